"""Interpolated quantile estimation over a sorted sample."""

import math
from typing import Sequence

from numcmp.core.errors import InvalidArgument
from numcmp.core.sample import check_sorted


def quantile_index(n: int, q: float) -> float:
    """Fractional index of quantile ``q`` in a sample of ``n`` items.

    2 items at q=0.5 give index 0.5; 3 items at q=0.5 give index 1.0.
    """
    return (n - 1) * q


def quantile(sorted_sample: Sequence[float], q: float) -> float:
    """Compute the linearly interpolated quantile of a sorted sample.

    The boundaries q=0 and q=1 return the first and last elements exactly,
    as does any q landing on an integer index. Otherwise the result
    interpolates between the two bracketing order statistics.

    Args:
        sorted_sample: Non-empty sequence sorted ascending.
        q: Quantile in [0, 1].

    Returns:
        The quantile value as a float.

    Raises:
        InvalidArgument: If the sample is empty or q is outside [0, 1].
        UnsortedSampleError: If sorted checks are enabled and the sample
            is not sorted.
    """
    n = len(sorted_sample)
    if n == 0:
        raise InvalidArgument("sample is empty")

    if not 0.0 <= q <= 1.0:
        raise InvalidArgument(f"quantile parameter q={q} is out of range [0,1]")

    check_sorted(sorted_sample)

    if q == 0.0:
        return float(sorted_sample[0])
    if q == 1.0:
        return float(sorted_sample[n - 1])

    qi = quantile_index(n, q)
    qf = math.floor(qi)
    i = int(qf)

    if i == qi:
        return float(sorted_sample[i])

    t = qi - qf
    x0 = float(sorted_sample[i])
    x1 = float(sorted_sample[i + 1])
    return x0 * (1.0 - t) + x1 * t
