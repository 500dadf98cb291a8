"""Bootstrap resampling from a baseline sample."""

from typing import Sequence

import numpy as np

from numcmp.core.errors import InvalidArgument


def resample(
    baseline: Sequence[float],
    size: int,
    rng: np.random.Generator,
) -> np.ndarray:
    """Draw one sorted bootstrap replicate from ``baseline``.

    Each of the ``size`` draws picks a uniformly random index into
    ``baseline`` independently (sampling with replacement), so every value
    in the replicate is a member of the baseline.

    Args:
        baseline: Non-empty baseline sample.
        size: Replicate size, normally ``len(target)``.
        rng: Random source. Seed it for reproducible replicates.

    Returns:
        Replicate as a float64 array sorted ascending.

    Raises:
        InvalidArgument: If the baseline is empty or size is not positive.
    """
    n = len(baseline)
    if n == 0:
        raise InvalidArgument("baseline sample is empty")
    if size <= 0:
        raise InvalidArgument(f"replicate size must be > 0, got {size}")

    values = np.asarray(baseline, dtype=np.float64)
    idx = rng.integers(0, n, size=size)
    replicate = values[idx]
    replicate.sort()
    return replicate
