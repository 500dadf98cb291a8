"""Sample invariants.

A Sample is an ascending sequence of finite floats. The sorted check is on
by default unless Python runs with ``-O`` or ``NUMCMP_CHECK_SORTED`` is
set to a false value.
"""

import os
from contextlib import contextmanager
from typing import Iterator, Sequence

import numpy as np

from numcmp.core.errors import UnsortedSampleError

_FALSE_VALUES = ("0", "false", "no", "off")


def _default_enabled() -> bool:
    env = os.environ.get("NUMCMP_CHECK_SORTED")
    if env is not None:
        return env.strip().lower() not in _FALSE_VALUES
    return __debug__


_checks_enabled = _default_enabled()


def set_sorted_checks(enabled: bool) -> None:
    """Enable or disable sorted-invariant checks process-wide."""
    global _checks_enabled
    _checks_enabled = bool(enabled)


def sorted_checks_enabled() -> bool:
    return _checks_enabled


@contextmanager
def sorted_checks(enabled: bool) -> Iterator[None]:
    """Temporarily enable or disable sorted-invariant checks."""
    previous = _checks_enabled
    set_sorted_checks(enabled)
    try:
        yield
    finally:
        set_sorted_checks(previous)


def is_sorted(xs: Sequence[float]) -> bool:
    """Return True if ``xs`` is sorted ascending (ties allowed)."""
    arr = np.asarray(xs, dtype=np.float64)
    if arr.size < 2:
        return True
    return bool(np.all(arr[:-1] <= arr[1:]))


def check_sorted(xs: Sequence[float], name: str = "sample") -> None:
    """Verify the sorted invariant if checks are enabled.

    Args:
        xs: Sequence that must be sorted ascending.
        name: Label used in the error message.

    Raises:
        UnsortedSampleError: If checks are enabled and ``xs`` is not sorted.
    """
    if _checks_enabled and not is_sorted(xs):
        raise UnsortedSampleError(f"{name} is not sorted ascending")


def as_sorted_sample(values: Sequence[float]) -> np.ndarray:
    """Return ``values`` as a sorted float64 array."""
    return np.sort(np.asarray(values, dtype=np.float64))
