"""Exception hierarchy for numcmp.

All errors are fatal to the operation that raised them. Nothing in the
engine retries or skips an estimator after a failure.
"""


class NumcmpError(Exception):
    """Base class for all numcmp errors."""


class InvalidArgument(NumcmpError, ValueError):
    """Raised for out-of-range parameters or empty samples."""


class UncomparableValue(NumcmpError, ArithmeticError):
    """Raised when two estimator values cannot be totally ordered (e.g. NaN)."""


class UnsortedSampleError(NumcmpError, AssertionError):
    """Raised when a sample that must be sorted ascending is not."""


class SampleReadError(NumcmpError, OSError):
    """Raised when a numeric text source cannot be read or parsed."""
