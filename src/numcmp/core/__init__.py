"""Core layer: errors, sample invariants, quantiles, estimators, config."""

from numcmp.core.errors import (
    InvalidArgument,
    NumcmpError,
    SampleReadError,
    UncomparableValue,
    UnsortedSampleError,
)
from numcmp.core.quantile import quantile
from numcmp.core.estimators import (
    DEFAULT_ESTIMATORS,
    Estimator,
    SampleSummary,
    get_estimator,
    select_estimators,
    summarize,
)
from numcmp.core.config import ComparisonConfig

__all__ = [
    "NumcmpError",
    "InvalidArgument",
    "UncomparableValue",
    "UnsortedSampleError",
    "SampleReadError",
    "quantile",
    "Estimator",
    "SampleSummary",
    "DEFAULT_ESTIMATORS",
    "get_estimator",
    "select_estimators",
    "summarize",
    "ComparisonConfig",
]
