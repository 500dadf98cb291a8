"""
numcmp - compare two numeric samples with bootstrap resampling.

Estimates whether differences in the mean and selected percentiles of a
target sample are larger than sampling noise drawn from a baseline would
explain.
"""

__version__ = "0.1.0"

from numcmp.core.config import ComparisonConfig
from numcmp.core.estimators import DEFAULT_ESTIMATORS, Estimator, summarize
from numcmp.core.quantile import quantile
from numcmp.experiment.comparison import ComparisonResult, compare_samples
from numcmp.model.simulation import EstimatorResult, simulate

__all__ = [
    "ComparisonConfig",
    "ComparisonResult",
    "DEFAULT_ESTIMATORS",
    "Estimator",
    "EstimatorResult",
    "compare_samples",
    "quantile",
    "simulate",
    "summarize",
    "__version__",
]
