"""Experimentation layer: parallel runner, comparison, analysis."""

from numcmp.experiment.runner import partition_iterations, run_simulation
from numcmp.experiment.analysis import (
    results_to_dataframe,
    summaries_to_dataframe,
    tail_probability,
)
from numcmp.experiment.comparison import ComparisonResult, compare_samples

__all__ = [
    "partition_iterations",
    "run_simulation",
    "tail_probability",
    "results_to_dataframe",
    "summaries_to_dataframe",
    "ComparisonResult",
    "compare_samples",
]
