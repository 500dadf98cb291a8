"""Baseline vs target comparison (summaries plus bootstrap simulation)."""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

import pandas as pd

from numcmp.core.config import ComparisonConfig
from numcmp.core.estimators import DEFAULT_ESTIMATORS, Estimator, SampleSummary, summarize
from numcmp.core.sample import sorted_checks
from numcmp.experiment.analysis import results_to_dataframe
from numcmp.experiment.runner import run_simulation
from numcmp.model.simulation import EstimatorResult

logger = logging.getLogger(__name__)


@dataclass
class ComparisonResult:
    """Result of comparing a target sample against a baseline.

    Attributes:
        baseline_summary: Full-sample statistics of the baseline.
        target_summary: Full-sample statistics of the target.
        results: Simulation outcome per estimator, in registry order.
        metrics: DataFrame view of ``results``.
        tail_policy: Policy used for the ``tail_probability`` column.
    """
    baseline_summary: SampleSummary
    target_summary: SampleSummary
    results: List[EstimatorResult]
    metrics: pd.DataFrame
    tail_policy: str = "greater"

    def significant_differences(self, alpha: float = 0.05) -> pd.DataFrame:
        """Return metrics whose tail probability is below alpha or above 1 - alpha.

        Args:
            alpha: Significance level (default 0.05).
        """
        tail = self.metrics['tail_probability']
        return self.metrics[(tail < alpha) | (tail > 1 - alpha)]


def compare_samples(
    baseline: Sequence[float],
    target: Sequence[float],
    config: Optional[ComparisonConfig] = None,
    estimators: Sequence[Estimator] = DEFAULT_ESTIMATORS,
    progress_callback: Optional[Callable[[int, int], None]] = None,
) -> ComparisonResult:
    """Summarize both samples and run the bootstrap simulation.

    Args:
        baseline: Sorted, non-empty baseline sample.
        target: Sorted, non-empty target sample.
        config: Run settings. Defaults to ComparisonConfig().
        estimators: Estimators to evaluate.
        progress_callback: Forwarded to run_simulation.

    Returns:
        ComparisonResult with summaries, results and a metrics table.

    Example:
        >>> result = compare_samples([1.0, 2.0, 3.0], [2.0, 3.0, 4.0],
        ...                          ComparisonConfig(iterations=1000))
        >>> print(result.metrics[['name', 'tail_probability']])
    """
    config = config or ComparisonConfig()
    logger.info(f"Comparing baseline (n={len(baseline)}) to target (n={len(target)})")

    with sorted_checks(config.check_sorted):
        baseline_summary = summarize(baseline, estimators)
        target_summary = summarize(target, estimators)

    results = run_simulation(
        baseline, target, config, estimators, progress_callback=progress_callback
    )

    return ComparisonResult(
        baseline_summary=baseline_summary,
        target_summary=target_summary,
        results=results,
        metrics=results_to_dataframe(results, config.tail_policy),
        tail_policy=config.tail_policy,
    )
