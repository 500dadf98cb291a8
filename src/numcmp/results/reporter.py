"""Plain-text rendering of summaries and comparison results."""

from typing import Iterable, List

from numcmp.core.estimators import SampleSummary
from numcmp.experiment.analysis import tail_probability
from numcmp.model.simulation import EstimatorResult


def format_summary(title: str, summary: SampleSummary) -> str:
    """Render one sample summary block.

    Example output::

        === Summary (baseline) ===
        Count:	10
        avg:	5.5
    """
    lines = [f"=== Summary ({title}) ===", f"Count:\t{summary.count}"]
    for name, value in summary.values.items():
        lines.append(f"{name}:\t{value}")
    return "\n".join(lines) + "\n"


def format_comparison(results: Iterable[EstimatorResult], policy: str = "greater") -> str:
    """Render the comparison block, one line per estimator.

    Each line reads ``name: baseline to target, tail_probability``.
    """
    lines: List[str] = ["=== Comparison ==="]
    for res in results:
        r = tail_probability(res, policy)
        lines.append(
            f"{res.name}: {res.baseline_statistic} to {res.target_statistic}, {r}"
        )
    return "\n".join(lines) + "\n"


def render_report(comparison) -> str:
    """Full report for a ComparisonResult: both summaries, then the comparison."""
    return "\n".join([
        format_summary("baseline", comparison.baseline_summary),
        format_summary("target", comparison.target_summary),
        format_comparison(comparison.results, comparison.tail_policy),
    ])
