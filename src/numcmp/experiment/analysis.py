"""Tail probabilities and tabular views of simulation results."""

from typing import List, Sequence

import pandas as pd

from numcmp.core.config import TAIL_POLICIES
from numcmp.core.errors import InvalidArgument
from numcmp.core.estimators import SampleSummary
from numcmp.model.simulation import EstimatorResult


def tail_probability(result: EstimatorResult, policy: str = "greater") -> float:
    """Empirical tail probability for one estimator.

    Args:
        result: Simulation result.
        policy: "greater" always returns p_target_greater. "directional"
            returns p_target_less when the target statistic is below the
            baseline statistic, else p_target_greater.

    Raises:
        InvalidArgument: For an unknown policy.
    """
    if policy not in TAIL_POLICIES:
        raise InvalidArgument(f"tail policy must be one of {TAIL_POLICIES}, got {policy!r}")

    if policy == "directional" and result.target_statistic < result.baseline_statistic:
        return result.p_target_less
    return result.p_target_greater


def results_to_dataframe(
    results: Sequence[EstimatorResult],
    policy: str = "greater",
) -> pd.DataFrame:
    """One row per estimator, in result order.

    Columns: name, baseline, target, difference, iterations, target_gt,
    target_lt, ties, p_greater, p_less, tail_probability.
    """
    rows: List[dict] = []
    for res in results:
        rows.append({
            'name': res.name,
            'baseline': res.baseline_statistic,
            'target': res.target_statistic,
            'difference': res.target_statistic - res.baseline_statistic,
            'iterations': res.iteration_count,
            'target_gt': res.count_target_greater,
            'target_lt': res.count_target_less,
            'ties': res.count_ties,
            'p_greater': res.p_target_greater,
            'p_less': res.p_target_less,
            'tail_probability': tail_probability(res, policy),
        })
    columns = [
        'name', 'baseline', 'target', 'difference', 'iterations',
        'target_gt', 'target_lt', 'ties', 'p_greater', 'p_less', 'tail_probability',
    ]
    return pd.DataFrame(rows, columns=columns)


def summaries_to_dataframe(baseline: SampleSummary, target: SampleSummary) -> pd.DataFrame:
    """Side-by-side full-sample summaries, indexed by statistic name."""
    index = ['count'] + list(baseline.values)
    return pd.DataFrame(
        {
            'baseline': [baseline.count] + [baseline.values[k] for k in index[1:]],
            'target': [target.count] + [target.values.get(k) for k in index[1:]],
        },
        index=index,
    )
