"""Bootstrap simulation engine.

Draws ``iterations`` replicates from the baseline, each the size of the
target, evaluates every estimator on each replicate and counts how often
the target's full-sample statistic lies above or below the simulated one.
"""

import logging
import math
from dataclasses import dataclass, replace
from typing import List, Optional, Sequence

import numpy as np

from numcmp.core.errors import InvalidArgument, UncomparableValue
from numcmp.core.estimators import DEFAULT_ESTIMATORS, Estimator
from numcmp.core.sample import check_sorted, sorted_checks
from numcmp.model.resampler import resample

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EstimatorResult:
    """Outcome of one estimator over a simulation run.

    Attributes:
        name: Estimator name.
        baseline_statistic: Estimator value on the full baseline.
        target_statistic: Estimator value on the full target.
        iteration_count: Number of replicates evaluated.
        count_target_greater: Replicates where the target value was larger.
        count_target_less: Replicates where the target value was smaller.
    """
    name: str
    baseline_statistic: float
    target_statistic: float
    iteration_count: int
    count_target_greater: int
    count_target_less: int

    @property
    def count_ties(self) -> int:
        return self.iteration_count - self.count_target_greater - self.count_target_less

    @property
    def p_target_greater(self) -> float:
        """Fraction of replicates the target statistic exceeded."""
        return self.count_target_greater / self.iteration_count

    @property
    def p_target_less(self) -> float:
        """Fraction of replicates the target statistic fell short of."""
        return self.count_target_less / self.iteration_count


def compare_values(target_value: float, simulated_value: float) -> int:
    """Three-way compare: 1 if target > simulated, -1 if less, 0 if equal.

    Raises:
        UncomparableValue: If either operand is NaN.
    """
    if math.isnan(target_value) or math.isnan(simulated_value):
        raise UncomparableValue(
            f"cannot order {target_value!r} against {simulated_value!r}"
        )
    if target_value > simulated_value:
        return 1
    if target_value < simulated_value:
        return -1
    return 0


def simulate(
    iterations: int,
    baseline: Sequence[float],
    target: Sequence[float],
    estimators: Sequence[Estimator] = DEFAULT_ESTIMATORS,
    rng: Optional[np.random.Generator] = None,
) -> List[EstimatorResult]:
    """Run the bootstrap comparison.

    Args:
        iterations: Number of replicates (> 0).
        baseline: Non-empty baseline sample, sorted ascending.
        target: Non-empty target sample, sorted ascending.
        estimators: Estimators to evaluate, in report order.
        rng: Random source. A fresh unseeded generator is used if None.

    Returns:
        One EstimatorResult per estimator, in ``estimators`` order.

    Raises:
        InvalidArgument: For a non-positive iteration count or empty samples.
        UncomparableValue: If an estimator yields NaN.
        UnsortedSampleError: If sorted checks are enabled and the baseline
            is not sorted.

    Plain Language:
        Pretends the target was drawn from the baseline many times and
        counts how often the real target looks bigger or smaller than
        those pretend draws.
    """
    if iterations <= 0:
        raise InvalidArgument(f"iterations must be > 0, got {iterations}")
    if len(baseline) == 0:
        raise InvalidArgument("baseline sample is empty")
    if len(target) == 0:
        raise InvalidArgument("target sample is empty")

    check_sorted(baseline, "baseline")

    if rng is None:
        rng = np.random.default_rng()

    baseline_stats = [est(baseline) for est in estimators]
    target_stats = [est(target) for est in estimators]
    greater = [0] * len(estimators)
    less = [0] * len(estimators)

    size = len(target)
    logger.debug(
        f"Simulating {iterations} replicates of size {size} "
        f"from baseline of {len(baseline)}"
    )

    # replicates come back sorted from resample, so their check is skipped
    with sorted_checks(False):
        for _ in range(iterations):
            replicate = resample(baseline, size, rng)

            for k, est in enumerate(estimators):
                order = compare_values(target_stats[k], est(replicate))
                if order > 0:
                    greater[k] += 1
                elif order < 0:
                    less[k] += 1

    return [
        EstimatorResult(
            name=est.name,
            baseline_statistic=baseline_stats[k],
            target_statistic=target_stats[k],
            iteration_count=iterations,
            count_target_greater=greater[k],
            count_target_less=less[k],
        )
        for k, est in enumerate(estimators)
    ]


def combine_results(partials: Sequence[Sequence[EstimatorResult]]) -> List[EstimatorResult]:
    """Sum the counts of per-worker results into one result per estimator.

    Args:
        partials: One result list per worker, each in the same estimator order.

    Raises:
        InvalidArgument: If no partials are given or they do not line up
            (different estimators or full-sample statistics).
    """
    if not partials:
        raise InvalidArgument("no partial results to combine")

    combined = list(partials[0])
    for part in partials[1:]:
        if len(part) != len(combined):
            raise InvalidArgument("partial results cover different estimators")
        for k, (acc, res) in enumerate(zip(combined, part)):
            if (acc.name, acc.baseline_statistic, acc.target_statistic) != (
                res.name, res.baseline_statistic, res.target_statistic
            ):
                raise InvalidArgument(f"partial results disagree for estimator {res.name!r}")
            combined[k] = replace(
                acc,
                iteration_count=acc.iteration_count + res.iteration_count,
                count_target_greater=acc.count_target_greater + res.count_target_greater,
                count_target_less=acc.count_target_less + res.count_target_less,
            )
    return combined
