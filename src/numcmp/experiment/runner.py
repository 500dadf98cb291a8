"""Simulation runner: splits iterations across independent workers.

Each partition gets its own random stream spawned from the run's
SeedSequence, so partitions never share a draw sequence and a run is
reproducible for a given seed and worker count.
"""

import logging
import time
from concurrent.futures import ProcessPoolExecutor
from typing import Callable, List, Optional, Sequence, Tuple

import numpy as np

from numcmp.core.config import ComparisonConfig
from numcmp.core.estimators import DEFAULT_ESTIMATORS, Estimator
from numcmp.core.sample import sorted_checks
from numcmp.model.simulation import EstimatorResult, combine_results, simulate

logger = logging.getLogger(__name__)


def partition_iterations(iterations: int, n_parts: int) -> List[int]:
    """Split ``iterations`` into at most ``n_parts`` positive, near-equal chunks.

    Chunk sizes differ by at most one. Fewer chunks are returned when
    there are fewer iterations than parts.
    """
    n_parts = max(1, min(n_parts, iterations))
    base, extra = divmod(iterations, n_parts)
    return [base + (1 if i < extra else 0) for i in range(n_parts)]


def _run_partition(
    args: Tuple[int, np.ndarray, np.ndarray, Sequence[Estimator], np.random.SeedSequence, bool]
) -> List[EstimatorResult]:
    """Run one partition (helper for parallel execution)."""
    iterations, baseline, target, estimators, seed_seq, check_sorted = args
    rng = np.random.default_rng(seed_seq)
    with sorted_checks(check_sorted):
        return simulate(iterations, baseline, target, estimators, rng=rng)


def run_simulation(
    baseline: Sequence[float],
    target: Sequence[float],
    config: Optional[ComparisonConfig] = None,
    estimators: Sequence[Estimator] = DEFAULT_ESTIMATORS,
    progress_callback: Optional[Callable[[int, int], None]] = None,
) -> List[EstimatorResult]:
    """Run the bootstrap simulation according to ``config``.

    Args:
        baseline: Sorted, non-empty baseline sample.
        target: Sorted, non-empty target sample.
        config: Run settings. Defaults to ComparisonConfig().
        estimators: Estimators to evaluate. Must be picklable when
            config.n_workers > 1 (no lambdas).
        progress_callback: Optional callback(done_partitions, total_partitions)
            for progress reporting.

    Returns:
        Combined results, one per estimator, with iteration_count equal to
        config.iterations.
    """
    config = config or ComparisonConfig()
    baseline = np.asarray(baseline, dtype=np.float64)
    target = np.asarray(target, dtype=np.float64)
    estimators = tuple(estimators)

    sizes = partition_iterations(config.iterations, config.n_workers)
    seeds = config.seed_sequence().spawn(len(sizes))
    tasks = [
        (size, baseline, target, estimators, seed, config.check_sorted)
        for size, seed in zip(sizes, seeds)
    ]

    logger.info(
        f"Running {config.iterations} iterations over {len(tasks)} partition(s) "
        f"(seed={config.random_seed})"
    )
    start = time.perf_counter()

    partials: List[List[EstimatorResult]] = []
    if len(tasks) == 1:
        partials.append(_run_partition(tasks[0]))
        if progress_callback is not None:
            progress_callback(1, 1)
    else:
        with ProcessPoolExecutor(max_workers=len(tasks)) as executor:
            for done, part in enumerate(executor.map(_run_partition, tasks), start=1):
                logger.debug(f"Partition {done}/{len(tasks)} finished")
                partials.append(part)
                if progress_callback is not None:
                    progress_callback(done, len(tasks))

    results = combine_results(partials)
    logger.info(f"Simulation finished in {time.perf_counter() - start:.2f}s")
    return results
