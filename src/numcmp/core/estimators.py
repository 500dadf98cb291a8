"""Estimator registry: named scalar statistics over a sample.

The registry is a fixed, ordered tuple. Consumers rely on its order for
display and for pairing simulation counts with names.
"""

from dataclasses import dataclass
from functools import partial
from typing import Callable, Dict, Iterable, Sequence, Tuple

import numpy as np

from numcmp.core.errors import InvalidArgument
from numcmp.core.quantile import quantile


@dataclass(frozen=True)
class Estimator:
    """A named, deterministic function reducing a sample to one float.

    Attributes:
        name: Identifier used in summaries and reports (e.g. "p95").
        func: Callable taking a non-empty sorted sample and returning a float.
    """
    name: str
    func: Callable[[Sequence[float]], float]

    def __call__(self, sample: Sequence[float]) -> float:
        return self.func(sample)


def mean(sample: Sequence[float]) -> float:
    """Arithmetic mean (sum / count) of a non-empty sample."""
    if len(sample) == 0:
        raise InvalidArgument("sample is empty")
    return float(np.sum(sample) / len(sample))


def quantile_estimator(name: str, q: float) -> Estimator:
    """Build an estimator for quantile ``q``.

    The returned estimator is picklable (built on ``functools.partial``).
    """
    return Estimator(name=name, func=partial(quantile, q=q))


DEFAULT_ESTIMATORS: Tuple[Estimator, ...] = (
    Estimator(name="avg", func=mean),
    quantile_estimator("min", 0.0),
    quantile_estimator("p50", 0.5),
    quantile_estimator("p75", 0.75),
    quantile_estimator("p90", 0.9),
    quantile_estimator("p95", 0.95),
    quantile_estimator("p99", 0.99),
    quantile_estimator("max", 1.0),
)

ESTIMATOR_NAMES: Tuple[str, ...] = tuple(est.name for est in DEFAULT_ESTIMATORS)

_BY_NAME: Dict[str, Estimator] = {est.name: est for est in DEFAULT_ESTIMATORS}


def get_estimator(name: str) -> Estimator:
    """Look up a registered estimator by name.

    Raises:
        InvalidArgument: If no estimator has that name.
    """
    try:
        return _BY_NAME[name]
    except KeyError:
        raise InvalidArgument(
            f"unknown estimator {name!r}; expected one of {', '.join(ESTIMATOR_NAMES)}"
        ) from None


def select_estimators(names: Iterable[str]) -> Tuple[Estimator, ...]:
    """Return the named estimators, ordered as in the default registry.

    Args:
        names: Estimator names. Must be non-empty, known and unique.

    Raises:
        InvalidArgument: For an empty selection, unknown or repeated names.
    """
    names = list(names)
    if not names:
        raise InvalidArgument("at least one estimator must be selected")

    seen = set()
    for name in names:
        get_estimator(name)
        if name in seen:
            raise InvalidArgument(f"estimator {name!r} selected more than once")
        seen.add(name)

    return tuple(est for est in DEFAULT_ESTIMATORS if est.name in seen)


@dataclass(frozen=True)
class SampleSummary:
    """Full-sample statistics for one sample.

    Attributes:
        count: Number of values in the sample.
        values: Estimator name -> value, in registry order.
    """
    count: int
    values: Dict[str, float]


def summarize(
    sample: Sequence[float],
    estimators: Sequence[Estimator] = DEFAULT_ESTIMATORS,
) -> SampleSummary:
    """Evaluate every estimator once on a sorted sample."""
    values = {est.name: est(sample) for est in estimators}
    return SampleSummary(count=len(sample), values=values)
