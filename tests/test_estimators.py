"""Tests for the estimator registry and summaries."""

import pickle

import pytest

from numcmp.core.errors import InvalidArgument
from numcmp.core.estimators import (
    DEFAULT_ESTIMATORS,
    ESTIMATOR_NAMES,
    Estimator,
    get_estimator,
    mean,
    select_estimators,
    summarize,
)


class TestRegistry:
    """Registry contents and ordering."""

    def test_registration_order(self):
        assert ESTIMATOR_NAMES == ("avg", "min", "p50", "p75", "p90", "p95", "p99", "max")

    def test_estimators_are_immutable(self):
        est = DEFAULT_ESTIMATORS[0]
        with pytest.raises(AttributeError):
            est.name = "other"

    def test_registry_pickles(self):
        """Registry can be shipped to worker processes."""
        restored = pickle.loads(pickle.dumps(DEFAULT_ESTIMATORS))
        xs = [1.0, 2.0, 3.0, 4.0]
        assert [e(xs) for e in restored] == [e(xs) for e in DEFAULT_ESTIMATORS]

    def test_values_on_baseline(self, baseline):
        values = {est.name: est(baseline) for est in DEFAULT_ESTIMATORS}
        assert values["avg"] == 5.5
        assert values["min"] == 1.0
        assert values["p50"] == 5.5
        assert values["p75"] == pytest.approx(7.75)
        assert values["max"] == 10.0

    def test_custom_estimator(self):
        est = Estimator(name="first", func=lambda xs: float(xs[0]))
        assert est([4.0, 5.0]) == 4.0


class TestMean:

    def test_mean(self):
        assert mean([1.0, 2.0, 3.0, 4.0]) == 2.5

    def test_empty(self):
        with pytest.raises(InvalidArgument):
            mean([])


class TestLookup:

    def test_get_estimator(self):
        assert get_estimator("p95").name == "p95"

    def test_unknown_estimator(self):
        with pytest.raises(InvalidArgument, match="unknown estimator"):
            get_estimator("p42")

    def test_select_keeps_registry_order(self):
        selected = select_estimators(["max", "avg", "p50"])
        assert [e.name for e in selected] == ["avg", "p50", "max"]

    def test_select_rejects_duplicates(self):
        with pytest.raises(InvalidArgument):
            select_estimators(["avg", "avg"])

    def test_select_rejects_empty(self):
        with pytest.raises(InvalidArgument):
            select_estimators([])


class TestSummarize:

    def test_summary_count_and_order(self, target):
        summary = summarize(target)
        assert summary.count == 10
        assert list(summary.values) == list(ESTIMATOR_NAMES)
        assert summary.values["avg"] == 14.5
        assert summary.values["min"] == 10.0
        assert summary.values["max"] == 19.0

    def test_summary_is_repeatable(self, baseline):
        assert summarize(baseline) == summarize(baseline)

    def test_summary_of_empty_sample_fails(self):
        with pytest.raises(InvalidArgument):
            summarize([])
