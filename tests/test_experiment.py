"""Tests for the simulation runner, comparison and analysis."""

import pandas as pd
import pytest

from numcmp.core.config import ComparisonConfig
from numcmp.core.errors import InvalidArgument
from numcmp.core.estimators import ESTIMATOR_NAMES, select_estimators
from numcmp.experiment.analysis import (
    results_to_dataframe,
    summaries_to_dataframe,
    tail_probability,
)
from numcmp.experiment.comparison import ComparisonResult, compare_samples
from numcmp.experiment.runner import partition_iterations, run_simulation
from numcmp.model.simulation import EstimatorResult


class TestPartitionIterations:

    def test_even_split(self):
        assert partition_iterations(100, 4) == [25, 25, 25, 25]

    def test_uneven_split(self):
        parts = partition_iterations(10, 3)
        assert parts == [4, 3, 3]
        assert sum(parts) == 10

    def test_fewer_iterations_than_parts(self):
        assert partition_iterations(2, 8) == [1, 1]

    def test_single_part(self):
        assert partition_iterations(7, 1) == [7]


class TestRunSimulation:

    def test_in_process_run(self, baseline, target):
        config = ComparisonConfig(iterations=500, random_seed=1)
        results = run_simulation(baseline, target, config)

        assert [r.name for r in results] == list(ESTIMATOR_NAMES)
        assert all(r.iteration_count == 500 for r in results)

    def test_reproducible(self, baseline, target):
        config = ComparisonConfig(iterations=200, random_seed=11)
        assert run_simulation(baseline, target, config) == run_simulation(baseline, target, config)

    def test_seed_changes_draws(self, baseline):
        target = [4.0, 5.0, 6.0, 7.0]
        a = run_simulation(baseline, target, ComparisonConfig(iterations=300, random_seed=1))
        b = run_simulation(baseline, target, ComparisonConfig(iterations=300, random_seed=2))
        assert a != b

    def test_parallel_counts_sum(self, baseline, target):
        """Worker partitions combine to exactly the configured iterations."""
        config = ComparisonConfig(iterations=301, random_seed=5, n_workers=3)
        results = run_simulation(baseline, target, config)

        for res in results:
            assert res.iteration_count == 301
            assert res.count_target_greater + res.count_target_less <= 301

        avg = next(r for r in results if r.name == "avg")
        assert avg.p_target_greater > 0.95

    def test_progress_callback(self, baseline, target):
        calls = []
        config = ComparisonConfig(iterations=50)
        run_simulation(baseline, target, config, progress_callback=lambda d, t: calls.append((d, t)))
        assert calls == [(1, 1)]

    def test_default_config(self, baseline, target):
        results = run_simulation(baseline, target, ComparisonConfig(iterations=20))
        assert len(results) == 8


class TestTailProbability:

    def _result(self, baseline_stat, target_stat):
        return EstimatorResult("avg", baseline_stat, target_stat, 100, 80, 15)

    def test_greater_policy_ignores_direction(self):
        """Default policy reports count_target_greater in both directions."""
        assert tail_probability(self._result(1.0, 2.0)) == 0.8
        assert tail_probability(self._result(2.0, 1.0)) == 0.8

    def test_directional_policy(self):
        assert tail_probability(self._result(1.0, 2.0), "directional") == 0.8
        assert tail_probability(self._result(2.0, 1.0), "directional") == 0.15

    def test_unknown_policy(self):
        with pytest.raises(InvalidArgument):
            tail_probability(self._result(1.0, 2.0), "two-sided")


class TestDataFrames:

    def test_results_dataframe_columns(self):
        results = [
            EstimatorResult("avg", 1.0, 2.0, 100, 80, 15),
            EstimatorResult("p50", 1.0, 1.0, 100, 10, 10),
        ]
        df = results_to_dataframe(results)

        assert list(df['name']) == ["avg", "p50"]
        assert list(df['ties']) == [5, 80]
        assert df.loc[0, 'difference'] == 1.0
        assert df.loc[0, 'tail_probability'] == 0.8

    def test_empty_results(self):
        df = results_to_dataframe([])
        assert len(df) == 0
        assert 'tail_probability' in df.columns

    def test_summaries_dataframe(self, baseline, target):
        result = compare_samples(baseline, target, ComparisonConfig(iterations=10))
        df = summaries_to_dataframe(result.baseline_summary, result.target_summary)

        assert list(df.index) == ["count"] + list(ESTIMATOR_NAMES)
        assert df.loc["avg", "baseline"] == 5.5
        assert df.loc["avg", "target"] == 14.5
        assert df.loc["count", "target"] == 10


class TestCompareSamples:

    def test_returns_result(self, baseline, target):
        result = compare_samples(baseline, target, ComparisonConfig(iterations=1000, random_seed=42))

        assert isinstance(result, ComparisonResult)
        assert result.baseline_summary.values["avg"] == 5.5
        assert result.target_summary.values["avg"] == 14.5
        assert isinstance(result.metrics, pd.DataFrame)
        assert len(result.metrics) == len(result.results) == 8

    def test_significant_differences(self, baseline, target):
        result = compare_samples(baseline, target, ComparisonConfig(iterations=500))
        sig = result.significant_differences(alpha=0.05)

        assert "avg" in list(sig['name'])
        tail = sig['tail_probability']
        assert all((tail < 0.05) | (tail > 0.95))

    def test_selected_estimators(self, baseline, target):
        estimators = select_estimators(["avg", "max"])
        result = compare_samples(baseline, target, ComparisonConfig(iterations=50), estimators)

        assert [r.name for r in result.results] == ["avg", "max"]
        assert list(result.target_summary.values) == ["avg", "max"]

    def test_directional_policy_recorded(self, baseline):
        config = ComparisonConfig(iterations=100, tail_policy="directional")
        result = compare_samples(baseline, [-3.0, -2.0], config)

        assert result.tail_policy == "directional"
        avg = result.metrics.set_index('name').loc["avg"]
        assert avg['tail_probability'] == avg['p_less'] == 1.0
