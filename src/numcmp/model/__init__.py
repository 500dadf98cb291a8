"""Simulation model: resampler and bootstrap engine."""

from numcmp.model.resampler import resample
from numcmp.model.simulation import EstimatorResult, combine_results, simulate

__all__ = ["resample", "simulate", "combine_results", "EstimatorResult"]
