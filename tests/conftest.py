"""Pytest fixtures for numcmp tests."""

import numpy as np
import pytest

from numcmp.core.sample import set_sorted_checks


@pytest.fixture(autouse=True)
def enable_sorted_checks():
    """Run every test with sorted-invariant checks on."""
    set_sorted_checks(True)
    yield
    set_sorted_checks(True)


@pytest.fixture
def default_seed() -> int:
    """Default random seed for reproducible tests."""
    return 42


@pytest.fixture
def rng(default_seed) -> np.random.Generator:
    return np.random.default_rng(default_seed)


@pytest.fixture
def baseline() -> list:
    """Baseline sample 1..10."""
    return [float(x) for x in range(1, 11)]


@pytest.fixture
def target() -> list:
    """Target sample 10..19, clearly above the baseline."""
    return [float(x) for x in range(10, 20)]


@pytest.fixture
def write_numbers(tmp_path):
    """Factory writing one value per line to a file under tmp_path."""
    def _write(name, lines):
        path = tmp_path / name
        path.write_text("\n".join(str(x) for x in lines) + "\n")
        return path
    return _write
