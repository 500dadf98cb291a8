"""Comparison run configuration.

Configuration can be loaded from:
1. YAML/JSON files
2. Environment variables (for deployment)
3. Command-line flags (applied by the CLI on top of the above)

Example usage:
    from numcmp.core.config import load_config, config_from_env

    config = config_from_env(load_config(Path("numcmp.yaml")))
    config = config.clone_with_seed(7)
"""

import json
import os
from dataclasses import asdict, dataclass, field, fields, replace
from pathlib import Path
from typing import Optional

import numpy as np
import yaml

from numcmp.core.errors import InvalidArgument
from numcmp.core.sample import sorted_checks_enabled

DEFAULT_ITERATIONS = 10000
DEFAULT_SEED = 42

TAIL_POLICIES = ("greater", "directional")

_ENV_PREFIX = "NUMCMP_"


@dataclass
class ComparisonConfig:
    """Settings for one baseline-vs-target comparison.

    Attributes:
        iterations: Number of bootstrap replicates (must be > 0).
        random_seed: Master seed; worker streams are spawned from it.
        n_workers: Worker processes for the simulation. 1 runs in-process.
        check_sorted: Verify the sorted-sample invariant during the run.
        tail_policy: Which count the report turns into a tail probability.
            "greater" always uses count_target_greater; "directional" uses
            count_target_less when the target statistic is below baseline.
    """
    iterations: int = DEFAULT_ITERATIONS
    random_seed: int = DEFAULT_SEED
    n_workers: int = 1
    check_sorted: bool = field(default_factory=sorted_checks_enabled)
    tail_policy: str = "greater"

    def __post_init__(self) -> None:
        for name in ("iterations", "random_seed", "n_workers"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidArgument(f"{name} must be an integer, got {value!r}")
        if not isinstance(self.check_sorted, bool):
            raise InvalidArgument(f"check_sorted must be a boolean, got {self.check_sorted!r}")
        if self.iterations <= 0:
            raise InvalidArgument(f"iterations must be > 0, got {self.iterations}")
        if self.n_workers < 1:
            raise InvalidArgument(f"n_workers must be >= 1, got {self.n_workers}")
        if self.tail_policy not in TAIL_POLICIES:
            raise InvalidArgument(
                f"tail_policy must be one of {TAIL_POLICIES}, got {self.tail_policy!r}"
            )

    def seed_sequence(self) -> np.random.SeedSequence:
        """Root seed sequence for this run."""
        return np.random.SeedSequence(self.random_seed)

    def clone_with_seed(self, new_seed: int) -> "ComparisonConfig":
        """Create a copy of this config with a different seed."""
        return replace(self, random_seed=new_seed)

    def to_dict(self) -> dict:
        return asdict(self)


def _parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in ("1", "true", "yes", "on"):
        return True
    if lowered in ("0", "false", "no", "off"):
        return False
    raise InvalidArgument(f"cannot interpret {value!r} as a boolean")


def _parse_int(name: str, value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise InvalidArgument(f"{name} must be an integer, got {value!r}") from None


def config_from_env(base: Optional[ComparisonConfig] = None) -> ComparisonConfig:
    """Apply NUMCMP_* environment overrides to ``base`` (or the defaults).

    Recognised variables: NUMCMP_ITERATIONS, NUMCMP_SEED, NUMCMP_WORKERS,
    NUMCMP_CHECK_SORTED, NUMCMP_TAIL_POLICY.
    """
    config = base or ComparisonConfig()
    overrides = {}

    if (value := os.environ.get(f"{_ENV_PREFIX}ITERATIONS")) is not None:
        overrides["iterations"] = _parse_int("NUMCMP_ITERATIONS", value)
    if (value := os.environ.get(f"{_ENV_PREFIX}SEED")) is not None:
        overrides["random_seed"] = _parse_int("NUMCMP_SEED", value)
    if (value := os.environ.get(f"{_ENV_PREFIX}WORKERS")) is not None:
        overrides["n_workers"] = _parse_int("NUMCMP_WORKERS", value)
    if (value := os.environ.get(f"{_ENV_PREFIX}CHECK_SORTED")) is not None:
        overrides["check_sorted"] = _parse_bool(value)
    if (value := os.environ.get(f"{_ENV_PREFIX}TAIL_POLICY")) is not None:
        overrides["tail_policy"] = value.strip().lower()

    if not overrides:
        return config
    return replace(config, **overrides)


def load_config(config_path: Path) -> ComparisonConfig:
    """Load a configuration from a YAML or JSON file.

    Args:
        config_path: Path to configuration file (.yaml, .yml, or .json)

    Returns:
        ComparisonConfig instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If file format is not supported
        InvalidArgument: If the file cannot be parsed or holds invalid settings
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, encoding="utf-8") as f:
        try:
            if config_path.suffix in (".yaml", ".yml"):
                data = yaml.safe_load(f)
            elif config_path.suffix == ".json":
                data = json.load(f)
            else:
                raise ValueError(
                    f"Unsupported config format: {config_path.suffix}. "
                    "Use .yaml, .yml, or .json"
                )
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise InvalidArgument(f"Cannot parse config file {config_path}: {e}") from e

    data = data or {}
    if not isinstance(data, dict):
        raise InvalidArgument(
            f"Config file {config_path} must hold a mapping, got {type(data).__name__}"
        )
    unknown = set(data) - {f.name for f in fields(ComparisonConfig)}
    if unknown:
        raise InvalidArgument(f"Unknown config keys in {config_path}: {sorted(unknown)}")

    return ComparisonConfig(**data)


def save_config(config: ComparisonConfig, config_path: Path) -> None:
    """Save a configuration to a YAML or JSON file.

    Raises:
        ValueError: If file format is not supported
    """
    config_path = Path(config_path)
    if config_path.suffix not in (".yaml", ".yml", ".json"):
        raise ValueError(
            f"Unsupported config format: {config_path.suffix}. "
            "Use .yaml, .yml, or .json"
        )

    data = config.to_dict()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w", encoding="utf-8") as f:
        if config_path.suffix == ".json":
            json.dump(data, f, indent=2)
        else:
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)
