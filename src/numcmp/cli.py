"""Command-line entry point: compare two numeric samples."""

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from numcmp.core.config import TAIL_POLICIES, ComparisonConfig, config_from_env, load_config
from numcmp.core.errors import NumcmpError
from numcmp.core.estimators import DEFAULT_ESTIMATORS, select_estimators
from numcmp.data.reader import read_sorted_sample
from numcmp.experiment.comparison import compare_samples
from numcmp.results.reporter import render_report

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "WARNING") -> None:
    """Attach a console handler to the ``numcmp`` logger."""
    root = logging.getLogger("numcmp")
    root.setLevel(level.upper())
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="numcmp",
        description="Compare two numeric samples using bootstrapping and simulation",
    )
    parser.add_argument("baseline", type=Path, metavar="BASELINE", help="File with baseline numbers")
    parser.add_argument("target", type=Path, metavar="TARGET", help="File with numbers under test")
    parser.add_argument(
        "-i", "--iterations", type=int, help="Number of simulation iterations (default 10000)"
    )
    parser.add_argument("--seed", type=int, help="Random seed (default 42)")
    parser.add_argument("--workers", type=int, help="Worker processes (default 1)")
    parser.add_argument("--config", type=Path, help="YAML or JSON config file")
    parser.add_argument(
        "--estimators",
        help="Comma-separated estimators to report "
        f"(default {','.join(est.name for est in DEFAULT_ESTIMATORS)})",
    )
    parser.add_argument("--tail-policy", choices=TAIL_POLICIES, help="Tail probability policy")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default WARNING)")
    return parser


def resolve_config(args: argparse.Namespace) -> ComparisonConfig:
    """Defaults < config file < environment < command-line flags."""
    config = load_config(args.config) if args.config else ComparisonConfig()
    config = config_from_env(config)

    overrides = {}
    if args.iterations is not None:
        overrides["iterations"] = args.iterations
    if args.seed is not None:
        overrides["random_seed"] = args.seed
    if args.workers is not None:
        overrides["n_workers"] = args.workers
    if args.tail_policy is not None:
        overrides["tail_policy"] = args.tail_policy

    return replace(config, **overrides) if overrides else config


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point. Returns the process exit status."""
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        config = resolve_config(args)
        estimators = DEFAULT_ESTIMATORS
        if args.estimators:
            estimators = select_estimators(n.strip() for n in args.estimators.split(","))

        baseline = read_sorted_sample(args.baseline)
        target = read_sorted_sample(args.target)
        comparison = compare_samples(baseline, target, config, estimators)
    except (NumcmpError, FileNotFoundError, ValueError) as e:
        logger.debug(f"Comparison failed: {e}", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(render_report(comparison), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
