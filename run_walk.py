#!/usr/bin/env python3
"""Entry point for running a bounded random walk on the middle-square generator.

Chains the run stages into a single command:
config -> walk -> tables -> PRNG comparison -> figures -> JSON summary.

Usage:
    python run_walk.py --mode uniform --seed 19890929
    python run_walk.py --mode gaussian --steps 500 --plot figures/
    python run_walk.py --draws 20 --compare 10000 --table
    python run_walk.py --mode gaussian --dry-run
"""

import argparse
import json
import logging
import sys
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Generator

from dacite import DaciteError

from squarewalk.config import (
    WalkConfig,
    config_from_dict,
    config_hash,
    config_to_dict,
    geometry_hash,
)
from squarewalk.reproducibility import default_seed, get_git_hash, set_seed
from squarewalk.walk import RejectionLimitError, WalkMode

log = logging.getLogger(__name__)


@contextmanager
def stage_timer(name: str) -> Generator[None, None, None]:
    """Context manager that prints stage banners with elapsed time to stderr."""
    print(f"\n=== {name} ===", file=sys.stderr)
    log.info("Starting: %s", name)
    t0 = time.monotonic()
    yield
    elapsed = time.monotonic() - t0
    print(f"... done in {elapsed:.3f}s", file=sys.stderr)
    log.info("Completed: %s in %.3fs", name, elapsed)


def build_config(args: argparse.Namespace) -> WalkConfig:
    """Turn parsed CLI arguments into a validated WalkConfig."""
    seed = args.seed if args.seed is not None else default_seed()
    return config_from_dict({
        "mode": args.mode,
        "seed": seed,
        "width": args.width,
        "height": args.height,
        "destination": list(args.destination),
        "start": list(args.start) if args.start is not None else None,
        "steps": args.steps,
        "max_attempts": args.max_attempts,
        "description": args.description,
    })


def run_pipeline(config: WalkConfig, args: argparse.Namespace) -> dict[str, Any]:
    """Execute the walk and its optional reports.

    Args:
        config: Validated walk configuration.
        args: Parsed CLI arguments selecting the optional stages.

    Returns:
        JSON-ready run summary.
    """
    # Lazy imports keep --dry-run free of scipy/matplotlib start-up
    from squarewalk.prng import MiddleSquareGenerator
    from squarewalk.reporting import (
        binary_table,
        compare_prng,
        format_comparison,
        gaussian_table,
        trajectory_table,
        uniform_table,
    )
    from squarewalk.walk import simulate

    set_seed(config.seed)

    if args.draws:
        with stage_timer("Raw Draws"):
            # Each table starts from a freshly seeded generator.
            for table in (uniform_table, gaussian_table, binary_table):
                print(table(MiddleSquareGenerator(config.seed), args.draws))
                print()

    with stage_timer("Random Walk"):
        walker, trajectory = simulate(config)

    if args.table:
        print(trajectory_table(trajectory))
        print()

    comparison = None
    if args.compare:
        with stage_timer("PRNG Comparison"):
            comparison = compare_prng(args.compare, config.seed)
            print(format_comparison(comparison))
            print()

    figures: list[str] = []
    if args.plot is not None:
        with stage_timer("Visualization"):
            from squarewalk.visualization import render_all

            paths = render_all(trajectory, walker, args.plot, comparison=comparison)
            figures = [str(p) for p in paths]
            log.info("Generated %d figure files", len(paths))

    summary: dict[str, Any] = {
        "config": config_to_dict(config),
        "config_hash": config_hash(config),
        "geometry_hash": geometry_hash(config),
        "git_hash": get_git_hash(),
        "x_range": list(walker.x_range),
        "y_range": list(walker.y_range),
        "start": list(walker.start),
        "destination": list(walker.destination),
        "status": trajectory.status.value,
        "points": len(trajectory),
        "steps_taken": trajectory.steps_taken,
        "rejected": trajectory.rejected,
        "end": list(trajectory.end),
        "figures": figures,
    }
    if comparison is not None:
        summary["comparison"] = comparison.to_dict()
    return summary


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run a bounded 2-D random walk on the middle-square PRNG"
    )
    parser.add_argument(
        "--mode",
        default=WalkMode.UNIFORM.value,
        help="Step distribution: 'uniform' or 'gaussian'",
    )
    parser.add_argument(
        "--seed",
        type=lambda value: int(value, 0),
        default=None,
        help="Generator seed (decimal or 0x-prefixed hex); defaults to the current time",
    )
    parser.add_argument("--steps", type=int, default=100, help="Maximum accepted steps")
    parser.add_argument("--width", type=float, default=4.0, help="Rectangle width")
    parser.add_argument("--height", type=float, default=4.0, help="Rectangle height")
    parser.add_argument(
        "--destination",
        nargs=2,
        type=float,
        metavar=("X", "Y"),
        default=(0.0, 0.0),
        help="Destination point that ends the walk early",
    )
    parser.add_argument(
        "--start",
        nargs=2,
        type=float,
        metavar=("X", "Y"),
        default=None,
        help="Explicit start point (not validated against the rectangle)",
    )
    parser.add_argument(
        "--max-attempts",
        type=int,
        default=None,
        help="Cap each rejection loop at this many attempts (default: unbounded)",
    )
    parser.add_argument("--description", default="", help="Free-text run label")
    parser.add_argument(
        "--table",
        action="store_true",
        help="Print the trajectory as an x/y table",
    )
    parser.add_argument(
        "--draws",
        type=int,
        default=0,
        metavar="N",
        help="Print N uniform, N/2 Gaussian pairs and N binary draws",
    )
    parser.add_argument(
        "--compare",
        type=int,
        default=0,
        metavar="N",
        help="Compare N uniform draws against NumPy's generator",
    )
    parser.add_argument(
        "--plot",
        type=Path,
        default=None,
        metavar="DIR",
        help="Write PNG + SVG figures into DIR",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Validate and print the config without walking",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable DEBUG-level logging",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = build_config(args)
    except (ValueError, DaciteError) as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        sys.exit(1)

    log.info("Seed: %d", config.seed)
    log.info("Config hash: %s", config_hash(config))

    if args.dry_run:
        print(json.dumps({
            "config": config_to_dict(config),
            "config_hash": config_hash(config),
            "geometry_hash": geometry_hash(config),
        }, indent=2))
        return

    try:
        summary = run_pipeline(config, args)
    except RejectionLimitError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception:
        log.exception("Walk run failed")
        sys.exit(1)

    print(json.dumps(summary, indent=2))


if __name__ == "__main__":
    main()
