"""Orchestrator: render every figure for one walk run.

Saves to the given directory as PNG + SVG.
"""

import logging
from pathlib import Path

from squarewalk.reporting.comparison import PRNGComparison
from squarewalk.visualization.style import apply_style, save_figure
from squarewalk.walk.simulator import RandomWalk
from squarewalk.walk.types import Trajectory

log = logging.getLogger(__name__)


def render_all(
    trajectory: Trajectory,
    walker: RandomWalk,
    output_dir: str | Path,
    comparison: PRNGComparison | None = None,
) -> list[Path]:
    """Generate all figures for a single run.

    Each plot type is wrapped in try/except to ensure one failure
    doesn't block the others.

    Args:
        trajectory: Finished walk.
        walker: Simulator that produced the walk.
        output_dir: Directory for figure files. Created if absent.
        comparison: Optional compare_prng() result to chart.

    Returns:
        List of paths to generated figure files.
    """
    apply_style()
    output_dir = Path(output_dir)
    generated_files: list[Path] = []

    try:
        from squarewalk.visualization.trajectory import plot_trajectory

        fig = plot_trajectory(trajectory, walker)
        paths = save_figure(fig, output_dir, f"walk_{walker.mode.value}")
        generated_files.extend(paths)
        log.info("Generated: walk_%s", walker.mode.value)
    except Exception as e:
        log.warning("Failed to generate walk plot: %s", e)

    if comparison is not None:
        try:
            from squarewalk.visualization.distributions import plot_uniform_comparison

            fig = plot_uniform_comparison(comparison)
            paths = save_figure(fig, output_dir, "uniform_comparison")
            generated_files.extend(paths)
            log.info("Generated: uniform_comparison")
        except Exception as e:
            log.warning("Failed to generate uniform_comparison: %s", e)

    return generated_files
