"""Trajectory plot: every step drawn as a segment with a direction marker.

Reads geometry (rectangle, start, destination, mode) from the RandomWalk
that produced the trajectory rather than re-deriving it.
"""

import matplotlib.pyplot as plt
import numpy as np

from squarewalk.visualization.style import (
    AXIS_COLOR,
    DESTINATION_COLOR,
    END_COLOR,
    START_COLOR,
    STEP_COLORS,
)
from squarewalk.walk.simulator import RandomWalk
from squarewalk.walk.types import Trajectory, WalkMode

_TITLES = {
    WalkMode.UNIFORM: "Random Walk With Uniform-distributed Random Step Distance",
    WalkMode.GAUSSIAN: "Random Walk With Gaussian-distributed Random Step Distance",
}


def step_marker(prev: np.ndarray, curr: np.ndarray) -> str:
    """Arrow-like marker for the move from ``prev`` to ``curr``.

    Returns ">" / "<" for x moves, "^" / "v" for y moves, "" for a
    zero-length step.
    """
    if curr[0] > prev[0]:
        return ">"
    if curr[0] < prev[0]:
        return "<"
    if curr[1] > prev[1]:
        return "^"
    if curr[1] < prev[1]:
        return "v"
    return ""


def plot_trajectory(trajectory: Trajectory, walker: RandomWalk) -> plt.Figure:
    """Draw the walk inside its rectangle with start, end and destination.

    Args:
        trajectory: Finished walk.
        walker: The simulator that produced it, for geometry.

    Returns:
        The matplotlib Figure containing the plot.
    """
    fig, ax = plt.subplots()
    points = trajectory.points
    x_min, x_max = walker.x_range
    y_min, y_max = walker.y_range

    for i in range(1, len(points)):
        color = STEP_COLORS[i % len(STEP_COLORS)]
        prev, curr = points[i - 1], points[i]
        marker = step_marker(prev, curr)
        if marker:
            ax.plot(curr[0], curr[1], marker=marker, markersize=5, color=color)
        ax.plot(
            [prev[0], curr[0]], [prev[1], curr[1]],
            linestyle="-", linewidth=0.5, color=color,
        )

    ax.plot([x_min, x_max], [0, 0], color=AXIS_COLOR, linewidth=0.8)
    ax.plot([0, 0], [y_min, y_max], color=AXIS_COLOR, linewidth=0.8)

    marks = [
        (walker.destination, "D", DESTINATION_COLOR, "Destination"),
        (walker.start, "o", START_COLOR, "Start"),
        (trajectory.end, "X", END_COLOR, "End"),
    ]
    for (x, y), marker, color, label in marks:
        ax.plot(
            x, y, marker=marker, markersize=8, linestyle="",
            markerfacecolor=color, markeredgecolor=color, label=label,
        )

    ax.set_xlim(x_min, x_max)
    ax.set_ylim(y_min, y_max)
    ax.set_aspect("equal", adjustable="box")
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.set_title(_TITLES[walker.mode])
    ax.legend(loc="upper right")

    fig.tight_layout()
    return fig
