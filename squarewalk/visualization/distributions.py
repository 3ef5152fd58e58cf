"""Decile histogram comparison between the middle-square and library generators."""

import matplotlib.pyplot as plt
import numpy as np

from squarewalk.reporting.comparison import PRNGComparison
from squarewalk.visualization.style import AXIS_COLOR, LIBRARY_COLOR, MIDDLE_SQUARE_COLOR


def plot_uniform_comparison(comparison: PRNGComparison) -> plt.Figure:
    """Grouped bars of per-decile counts with the flat expectation overlaid.

    Args:
        comparison: Result of compare_prng().

    Returns:
        The matplotlib Figure containing the bar chart.
    """
    fig, ax = plt.subplots(figsize=(8, 5))
    bins = np.arange(10)
    width = 0.4

    ax.bar(
        bins - width / 2, comparison.middle_square_counts, width,
        color=MIDDLE_SQUARE_COLOR,
        label=f"Middle-square (chi2={comparison.middle_square_chi2:.1f})",
    )
    ax.bar(
        bins + width / 2, comparison.library_counts, width,
        color=LIBRARY_COLOR,
        label=f"NumPy PCG64 (chi2={comparison.library_chi2:.1f})",
    )
    ax.axhline(comparison.count / 10, color=AXIS_COLOR, linestyle="--", label="Expected")

    ax.set_xticks(bins)
    ax.set_xticklabels([f".{i}" for i in bins])
    ax.set_xlabel("Decile of [0, 1)")
    ax.set_ylabel("Count")
    ax.set_title(f"Uniform draws per decile (n={comparison.count})")
    ax.legend()

    fig.tight_layout()
    return fig
