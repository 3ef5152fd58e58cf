"""Text reporting: draw and trajectory tables, PRNG comparison."""

from squarewalk.reporting.comparison import PRNGComparison, compare_prng, format_comparison
from squarewalk.reporting.tables import (
    binary_table,
    decile_counts,
    gaussian_table,
    trajectory_table,
    uniform_table,
)

__all__ = [
    "PRNGComparison",
    "compare_prng",
    "format_comparison",
    "uniform_table",
    "gaussian_table",
    "binary_table",
    "trajectory_table",
    "decile_counts",
]
