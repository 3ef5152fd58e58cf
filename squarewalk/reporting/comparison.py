"""Side-by-side uniformity comparison against NumPy's PCG64 generator.

Both generators draw the same number of uniform variates; the values are
bucketed into tenths and each histogram is scored with a chi-square
goodness-of-fit test against a flat expectation.
"""

import logging
from dataclasses import dataclass

import numpy as np
from scipy.stats import chisquare

from squarewalk.prng.draws import draw_uniform
from squarewalk.prng.generator import MiddleSquareGenerator
from squarewalk.reporting.tables import decile_counts
from squarewalk.reproducibility.seed import library_rng

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class PRNGComparison:
    """Decile histograms and chi-square scores for both generators."""

    count: int
    seed: int
    library_seed: int
    middle_square_counts: np.ndarray  # int64 array of shape (10,)
    library_counts: np.ndarray  # int64 array of shape (10,)
    middle_square_chi2: float
    middle_square_p: float
    library_chi2: float
    library_p: float

    def to_dict(self) -> dict:
        return {
            "count": self.count,
            "seed": self.seed,
            "library_seed": self.library_seed,
            "middle_square": {
                "counts": self.middle_square_counts.tolist(),
                "chi2": self.middle_square_chi2,
                "p_value": self.middle_square_p,
            },
            "library": {
                "counts": self.library_counts.tolist(),
                "chi2": self.library_chi2,
                "p_value": self.library_p,
            },
        }


def _score(counts: np.ndarray) -> tuple[float, float]:
    if counts.sum() == 0:
        return float("nan"), float("nan")
    result = chisquare(counts)
    return float(result.statistic), float(result.pvalue)


def compare_prng(count: int, seed: int, library_seed: int | None = None) -> PRNGComparison:
    """Draw ``count`` uniforms from each generator and compare their histograms.

    Args:
        count: Number of uniform draws per generator.
        seed: Seed for the MiddleSquareGenerator.
        library_seed: Seed for the NumPy generator. Defaults to ``seed``.

    Returns:
        PRNGComparison with counts and chi-square statistics.
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    if library_seed is None:
        library_seed = seed

    ours = decile_counts(draw_uniform(MiddleSquareGenerator(seed), count))
    theirs = decile_counts(library_rng(library_seed).random(count))

    ms_chi2, ms_p = _score(ours)
    lib_chi2, lib_p = _score(theirs)
    log.info(
        "PRNG comparison over %d draws: middle-square chi2=%.2f (p=%.3f), "
        "library chi2=%.2f (p=%.3f)",
        count, ms_chi2, ms_p, lib_chi2, lib_p,
    )
    return PRNGComparison(
        count=count,
        seed=seed,
        library_seed=library_seed,
        middle_square_counts=ours,
        library_counts=theirs,
        middle_square_chi2=ms_chi2,
        middle_square_p=ms_p,
        library_chi2=lib_chi2,
        library_p=lib_p,
    )


def format_comparison(comparison: PRNGComparison) -> str:
    """Render both histograms as tab-separated text tables."""
    header = "\t".join(f".{i}" for i in range(10))

    def block(title: str, counts: np.ndarray, chi2: float, p: float) -> list[str]:
        return [
            f"{title} distribution from 0.0 to 0.9",
            header,
            "\t".join(str(int(c)) for c in counts),
            f"chi2={chi2:.3f}\tp={p:.4f}",
        ]

    lines = block(
        "Middle-square PRNG",
        comparison.middle_square_counts,
        comparison.middle_square_chi2,
        comparison.middle_square_p,
    )
    lines.append("")
    lines.extend(
        block(
            "NumPy PCG64",
            comparison.library_counts,
            comparison.library_chi2,
            comparison.library_p,
        )
    )
    return "\n".join(lines)
