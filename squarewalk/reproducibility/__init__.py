"""Reproducibility infrastructure: seed management and code provenance tracking."""

from squarewalk.reproducibility.seed import (
    default_seed,
    library_rng,
    set_seed,
    verify_seed_determinism,
)
from squarewalk.reproducibility.git_hash import get_git_hash

__all__ = [
    "default_seed",
    "set_seed",
    "library_rng",
    "verify_seed_determinism",
    "get_git_hash",
]
