"""Deterministic config hashing using SHA-256 over sorted JSON."""

import hashlib
import json
from typing import Any

from squarewalk.config.serialization import config_to_dict


def config_hash(config: Any, exclude_fields: list[str] | None = None) -> str:
    """Deterministic SHA-256 hash of a WalkConfig.

    Args:
        config: WalkConfig instance.
        exclude_fields: Optional top-level field names to leave out.

    Returns:
        First 16 hex characters of the SHA-256 hash.
    """
    d = config_to_dict(config)
    for name in exclude_fields or ():
        d.pop(name, None)
    serialized = json.dumps(
        d,
        sort_keys=True,
        ensure_ascii=True,
        separators=(",", ":"),
        indent=None,
    )
    return hashlib.sha256(serialized.encode("utf-8")).hexdigest()[:16]


def geometry_hash(config: Any) -> str:
    """Hash of everything but seed, steps and description.

    Two configs that only differ in seed or step budget describe the same
    rectangle, destination and distribution, and share this hash.
    """
    return config_hash(config, exclude_fields=["seed", "steps", "description"])
