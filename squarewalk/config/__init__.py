"""Walk configuration: frozen dataclass, anchor defaults, hashing, and dict/JSON conversion."""

from squarewalk.config.experiment import WalkConfig
from squarewalk.config.defaults import ANCHOR_CONFIG
from squarewalk.config.hashing import config_hash, geometry_hash
from squarewalk.config.serialization import (
    config_from_dict,
    config_to_dict,
    config_to_json,
)

__all__ = [
    "WalkConfig",
    "ANCHOR_CONFIG",
    "config_hash",
    "geometry_hash",
    "config_to_dict",
    "config_from_dict",
    "config_to_json",
]
