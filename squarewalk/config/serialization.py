"""Dict and JSON conversion for walk configs."""

import json
from dataclasses import asdict
from typing import Any

from dacite import from_dict, Config as DaciteConfig

from squarewalk.config.experiment import WalkConfig
from squarewalk.walk.types import WalkMode

# strict=True rejects unknown keys; casts turn JSON lists back into tuples,
# mode strings into WalkMode and integer literals into floats.
_DACITE_CONFIG = DaciteConfig(
    cast=[tuple, WalkMode, float],
    check_types=True,
    strict=True,
)


def config_to_dict(config: WalkConfig) -> dict[str, Any]:
    """Convert a WalkConfig to a plain, JSON-ready dictionary."""
    d = asdict(config)
    d["mode"] = config.mode.value
    return d


def config_from_dict(d: dict[str, Any]) -> WalkConfig:
    """Reconstruct a WalkConfig from a plain dictionary."""
    return from_dict(data_class=WalkConfig, data=d, config=_DACITE_CONFIG)


def config_to_json(config: WalkConfig) -> str:
    """Serialize a WalkConfig to a JSON string.

    Uses sorted keys and 2-space indent for human readability and diffability.
    """
    return json.dumps(config_to_dict(config), indent=2, sort_keys=True)
