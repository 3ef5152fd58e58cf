"""Anchor configuration: the reference walk every implementation must reproduce."""

from squarewalk.config.experiment import WalkConfig

# seed=19890929, uniform steps, 4x4 rectangle centred on the origin,
# destination at the origin, 100 steps, no retry cap.
ANCHOR_CONFIG = WalkConfig()
