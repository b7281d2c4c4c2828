"""Predefined behavior blocks for common motion, noise, color and interaction patterns."""
from __future__ import annotations

from artecode.ir.behavior_blocks import (
    BounceBlock,
    CirclePathBlock,
    FollowMouseBlock,
    JitterBlock,
    OscillateBlock,
    PerlinNoiseBlock,
    PulseBlock,
    RainbowBlock,
    RotateBlock,
)

BLOCK_PRESETS = {
    # Motion
    "oscillateX": OscillateBlock(axis="x", speed=0.05, range=100),
    "oscillateY": OscillateBlock(axis="y", speed=0.05, range=100),
    "slowRotate": RotateBlock(speed=0.01),
    "fastRotate": RotateBlock(speed=0.05),
    "bounceX": BounceBlock(axis="x", speed=0.05, min=100, max=700),
    "bounceY": BounceBlock(axis="y", speed=0.05, min=100, max=500),
    "orbit": CirclePathBlock(radius=150, speed=0.02),
    # Noise
    "noiseX": PerlinNoiseBlock(axis="x", scale=100, speed=0.01),
    "noiseY": PerlinNoiseBlock(axis="y", scale=100, speed=0.01),
    "shake": JitterBlock(amount=5),
    "vibrate": JitterBlock(amount=2),
    # Color
    "breathe": PulseBlock(speed=0.05, min_alpha=100, max_alpha=255),
    "fastPulse": PulseBlock(speed=0.1, min_alpha=50, max_alpha=255),
    "rainbowSlow": RainbowBlock(speed=1),
    "rainbowFast": RainbowBlock(speed=5),
    # Interaction
    "followSlow": FollowMouseBlock(speed=0.05),
    "followFast": FollowMouseBlock(speed=0.2),
}
