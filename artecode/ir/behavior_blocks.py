"""Composable behavior blocks.

Blocks are an additive animation layer on top of an element's single
behavior. Each block maps to one well-known sketch pattern (see
``artecode.compiler.block_compiler``).
"""
from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import ConfigDict, Discriminator, Tag

from artecode.ir.colors import IRModel

Axis = Literal["x", "y"]


# Motion blocks
class OscillateBlock(IRModel):
    type: Literal["oscillate"] = "oscillate"
    axis: Axis
    speed: float
    range: float


class RotateBlock(IRModel):
    type: Literal["rotate"] = "rotate"
    speed: float


class BounceBlock(IRModel):
    type: Literal["bounce"] = "bounce"
    axis: Axis
    speed: float
    min: float
    max: float


class CirclePathBlock(IRModel):
    type: Literal["circlePath"] = "circlePath"
    radius: float
    speed: float


# Noise blocks
class PerlinNoiseBlock(IRModel):
    type: Literal["perlinNoise"] = "perlinNoise"
    axis: Axis
    scale: float
    speed: float


class JitterBlock(IRModel):
    type: Literal["jitter"] = "jitter"
    amount: float


# Color blocks
class PulseBlock(IRModel):
    type: Literal["pulse"] = "pulse"
    speed: float
    min_alpha: float
    max_alpha: float


class RainbowBlock(IRModel):
    type: Literal["rainbow"] = "rainbow"
    speed: float


# Interaction blocks
class FollowMouseBlock(IRModel):
    type: Literal["followMouse"] = "followMouse"
    speed: float


class ClickToChangeBlock(IRModel):
    type: Literal["clickToChange"] = "clickToChange"
    property: str
    value: Any = None


class UnknownBlock(IRModel):
    """A block whose type this version does not know; kept so it can be skipped."""

    model_config = ConfigDict(extra="allow")

    type: str


_BLOCK_MODELS = {
    "oscillate": OscillateBlock,
    "rotate": RotateBlock,
    "bounce": BounceBlock,
    "circlePath": CirclePathBlock,
    "perlinNoise": PerlinNoiseBlock,
    "jitter": JitterBlock,
    "pulse": PulseBlock,
    "rainbow": RainbowBlock,
    "followMouse": FollowMouseBlock,
    "clickToChange": ClickToChangeBlock,
}

KNOWN_BLOCK_TYPES = frozenset(_BLOCK_MODELS)


def _block_tag(value: Any) -> str:
    if isinstance(value, dict):
        block_type = value.get("type")
    else:
        block_type = getattr(value, "type", None)
    return block_type if block_type in KNOWN_BLOCK_TYPES else "unknown"


BehaviorBlock = Annotated[
    Union[
        Annotated[OscillateBlock, Tag("oscillate")],
        Annotated[RotateBlock, Tag("rotate")],
        Annotated[BounceBlock, Tag("bounce")],
        Annotated[CirclePathBlock, Tag("circlePath")],
        Annotated[PerlinNoiseBlock, Tag("perlinNoise")],
        Annotated[JitterBlock, Tag("jitter")],
        Annotated[PulseBlock, Tag("pulse")],
        Annotated[RainbowBlock, Tag("rainbow")],
        Annotated[FollowMouseBlock, Tag("followMouse")],
        Annotated[ClickToChangeBlock, Tag("clickToChange")],
        Annotated[UnknownBlock, Tag("unknown")],
    ],
    Discriminator(_block_tag),
]


BLOCK_DESCRIPTIONS = {
    "oscillate": "Moves element back and forth smoothly",
    "rotate": "Rotates element continuously",
    "bounce": "Bounces element between boundaries",
    "circlePath": "Moves element in a circular path",
    "perlinNoise": "Adds smooth, organic movement",
    "jitter": "Adds small random vibrations",
    "pulse": "Fades element in and out",
    "rainbow": "Cycles through rainbow colors",
    "followMouse": "Element follows the mouse cursor",
    "clickToChange": "Changes property when clicked",
}
