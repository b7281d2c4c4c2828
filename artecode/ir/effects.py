"""Visual effect descriptors applied after all elements are drawn."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated, Literal, Optional, Union

from pydantic import Field

from artecode.ir.colors import Color, IRModel


class BlurParams(IRModel):
    type: Literal["blur"] = "blur"
    amount: float


class GlowParams(IRModel):
    type: Literal["glow"] = "glow"
    intensity: float
    color: Optional[Color] = None


class ColorShiftParams(IRModel):
    type: Literal["colorShift"] = "colorShift"
    hue: float
    saturation: float


class PixelateParams(IRModel):
    type: Literal["pixelate"] = "pixelate"
    size: float


class ThresholdParams(IRModel):
    type: Literal["threshold"] = "threshold"
    level: float


class InvertParams(IRModel):
    type: Literal["invert"] = "invert"


EffectParameters = Annotated[
    Union[BlurParams, GlowParams, ColorShiftParams, PixelateParams, ThresholdParams, InvertParams],
    Field(discriminator="type"),
]


class VisualEffect(IRModel):
    id: str
    name: str
    description: str = ""
    enabled: bool = False
    parameters: EffectParameters


DEFAULT_EFFECTS = (
    VisualEffect(
        id="blur",
        name="Blur",
        description="Gaussian blur for soft, dreamy effects",
        parameters=BlurParams(amount=3),
    ),
    VisualEffect(
        id="glow",
        name="Glow",
        description="Soft glow effect for highlights",
        parameters=GlowParams(intensity=20),
    ),
    VisualEffect(
        id="colorShift",
        name="Color Shift",
        description="Rotate hue and adjust saturation",
        parameters=ColorShiftParams(hue=0, saturation=1),
    ),
    VisualEffect(
        id="pixelate",
        name="Pixelate",
        description="Retro pixel art effect",
        parameters=PixelateParams(size=8),
    ),
    VisualEffect(
        id="threshold",
        name="Threshold",
        description="High contrast black and white",
        parameters=ThresholdParams(level=0.5),
    ),
    VisualEffect(
        id="invert",
        name="Invert",
        description="Invert all colors",
        parameters=InvertParams(),
    ),
)


@dataclass(frozen=True)
class EffectRange:
    min: float
    max: float
    step: float


_EFFECT_RANGES = {
    "blur": {"amount": EffectRange(0, 10, 0.5)},
    "glow": {"intensity": EffectRange(0, 100, 1)},
    "colorShift": {
        "hue": EffectRange(0, 360, 1),
        "saturation": EffectRange(0, 2, 0.1),
    },
    "pixelate": {"size": EffectRange(2, 20, 1)},
    "threshold": {"level": EffectRange(0, 1, 0.01)},
}

_FALLBACK_RANGE = EffectRange(0, 100, 1)


def get_effect_range(effect_type: str, parameter: str) -> EffectRange:
    """Slider bounds for an effect parameter; unknown pairs get 0..100 in steps of 1."""
    return _EFFECT_RANGES.get(effect_type, {}).get(parameter, _FALLBACK_RANGE)
