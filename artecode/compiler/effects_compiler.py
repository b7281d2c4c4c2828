"""Visual effects compiler: trailing draw() lines for enabled effects."""
from __future__ import annotations

from typing import List, Optional, Sequence

from artecode.ir.colors import color_to_code, format_number as num
from artecode.ir.effects import (
    BlurParams,
    ColorShiftParams,
    GlowParams,
    InvertParams,
    PixelateParams,
    ThresholdParams,
    VisualEffect,
)

DEFAULT_GLOW_COLOR = "'rgba(255, 255, 255, 0.8)'"


def _effect_lines(effect: VisualEffect) -> List[str]:
    params = effect.parameters

    if isinstance(params, BlurParams):
        return [f"  filter(BLUR, {num(params.amount)});"]

    if isinstance(params, GlowParams):
        shadow_color = DEFAULT_GLOW_COLOR
        if params.color is not None:
            shadow_color = f"color({color_to_code(params.color)}).toString()"
        return [
            f"  drawingContext.shadowBlur = {num(params.intensity)};",
            f"  drawingContext.shadowColor = {shadow_color};",
        ]

    if isinstance(params, ColorShiftParams):
        if params.hue == 0 and params.saturation == 1:
            return []
        return [
            "  // Color shift effect",
            "  loadPixels();",
            f"  // Apply hue shift: {num(params.hue)}°",
            f"  // Apply saturation: {num(params.saturation * 100)}%",
            "  updatePixels();",
        ]

    if isinstance(params, PixelateParams):
        size = num(params.size)
        return [
            "  // Pixelate effect",
            f"  let pg = createGraphics(width / {size}, height / {size});",
            "  pg.copy(get(), 0, 0, width, height, 0, 0, pg.width, pg.height);",
            "  image(pg, 0, 0, width, height);",
        ]

    if isinstance(params, ThresholdParams):
        return [f"  filter(THRESHOLD, {num(params.level)});"]

    if isinstance(params, InvertParams):
        return ["  filter(INVERT);"]

    raise TypeError(f"Unsupported effect parameters: {type(params).__name__}")


def generate_effects_code(effects: Optional[Sequence[VisualEffect]]) -> List[str]:
    """Lines for every enabled effect, in input order; empty when none are enabled."""
    enabled = [effect for effect in effects or () if effect.enabled]
    if not enabled:
        return []

    lines: List[str] = ["  // Apply visual effects"]
    for effect in enabled:
        lines.extend(_effect_lines(effect))
    return lines
