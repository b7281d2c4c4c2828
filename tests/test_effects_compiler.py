from artecode.compiler.effects_compiler import generate_effects_code
from artecode.ir.colors import rgb
from artecode.ir.effects import (
    DEFAULT_EFFECTS,
    BlurParams,
    ColorShiftParams,
    GlowParams,
    InvertParams,
    PixelateParams,
    ThresholdParams,
    VisualEffect,
    get_effect_range,
)


def _effect(params, enabled=True):
    return VisualEffect(id=params.type, name=params.type, enabled=enabled, parameters=params)


def test_no_enabled_effects_yield_no_lines():
    assert generate_effects_code(None) == []
    assert generate_effects_code([]) == []
    assert generate_effects_code(list(DEFAULT_EFFECTS)) == []


def test_enabled_effects_in_input_order():
    lines = generate_effects_code(
        [
            _effect(InvertParams()),
            _effect(BlurParams(amount=3), enabled=False),
            _effect(ThresholdParams(level=0.5)),
            _effect(BlurParams(amount=2.5)),
        ]
    )
    assert lines == [
        "  // Apply visual effects",
        "  filter(INVERT);",
        "  filter(THRESHOLD, 0.5);",
        "  filter(BLUR, 2.5);",
    ]


def test_glow_sets_shadow_properties():
    assert generate_effects_code([_effect(GlowParams(intensity=20))])[1:] == [
        "  drawingContext.shadowBlur = 20;",
        "  drawingContext.shadowColor = 'rgba(255, 255, 255, 0.8)';",
    ]
    colored = generate_effects_code([_effect(GlowParams(intensity=5, color=rgb(255, 0, 0)))])
    assert colored[-1] == "  drawingContext.shadowColor = color(255, 0, 0).toString();"


def test_color_shift_annotations():
    lines = generate_effects_code([_effect(ColorShiftParams(hue=90, saturation=1.5))])
    assert lines[1:] == [
        "  // Color shift effect",
        "  loadPixels();",
        "  // Apply hue shift: 90°",
        "  // Apply saturation: 150%",
        "  updatePixels();",
    ]


def test_neutral_color_shift_emits_only_header():
    assert generate_effects_code([_effect(ColorShiftParams(hue=0, saturation=1))]) == ["  // Apply visual effects"]


def test_pixelate_uses_offscreen_buffer():
    lines = generate_effects_code([_effect(PixelateParams(size=8))])
    assert "  let pg = createGraphics(width / 8, height / 8);" in lines
    assert lines[-1] == "  image(pg, 0, 0, width, height);"


def test_effect_ranges():
    assert get_effect_range("colorShift", "saturation").max == 2
    assert get_effect_range("blur", "amount").step == 0.5
    fallback = get_effect_range("invert", "anything")
    assert (fallback.min, fallback.max, fallback.step) == (0, 100, 1)
