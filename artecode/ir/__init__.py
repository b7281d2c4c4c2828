"""Scene IR.

Components:
- colors: color variants and their argument-list rendering
- scene_model: canvas, elements, styles, behaviors and scene helpers
- behavior_blocks: composable behavior block descriptors
- effects: visual effect descriptors and slider ranges
- sketch: freehand sketch shapes
- presets / examples: ready-made blocks and scenes
"""

from artecode.ir.colors import (
    Color,
    GrayColor,
    HsbColor,
    RgbColor,
    color_to_code,
    format_number,
    gray,
    hsb,
    rgb,
)

from artecode.ir.behavior_blocks import (
    BLOCK_DESCRIPTIONS,
    BehaviorBlock,
    BounceBlock,
    CirclePathBlock,
    ClickToChangeBlock,
    FollowMouseBlock,
    JitterBlock,
    OscillateBlock,
    PerlinNoiseBlock,
    PulseBlock,
    RainbowBlock,
    RotateBlock,
    UnknownBlock,
)

from artecode.ir.effects import (
    DEFAULT_EFFECTS,
    BlurParams,
    ColorShiftParams,
    EffectRange,
    GlowParams,
    InvertParams,
    PixelateParams,
    ThresholdParams,
    VisualEffect,
    get_effect_range,
)

from artecode.ir.scene_model import (
    AnimatedBehavior,
    BackgroundShape,
    Canvas,
    CircleShape,
    ElementStyle,
    FollowMouseBehavior,
    LinearFunction,
    LineShape,
    RandomBehavior,
    RectangleShape,
    Scene,
    SceneElement,
    SceneValidationResult,
    StaticBehavior,
    TextShape,
    TrigFunction,
    add_element,
    create_scene,
    remove_element,
    require_valid_scene,
    update_element,
    validate_scene,
)

from artecode.ir.sketch import SketchCircle, SketchData, SketchLine, SketchRectangle
from artecode.ir.presets import BLOCK_PRESETS

__all__ = [
    # Colors
    "Color",
    "GrayColor",
    "HsbColor",
    "RgbColor",
    "color_to_code",
    "format_number",
    "gray",
    "hsb",
    "rgb",
    # Blocks
    "BLOCK_DESCRIPTIONS",
    "BLOCK_PRESETS",
    "BehaviorBlock",
    "BounceBlock",
    "CirclePathBlock",
    "ClickToChangeBlock",
    "FollowMouseBlock",
    "JitterBlock",
    "OscillateBlock",
    "PerlinNoiseBlock",
    "PulseBlock",
    "RainbowBlock",
    "RotateBlock",
    "UnknownBlock",
    # Effects
    "DEFAULT_EFFECTS",
    "BlurParams",
    "ColorShiftParams",
    "EffectRange",
    "GlowParams",
    "InvertParams",
    "PixelateParams",
    "ThresholdParams",
    "VisualEffect",
    "get_effect_range",
    # Scene
    "AnimatedBehavior",
    "BackgroundShape",
    "Canvas",
    "CircleShape",
    "ElementStyle",
    "FollowMouseBehavior",
    "LinearFunction",
    "LineShape",
    "RandomBehavior",
    "RectangleShape",
    "Scene",
    "SceneElement",
    "SceneValidationResult",
    "StaticBehavior",
    "TextShape",
    "TrigFunction",
    "add_element",
    "create_scene",
    "remove_element",
    "require_valid_scene",
    "update_element",
    "validate_scene",
    # Sketch
    "SketchCircle",
    "SketchData",
    "SketchLine",
    "SketchRectangle",
]
