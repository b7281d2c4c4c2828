"""Bundled starter scenes, kept in the editor's JSON shape."""
from __future__ import annotations

from typing import Any, Dict

from artecode.ir.presets import BLOCK_PRESETS
from artecode.ir.scene_model import Scene


def _background(value: float) -> Dict[str, Any]:
    return {
        "id": "bg-1",
        "type": {"kind": "background", "color": {"mode": "gray", "value": value}},
        "behavior": {"kind": "static"},
    }


def _block_scene(fill: Dict[str, Any], *preset_names: str, diameter: float = 50, **extra: Any) -> Scene:
    return Scene.model_validate(
        {
            "canvas": {"width": 800, "height": 600},
            **extra,
            "elements": [
                _background(20),
                {
                    "id": "circle-1",
                    "type": {"kind": "circle", "x": 400, "y": 300, "diameter": diameter},
                    "style": {"fill": fill, "noStroke": True},
                    "behavior": {"kind": "static"},
                    "blocks": [BLOCK_PRESETS[name] for name in preset_names],
                },
            ],
        }
    )


DEFAULT_SCENE = Scene.model_validate(
    {
        "canvas": {"width": 800, "height": 600},
        "elements": [
            _background(20),
            {
                "id": "circle-1",
                "type": {"kind": "circle", "x": 400, "y": 300, "diameter": 50},
                "style": {"fill": {"mode": "rgb", "r": 255, "g": 100, "b": 100, "a": 150}, "noStroke": True},
                "behavior": {"kind": "followMouse", "property": "both"},
            },
        ],
    }
)

BLANK_SCENE = Scene.model_validate({"canvas": {"width": 400, "height": 400}, "elements": [_background(220)]})

EXAMPLE_SCENES: Dict[str, Scene] = {
    "colorful-circles": DEFAULT_SCENE,
    "bouncing-ball": Scene.model_validate(
        {
            "canvas": {"width": 400, "height": 400},
            "elements": [
                _background(220),
                {
                    "id": "ball-1",
                    "type": {"kind": "circle", "x": 200, "y": 200, "diameter": 50},
                    "style": {"fill": {"mode": "rgb", "r": 100, "g": 150, "b": 255}},
                    "behavior": {
                        "kind": "animated",
                        "property": "position",
                        "function": {"type": "sin", "speed": 0.1, "amplitude": 150, "offset": 0},
                    },
                },
            ],
        }
    ),
    "rainbow-trail": Scene.model_validate(
        {
            "canvas": {"width": 800, "height": 600},
            "colorMode": "HSB",
            "elements": [
                _background(20),
                {
                    "id": "circle-1",
                    "type": {"kind": "circle", "x": 400, "y": 300, "diameter": 40},
                    "style": {"fill": {"mode": "hsb", "h": 180, "s": 80, "b": 100, "a": 0.3}, "noStroke": True},
                    "behavior": {"kind": "followMouse", "property": "both"},
                },
            ],
        }
    ),
    "simple-shapes": Scene.model_validate(
        {
            "canvas": {"width": 400, "height": 400},
            "elements": [
                _background(240),
                {
                    "id": "circle-1",
                    "type": {"kind": "circle", "x": 100, "y": 100, "diameter": 80},
                    "style": {
                        "fill": {"mode": "rgb", "r": 255, "g": 100, "b": 100},
                        "stroke": {"mode": "gray", "value": 0},
                        "strokeWeight": 2,
                    },
                },
                {
                    "id": "rect-1",
                    "type": {"kind": "rectangle", "x": 200, "y": 200, "width": 100, "height": 60},
                    "style": {
                        "fill": {"mode": "rgb", "r": 100, "g": 150, "b": 255},
                        "stroke": {"mode": "gray", "value": 0},
                        "strokeWeight": 2,
                    },
                },
                {
                    "id": "line-1",
                    "type": {"kind": "line", "x1": 50, "y1": 300, "x2": 350, "y2": 300},
                    "style": {"stroke": {"mode": "gray", "value": 0}, "strokeWeight": 3},
                },
            ],
        }
    ),
    "interactive-circle": Scene.model_validate(
        {
            "canvas": {"width": 400, "height": 400},
            "elements": [
                _background(220),
                {
                    "id": "circle-1",
                    "type": {"kind": "circle", "x": 200, "y": 200, "diameter": 50},
                    "style": {"fill": {"mode": "rgb", "r": 255, "g": 100, "b": 100}},
                    "behavior": {"kind": "followMouse", "property": "both"},
                },
            ],
        }
    ),
}

BLOCK_EXAMPLE_SCENES: Dict[str, Scene] = {
    "oscillating-circle": _block_scene({"mode": "rgb", "r": 100, "g": 150, "b": 255}, "oscillateX"),
    "pulsing-circle": _block_scene({"mode": "rgb", "r": 255, "g": 100, "b": 100}, "breathe"),
    "oscillate-and-pulse": _block_scene({"mode": "rgb", "r": 255, "g": 150, "b": 100}, "oscillateX", "breathe"),
    "orbiting-circle": _block_scene({"mode": "rgb", "r": 100, "g": 255, "b": 150}, "orbit", diameter=30),
    "rainbow-circle": _block_scene(
        {"mode": "hsb", "h": 180, "s": 80, "b": 100}, "rainbowSlow", diameter=100, colorMode="HSB"
    ),
}


def get_example_scene(name: str) -> Scene:
    """Look up a bundled scene by name across both example sets."""
    scene = EXAMPLE_SCENES.get(name) or BLOCK_EXAMPLE_SCENES.get(name)
    if scene is None:
        raise KeyError(f"Unknown example scene: {name}")
    return scene
