"""Turn freehand sketch shapes into a natural-language generation prompt."""
from __future__ import annotations

import math
from collections import Counter
from typing import List

from artecode.ir.colors import format_number
from artecode.ir.sketch import SketchCircle, SketchData, SketchLine, SketchRectangle, SketchShape

BLANK_SKETCH_DESCRIPTION = "Create a blank p5.js sketch with a light gray background"


def _round(value: float) -> int:
    # half-up, like the browser's Math.round
    return math.floor(value + 0.5)


def describe_shape(shape: SketchShape) -> str:
    if isinstance(shape, SketchCircle):
        return (
            f"a circle centered at position ({_round(shape.x)}, {_round(shape.y)}) "
            f"with radius {_round(shape.radius)}"
        )
    if isinstance(shape, SketchRectangle):
        return (
            f"a rectangle at position ({_round(shape.x)}, {_round(shape.y)}) "
            f"with width {_round(abs(shape.width))} and height {_round(abs(shape.height))}"
        )
    if isinstance(shape, SketchLine):
        return (
            f"a line from point ({_round(shape.x1)}, {_round(shape.y1)}) "
            f"to point ({_round(shape.x2)}, {_round(shape.y2)})"
        )
    raise TypeError(f"Unsupported sketch shape: {type(shape).__name__}")


def generate_description(sketch: SketchData) -> str:
    if not sketch.shapes:
        return BLANK_SKETCH_DESCRIPTION

    shape_list = ", ".join(describe_shape(shape) for shape in sketch.shapes)
    width = format_number(sketch.canvas_width)
    height = format_number(sketch.canvas_height)
    return (
        f"Create a p5.js sketch on a canvas of {width}x{height} with {shape_list}. "
        "Use a light gray background and make the shapes colorful."
    )


def get_sketch_summary(sketch: SketchData) -> str:
    """Short count of shapes by kind, e.g. ``"2 circles, 1 line"``."""
    counts = Counter(shape.type for shape in sketch.shapes)
    parts: List[str] = []
    for kind in ("circle", "rectangle", "line"):
        count = counts.get(kind, 0)
        if count > 0:
            parts.append(f"{count} {kind}{'s' if count > 1 else ''}")
    return ", ".join(parts) if parts else "empty sketch"
