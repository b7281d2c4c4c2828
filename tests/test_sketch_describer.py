import pytest
from pydantic import ValidationError

from artecode.ir.sketch import SketchCircle, SketchData, SketchLine, SketchRectangle
from artecode.tools.sketch_describer import BLANK_SKETCH_DESCRIPTION, generate_description, get_sketch_summary


def test_empty_sketch_ignores_canvas_size():
    for width, height in ((800, 600), (10, 10)):
        sketch = SketchData(shapes=[], canvas_width=width, canvas_height=height)
        assert generate_description(sketch) == "Create a blank p5.js sketch with a light gray background"
    assert BLANK_SKETCH_DESCRIPTION.startswith("Create a blank")


def test_shapes_are_described_in_order():
    sketch = SketchData(
        shapes=[
            SketchCircle(x=100.4, y=99.5, radius=20.2),
            SketchRectangle(x=10, y=20, width=-30.6, height=40),
            SketchLine(x1=0, y1=0, x2=50, y2=60),
        ],
        canvas_width=800,
        canvas_height=600,
    )
    assert generate_description(sketch) == (
        "Create a p5.js sketch on a canvas of 800x600 with "
        "a circle centered at position (100, 100) with radius 20, "
        "a rectangle at position (10, 20) with width 31 and height 40, "
        "a line from point (0, 0) to point (50, 60). "
        "Use a light gray background and make the shapes colorful."
    )


def test_sketch_json_from_canvas():
    sketch = SketchData.model_validate(
        {"shapes": [{"type": "circle", "x": 1, "y": 2, "radius": 3, "color": "#ff0000"}], "canvasWidth": 400, "canvasHeight": 300}
    )
    assert "canvas of 400x300" in generate_description(sketch)


def test_summary_counts_shapes():
    sketch = SketchData(
        shapes=[
            SketchCircle(x=0, y=0, radius=1),
            SketchLine(x1=0, y1=0, x2=1, y2=1),
            SketchCircle(x=0, y=0, radius=1),
        ],
        canvas_width=1,
        canvas_height=1,
    )
    assert get_sketch_summary(sketch) == "2 circles, 1 line"
    assert get_sketch_summary(SketchData(canvas_width=1, canvas_height=1)) == "empty sketch"


def test_non_finite_shape_coordinates_are_rejected():
    with pytest.raises(ValidationError):
        SketchData.model_validate(
            {"shapes": [{"type": "circle", "x": float("nan"), "y": 1, "radius": 2}], "canvasWidth": 800, "canvasHeight": 600}
        )
