import pytest
from pydantic import ValidationError

from artecode.errors import InputConstraintError
from artecode.ir.behavior_blocks import OscillateBlock, UnknownBlock
from artecode.ir.colors import color_to_code, format_number, gray, hsb, rgb
from artecode.ir.examples import BLOCK_EXAMPLE_SCENES, DEFAULT_SCENE, EXAMPLE_SCENES, get_example_scene
from artecode.ir.scene_model import (
    CircleShape,
    FollowMouseBehavior,
    Scene,
    SceneElement,
    add_element,
    create_scene,
    remove_element,
    require_valid_scene,
    update_element,
    validate_scene,
)


def _circle(element_id="circle-1", x=100, y=100):
    return SceneElement(id=element_id, type=CircleShape(x=x, y=y, diameter=20))


def test_color_channels_keep_order_and_drop_missing_alpha():
    assert color_to_code(rgb(255, 100, 50)) == "255, 100, 50"
    assert color_to_code(rgb(255, 100, 50, 150)) == "255, 100, 50, 150"
    assert color_to_code(hsb(180, 80, 100, 0.3)) == "180, 80, 100, 0.3"
    assert color_to_code(gray(20)) == "20"
    assert color_to_code(gray(20, 0)) == "20, 0"


def test_format_number_prints_integral_values_without_decimal_point():
    assert format_number(255.0) == "255"
    assert format_number(0.05) == "0.05"
    assert format_number(-3) == "-3"


def test_scene_parses_editor_json():
    scene = Scene.model_validate(
        {
            "canvas": {"width": 800, "height": 600},
            "colorMode": "HSB",
            "frameRate": 30,
            "elements": [
                {
                    "id": "c",
                    "type": {"kind": "circle", "x": 1, "y": 2, "diameter": 3},
                    "style": {"fill": {"mode": "gray", "value": 10}, "noStroke": True, "strokeWeight": 2},
                    "behavior": {"kind": "followMouse", "property": "x"},
                    "blocks": [{"type": "oscillate", "axis": "x", "speed": 0.1, "range": 5}],
                }
            ],
        }
    )
    element = scene.elements[0]
    assert scene.color_mode == "HSB"
    assert scene.frame_rate == 30
    assert element.style.no_stroke is True
    assert element.style.stroke_weight == 2
    assert isinstance(element.behavior, FollowMouseBehavior)
    assert isinstance(element.blocks[0], OscillateBlock)


def test_unknown_block_type_is_kept_as_unknown_block():
    element = SceneElement.model_validate(
        {"id": "c", "type": {"kind": "circle", "x": 0, "y": 0, "diameter": 1}, "blocks": [{"type": "teleport", "axis": "x"}]}
    )
    block = element.blocks[0]
    assert isinstance(block, UnknownBlock)
    assert block.type == "teleport"
    assert block.axis == "x"


def test_stroke_weight_must_be_positive():
    with pytest.raises(ValidationError):
        SceneElement.model_validate(
            {"id": "c", "type": {"kind": "circle", "x": 0, "y": 0, "diameter": 1}, "style": {"strokeWeight": 0}}
        )


def test_scene_helpers_return_new_scenes():
    scene = create_scene(200, 100)
    with_circle = add_element(scene, _circle())
    assert scene.elements == []
    assert [el.id for el in with_circle.elements] == ["circle-1"]

    moved = update_element(with_circle, "circle-1", type=CircleShape(x=5, y=6, diameter=7))
    assert moved.elements[0].type.x == 5
    assert with_circle.elements[0].type.x == 100

    removed = remove_element(moved, "circle-1")
    assert removed.elements == []
    assert len(moved.elements) == 1


def test_update_element_accepts_editor_shaped_values():
    scene = add_element(create_scene(200, 100), _circle())
    updated = update_element(scene, "circle-1", behavior={"kind": "followMouse", "property": "y"})
    assert isinstance(updated.elements[0].behavior, FollowMouseBehavior)
    assert updated.elements[0].behavior.property == "y"


def test_create_scene_uses_default_canvas():
    scene = create_scene()
    assert scene.canvas.width == 400
    assert scene.canvas.height == 400


def test_scene_is_immutable():
    scene = create_scene(10, 10)
    with pytest.raises(ValidationError):
        scene.frame_rate = 30


def test_validate_scene_reports_every_problem():
    scene = Scene.model_validate(
        {
            "canvas": {"width": 0, "height": 100},
            "elements": [
                {"id": "", "type": {"kind": "circle", "x": 0, "y": 0, "diameter": 1}},
                {"id": "a", "type": {"kind": "circle", "x": 0, "y": 0, "diameter": 1}},
                {"id": "a", "type": {"kind": "circle", "x": 0, "y": 0, "diameter": 1}},
            ],
        }
    )
    result = validate_scene(scene)
    assert not result.valid
    assert result.errors == [
        "Canvas dimensions must be positive",
        "Element missing ID",
        "Duplicate element ID: a",
    ]
    with pytest.raises(InputConstraintError) as excinfo:
        require_valid_scene(scene)
    assert "Element missing ID" in excinfo.value.errors


def test_bundled_examples_are_valid_scenes():
    for scene in [*EXAMPLE_SCENES.values(), *BLOCK_EXAMPLE_SCENES.values()]:
        assert validate_scene(scene).valid
    assert get_example_scene("colorful-circles") is DEFAULT_SCENE
    with pytest.raises(KeyError):
        get_example_scene("missing")


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_numbers_are_rejected(value):
    with pytest.raises(ValidationError):
        CircleShape(x=value, y=0, diameter=10)
    with pytest.raises(ValidationError):
        rgb(value, 0, 0)
