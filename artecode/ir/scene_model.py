"""Visual scene model.

Everything on the canvas as structured data. The visual editor owns the
scene; the compiler only reads it. Helpers never mutate a scene in place,
they return a new value so editor history can keep old ones around.
"""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Annotated, Any, List, Literal, Optional, Union

from pydantic import Field

from artecode.errors import InputConstraintError
from artecode.ir.behavior_blocks import BehaviorBlock
from artecode.ir.colors import Color, IRModel
from artecode.ir.effects import VisualEffect
from artecode.utils.config import settings


class ElementStyle(IRModel):
    fill: Optional[Color] = None
    stroke: Optional[Color] = None
    stroke_weight: Optional[float] = Field(default=None, gt=0)
    no_fill: bool = False
    no_stroke: bool = False


# Element geometry
class CircleShape(IRModel):
    kind: Literal["circle"] = "circle"
    x: float
    y: float
    diameter: float


class RectangleShape(IRModel):
    kind: Literal["rectangle"] = "rectangle"
    x: float
    y: float
    width: float
    height: float


class LineShape(IRModel):
    kind: Literal["line"] = "line"
    x1: float
    y1: float
    x2: float
    y2: float


class TextShape(IRModel):
    kind: Literal["text"] = "text"
    content: str
    x: float
    y: float
    size: float


class BackgroundShape(IRModel):
    kind: Literal["background"] = "background"
    color: Color


ElementType = Annotated[
    Union[CircleShape, RectangleShape, LineShape, TextShape, BackgroundShape],
    Field(discriminator="kind"),
]


# Animation functions
class TrigFunction(IRModel):
    type: Literal["sin", "cos"]
    speed: float
    amplitude: float
    offset: float = 0


class LinearFunction(IRModel):
    type: Literal["linear"] = "linear"
    speed: float


AnimationFunction = Annotated[Union[TrigFunction, LinearFunction], Field(discriminator="type")]


# Element behaviors
class StaticBehavior(IRModel):
    kind: Literal["static"] = "static"


class FollowMouseBehavior(IRModel):
    kind: Literal["followMouse"] = "followMouse"
    property: Literal["x", "y", "both"] = "both"


class AnimatedBehavior(IRModel):
    kind: Literal["animated"] = "animated"
    property: str
    function: AnimationFunction


class RandomBehavior(IRModel):
    kind: Literal["random"] = "random"
    property: str
    min: float
    max: float


ElementBehavior = Annotated[
    Union[StaticBehavior, FollowMouseBehavior, AnimatedBehavior, RandomBehavior],
    Field(discriminator="kind"),
]


class SceneElement(IRModel):
    id: str
    type: ElementType
    style: ElementStyle = Field(default_factory=ElementStyle)
    behavior: ElementBehavior = Field(default_factory=StaticBehavior)
    blocks: List[BehaviorBlock] = Field(default_factory=list)

    @property
    def is_background(self) -> bool:
        return isinstance(self.type, BackgroundShape)

    @property
    def is_static(self) -> bool:
        return isinstance(self.behavior, StaticBehavior)


class Canvas(IRModel):
    width: float
    height: float


class Scene(IRModel):
    canvas: Canvas
    color_mode: Optional[Literal["RGB", "HSB"]] = None
    frame_rate: Optional[float] = None
    elements: List[SceneElement] = Field(default_factory=list)
    effects: Optional[List[VisualEffect]] = None


def create_scene(width: Optional[float] = None, height: Optional[float] = None) -> Scene:
    """Create a blank scene; missing dimensions come from settings."""
    return Scene(
        canvas=Canvas(
            width=settings.default_canvas_width if width is None else width,
            height=settings.default_canvas_height if height is None else height,
        )
    )


def add_element(scene: Scene, element: SceneElement) -> Scene:
    return scene.model_copy(update={"elements": [*scene.elements, element]})


def remove_element(scene: Scene, element_id: str) -> Scene:
    return scene.model_copy(update={"elements": [el for el in scene.elements if el.id != element_id]})


def update_element(scene: Scene, element_id: str, **updates: Any) -> Scene:
    """Return a scene where every element with ``element_id`` has ``updates`` applied.

    ``updates`` use field names (``style=...``, ``behavior=...``); values are
    re-validated so dicts in editor JSON shape are accepted too.
    """
    elements = []
    for el in scene.elements:
        if el.id == element_id:
            data = el.model_dump()
            data.update(updates)
            el = SceneElement.model_validate(data)
        elements.append(el)
    return scene.model_copy(update={"elements": elements})


@dataclass
class SceneValidationResult:
    valid: bool
    errors: List[str] = field(default_factory=list)


def validate_scene(scene: Scene) -> SceneValidationResult:
    errors: List[str] = []

    if scene.canvas.width <= 0 or scene.canvas.height <= 0:
        errors.append("Canvas dimensions must be positive")

    for element in scene.elements:
        if not element.id:
            errors.append("Element missing ID")

    counts = Counter(el.id for el in scene.elements if el.id)
    for element_id, count in counts.items():
        if count > 1:
            errors.append(f"Duplicate element ID: {element_id}")

    return SceneValidationResult(valid=not errors, errors=errors)


def require_valid_scene(scene: Scene) -> Scene:
    result = validate_scene(scene)
    if not result.valid:
        raise InputConstraintError(result.errors)
    return scene
