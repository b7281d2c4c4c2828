"""Freehand sketch input collected by the drawing canvas."""
from __future__ import annotations

from typing import Annotated, List, Literal, Optional, Union

from pydantic import Field

from artecode.ir.colors import IRModel


class SketchCircle(IRModel):
    type: Literal["circle"] = "circle"
    x: float
    y: float
    radius: float
    color: Optional[str] = None


class SketchRectangle(IRModel):
    type: Literal["rectangle"] = "rectangle"
    x: float
    y: float
    width: float
    height: float
    color: Optional[str] = None


class SketchLine(IRModel):
    type: Literal["line"] = "line"
    x1: float
    y1: float
    x2: float
    y2: float
    color: Optional[str] = None


SketchShape = Annotated[Union[SketchCircle, SketchRectangle, SketchLine], Field(discriminator="type")]


class SketchData(IRModel):
    shapes: List[SketchShape] = Field(default_factory=list)
    canvas_width: float
    canvas_height: float
