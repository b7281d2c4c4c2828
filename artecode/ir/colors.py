"""Color variants shared by element styles, backgrounds and effects."""
from __future__ import annotations

from typing import Annotated, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class IRModel(BaseModel):
    """Base for every scene IR value: immutable, camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True, allow_inf_nan=False
    )

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class RgbColor(IRModel):
    mode: Literal["rgb"] = "rgb"
    r: float
    g: float
    b: float
    a: Optional[float] = None

    def channels(self) -> Tuple[float, ...]:
        return (self.r, self.g, self.b) if self.a is None else (self.r, self.g, self.b, self.a)


class HsbColor(IRModel):
    mode: Literal["hsb"] = "hsb"
    h: float
    s: float
    b: float
    a: Optional[float] = None

    def channels(self) -> Tuple[float, ...]:
        return (self.h, self.s, self.b) if self.a is None else (self.h, self.s, self.b, self.a)


class GrayColor(IRModel):
    mode: Literal["gray"] = "gray"
    value: float
    a: Optional[float] = None

    def channels(self) -> Tuple[float, ...]:
        return (self.value,) if self.a is None else (self.value, self.a)


Color = Annotated[Union[RgbColor, HsbColor, GrayColor], Field(discriminator="mode")]


def rgb(r: float, g: float, b: float, a: Optional[float] = None) -> RgbColor:
    return RgbColor(r=r, g=g, b=b, a=a)


def hsb(h: float, s: float, b: float, a: Optional[float] = None) -> HsbColor:
    return HsbColor(h=h, s=s, b=b, a=a)


def gray(value: float, a: Optional[float] = None) -> GrayColor:
    return GrayColor(value=value, a=a)


def format_number(value: float) -> str:
    """Print a number the way the sketch runtime would (``255`` rather than ``255.0``)."""
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return repr(number)


def color_to_code(color: Union[RgbColor, HsbColor, GrayColor]) -> str:
    """Render a color as the argument list of fill()/stroke()/background()."""
    return ", ".join(format_number(channel) for channel in color.channels())
