"""Drawing primitives emitted by the clock face renderer."""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class HandKind(str, Enum):
    """Which hand a segment represents."""

    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"


class _Primitive(BaseModel):
    model_config = ConfigDict(frozen=True)

    color: str
    stroke_width: float


class Circle(_Primitive):
    """The face outline."""

    kind: Literal["circle"] = "circle"
    cx: float
    cy: float
    radius: float


class TickSegment(_Primitive):
    """A minute mark on the rim."""

    kind: Literal["tick"] = "tick"
    index: int = Field(ge=0, le=59)
    large: bool
    x1: float
    y1: float
    x2: float
    y2: float


class NumeralLabel(_Primitive):
    """
    An hour numeral.

    ``(x, y)`` is the horizontally centered baseline anchor, already shifted
    down by half of ``glyph_height``.
    """

    kind: Literal["numeral"] = "numeral"
    text: str
    x: float
    y: float
    text_size: float
    glyph_height: float


class HandSegment(_Primitive):
    """A hand drawn from the center outwards."""

    kind: Literal["hand"] = "hand"
    hand: HandKind
    angle: float
    x1: float
    y1: float
    x2: float
    y2: float


DrawPrimitive = Annotated[
    Union[Circle, TickSegment, NumeralLabel, HandSegment],
    Field(discriminator="kind"),
]

primitive_list_adapter = TypeAdapter(list[DrawPrimitive])


def dump_primitives(primitives: list) -> list[dict]:
    """JSON-ready dicts for a primitive sequence."""
    return primitive_list_adapter.dump_python(primitives, mode="json")


def load_primitives(data: list[dict]) -> list:
    """Rebuild primitives from :func:`dump_primitives` output."""
    return primitive_list_adapter.validate_python(data)
