"""Analog clock face rendering."""

from clockface.clock.geometry import ClockTime, ViewportGeometry
from clockface.clock.primitives import (
    Circle,
    DrawPrimitive,
    HandKind,
    HandSegment,
    NumeralLabel,
    TickSegment,
)
from clockface.clock.renderer import ClockFaceRenderer, render
from clockface.clock.style import ClockStyle, HandStyle

__all__ = [
    "Circle",
    "ClockFaceRenderer",
    "ClockStyle",
    "ClockTime",
    "DrawPrimitive",
    "HandKind",
    "HandSegment",
    "HandStyle",
    "NumeralLabel",
    "TickSegment",
    "ViewportGeometry",
    "render",
]
