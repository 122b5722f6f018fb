"""SVG drawing surface for clock face primitives."""

from typing import Iterable, List
from xml.sax.saxutils import escape, quoteattr

from clockface.clock.primitives import (
    Circle,
    DrawPrimitive,
    HandSegment,
    NumeralLabel,
    TickSegment,
)


def _num(value: float) -> str:
    """Compact coordinate formatting."""
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


class SvgSurface:
    """Draws primitives onto an SVG document."""

    def __init__(self, width: float, height: float, background: str = "white"):
        self.width = width
        self.height = height
        self.background = background

    def draw(self, primitives: Iterable[DrawPrimitive]) -> str:
        """
        Render primitives in order as an SVG string.

        Args:
            primitives: Output of ``ClockFaceRenderer.render``

        Returns:
            SVG document
        """
        elements: List[str] = [self._element(p) for p in primitives]
        body = "\n    ".join(elements)
        return f"""<?xml version="1.0" encoding="UTF-8" standalone="no"?>
<svg width="{_num(self.width)}" height="{_num(self.height)}" viewBox="0 0 {_num(self.width)} {_num(self.height)}" xmlns="http://www.w3.org/2000/svg">
    <rect width="100%" height="100%" fill={quoteattr(self.background)} />
    {body}
</svg>
"""

    def _element(self, primitive: DrawPrimitive) -> str:
        if isinstance(primitive, Circle):
            return (
                f'<circle cx="{_num(primitive.cx)}" cy="{_num(primitive.cy)}" '
                f'r="{_num(primitive.radius)}" fill="none" stroke={quoteattr(primitive.color)} '
                f'stroke-width="{_num(primitive.stroke_width)}" />'
            )
        if isinstance(primitive, (TickSegment, HandSegment)):
            cls = "tick" if isinstance(primitive, TickSegment) else f"hand {primitive.hand.value}"
            return (
                f'<line class="{cls}" x1="{_num(primitive.x1)}" y1="{_num(primitive.y1)}" '
                f'x2="{_num(primitive.x2)}" y2="{_num(primitive.y2)}" '
                f'stroke={quoteattr(primitive.color)} stroke-width="{_num(primitive.stroke_width)}" />'
            )
        if isinstance(primitive, NumeralLabel):
            return (
                f'<text x="{_num(primitive.x)}" y="{_num(primitive.y)}" '
                f'font-family="sans-serif" font-size="{_num(primitive.text_size)}" '
                f'text-anchor="middle" fill={quoteattr(primitive.color)}>{escape(primitive.text)}</text>'
            )
        raise TypeError(f"Unsupported primitive: {type(primitive).__name__}")
