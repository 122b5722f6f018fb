"""Clock face renderer."""

from typing import List, Optional

from clockface.clock.geometry import (
    ClockTime,
    ViewportGeometry,
    clock_to_drawing_angle,
    polar_to_cartesian,
)
from clockface.clock.primitives import (
    Circle,
    DrawPrimitive,
    HandKind,
    HandSegment,
    NumeralLabel,
    TickSegment,
)
from clockface.clock.style import (
    ClockStyle,
    HandStyle,
    TextMeasurer,
    approximate_glyph_height,
)
from clockface.logging.config import get_logger

logger = get_logger(__name__)

TICK_COUNT = 60
DEGREES_PER_TICK = 6.0
NUMERAL_STEP_DEGREES = 30.0


class ClockFaceRenderer:
    """Turns a viewport and a time into an ordered list of draw primitives."""

    def __init__(
        self,
        style: Optional[ClockStyle] = None,
        measure_text: Optional[TextMeasurer] = None,
    ):
        """
        Initialize renderer.

        Args:
            style: Drawing style, defaults to the stock black/gray face
            measure_text: Returns the rendered height of a string at a text
                size; must be deterministic
        """
        self.style = style or ClockStyle()
        self.measure_text = measure_text or approximate_glyph_height

    def render(self, viewport: ViewportGeometry, time: ClockTime) -> List[DrawPrimitive]:
        """
        Render the face for the given time.

        Output order is face outline, 60 ticks, 12 numerals, then the hour,
        minute and second hands.

        Args:
            viewport: Surface geometry
            time: Time to display

        Returns:
            Draw primitives, empty when the viewport leaves no room for a face
        """
        if viewport.is_degenerate:
            logger.debug(
                f"Nothing to draw: padding {viewport.padding} leaves no radius "
                f"in {viewport.width}x{viewport.height}"
            )
            return []

        primitives: List[DrawPrimitive] = [self._face(viewport)]
        primitives.extend(self._ticks(viewport))
        primitives.extend(self._numerals(viewport))
        primitives.extend(self._hands(viewport, time))
        return primitives

    def _face(self, viewport: ViewportGeometry) -> Circle:
        return Circle(
            cx=viewport.center_x,
            cy=viewport.center_y,
            radius=viewport.radius,
            color=self.style.face_color,
            stroke_width=self.style.face_stroke_width,
        )

    def _ticks(self, viewport: ViewportGeometry) -> List[TickSegment]:
        cx, cy = viewport.center
        radius = viewport.radius
        ticks = []
        for i in range(TICK_COUNT):
            angle = i * DEGREES_PER_TICK
            length = self.style.tick_length_for(i)
            # Ticks never reach past the center
            inner = max(0.0, radius - length)
            x1, y1 = polar_to_cartesian(cx, cy, inner, angle)
            x2, y2 = polar_to_cartesian(cx, cy, radius, angle)
            ticks.append(
                TickSegment(
                    index=i,
                    large=i % 5 == 0,
                    x1=x1,
                    y1=y1,
                    x2=x2,
                    y2=y2,
                    color=self.style.tick_color,
                    stroke_width=self.style.tick_stroke_width,
                )
            )
        return ticks

    def _numerals(self, viewport: ViewportGeometry) -> List[NumeralLabel]:
        cx, cy = viewport.center
        distance = viewport.radius * self.style.numeral_radius_ratio
        size = self.style.numeral_text_size
        labels = []
        for num in range(1, 13):
            text = str(num)
            angle = (num - 3) * NUMERAL_STEP_DEGREES
            x, y = polar_to_cartesian(cx, cy, distance, angle)
            glyph_height = self.measure_text(text, size)
            labels.append(
                NumeralLabel(
                    text=text,
                    x=x,
                    y=y + glyph_height / 2,
                    text_size=size,
                    glyph_height=glyph_height,
                    color=self.style.numeral_color,
                    stroke_width=0,
                )
            )
        return labels

    def _hands(self, viewport: ViewportGeometry, time: ClockTime) -> List[HandSegment]:
        hands = (
            (HandKind.HOUR, time.hour_angle, self.style.hour_hand),
            (HandKind.MINUTE, time.minute_angle, self.style.minute_hand),
            (HandKind.SECOND, time.second_angle, self.style.second_hand),
        )
        return [self._hand(viewport, kind, angle, hand_style) for kind, angle, hand_style in hands]

    def _hand(
        self,
        viewport: ViewportGeometry,
        kind: HandKind,
        angle: float,
        hand_style: HandStyle,
    ) -> HandSegment:
        """Build a hand from a 12 o'clock based angle."""
        cx, cy = viewport.center
        x2, y2 = polar_to_cartesian(
            cx, cy, viewport.radius * hand_style.length_ratio, clock_to_drawing_angle(angle)
        )
        return HandSegment(
            hand=kind,
            angle=angle,
            x1=cx,
            y1=cy,
            x2=x2,
            y2=y2,
            color=hand_style.color,
            stroke_width=hand_style.stroke_width,
        )


_default_renderer = ClockFaceRenderer()


def render(viewport: ViewportGeometry, time: ClockTime) -> List[DrawPrimitive]:
    """Render with the default style."""
    return _default_renderer.render(viewport, time)
