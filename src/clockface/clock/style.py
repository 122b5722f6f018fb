"""Immutable drawing style for the clock face."""

from typing import Callable

from pydantic import BaseModel, ConfigDict, Field

from clockface.config import Settings

# Digit glyphs rendered at text size N are roughly 0.72 * N tall
DIGIT_HEIGHT_RATIO = 0.72

TextMeasurer = Callable[[str, float], float]


def approximate_glyph_height(text: str, text_size: float) -> float:
    """Estimate the rendered height of a numeral string."""
    if not text:
        return 0.0
    return text_size * DIGIT_HEIGHT_RATIO


class HandStyle(BaseModel):
    model_config = ConfigDict(frozen=True)

    length_ratio: float = Field(gt=0, le=1)
    stroke_width: float = Field(gt=0)
    color: str


class ClockStyle(BaseModel):
    """Style values passed into every primitive the renderer builds."""

    model_config = ConfigDict(frozen=True)

    face_color: str = "black"
    face_stroke_width: float = 5

    tick_length: float = 20
    large_tick_length: float = 30
    tick_stroke_width: float = 3
    tick_color: str = "black"

    numeral_text_size: float = 40
    numeral_radius_ratio: float = 0.85
    numeral_color: str = "black"

    hour_hand: HandStyle = HandStyle(length_ratio=0.5, stroke_width=8, color="black")
    minute_hand: HandStyle = HandStyle(length_ratio=0.7, stroke_width=6, color="gray")
    second_hand: HandStyle = HandStyle(length_ratio=0.9, stroke_width=4, color="gray")

    @classmethod
    def from_settings(cls, settings: Settings) -> "ClockStyle":
        return cls(
            face_color=settings.face_color,
            face_stroke_width=settings.face_stroke_width,
            tick_length=settings.tick_length,
            large_tick_length=settings.large_tick_length,
            tick_stroke_width=settings.tick_stroke_width,
            tick_color=settings.face_color,
            numeral_text_size=settings.numeral_text_size,
            numeral_radius_ratio=settings.numeral_radius_ratio,
            numeral_color=settings.face_color,
            hour_hand=HandStyle(
                length_ratio=settings.hour_hand_ratio,
                stroke_width=settings.hour_hand_width,
                color=settings.emphasis_color,
            ),
            minute_hand=HandStyle(
                length_ratio=settings.minute_hand_ratio,
                stroke_width=settings.minute_hand_width,
                color=settings.muted_color,
            ),
            second_hand=HandStyle(
                length_ratio=settings.second_hand_ratio,
                stroke_width=settings.second_hand_width,
                color=settings.muted_color,
            ),
        )

    def tick_length_for(self, index: int) -> float:
        return self.large_tick_length if index % 5 == 0 else self.tick_length
