"""Viewport, time and angle math for the clock face.

Two angle conventions are in play and are kept apart on purpose:

* drawing angles: 0 degrees points at 3 o'clock and grows clockwise on a
  y-down surface. Ticks and numerals are laid out directly in it.
* clock angles: 0 degrees points at 12 o'clock and grows clockwise. Hand
  angles are computed in it and shifted by -90 degrees before drawing.
"""

import math
from datetime import datetime
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field

from clockface.config import Settings

DEGREES_PER_HOUR = 30.0
DEGREES_PER_MINUTE = 6.0
DEGREES_PER_SECOND = 6.0
HOUR_CREEP_PER_MINUTE = 0.5


class ViewportGeometry(BaseModel):
    """Drawing surface size and the face padding inside it."""

    model_config = ConfigDict(frozen=True)

    width: float = Field(ge=0)
    height: float = Field(ge=0)
    padding: float = Field(default=50, ge=0)

    @classmethod
    def from_settings(cls, settings: Settings) -> "ViewportGeometry":
        return cls(width=settings.width, height=settings.height, padding=settings.padding)

    @property
    def center_x(self) -> float:
        return self.width / 2

    @property
    def center_y(self) -> float:
        return self.height / 2

    @property
    def center(self) -> Tuple[float, float]:
        return self.center_x, self.center_y

    @property
    def radius(self) -> float:
        """Face radius, clamped to zero when padding eats the whole viewport."""
        return max(0.0, min(self.center_x, self.center_y) - self.padding)

    @property
    def is_degenerate(self) -> bool:
        return self.radius <= 0

    def resized(self, width: float, height: float) -> "ViewportGeometry":
        return type(self)(width=width, height=height, padding=self.padding)


class ClockTime(BaseModel):
    """A 12-hour wall-clock reading."""

    model_config = ConfigDict(frozen=True)

    hours: int = Field(ge=0, le=11)
    minutes: int = Field(default=0, ge=0, le=59)
    seconds: int = Field(default=0, ge=0, le=59)

    @classmethod
    def from_datetime(cls, value: datetime) -> "ClockTime":
        return cls(hours=value.hour % 12, minutes=value.minute, seconds=value.second)

    @classmethod
    def parse(cls, text: str) -> "ClockTime":
        """
        Parse ``HH:MM`` or ``HH:MM:SS`` in 24-hour notation.

        Raises:
            ValueError: If the text is not a valid time of day
        """
        parts = text.strip().split(":")
        if len(parts) not in (2, 3):
            raise ValueError(f"Time must be in HH:MM or HH:MM:SS format: {text!r}")
        try:
            values = [int(part) for part in parts]
        except ValueError as e:
            raise ValueError(f"Invalid time format: {text!r}") from e

        hour = values[0]
        if not 0 <= hour <= 23:
            raise ValueError(f"Hour out of range: {hour}")
        return cls(
            hours=hour % 12,
            minutes=values[1],
            seconds=values[2] if len(values) == 3 else 0,
        )

    @property
    def hour_angle(self) -> float:
        return hour_angle(self.hours, self.minutes)

    @property
    def minute_angle(self) -> float:
        return minute_angle(self.minutes)

    @property
    def second_angle(self) -> float:
        return second_angle(self.seconds)

    def __str__(self) -> str:
        return f"{self.hours:02d}:{self.minutes:02d}:{self.seconds:02d}"


def normalize_angle(degrees: float) -> float:
    """Fold an angle into [0, 360)."""
    folded = math.fmod(degrees, 360.0)
    if folded < 0:
        folded += 360.0
    # fmod of a tiny negative value can land exactly on 360
    return 0.0 if folded >= 360.0 else folded


def hour_angle(hours: int, minutes: int = 0) -> float:
    """Hour hand angle, creeping half a degree per minute."""
    return normalize_angle(hours * DEGREES_PER_HOUR + minutes * HOUR_CREEP_PER_MINUTE)


def minute_angle(minutes: int) -> float:
    return normalize_angle(minutes * DEGREES_PER_MINUTE)


def second_angle(seconds: int) -> float:
    return normalize_angle(seconds * DEGREES_PER_SECOND)


def clock_to_drawing_angle(clock_degrees: float) -> float:
    """Convert a 12 o'clock based angle to the 3 o'clock drawing convention."""
    return normalize_angle(clock_degrees - 90.0)


def polar_to_cartesian(
    cx: float, cy: float, distance: float, drawing_degrees: float
) -> Tuple[float, float]:
    """Point at ``distance`` from (cx, cy) along a drawing-convention angle."""
    rad = math.radians(drawing_degrees)
    return cx + math.cos(rad) * distance, cy + math.sin(rad) * distance
