"""Settings and configuration management using Pydantic."""

import os
import re
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Literal, Tuple, Type

import yaml
from pydantic import Field, field_validator, model_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from clockface.logging.config import get_logger

logger = get_logger(__name__)

CONFIG_FILE = Path("config.yaml")

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}$")
_NAMED_COLOR = re.compile(r"^[a-z]+$")


class YamlConfigSettingsSource(PydanticBaseSettingsSource):
    """
    Loads settings from a ``config.yaml`` file in the working directory.
    """

    def get_field_value(self, field: Any, field_name: str) -> Tuple[Any, str, bool]:
        return self().get(field_name), field_name, False

    def __call__(self) -> Dict[str, Any]:
        if not CONFIG_FILE.exists():
            return {}

        encoding = self.config.get("env_file_encoding")
        try:
            content = yaml.safe_load(CONFIG_FILE.read_text(encoding))
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Failed to load {CONFIG_FILE}: {e}")
            return {}

        if not isinstance(content, dict):
            logger.warning(f"Ignoring {CONFIG_FILE}: top level is not a mapping")
            return {}
        return content


class Settings(BaseSettings):
    """Clock face configuration settings."""

    model_config = SettingsConfigDict(
        env_prefix="CLOCKFACE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        # First source wins
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )

    # Viewport
    width: int = Field(default=800, ge=0, description="Viewport width")
    height: int = Field(default=800, ge=0, description="Viewport height")
    padding: int = Field(
        default=50,
        ge=0,
        description="Distance between the clock face and the viewport edge",
    )

    # Face
    face_stroke_width: float = Field(default=5, gt=0, description="Outline stroke width")
    face_color: str = Field(default="black", description="Outline color")

    # Scale ticks
    tick_length: float = Field(default=20, ge=0, description="Minute tick length")
    large_tick_length: float = Field(
        default=30,
        ge=0,
        description="Tick length at every fifth minute",
    )
    tick_stroke_width: float = Field(default=3, gt=0, description="Tick stroke width")

    # Numerals
    numeral_text_size: float = Field(default=40, gt=0, description="Numeral font size")
    numeral_radius_ratio: float = Field(
        default=0.85,
        gt=0,
        le=1,
        description="Numeral distance from center as a fraction of the radius",
    )

    # Hands
    hour_hand_ratio: float = Field(default=0.5, gt=0, le=1)
    minute_hand_ratio: float = Field(default=0.7, gt=0, le=1)
    second_hand_ratio: float = Field(default=0.9, gt=0, le=1)
    hour_hand_width: float = Field(default=8, gt=0)
    minute_hand_width: float = Field(default=6, gt=0)
    second_hand_width: float = Field(default=4, gt=0)
    emphasis_color: str = Field(default="black", description="Hour hand color")
    muted_color: str = Field(default="gray", description="Minute and second hand color")

    # Refresh
    update_interval: float = Field(
        default=1.0,
        ge=0.1,
        description="Clock update interval in seconds",
    )
    svg_output_path: Path = Field(
        default=Path("/tmp/clockface.svg"),
        description="Path to save generated clock SVG",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    log_file: Path | None = Field(default=None, description="Log file path")

    # Development
    debug: bool = Field(default=False, description="Enable debug mode")

    @field_validator("face_color", "emphasis_color", "muted_color")
    @classmethod
    def validate_color(cls, v: str) -> str:
        """Accept ``#rrggbb`` or a lowercase named color."""
        v = v.strip()
        if not (_HEX_COLOR.match(v) or _NAMED_COLOR.match(v)):
            raise ValueError(f"Invalid color: {v!r}")
        return v

    @field_validator("svg_output_path", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path | None) -> Path | None:
        """Expand environment variables and user paths."""
        if v is None:
            return None
        if isinstance(v, str):
            v = os.path.expandvars(os.path.expanduser(v))
        return Path(v)

    @model_validator(mode="after")
    def check_tick_lengths(self) -> "Settings":
        if self.large_tick_length < self.tick_length:
            raise ValueError("large_tick_length must not be shorter than tick_length")
        return self

    def ensure_directories(self) -> None:
        """Ensure required directories exist."""
        if self.log_file:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)
        self.svg_output_path.parent.mkdir(parents=True, exist_ok=True)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
