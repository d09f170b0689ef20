"""
config.py: Validated game configuration using Pydantic.

A GameConfig bundles every tuning value the simulation reads. Values come
from constants.py unless overridden per instance or through FLAPPY_*
environment variables (with .env file support).
"""

import logging
from dataclasses import dataclass

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import (
    ENV_PREFIX, GRAVITY, JUMP_IMPULSE, PIPE_FREQUENCY, PIPE_GAP,
    PIPE_MIN_MARGIN, PIPE_SPEED, PIPE_WIDTH, SCREEN_HEIGHT, SCREEN_WIDTH,
    SPRITE_HEIGHT, SPRITE_WIDTH, SPRITE_X_RATIO, SPRITE_Y_RATIO
)

logger = logging.getLogger(__name__)


class ConfigurationError(ValueError):
    """Raised when the game cannot run with the given configuration."""


def _describe(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in error.errors()
    )


@dataclass(frozen=True)
class Bounds:
    """Playfield size, fixed for the duration of one tick."""
    width: float = SCREEN_WIDTH
    height: float = SCREEN_HEIGHT


class GameConfig(BaseSettings):
    """Tuning values for one engine."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Sprite
    sprite_width: float = Field(default=SPRITE_WIDTH, gt=0)
    sprite_height: float = Field(default=SPRITE_HEIGHT, gt=0)
    sprite_x_ratio: float = Field(default=SPRITE_X_RATIO, ge=0.0, le=1.0)
    sprite_y_ratio: float = Field(default=SPRITE_Y_RATIO, ge=0.0, le=1.0)

    # Physics
    gravity: float = Field(default=GRAVITY, ge=0)
    jump: float = Field(default=JUMP_IMPULSE, lt=0)  # Negative is upwards

    # Pipes
    pipe_width: float = Field(default=PIPE_WIDTH, gt=0)
    pipe_gap: float = Field(default=PIPE_GAP, gt=0)
    pipe_speed: float = Field(default=PIPE_SPEED, gt=0)
    pipe_frequency: int = Field(default=PIPE_FREQUENCY, gt=0)
    min_margin: float = Field(default=PIPE_MIN_MARGIN, ge=0)

    def __init__(self, **values):
        try:
            super().__init__(**values)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid game config: {_describe(e)}") from None

    def validate(self) -> "GameConfig":
        """Re-checks the current values, e.g. after fields were reassigned."""
        try:
            type(self).model_validate(self.model_dump())
        except ValidationError as e:
            raise ConfigurationError(f"Invalid game config: {_describe(e)}") from None
        return self

    def check_bounds(self, bounds: Bounds) -> Bounds:
        """
        Rejects a playfield too small to hold a pipe gap plus both margins.
        """
        if bounds.width <= 0 or bounds.height <= 0:
            raise ConfigurationError(
                f"Playfield must have a positive size, got {bounds.width}x{bounds.height}")
        room = bounds.height - self.pipe_gap - self.min_margin * 2
        if room <= 0:
            raise ConfigurationError(
                f"Playfield height {bounds.height} cannot fit a gap of {self.pipe_gap} "
                f"with {self.min_margin} margins (short by {-room})")
        return bounds

    @classmethod
    def from_env(cls) -> "GameConfig":
        """Builds a config from FLAPPY_<FIELD> variables, e.g. FLAPPY_GRAVITY=0.5."""
        config = cls()
        overrides = {
            name: value for name, value in config.model_dump().items()
            if value != cls.model_fields[name].default
        }
        if overrides:
            logger.info(f"Config overrides from environment: {overrides}")
        return config
