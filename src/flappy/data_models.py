"""
data_models.py: Data structures for the game state.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Tuple

from .config import Bounds, GameConfig


class GameState(Enum):
    """Session states."""
    START = auto()
    PLAYING = auto()
    GAME_OVER = auto()


@dataclass
class Sprite:
    """The player-controlled sprite."""
    x: float
    y: float
    width: float
    height: float
    dy: float = 0.0
    gravity: float = 0.0
    jump: float = 0.0

    @classmethod
    def spawn(cls, bounds: Bounds, config: GameConfig) -> "Sprite":
        """Creates the sprite at its resting position for a fresh session."""
        return cls(
            x=bounds.width * config.sprite_x_ratio,
            y=bounds.height * config.sprite_y_ratio,
            width=config.sprite_width,
            height=config.sprite_height,
            dy=0.0,
            gravity=config.gravity,
            jump=config.jump,
        )


@dataclass
class Pipe:
    """An obstacle pair; the sprite must fly between top and bottom."""
    x: float
    top: float
    bottom: float
    passed: bool = False

    @property
    def gap(self) -> float:
        return self.bottom - self.top


@dataclass(frozen=True)
class Frame:
    """Everything the renderer needs for one frame."""
    state: GameState
    sprite: Sprite
    pipes: Tuple[Pipe, ...]
    score: int
    tick_count: int
    bounds: Bounds
    pipe_width: float
