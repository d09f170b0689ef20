"""
flappy: frame-driven simulation core for a scrolling obstacle arcade game.
"""

from .config import Bounds, ConfigurationError, GameConfig
from .data_models import Frame, GameState, Pipe, Sprite
from .game_engine import GameEngine

__all__ = [
    "Bounds",
    "ConfigurationError",
    "Frame",
    "GameConfig",
    "GameEngine",
    "GameState",
    "Pipe",
    "Sprite",
]
