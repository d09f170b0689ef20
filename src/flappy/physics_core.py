"""
physics_core.py: The deterministic kinematic functions and collision logic.
"""

from .config import Bounds, GameConfig
from .data_models import Pipe, Sprite


class PhysicsCore:
    """
    Per-tick sprite integration plus sprite-vs-pipe and sprite-vs-bounds tests.
    """

    def __init__(self, config: GameConfig):
        self.pipe_width = config.pipe_width

    def apply_gravity_and_movement(self, sprite: Sprite) -> Sprite:
        """Advances the sprite by one tick: velocity first, then position."""
        sprite.dy += sprite.gravity
        sprite.y += sprite.dy
        return sprite

    def flap(self, sprite: Sprite) -> Sprite:
        """Overrides the current velocity with the jump impulse."""
        sprite.dy = sprite.jump
        return sprite

    def is_collision(self, sprite: Sprite, pipe: Pipe) -> bool:
        """True when the sprite overlaps the pipe horizontally but is outside its gap."""
        overlaps_x = sprite.x < pipe.x + self.pipe_width and sprite.x + sprite.width > pipe.x
        outside_gap = sprite.y < pipe.top or sprite.y + sprite.height > pipe.bottom
        return overlaps_x and outside_gap

    def is_out_of_bounds(self, sprite: Sprite, bounds: Bounds) -> bool:
        """Floor/ceiling test; touching either edge counts."""
        return sprite.y + sprite.height >= bounds.height or sprite.y <= 0

    def has_passed(self, sprite: Sprite, pipe: Pipe) -> bool:
        """True once the pipe's trailing edge is fully behind the sprite."""
        return pipe.x + self.pipe_width < sprite.x
