"""
obstacles.py: Pipe generation and the per-tick pipe sweep.
"""

import logging
import math
import random
from dataclasses import dataclass, field
from typing import List, Optional

from .config import Bounds, ConfigurationError
from .data_models import Pipe, Sprite
from .physics_core import PhysicsCore

logger = logging.getLogger(__name__)


def create_pipe(bounds: Bounds, gap_height: float, min_margin: float,
                rng: Optional[random.Random] = None) -> Pipe:
    """
    Spawns a pipe at the right edge with its gap placed at random.

    The gap top is a whole number in [min_margin, height - gap - min_margin],
    so both pipe halves keep at least min_margin of length.
    """
    rng = rng or random
    low = math.ceil(min_margin)
    high = math.floor(bounds.height - gap_height - min_margin)
    if high < low:
        raise ConfigurationError(
            f"No room for a gap of {gap_height} in a playfield {bounds.height} high")
    top = float(rng.randint(low, high))
    pipe = Pipe(x=float(bounds.width), top=top, bottom=top + gap_height)
    logger.debug(f"Spawned pipe at x={pipe.x} gap=[{pipe.top}, {pipe.bottom}]")
    return pipe


@dataclass
class SweepResult:
    """Outcome of one pass over the pipes."""
    pipes: List[Pipe] = field(default_factory=list)
    points: int = 0
    collided: bool = False


def sweep_pipes(pipes: List[Pipe], sprite: Sprite, speed: float,
                core: PhysicsCore) -> SweepResult:
    """
    Moves, culls, scores and collision-tests every pipe once.

    The input list is read as a snapshot; survivors go into a fresh list so
    removing a pipe never shifts the ones after it. Every pipe is visited
    even after a collision so the returned list stays consistent.
    """
    result = SweepResult()
    for pipe in list(pipes):
        # 1. Advance
        pipe.x -= speed

        # 2. Cull once fully off the left edge
        off_screen = pipe.x + core.pipe_width < 0

        # 3. Score each pipe exactly once
        if not pipe.passed and core.has_passed(sprite, pipe):
            pipe.passed = True
            result.points += 1

        if off_screen:
            continue
        result.pipes.append(pipe)

        # 4. Collision
        if not result.collided and core.is_collision(sprite, pipe):
            result.collided = True

    return result
