"""
game_engine.py: The session owner and Start -> Playing -> GameOver state machine.

The engine never schedules itself. An external driver calls tick() once per
display frame and forwards input through the trigger_* methods.
"""

import logging
import random
from collections import deque
from dataclasses import replace
from typing import Callable, Deque, List, Optional, Tuple

from .config import Bounds, ConfigurationError, GameConfig
from .data_models import Frame, GameState, Pipe, Sprite
from .obstacles import create_pipe, sweep_pipes
from .physics_core import PhysicsCore

logger = logging.getLogger(__name__)

BoundsProvider = Callable[[], Bounds]
RenderCallback = Callable[[Frame], None]
StateListener = Callable[[GameState, GameState, "GameEngine"], None]


class GameEngine:
    """
    Owns the sprite, the pipes and the score of one game session.

    Triggers that arrive while a tick is running (for example from the render
    callback or a state listener) are queued and applied when the next tick
    starts, so the sprite is never changed halfway through an update.
    """

    VALID_TRANSITIONS: List[Tuple[GameState, GameState]] = [
        (GameState.START, GameState.PLAYING),
        (GameState.PLAYING, GameState.GAME_OVER),
        (GameState.GAME_OVER, GameState.START),
    ]

    def __init__(self, config: Optional[GameConfig] = None,
                 bounds_provider: Optional[BoundsProvider] = None,
                 render: Optional[RenderCallback] = None,
                 rng: Optional[random.Random] = None):
        self.config = (config or GameConfig()).validate()
        self.core = PhysicsCore(self.config)
        self._bounds_provider = bounds_provider or Bounds
        self._render = render
        self._rng = rng or random.Random()
        self._listeners: List[StateListener] = []
        self._pending: Deque[Callable[[], None]] = deque()
        self._in_tick = False

        self._state = GameState.START
        self._valid_transitions = set(self.VALID_TRANSITIONS)
        self._rejected_bounds: Optional[Bounds] = None
        self._bounds = self.config.check_bounds(self._bounds_provider())
        self._new_session()
        logger.info(f"GameEngine initialized with state: {self._state.name}")

    # ---------- Session ----------

    def _query_bounds(self) -> Bounds:
        """
        Re-reads the playfield size. A size too small for a pipe gap is
        refused and the last good bounds stay in use.
        """
        bounds = self._bounds_provider()
        try:
            self._bounds = self.config.check_bounds(bounds)
            self._rejected_bounds = None
        except ConfigurationError as e:
            if bounds != self._rejected_bounds:
                logger.warning(f"Keeping playfield {self._bounds}: {e}")
                self._rejected_bounds = bounds
        return self._bounds

    def _new_session(self):
        """Replaces the sprite and pipes and zeroes the counters."""
        bounds = self._query_bounds()
        self._sprite = Sprite.spawn(bounds, self.config)
        self._pipes: List[Pipe] = []
        self._score = 0
        self._tick_count = 0
        self.final_score: Optional[int] = None

    @property
    def sprite(self) -> Sprite:
        return self._sprite

    @property
    def pipes(self) -> Tuple[Pipe, ...]:
        return tuple(self._pipes)

    @property
    def tick_count(self) -> int:
        return self._tick_count

    @property
    def bounds(self) -> Bounds:
        return self._bounds

    def get_state(self) -> GameState:
        return self._state

    def get_score(self) -> int:
        return self._score

    # ---------- State machine ----------

    def can_transition(self, to_state: GameState) -> bool:
        return (self._state, to_state) in self._valid_transitions

    def _transition(self, to_state: GameState):
        """Callers check can_transition first."""
        old_state = self._state
        self._state = to_state
        logger.info(f"State transition: {old_state.name} -> {to_state.name}")

        for listener in list(self._listeners):
            try:
                listener(old_state, to_state, self)
            except Exception as e:
                logger.error(f"Error in state listener: {e}")

    def add_listener(self, callback: StateListener):
        """Registers a callback run after every state change."""
        self._listeners.append(callback)

    def remove_listener(self, callback: StateListener):
        if callback in self._listeners:
            self._listeners.remove(callback)

    # ---------- Input ----------

    def _submit(self, action: Callable[[], None]):
        if self._in_tick:
            self._pending.append(action)
        else:
            action()

    def trigger_jump(self):
        """Jump input; ignored unless a game is in progress."""
        self._submit(self._apply_jump)

    def trigger_start(self):
        """Start input; leaves the start screen with a fresh session."""
        self._submit(self._apply_start)

    def trigger_reset(self):
        """Retry input; returns from game over to the start screen."""
        self._submit(self._apply_reset)

    def _apply_jump(self):
        if self._state != GameState.PLAYING:
            logger.debug(f"Jump ignored in state {self._state.name}")
            return
        self.core.flap(self._sprite)

    def _apply_start(self):
        if not self.can_transition(GameState.PLAYING):
            logger.debug(f"Start ignored in state {self._state.name}")
            return
        self._new_session()
        self._transition(GameState.PLAYING)

    def _apply_reset(self):
        if not self.can_transition(GameState.START):
            logger.debug(f"Reset ignored in state {self._state.name}")
            return
        self._new_session()
        self._transition(GameState.START)

    # ---------- Simulation ----------

    def tick(self) -> GameState:
        """
        Advances one frame.

        Start renders the idle pose without physics or collisions, Playing
        runs the full simulation step, GameOver is frozen and does nothing.
        """
        if self._in_tick:
            logger.warning("tick() called while a tick is running; ignored")
            return self._state

        self._in_tick = True
        try:
            while self._pending:
                self._pending.popleft()()

            if self._state == GameState.START:
                self._query_bounds()
                self._emit_frame()
            elif self._state == GameState.PLAYING:
                self._step()
        finally:
            self._in_tick = False
        return self._state

    def _step(self):
        """One Playing tick: physics, spawn, pipe sweep with scoring, bounds, render."""
        bounds = self._query_bounds()
        config = self.config

        # 1. Sprite physics
        self.core.apply_gravity_and_movement(self._sprite)

        # 2. Spawn on cadence
        self._tick_count += 1
        if self._tick_count % config.pipe_frequency == 0:
            self._pipes.append(
                create_pipe(bounds, config.pipe_gap, config.min_margin, self._rng))

        # 3. Move, cull, score and collide
        sweep = sweep_pipes(self._pipes, self._sprite, config.pipe_speed, self.core)
        self._pipes = sweep.pipes
        self._score += sweep.points

        # 4. Floor/ceiling, independent of pipes
        if sweep.collided or self.core.is_out_of_bounds(self._sprite, bounds):
            self.final_score = self._score
            self._transition(GameState.GAME_OVER)

        self._emit_frame()

    def snapshot(self) -> Frame:
        """A detached copy of the current session for drawing."""
        return Frame(
            state=self._state,
            sprite=replace(self._sprite),
            pipes=tuple(replace(pipe) for pipe in self._pipes),
            score=self._score,
            tick_count=self._tick_count,
            bounds=self._bounds,
            pipe_width=self.config.pipe_width,
        )

    def _emit_frame(self):
        if self._render is not None:
            self._render(self.snapshot())
