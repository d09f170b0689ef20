#!/usr/bin/env python3
"""
client.py

pygame driver: owns the window and the frame clock, forwards input to the
engine and calls engine.tick() once per rendered frame.
"""

import logging
import os
import sys
from typing import Optional

import pygame

from .config import Bounds, ConfigurationError, GameConfig
from .constants import ENV_PREFIX, RENDER_FPS, SCREEN_HEIGHT, SCREEN_WIDTH
from .data_models import GameState
from .game_engine import GameEngine
from .rendering import FrameRenderer, PygameSurface

logger = logging.getLogger(__name__)

JUMP_KEYS = (pygame.K_SPACE, pygame.K_UP, pygame.K_w)
RETRY_KEYS = (pygame.K_r, pygame.K_RETURN)


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )


class FlappyClient:
    def __init__(self, config: Optional[GameConfig] = None, fps: int = RENDER_FPS):
        pygame.init()
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT), pygame.RESIZABLE)
        pygame.display.set_caption("Flappy")
        self.fps = fps

        self.renderer = FrameRenderer(PygameSurface(self.screen))
        self.engine = GameEngine(
            config=config,
            bounds_provider=self.current_bounds,
            render=self.render,
        )
        self.engine.add_listener(self._on_state_change)
        self.clock = pygame.time.Clock()
        self.running = False

    def current_bounds(self) -> Bounds:
        width, height = self.screen.get_size()
        return Bounds(width=width, height=height)

    def render(self, frame):
        self.renderer.draw(frame)
        pygame.display.flip()

    def _on_state_change(self, old_state: GameState, new_state: GameState, engine: GameEngine):
        if new_state == GameState.GAME_OVER:
            logger.info(f"Game over. Final score: {engine.final_score}")

    def handle_event(self, event):
        """Maps one pygame event onto engine triggers."""
        state = self.engine.get_state()

        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self.running = False
        elif event.type == pygame.MOUSEBUTTONDOWN:
            if state == GameState.START:
                self.engine.trigger_start()
            else:
                self.engine.trigger_jump()
        elif event.type == pygame.KEYDOWN and event.key in JUMP_KEYS:
            self.engine.trigger_jump()
        elif event.type == pygame.KEYDOWN and event.key in RETRY_KEYS:
            self.engine.trigger_reset()
        elif event.type == pygame.VIDEORESIZE:
            # Some platforms need the mode reset for the new size to stick
            self.screen = pygame.display.set_mode(event.size, pygame.RESIZABLE)
            self.renderer.surface = PygameSurface(self.screen)
            logger.debug(f"Playfield resized to {event.size}")

    def run(self):
        """The main client execution loop."""
        self.running = True
        while self.running:
            self.clock.tick(self.fps)

            for event in pygame.event.get():
                self.handle_event(event)

            if self.running:
                self.engine.tick()

        pygame.quit()


def main() -> None:
    """Main entry point."""
    debug = os.getenv(f"{ENV_PREFIX}DEBUG", "false").lower() == "true"
    setup_logging(debug)
    logger.info("Flappy starting...")

    try:
        client = FlappyClient(config=GameConfig.from_env())
        client.run()
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(2)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)

    logger.info("Flappy stopped")


if __name__ == "__main__":
    main()
