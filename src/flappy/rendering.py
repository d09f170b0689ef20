"""
rendering.py: Draws engine frames onto a pygame surface.

The engine only hands out Frame snapshots; everything here is the drawing
collaborator on the other side of the render callback.
"""

from dataclasses import dataclass
from typing import Optional, Protocol, Tuple

import pygame

from .data_models import Frame, GameState

Rect = Tuple[float, float, float, float]

SKY_COLOR = (0, 191, 255)
SPRITE_COLOR = (255, 220, 80)
PIPE_COLOR = (0, 150, 0)
PIPE_CAP_COLOR = (0, 110, 0)
SCORE_COLOR = (255, 165, 0)
BANNER_COLOR = (255, 255, 255, 178)
BANNER_TEXT_COLOR = (255, 87, 51)


class DrawSurface(Protocol):
    """The two drawing operations the renderer needs."""

    def draw_image(self, image: pygame.Surface, src_rect: Rect, dest_rect: Rect) -> None:
        ...

    def clear(self, rect: Rect) -> None:
        ...


class PygameSurface:
    """DrawSurface backed by a pygame.Surface (usually the display)."""

    def __init__(self, target: pygame.Surface, clear_color=(0, 0, 0)):
        self.target = target
        self.clear_color = clear_color

    def draw_image(self, image: pygame.Surface, src_rect: Rect, dest_rect: Rect):
        src = pygame.Rect(src_rect).clip(image.get_rect())
        if src.width <= 0 or src.height <= 0:
            return
        dest = pygame.Rect(dest_rect)
        region = image.subsurface(src)
        if dest.size != src.size:
            if dest.width <= 0 or dest.height <= 0:
                return
            region = pygame.transform.scale(region, dest.size)
        self.target.blit(region, dest.topleft)

    def clear(self, rect: Rect):
        self.target.fill(self.clear_color, pygame.Rect(rect))


@dataclass
class SpriteImages:
    background: pygame.Surface
    sprite: pygame.Surface
    pipe: pygame.Surface  # Top half is the upper pipe, bottom half the lower one


def placeholder_images() -> SpriteImages:
    """Solid-colour stand-ins for the background, sprite and pipe art."""
    background = pygame.Surface((40, 60))
    background.fill(SKY_COLOR)

    sprite = pygame.Surface((40, 30))
    sprite.fill(SPRITE_COLOR)

    pipe = pygame.Surface((52, 640))
    pipe.fill(PIPE_COLOR)
    pipe.fill(PIPE_CAP_COLOR, (0, 300, 52, 20))  # Cap at the gap end of the upper pipe
    pipe.fill(PIPE_CAP_COLOR, (0, 320, 52, 20))  # Cap at the gap end of the lower pipe

    return SpriteImages(background=background, sprite=sprite, pipe=pipe)


def _full(image: pygame.Surface) -> Rect:
    return (0, 0, image.get_width(), image.get_height())


class FrameRenderer:
    """Turns a Frame into draw calls; usable directly as the engine's render callback."""

    def __init__(self, surface: DrawSurface, images: Optional[SpriteImages] = None, font=None):
        self.surface = surface
        self.images = images or placeholder_images()
        self._font = font

    @property
    def font(self):
        if self._font is None:
            pygame.font.init()
            self._font = pygame.font.Font(None, 24)
        return self._font

    def __call__(self, frame: Frame):
        self.draw(frame)

    def draw(self, frame: Frame):
        width, height = frame.bounds.width, frame.bounds.height
        images = self.images

        self.surface.clear((0, 0, width, height))
        self.surface.draw_image(images.background, _full(images.background), (0, 0, width, height))

        for pipe in frame.pipes:
            self._draw_pipe(pipe, frame.pipe_width)

        sprite = frame.sprite
        self.surface.draw_image(
            images.sprite, _full(images.sprite), (sprite.x, sprite.y, sprite.width, sprite.height))

        if frame.state == GameState.START:
            self._draw_banner(frame, "Start the Game")
        else:
            self._draw_text(f"Score: {frame.score}", width - 100, 30, SCORE_COLOR)

        if frame.state == GameState.GAME_OVER:
            self._draw_banner(frame, f"Game Over! Score: {frame.score}")
            self._draw_text("Press R to retry", width / 2, height / 3 + 80, BANNER_TEXT_COLOR)

    def _draw_pipe(self, pipe, pipe_width: float):
        sheet = self.images.pipe
        half = sheet.get_height() / 2
        # Upper pipe ends at the gap top, lower pipe starts at the gap bottom
        self.surface.draw_image(
            sheet, (0, 0, sheet.get_width(), half), (pipe.x, pipe.top - half, pipe_width, half))
        self.surface.draw_image(
            sheet, (0, half, sheet.get_width(), half), (pipe.x, pipe.bottom, pipe_width, half))

    def _draw_banner(self, frame: Frame, text: str):
        width, height = frame.bounds.width, frame.bounds.height
        banner = pygame.Surface((max(int(width / 2), 1), 50), pygame.SRCALPHA)
        banner.fill(BANNER_COLOR)
        self.surface.draw_image(banner, _full(banner), (width / 4, height / 3, width / 2, 50))
        self._draw_text(text, width / 2, height / 3 + 25, BANNER_TEXT_COLOR)

    def _draw_text(self, text: str, center_x: float, center_y: float, color):
        rendered = self.font.render(text, True, color)
        w, h = rendered.get_width(), rendered.get_height()
        self.surface.draw_image(rendered, (0, 0, w, h), (center_x - w / 2, center_y - h / 2, w, h))
