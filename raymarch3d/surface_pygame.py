"""pygame-backed pixel surface."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

import pygame
from pygame.color import Color
from pygame.surface import Surface

from .constants import PALETTE


class PygameSurface:
    """Adapts a ``pygame.Surface`` to palette-indexed pixel writes.

    The palette maps colour indices to RGB; the renderer never sees it.
    """

    def __init__(self, surface: Surface, palette: Sequence[tuple[int, int, int]] = PALETTE) -> None:
        self.surface = surface
        self.colors = [Color(*rgb) for rgb in palette]

    @classmethod
    def create(cls, width: int, height: int, palette: Sequence[tuple[int, int, int]] = PALETTE) -> PygameSurface:
        return cls(Surface((width, height)), palette)

    @property
    def width(self) -> int:
        return self.surface.get_width()

    @property
    def height(self) -> int:
        return self.surface.get_height()

    def fill(self, color: int) -> None:
        self.surface.fill(self.colors[color])

    def set_pixel(self, x: int, y: int, color: int) -> None:
        self.surface.set_at((x, y), self.colors[color])

    def blit_scaled(self, target: Surface, size: Optional[tuple[int, int]] = None) -> None:
        """Scale the frame (nearest neighbour) onto ``target``."""
        size = size or target.get_size()
        target.blit(pygame.transform.scale(self.surface, size), (0, 0))
