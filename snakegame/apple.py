"""The apple the snake chases."""

from __future__ import annotations

from dataclasses import dataclass

import pygame

from snakegame.snake import Drawable
from snakegame.utils import APPLE_COLOR, CELL_SIZE, Position


@dataclass(frozen=True)
class Apple(Drawable):
    """An apple sitting on one cell of the board."""

    position: Position = (0, 0)

    def draw(self, surface: pygame.Surface) -> None:
        x, y = self.position
        center = (int(CELL_SIZE * (x + 0.5)), int(CELL_SIZE * (y + 0.5)))
        pygame.draw.circle(surface, APPLE_COLOR, center, CELL_SIZE / 2)