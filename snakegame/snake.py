"""The snake: its body, movement rules and collision detection."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from collections import deque

import pygame

from snakegame.utils import (
    CELL_SIZE,
    INITIAL_SNAKE_LENGTH,
    SNAKE_COLOR,
    SNAKE_HEAD_COLOR,
    SNAKE_TAIL_COLOR,
    Position,
    in_bounds,
)


class Direction(enum.Enum):
    NONE = 0
    UP = 1
    RIGHT = 2
    DOWN = 3
    LEFT = 4

    @property
    def vector(self) -> Position:
        return _VECTORS[self]

    @property
    def is_vertical(self) -> bool:
        return self in (Direction.UP, Direction.DOWN)

    @property
    def is_horizontal(self) -> bool:
        return self in (Direction.LEFT, Direction.RIGHT)


_VECTORS = {
    Direction.NONE: (0, 0),
    Direction.UP: (0, -1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
}


class Collision(enum.Enum):
    NONE = 0
    APPLE = 1
    SELF = 2
    WALL = 3


class Drawable(ABC):
    """Something that can paint itself onto a surface."""

    @abstractmethod
    def draw(self, surface: pygame.Surface) -> None:
        """Paint onto the surface."""


def _perpendicular(a: Direction, b: Direction) -> bool:
    return (a.is_vertical and b.is_horizontal) or (b.is_vertical and a.is_horizontal)


_ROUNDNESS = 0.5


class Snake(Drawable):
    """A snake whose head is the last cell of its body."""

    def __init__(self, initial_head_position: Position = (0, 0)) -> None:
        x, y = initial_head_position
        self._body: deque[Position] = deque(
            (x + i, y) for i in range(INITIAL_SNAKE_LENGTH)
        )
        self._heading = Direction.NONE

    @property
    def head(self) -> Position:
        return self._body[-1]

    @property
    def body(self) -> tuple[Position, ...]:
        return tuple(self._body)

    @property
    def heading(self) -> Direction:
        return self._heading

    def __len__(self) -> int:
        return len(self._body)

    def move(self, new_direction: Direction, apple_position: Position) -> Collision:
        """Step one cell, growing when the apple is reached."""
        if new_direction is Direction.NONE:
            return Collision.NONE
        if not self._has_direction and new_direction is Direction.LEFT:
            return Collision.NONE  # the body lies to the left at the start

        turns = not self._has_direction or _perpendicular(new_direction, self._heading)
        dx, dy = (new_direction if turns else self._heading).vector
        if turns:
            self._heading = new_direction

        hx, hy = self.head
        self._body.append((hx + dx, hy + dy))

        collision = self._detect_collision(apple_position)
        if collision is not Collision.APPLE:
            self._body.popleft()
        return collision

    def collides_with(self, position: Position) -> bool:
        return position in self._body

    def draw(self, surface: pygame.Surface) -> None:
        radius = int(CELL_SIZE * _ROUNDNESS / 2)
        last = len(self._body) - 1
        for index, (x, y) in enumerate(self._body):
            if index == 0:
                color = SNAKE_HEAD_COLOR
            elif index == last:
                color = SNAKE_TAIL_COLOR
            else:
                color = SNAKE_COLOR
            rect = pygame.Rect(x * CELL_SIZE, y * CELL_SIZE, CELL_SIZE, CELL_SIZE)
            pygame.draw.rect(surface, color, rect, border_radius=radius)

    @property
    def _has_direction(self) -> bool:
        return self._heading is not Direction.NONE

    def _detect_collision(self, apple_position: Position) -> Collision:
        head = self.head
        if head == apple_position:
            return Collision.APPLE
        if not in_bounds(head):
            return Collision.WALL
        if self._has_direction and any(
            part == head for part in list(self._body)[:-1]
        ):
            return Collision.SELF
        return Collision.NONE