"""Board settings and small helpers for positions on the grid."""

from __future__ import annotations

import random
from pathlib import Path

Position = tuple[int, int]
Color = tuple[int, int, int, int]

CELL_SIZE = 64
CELLS_PER_ROW = 12
CELLS_PER_COLUMN = 12
WINDOW_WIDTH = CELL_SIZE * CELLS_PER_ROW
WINDOW_HEIGHT = CELL_SIZE * CELLS_PER_COLUMN
WINDOW_TITLE = "game"
FPS = 60

BACKGROUND_COLOR: Color = (0xDF, 0xFF, 0x94, 0xFF)
SNAKE_HEAD_COLOR: Color = (0x64, 0x8F, 0x00, 0xFF)
SNAKE_COLOR: Color = (0x40, 0x5C, 0x00, 0xFF)
SNAKE_TAIL_COLOR: Color = (0x2B, 0x3D, 0x00, 0xFF)
APPLE_COLOR: Color = (0xFF, 0x48, 0x24, 0xFF)
SCORE_COLOR: Color = (80, 80, 80, 255)

INITIAL_SNAKE_LENGTH = 3
SNAKE_MOVE_INTERVAL = 0.090  # seconds between snake steps
SCORE_FONT_SIZE = 42

RESOURCES_DIR = Path(__file__).resolve().parent / "resources"
SOUNDS_DIR = RESOURCES_DIR / "sounds"
EAT_SOUND = SOUNDS_DIR / "snake_eat.wav"
SELF_COLLISION_SOUND = SOUNDS_DIR / "snake_self_collision.wav"
WALL_COLLISION_SOUND = SOUNDS_DIR / "snake_wall_collision.wav"


def in_bounds(position: Position) -> bool:
    """Return True if the position lies on the board."""
    x, y = position
    return 0 <= x < CELLS_PER_ROW and 0 <= y < CELLS_PER_COLUMN


def generate_random_position(
    x_max: int = CELLS_PER_ROW - 1,
    y_max: int = CELLS_PER_COLUMN - 1,
    rng: random.Random | None = None,
) -> Position:
    """Pick a cell with 0 <= x <= x_max and 0 <= y <= y_max."""
    source = rng if rng is not None else random
    return source.randint(0, x_max), source.randint(0, y_max)