import pygame
import pytest

from snakegame.snake import Collision, Direction, Drawable, Snake
from snakegame.utils import (
    CELL_SIZE,
    INITIAL_SNAKE_LENGTH,
    SNAKE_COLOR,
    SNAKE_HEAD_COLOR,
    SNAKE_TAIL_COLOR,
)

FAR_APPLE = (11, 11)


def test_initial_body_extends_right():
    snake = Snake((3, 4))
    assert snake.body == ((3, 4), (4, 4), (5, 4))
    assert snake.head == (5, 4)
    assert len(snake) == INITIAL_SNAKE_LENGTH


def test_move_none_does_nothing():
    snake = Snake((3, 4))
    assert snake.move(Direction.NONE, FAR_APPLE) is Collision.NONE
    assert snake.body == ((3, 4), (4, 4), (5, 4))


def test_initial_left_is_ignored():
    snake = Snake((3, 4))
    assert snake.move(Direction.LEFT, FAR_APPLE) is Collision.NONE
    assert snake.body == ((3, 4), (4, 4), (5, 4))
    assert snake.heading is Direction.NONE


def test_move_right_shifts_body():
    snake = Snake((3, 4))
    assert snake.move(Direction.RIGHT, FAR_APPLE) is Collision.NONE
    assert snake.body == ((4, 4), (5, 4), (6, 4))
    assert snake.heading is Direction.RIGHT


def test_initial_up_is_allowed():
    snake = Snake((3, 4))
    snake.move(Direction.UP, FAR_APPLE)
    assert snake.head == (5, 3)
    assert len(snake) == INITIAL_SNAKE_LENGTH


def test_opposite_direction_keeps_heading():
    snake = Snake((3, 4))
    snake.move(Direction.RIGHT, FAR_APPLE)
    snake.move(Direction.LEFT, FAR_APPLE)
    assert snake.head == (7, 4)
    assert snake.heading is Direction.RIGHT


def test_eating_apple_grows():
    snake = Snake((3, 4))
    assert snake.move(Direction.RIGHT, (6, 4)) is Collision.APPLE
    assert len(snake) == INITIAL_SNAKE_LENGTH + 1
    assert snake.body[0] == (3, 4)
    assert snake.head == (6, 4)


def test_wall_collision():
    snake = Snake((9, 0))
    assert snake.move(Direction.RIGHT, FAR_APPLE) is Collision.WALL


def test_wall_collision_top():
    snake = Snake((2, 0))
    assert snake.move(Direction.UP, FAR_APPLE) is Collision.WALL


def test_self_collision():
    snake = Snake((3, 4))
    assert snake.move(Direction.RIGHT, (6, 4)) is Collision.APPLE
    assert snake.move(Direction.UP, (6, 3)) is Collision.APPLE
    assert snake.move(Direction.LEFT, FAR_APPLE) is Collision.NONE
    assert snake.move(Direction.DOWN, FAR_APPLE) is Collision.SELF


def test_collides_with():
    snake = Snake((3, 4))
    assert snake.collides_with((4, 4))
    assert not snake.collides_with((6, 4))


def test_snake_is_drawable():
    assert isinstance(Snake(), Drawable)
    with pytest.raises(TypeError):
        Drawable()


def test_draw_colors_cells():
    surface = pygame.Surface((CELL_SIZE * 12, CELL_SIZE * 12))
    surface.fill((0, 0, 0))
    snake = Snake((1, 1))
    snake.draw(surface)
    half = CELL_SIZE // 2
    assert surface.get_at((1 * CELL_SIZE + half, CELL_SIZE + half)) == SNAKE_HEAD_COLOR
    assert surface.get_at((2 * CELL_SIZE + half, CELL_SIZE + half)) == SNAKE_COLOR
    assert surface.get_at((3 * CELL_SIZE + half, CELL_SIZE + half)) == SNAKE_TAIL_COLOR
    assert surface.get_at((5 * CELL_SIZE + half, CELL_SIZE + half)) == (0, 0, 0, 255)