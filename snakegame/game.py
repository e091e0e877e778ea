"""Game rules and the window that plays them."""

from __future__ import annotations

import random
import time
from pathlib import Path

import pygame

from snakegame.apple import Apple
from snakegame.snake import Collision, Direction, Snake
from snakegame.utils import (
    BACKGROUND_COLOR,
    CELL_SIZE,
    CELLS_PER_COLUMN,
    CELLS_PER_ROW,
    EAT_SOUND,
    FPS,
    INITIAL_SNAKE_LENGTH,
    SCORE_COLOR,
    SCORE_FONT_SIZE,
    SELF_COLLISION_SOUND,
    SNAKE_MOVE_INTERVAL,
    WALL_COLLISION_SOUND,
    WINDOW_HEIGHT,
    WINDOW_TITLE,
    WINDOW_WIDTH,
    generate_random_position,
)

_KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
    pygame.K_k: Direction.UP,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
    pygame.K_l: Direction.RIGHT,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
    pygame.K_j: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_h: Direction.LEFT,
}


def direction_for_key(key: int) -> Direction | None:
    """Map a key code to a direction, or None for keys that do not steer."""
    return _KEY_DIRECTIONS.get(key)


class GameState:
    """The board, the snake and the apple, without any display."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.snake = Snake()
        self.apple = Apple()
        self.next_direction = Direction.NONE
        self.running = False
        self.new_round()

    def new_round(self) -> None:
        """Place a fresh snake and apple and start playing."""
        self.running = True
        self.next_direction = Direction.NONE
        self.snake = Snake(
            generate_random_position(
                CELLS_PER_ROW - INITIAL_SNAKE_LENGTH - 1,
                CELLS_PER_COLUMN - 1,
                self.rng,
            )
        )
        self.spawn_apple()

    def spawn_apple(self) -> None:
        """Put the apple on a random cell the snake does not occupy."""
        while True:
            position = generate_random_position(rng=self.rng)
            if not self.snake.collides_with(position):
                break
        self.apple = Apple(position)

    def steer(self, direction: Direction) -> None:
        self.next_direction = direction

    def advance(self) -> Collision:
        """Move the snake one step and apply the outcome."""
        collision = self.snake.move(self.next_direction, self.apple.position)
        if collision is Collision.APPLE:
            self.spawn_apple()
        elif collision in (Collision.SELF, Collision.WALL):
            self.running = False
            self.next_direction = Direction.NONE
        return collision

    def score(self) -> int:
        return len(self.snake) - INITIAL_SNAKE_LENGTH


def _load_sound(path: Path) -> pygame.mixer.Sound | None:
    if not path.is_file():
        return None
    try:
        return pygame.mixer.Sound(str(path))
    except pygame.error:
        return None


class Game:
    """A window running the game until it is closed."""

    def __init__(self) -> None:
        pygame.init()
        self.screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.Font(None, SCORE_FONT_SIZE)
        try:
            pygame.mixer.init()
            audio = True
        except pygame.error:
            audio = False
        self.sounds: dict[Collision, pygame.mixer.Sound | None] = {
            Collision.APPLE: _load_sound(EAT_SOUND) if audio else None,
            Collision.SELF: _load_sound(SELF_COLLISION_SOUND) if audio else None,
            Collision.WALL: _load_sound(WALL_COLLISION_SOUND) if audio else None,
        }
        self.state = GameState()
        self._last_move = time.monotonic()
        self._closed = False
        self._quit_requested = False

    def __enter__(self) -> Game:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def run(self) -> None:
        """Play rounds until the window is closed."""
        while not self._quit_requested:
            self.state.new_round()
            while self.state.running and not self._quit_requested:
                self._update()
                self._draw()
                self.clock.tick(FPS)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if pygame.mixer.get_init():
            pygame.mixer.quit()
        pygame.quit()

    def _update(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._quit_requested = True
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self._quit_requested = True
                    continue
                direction = direction_for_key(event.key)
                if direction is not None:
                    self.state.steer(direction)

        now = time.monotonic()
        if now - self._last_move >= SNAKE_MOVE_INTERVAL:
            self._last_move = now
            collision = self.state.advance()
            sound = self.sounds.get(collision)
            if sound is not None:
                sound.play()

    def _draw(self) -> None:
        self.screen.fill(BACKGROUND_COLOR)
        self.state.apple.draw(self.screen)
        self.state.snake.draw(self.screen)
        text = self.font.render(f"score : {self.state.score()}", True, SCORE_COLOR)
        self.screen.blit(text, (CELL_SIZE, CELL_SIZE))
        pygame.display.flip()


def main(argv: list[str] | None = None) -> int:
    with Game() as game:
        game.run()
    return 0