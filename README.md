# snakegame

The classic snake game on a 12 × 12 grid, drawn with pygame.

Steer the snake to the red apple. Each apple you eat makes the snake one
segment longer and adds a point to your score, shown in the top-left corner.
A round ends when the snake hits a wall or its own body. A new round then
starts straight away, with a fresh snake at a random position.

## Installing

```
pip install .
```

## Playing

```
snakegame
```

Controls:

| Action | Keys                  |
|--------|-----------------------|
| Up     | Up arrow, `W`, `K`    |
| Right  | Right arrow, `D`, `L` |
| Down   | Down arrow, `S`, `J`  |
| Left   | Left arrow, `A`, `H`  |
| Quit   | `Escape`, or close the window |

The snake stays still until you give it a first direction. Its body lies to
the left of its head at the start, so a first move to the left is ignored.
The snake cannot turn back on itself. If you press the key for the direction
opposite its current heading, it keeps moving the way it was already going.
The snake moves one cell every 90 ms.

## Sound

The game plays a sound when the snake eats an apple, hits itself or hits a
wall. It looks for these files in the `resources/sounds` directory inside the
installed `snakegame` package:

- `snake_eat.wav`
- `snake_self_collision.wav`
- `snake_wall_collision.wav`

The package does not ship any sound files. Any file that is missing or
cannot be loaded is skipped. If no audio device is available, the game runs
without sound.

## Using the game logic

The rules are kept separate from the window, so you can drive a game without
a display:

```python
import random

from snakegame.game import GameState
from snakegame.snake import Direction

state = GameState(random.Random(1))
state.steer(Direction.UP)
collision = state.advance()
print(collision, state.score(), state.running)
```

- `GameState.advance()` moves the snake one step and returns a `Collision`.
  - On `APPLE`, a new apple is placed on a free cell.
  - On `SELF` or `WALL`, `running` becomes `False`. `new_round()` starts
    again.
- `snakegame.snake.Snake` also works on its own.
  - `Snake.move(direction, apple_position)` returns a `Collision`: `NONE`,
    `APPLE`, `SELF` or `WALL`.
  - `head`, `body` and `len(snake)` describe the snake's current shape.
- `snakegame.utils.in_bounds` checks a cell against the grid.
- `snakegame.utils.generate_random_position` picks a random cell.
- `snakegame.game.direction_for_key` maps a pygame key code to a `Direction`.

## Running the tests

```
pip install .[test]
pytest
```