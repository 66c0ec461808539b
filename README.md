# termpacman

A Pac-Man style maze game that runs in your terminal, drawn with curses.

Guide Pac-Man around the maze, eat every pellet and stay clear of the four
ghosts: Blinky (`B`), Pinky (`P`), Inky (`I`) and Clyde (`C`). When you eat a
power pellet (`o`) the ghosts turn blue for a short time, and you can eat them
for bonus points.

## Installing

```
pip install .
```

The game uses only the standard library. It needs the `curses` module, which
ships with Python on Linux and macOS.

## Playing

```
termpacman
```

The same game starts with `python -m termpacman.cli`. `termpacman --help`
lists the controls.

The terminal must be at least 56 columns wide and 37 rows tall.

### Controls

| Key         | Action     |
|-------------|------------|
| `w` or `8`  | move up    |
| `a` or `4`  | move left  |
| `s` or `2`  | move down  |
| `d` or `6`  | move right |
| `5`         | stay put   |
| `q`         | quit       |

The game advances four turns a second. Pac-Man keeps going the way he was
heading when no key is pressed, and if the direction you asked for is walled
off he carries on in his current direction instead. The tunnel on the middle
row takes you from one side of the maze to the other.

### Scoring

- Pellet: 10 points
- Power pellet: 50 points, and the ghosts become vulnerable for about 30 turns
- Ghosts eaten during one power-up: 200, 400, 800 and 1600 points

The score is shown at the top and the remaining lives at the bottom. You start
with three lives; being caught by a ghost costs one and sends everyone back to
their starting places, and being caught with none left ends the game. Clearing
every pellet starts a fresh maze with the score carried over.

Blinky starts outside the ghost box; Pinky, Inky and Clyde come out after 10,
20 and 30 turns.

## Using the game from Python

The rules live apart from the screen, so a game can be driven without a
terminal:

```python
import random
from termpacman.game import Game

game = Game(rng=random.Random(1), pause=lambda seconds: None)
game.step("d")          # move right, then move every ghost
game.tick_vulnerable()  # count down a power-up
print(game.score, game.lives, game.pellets, game.game_over)
```

`termpacman.cli.render_rows(game, mouth_open)` returns the maze as plain text
rows with the characters drawn on it. `termpacman.board` holds the layout and
the `Terrain`, `Actor` and `Heading` enums.

## What it does not do

- The ghosts wander the maze at random; they do not chase or scatter.
- There is no bonus fruit, no sound and no high-score table: scores are not
  saved between games.
- There is no Windows support out of the box, since it relies on `curses`.

## Development

```
pip install -e ".[test]"
pytest
```