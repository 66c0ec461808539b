"""Terminal front end: drawing the maze with curses and reading keys."""

from __future__ import annotations

import argparse
import curses
import time
from collections.abc import Iterator, Sequence

from termpacman.board import ROWS, Actor, Heading, Terrain
from termpacman.game import Character, Game

FRAME_DELAY = 0.25
IDLE_SECONDS = 1.0

SCORE_ROW = 2
SCORE_COL = 6
MAP_TOP = 4
LIVES_ROW = ROWS + 4
INPUT_ROW = ROWS + 5

_PACMAN_PAIR = 10
_BLINKY_PAIR = 11
_PINKY_PAIR = 12
_INKY_PAIR = 13
_CLYDE_PAIR = 14
_WALL_PAIR = 15
_VULNERABLE_PAIR = 16

_PALETTE = {
    _PACMAN_PAIR: (curses.COLOR_YELLOW, curses.COLOR_BLACK),
    _BLINKY_PAIR: (curses.COLOR_RED, curses.COLOR_BLACK),
    _PINKY_PAIR: (curses.COLOR_MAGENTA, curses.COLOR_BLACK),
    _INKY_PAIR: (curses.COLOR_CYAN, curses.COLOR_BLACK),
    _CLYDE_PAIR: (curses.COLOR_YELLOW, curses.COLOR_BLACK),
    _VULNERABLE_PAIR: (curses.COLOR_BLUE, curses.COLOR_BLACK),
    _WALL_PAIR: (curses.COLOR_BLUE, curses.COLOR_BLUE),
}

_ACTOR_PAIRS = {
    Actor.PACMAN: _PACMAN_PAIR,
    Actor.BLINKY: _BLINKY_PAIR,
    Actor.PINKY: _PINKY_PAIR,
    Actor.INKY: _INKY_PAIR,
    Actor.CLYDE: _CLYDE_PAIR,
}

_TERRAIN_GLYPHS = {
    Terrain.WALL: "%",
    Terrain.FENCE: "-",
    Terrain.PELLET: ".",
    Terrain.BIG_PELLET: "o",
    Terrain.SPACE: " ",
}

# The mouth points back towards where Pac-Man came from.
_PACMAN_GLYPHS = {
    Heading.NORTH: "v",
    Heading.EAST: "<",
    Heading.WEST: ">",
    Heading.SOUTH: "^",
}


def terrain_glyph(terrain: Terrain) -> str:
    """Character drawn for a terrain cell; unknown kinds show as '/'."""
    return _TERRAIN_GLYPHS.get(terrain, "/")


def pacman_glyph(heading: Heading | None, mouth_open: bool) -> str:
    """Pac-Man's character: a closed 'O' or an open mouth facing its heading."""
    if not mouth_open or heading is None:
        return "O"
    return _PACMAN_GLYPHS.get(heading, "O")


def _character_cell(character: Character, mouth_open: bool) -> tuple[str, int]:
    if character.actor is Actor.PACMAN:
        return pacman_glyph(character.heading, mouth_open), _PACMAN_PAIR
    pair = _VULNERABLE_PAIR if character.vulnerable else _ACTOR_PAIRS[character.actor]
    return character.actor.letter, pair


def _cells(game: Game, mouth_open: bool) -> Iterator[tuple[int, int, str, int]]:
    """Every maze cell as (row, col, glyph, colour pair or 0)."""
    occupants: dict[tuple[int, int], Character] = {}
    # Reverse so that Pac-Man, listed first, wins a shared cell.
    for character in reversed(list(game.characters.values())):
        occupants[character.position] = character
    for row, terrain_row in enumerate(game.terrain):
        for col, terrain in enumerate(terrain_row):
            character = occupants.get((row, col))
            if character is not None:
                glyph, pair = _character_cell(character, mouth_open)
            else:
                glyph = terrain_glyph(terrain)
                pair = _WALL_PAIR if terrain is Terrain.WALL else 0
            yield row, col, glyph, pair


def render_rows(game: Game, mouth_open: bool) -> list[str]:
    """The maze as plain text rows, actors drawn over the terrain."""
    rows: list[list[str]] = [[] for _ in game.terrain]
    for row, _col, glyph, _pair in _cells(game, mouth_open):
        rows[row].append(glyph)
    return ["".join(row) for row in rows]


def _init_colors() -> dict[int, int]:
    """Set up colour pairs; empty when the terminal offers no colour."""
    try:
        if not curses.has_colors():
            return {}
        curses.start_color()
        for pair, (foreground, background) in _PALETTE.items():
            curses.init_pair(pair, foreground, background)
        return {pair: curses.color_pair(pair) for pair in _PALETTE}
    except curses.error:
        return {}


class Screen:
    """Draws a game on a curses window and turns key presses into commands."""

    def __init__(self, stdscr) -> None:
        self.stdscr = stdscr
        self.stdscr.nodelay(True)
        self.attrs = _init_colors()
        self.mouth_open = False
        self.command: str | None = None
        self.last_input = time.monotonic()

    def _put(self, row: int, col: int, text: str, attr: int = 0) -> None:
        try:
            self.stdscr.addstr(row, col, text, attr)
        except curses.error:
            # Writing the bottom-right cell of a window moves the cursor off it.
            pass

    def draw(self, game: Game) -> None:
        """Paint score, maze and remaining lives."""
        self._put(SCORE_ROW, SCORE_COL, str(game.score))
        for row, col, glyph, pair in _cells(game, self.mouth_open):
            self._put(MAP_TOP + row, col, glyph, self.attrs.get(pair, 0))
        self.mouth_open = not self.mouth_open
        self.stdscr.move(LIVES_ROW, 0)
        self.stdscr.clrtoeol()
        self._put(LIVES_ROW, 1, "O " * game.lives)
        self.stdscr.move(INPUT_ROW, 0)
        self.stdscr.refresh()

    def read_command(self, game: Game) -> str | None:
        """The key to act on this turn, repeating the heading once input goes idle."""
        key = self.stdscr.getch()
        now = time.monotonic()
        if key != -1:
            self.last_input = now
            self.command = chr(key) if 0 <= key < 256 else ""
        elif now - self.last_input >= IDLE_SECONDS:
            self.command = {
                Heading.NORTH: "w",
                Heading.SOUTH: "s",
                Heading.EAST: "d",
                Heading.WEST: "a",
            }[game.pacman.heading]
        return self.command


def run(stdscr) -> Game:
    """Play until the game ends or the player quits; returns the final game."""
    try:
        curses.raw()
        curses.curs_set(0)
    except curses.error:
        pass
    stdscr.keypad(True)
    game = Game()
    screen = Screen(stdscr)
    while not game.game_over:
        game.tick_vulnerable()
        screen.draw(game)
        time.sleep(FRAME_DELAY)
        game.step(screen.read_command(game))
    return game


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="termpacman",
        description="Pac-Man in the terminal. Move with w/a/s/d or 8/4/2/6, "
        "5 to stand still, q to quit.",
    )
    parser.parse_args(argv)
    curses.wrapper(run)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())