"""Maze layout, terrain kinds, actors and headings."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import Enum, IntEnum

ROWS = 31
COLS = 56
TOTAL_PELLETS = 244

LAYOUT: tuple[str, ...] = (
    "%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%",
    "% . . . . . . . . . . . . % % . . . . . . . . . . . . %",
    "% . %%%%%%% . %%%%%%%%% . % % . %%%%%%%%% . %%%%%%% . %",
    "% o %     % . %       % . % % . %       % . %     % o %",
    "% . %%%%%%% . %%%%%%%%% . %%% . %%%%%%%%% . %%%%%%% . %",
    "% . . . . . . . . . . . . . . . . . . . . . . . . . . %",
    "% . %%%%%%% . %%% . %%%%%%%%%%%%%%% . %%% . %%%%%%% . %",
    "% . %%%%%%% . % % . %%%%%%% %%%%%%% . % % . %%%%%%% . %",
    "% . . . . . . % % . . . . % % . . . . % % . . . . . . %",
    "%%%%%%%%%%% . % %%%%%%%   % %   %%%%%%% % . %%%%%%%%%%%",
    "          % . % %%%%%%%   %%%   %%%%%%% % . %          ",
    "          % . % %                     % % . %          ",
    "          % . % %   %%%%%-----%%%%%   % % . %          ",
    "%%%%%%%%%%% . %%%   %             %   %%% . %%%%%%%%%%%",
    "            .       %             %       .            ",
    "%%%%%%%%%%% . %%%   %             %   %%% . %%%%%%%%%%%",
    "          % . % %   %%%%%%%%%%%%%%%   % % . %          ",
    "          % . % %                     % % . %          ",
    "          % . % %   %%%%%%%%%%%%%%%   % % . %          ",
    "%%%%%%%%%%% . %%%   %%%%%%% %%%%%%%   %%% . %%%%%%%%%%%",
    "% . . . . . . . . . . . . % % . . . . . . . . . . . . %",
    "% . %%%%%%% . %%%%%%%%% . % % . %%%%%%%%% . %%%%%%% . %",
    "% . %%%%% % . %%%%%%%%% . %%% . %%%%%%%%% . % %%%%% . %",
    "% o . . % % . . . . . . .     . . . . . . . % % . . o %",
    "%%%%% . % % . %%% . %%%%%%%%%%%%%%% . %%% . % % . %%%%%",
    "%%%%% . %%% . % % . %%%%%%% %%%%%%% . % % . %%% . %%%%%",
    "% . . . . . . % % . . . . % % . . . . % % . . . . . . %",
    "% . %%%%%%%%%%% %%%%%%% . % % . %%%%%%% %%%%%%%%%%% . %",
    "% . %%%%%%%%%%%%%%%%%%% . %%% . %%%%%%%%%%%%%%%%%%% . %",
    "% . . . . . . . . . . . . . . . . . . . . . . . . . . %",
    "%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%",
)

BOX_ROW = 14
TUNNEL_ROW = 14


class Terrain(IntEnum):
    """What occupies a maze cell underneath any actor."""

    WALL = 0
    FENCE = 1
    PELLET = 2
    BIG_PELLET = 3
    FRUIT = 4
    SPACE = 5

    @classmethod
    def from_char(cls, char: str) -> Terrain:
        """Terrain for a layout character; anything unknown is open space."""
        return _CHAR_TERRAIN.get(char, cls.SPACE)


_CHAR_TERRAIN = {
    "%": Terrain.WALL,
    ".": Terrain.PELLET,
    "o": Terrain.BIG_PELLET,
    "-": Terrain.FENCE,
}


class Actor(IntEnum):
    """The characters that move through the maze."""

    PACMAN = 0
    BLINKY = 1
    PINKY = 2
    INKY = 3
    CLYDE = 4

    @property
    def is_ghost(self) -> bool:
        return self is not Actor.PACMAN

    @property
    def letter(self) -> str:
        """Single-letter symbol used for ghosts on screen."""
        return "O" if self is Actor.PACMAN else self.name[0]

    @property
    def start(self) -> tuple[int, int]:
        """Row and column where the actor begins a life."""
        return START_POSITIONS[self]

    @property
    def release_after(self) -> int:
        """Moves that must pass before the ghost leaves the box."""
        return RELEASE_AFTER[self]


START_POSITIONS: dict[Actor, tuple[int, int]] = {
    Actor.PACMAN: (23, 26),
    Actor.BLINKY: (11, 28),
    Actor.PINKY: (BOX_ROW, 27),
    Actor.INKY: (BOX_ROW, 23),
    Actor.CLYDE: (BOX_ROW, 31),
}

RELEASE_AFTER: dict[Actor, int] = {
    Actor.PACMAN: 0,
    Actor.BLINKY: 0,
    Actor.PINKY: 10,
    Actor.INKY: 20,
    Actor.CLYDE: 30,
}


class Heading(Enum):
    """Compass direction of travel; columns advance two cells at a time."""

    NORTH = 1
    SOUTH = 2
    EAST = 3
    WEST = 4

    @property
    def delta(self) -> tuple[int, int]:
        return _HEADING_DELTA[self]

    @property
    def vertical(self) -> bool:
        return self in (Heading.NORTH, Heading.SOUTH)


_HEADING_DELTA = {
    Heading.NORTH: (-1, 0),
    Heading.SOUTH: (1, 0),
    Heading.EAST: (0, 2),
    Heading.WEST: (0, -2),
}

# Ghost directions are numbered 0..3 in this order.
GHOST_STEPS: tuple[tuple[int, int], ...] = (
    Heading.NORTH.delta,
    Heading.SOUTH.delta,
    Heading.WEST.delta,
    Heading.EAST.delta,
)


def parse_layout(lines: Iterable[str]) -> list[list[Terrain]]:
    """Turn layout text into a grid of terrain, padding each row to COLS with space."""
    grid = []
    for number, line in enumerate(lines):
        if len(line) > COLS:
            raise ValueError(f"layout row {number} is wider than {COLS} columns")
        row = [Terrain.from_char(char) for char in line]
        row.extend([Terrain.SPACE] * (COLS - len(row)))
        grid.append(row)
    return grid


def is_blocked(terrain: Terrain) -> bool:
    """True where no actor may step: walls and the ghost-box fence."""
    return terrain in (Terrain.WALL, Terrain.FENCE)


def count_pellets(grid: Iterable[Sequence[Terrain]]) -> int:
    """Number of small and big pellets left in the grid."""
    return sum(
        cell in (Terrain.PELLET, Terrain.BIG_PELLET) for row in grid for cell in row
    )