"""Game state and rules: movement, ghost behaviour, scoring and lives."""

from __future__ import annotations

import random
import time
from collections.abc import Callable
from dataclasses import dataclass

from termpacman.board import (
    COLS,
    GHOST_STEPS,
    LAYOUT,
    TOTAL_PELLETS,
    TUNNEL_ROW,
    Actor,
    Heading,
    Terrain,
    is_blocked,
    parse_layout,
)

GHOST_ORDER: tuple[Actor, ...] = (Actor.BLINKY, Actor.PINKY, Actor.INKY, Actor.CLYDE)
STARTING_LIVES = 3
VULNERABLE_TICKS = 30
TURN_CHANCE = 22
PELLET_POINTS = 10
BIG_PELLET_POINTS = 50
GHOST_POINTS: tuple[int, ...] = (200, 400, 800, 1600)

_COMMAND_HEADINGS = {
    "w": Heading.NORTH,
    "8": Heading.NORTH,
    "a": Heading.WEST,
    "4": Heading.WEST,
    "s": Heading.SOUTH,
    "2": Heading.SOUTH,
    "d": Heading.EAST,
    "6": Heading.EAST,
}
_HEADING_COMMANDS = {
    Heading.NORTH: "w",
    Heading.SOUTH: "s",
    Heading.EAST: "d",
    Heading.WEST: "a",
}

Action = tuple["Heading | None", tuple[int, int]]


def ghost_points(eaten_so_far: int) -> int:
    """Points for eating a ghost after `eaten_so_far` others in one power-up."""
    if eaten_so_far < 0:
        raise ValueError("number of ghosts eaten cannot be negative")
    if eaten_so_far < len(GHOST_POINTS):
        return GHOST_POINTS[eaten_so_far]
    return 0


@dataclass
class Character:
    """One actor in the maze with its position and movement state."""

    actor: Actor
    row: int
    col: int
    heading: Heading = Heading.WEST
    direction: int = 0
    vulnerable: bool = False

    @property
    def position(self) -> tuple[int, int]:
        return (self.row, self.col)

    @classmethod
    def at_start(cls, actor: Actor) -> Character:
        row, col = actor.start
        return cls(actor, row, col)


class Game:
    """The full state of a game and the rules that advance it."""

    def __init__(
        self,
        rng: random.Random | None = None,
        pause: Callable[[float], object] | None = None,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.pause = pause if pause is not None else time.sleep
        self.lives = STARTING_LIVES
        self.score = 0
        self.reset()

    def reset(self) -> None:
        """Lay out a fresh maze; the score carries over, lives refill only if spent."""
        self.terrain: list[list[Terrain]] = parse_layout(LAYOUT)
        self.characters: dict[Actor, Character] = {
            actor: Character.at_start(actor) for actor in Actor
        }
        self.pacman.heading = Heading.EAST
        if self.lives == 0:
            self.lives = STARTING_LIVES
        self.game_over = False
        self.pellets = TOTAL_PELLETS
        self.moves = 0
        self.vulnerable_mode = False
        self.vulnerable_count = 0
        self.ghosts_eaten = 0
        self.released: set[Actor] = set()

    @property
    def pacman(self) -> Character:
        return self.characters[Actor.PACMAN]

    @property
    def ghosts(self) -> list[Character]:
        return [self.characters[actor] for actor in GHOST_ORDER]

    def set_vulnerable(self, on: bool) -> None:
        """Switch every ghost into or out of the vulnerable state."""
        for ghost in self.ghosts:
            ghost.vulnerable = on
        self.vulnerable_mode = on
        self.vulnerable_count = 0
        self.ghosts_eaten = 0

    def next_level(self) -> None:
        self.reset()
        self.pause(1)

    def lose_life(self) -> None:
        """Send everyone back to the start, or end the game when no lives remain."""
        if self.lives < 1:
            self.game_over = True
            return
        self.lives -= 1
        self.set_vulnerable(False)
        self.characters = {actor: Character.at_start(actor) for actor in Actor}
        self.moves = 0
        self.released.clear()
        self.pacman.heading = Heading.EAST
        self.pause(1)

    def terrain_at(self, row: int, col: int) -> Terrain:
        """Terrain of a cell; anything outside the maze counts as wall."""
        if 0 <= row < len(self.terrain) and 0 <= col < COLS:
            return self.terrain[row][col]
        return Terrain.WALL

    def actor_at(self, row: int, col: int) -> Actor | None:
        """The actor standing on a cell, Pac-Man taking precedence."""
        return next(
            (
                character.actor
                for character in self.characters.values()
                if character.position == (row, col)
            ),
            None,
        )

    def _is_open(self, row: int, col: int) -> bool:
        return not is_blocked(self.terrain_at(row, col))

    def _eat_ghost(self, actor: Actor) -> None:
        self.characters[actor] = Character.at_start(actor)
        self.released.discard(actor)
        self.score += ghost_points(self.ghosts_eaten)
        self.ghosts_eaten += 1

    def move_pacman(self, drow: int, dcol: int) -> bool:
        """Try to move Pac-Man by the given offset; True if Pac-Man took the step."""
        if self.pellets < 1:
            self.next_level()
            return True
        pacman = self.pacman
        row, col = pacman.row + drow, pacman.col + dcol
        terrain = self.terrain_at(row, col)
        if is_blocked(terrain):
            return False

        occupant = self.actor_at(row, col)
        if occupant is not None and occupant.is_ghost:
            if self.characters[occupant].vulnerable:
                self._eat_ghost(occupant)
            else:
                self.lose_life()
            return False

        if col == COLS - 2:
            pacman.row, pacman.col = TUNNEL_ROW, 2
            return True
        if col == 0:
            pacman.row, pacman.col = TUNNEL_ROW, COLS - 4
            return True

        pacman.row, pacman.col = row, col
        if terrain is Terrain.PELLET:
            self.terrain[row][col] = Terrain.SPACE
            self.score += PELLET_POINTS
            self.pellets -= 1
        elif terrain is Terrain.BIG_PELLET:
            self.terrain[row][col] = Terrain.SPACE
            self.score += BIG_PELLET_POINTS
            self.pellets -= 1
            self.set_vulnerable(True)
        return True

    def move_ghost(self, ghost: Actor) -> bool:
        """Advance one ghost; False while it is still waiting in the box."""
        if not ghost.is_ghost:
            raise ValueError(f"{ghost.name} is not a ghost")
        if self.pellets < 1:
            self.next_level()
            return True

        character = self.characters[ghost]
        if ghost is not Actor.BLINKY and ghost not in self.released:
            if self.moves <= ghost.release_after:
                return False
            self.released.add(ghost)
            character.row, character.col = Actor.BLINKY.start

        drow, dcol = GHOST_STEPS[character.direction]
        turned = False
        if not self._is_open(character.row + drow, character.col + dcol):
            while True:
                character.direction = self.rng.randrange(len(GHOST_STEPS))
                drow, dcol = GHOST_STEPS[character.direction]
                if self._is_open(character.row + drow, character.col + dcol):
                    break
            turned = True

        if self.actor_at(character.row + drow, character.col + dcol) is Actor.PACMAN:
            if character.vulnerable:
                self._eat_ghost(ghost)
            else:
                self.lose_life()
            return True

        if not turned:
            self._maybe_turn(character)
        drow, dcol = GHOST_STEPS[character.direction]
        character.row += drow
        character.col += dcol
        return True

    def _maybe_turn(self, character: Character) -> None:
        """At a junction, sometimes turn onto a perpendicular corridor."""
        open_steps = [
            self._is_open(character.row + drow, character.col + dcol)
            for drow, dcol in GHOST_STEPS
        ]
        if sum(open_steps) <= 2 or self.rng.randrange(100) >= TURN_CHANCE:
            return
        pick = self.rng.randrange(2)
        first, second = (2, 3) if character.direction in (0, 1) else (0, 1)
        if open_steps[first] and open_steps[second]:
            character.direction = first if pick == 0 else second
        elif open_steps[first]:
            character.direction = first
        else:
            character.direction = second

    def resolve_command(self, command: str | None) -> Action | None:
        """Decide Pac-Man's move for a key: (new heading or None, offset), or None to quit."""
        pacman = self.pacman
        while True:
            if command == "q":
                return None
            if command == "5":
                return None, (0, 0)
            heading = _COMMAND_HEADINGS.get(command) if command is not None else None
            if heading is not None:
                drow, dcol = heading.delta
                if self.terrain_at(pacman.row + drow, pacman.col + dcol) is not Terrain.WALL:
                    return heading, heading.delta
            drow, dcol = pacman.heading.delta
            if self.terrain_at(pacman.row + drow, pacman.col + dcol) is Terrain.WALL:
                command = "5"
            else:
                command = _HEADING_COMMANDS[pacman.heading]

    def step(self, command: str | None) -> None:
        """Play one turn: move Pac-Man for the command, then every ghost."""
        if self.game_over:
            return
        action = self.resolve_command(command)
        if action is None:
            self.game_over = True
            return
        heading, (drow, dcol) = action
        if heading is not None:
            self.pacman.heading = heading
        self.move_pacman(drow, dcol)
        self.moves += 1
        for ghost in GHOST_ORDER:
            self.move_ghost(ghost)

    def tick_vulnerable(self) -> None:
        """Count down the power-up; ghosts recover once it has run its course."""
        if self.vulnerable_mode and self.vulnerable_count <= VULNERABLE_TICKS:
            self.vulnerable_count += 1
        else:
            self.set_vulnerable(False)