import pytest

from termpacman.board import (
    COLS,
    GHOST_STEPS,
    LAYOUT,
    ROWS,
    Actor,
    Heading,
    Terrain,
    count_pellets,
    is_blocked,
    parse_layout,
)


@pytest.fixture
def grid():
    return parse_layout(LAYOUT)


def test_layout_shape(grid):
    assert len(grid) == ROWS
    assert all(len(row) == COLS for row in grid)


def test_layout_padding_column_is_space(grid):
    assert all(row[COLS - 1] is Terrain.SPACE for row in grid)


def test_layout_corners_are_walls(grid):
    assert grid[0][0] is Terrain.WALL
    assert grid[ROWS - 1][0] is Terrain.WALL


def test_big_pellets_in_layout(grid):
    assert grid[3][2] is Terrain.BIG_PELLET
    assert grid[23][2] is Terrain.BIG_PELLET
    big = sum(cell is Terrain.BIG_PELLET for row in grid for cell in row)
    assert big == 4


def test_fence_cells(grid):
    assert [grid[12][c] for c in range(25, 30)] == [Terrain.FENCE] * 5
    assert grid[12][24] is Terrain.WALL


def test_start_positions_are_open(grid):
    for actor in Actor:
        row, col = actor.start
        assert not is_blocked(grid[row][col])


def test_parse_characters():
    assert parse_layout(["%.o- x"])[0][:6] == [
        Terrain.WALL,
        Terrain.PELLET,
        Terrain.BIG_PELLET,
        Terrain.FENCE,
        Terrain.SPACE,
        Terrain.SPACE,
    ]


def test_parse_pads_short_rows():
    row = parse_layout(["%"])[0]
    assert len(row) == COLS
    assert row[1:] == [Terrain.SPACE] * (COLS - 1)


def test_parse_rejects_wide_rows():
    with pytest.raises(ValueError):
        parse_layout(["%" * (COLS + 1)])


def test_is_blocked():
    assert is_blocked(Terrain.WALL)
    assert is_blocked(Terrain.FENCE)
    for terrain in (Terrain.PELLET, Terrain.BIG_PELLET, Terrain.SPACE, Terrain.FRUIT):
        assert not is_blocked(terrain)


def test_count_pellets_small_grid():
    assert count_pellets(parse_layout([". o %", "- . ."])) == 4
    assert count_pellets(parse_layout(["%%%", "   "])) == 0


def test_count_pellets_matches_cell_scan(grid):
    total = count_pellets(grid)
    grid[1][2] = Terrain.SPACE
    assert count_pellets(grid) == total - 1


def test_heading_deltas():
    assert Heading.NORTH.delta == (-1, 0)
    assert Heading.SOUTH.delta == (1, 0)
    assert Heading.EAST.delta == (0, 2)
    assert Heading.WEST.delta == (0, -2)
    assert Heading.NORTH.vertical and not Heading.EAST.vertical

    layout = parse_layout(LAYOUT)
    row, col = Actor.PACMAN.start
    east_dr, east_dc = Heading.EAST.delta
    west_dr, west_dc = Heading.WEST.delta
    assert layout[row + east_dr][col + east_dc] is Terrain.SPACE
    assert layout[row + west_dr][col + west_dc] is Terrain.PELLET


def test_ghost_steps_order():
    assert GHOST_STEPS == ((-1, 0), (1, 0), (0, -2), (0, 2))

    layout = parse_layout(LAYOUT)
    row, col = Actor.BLINKY.start
    blocked = [is_blocked(layout[row + dr][col + dc]) for dr, dc in GHOST_STEPS]
    assert blocked == [True, True, False, False]


def test_actor_properties():
    assert not Actor.PACMAN.is_ghost
    assert all(a.is_ghost for a in Actor if a is not Actor.PACMAN)
    assert [a.letter for a in Actor][1:] == ["B", "P", "I", "C"]
    assert Actor.PINKY.release_after < Actor.INKY.release_after < Actor.CLYDE.release_after
    assert Actor.PACMAN.start == (23, 26)
    assert Actor.BLINKY.start == (11, 28)

    layout = parse_layout(LAYOUT)
    pac_row, pac_col = Actor.PACMAN.start
    blinky_row, blinky_col = Actor.BLINKY.start
    assert layout[pac_row][pac_col] is Terrain.SPACE
    assert layout[blinky_row][blinky_col] is Terrain.SPACE


def test_terrain_from_char():
    assert Terrain.from_char("%") is Terrain.WALL
    assert Terrain.from_char("?") is Terrain.SPACE