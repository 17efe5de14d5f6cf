"""Light beams bouncing through a grid of mirrors and splitters."""

from __future__ import annotations

from enum import Enum
from itertools import chain

Cell = tuple[int, int]
Grid = tuple[str, ...]


class Direction(Enum):
    """Direction in which a beam travels, as an (dx, dy) step."""

    N = (0, -1)
    S = (0, 1)
    E = (1, 0)
    W = (-1, 0)


_SLASH = {
    Direction.N: Direction.E,
    Direction.E: Direction.N,
    Direction.S: Direction.W,
    Direction.W: Direction.S,
}

_BACKSLASH = {
    Direction.N: Direction.W,
    Direction.E: Direction.S,
    Direction.S: Direction.E,
    Direction.W: Direction.N,
}

_VERTICAL = (Direction.N, Direction.S)
_HORIZONTAL = (Direction.E, Direction.W)


def parse_grid(text: str) -> Grid:
    """Split the puzzle text into grid rows."""
    rows = tuple(text.splitlines())
    if not rows:
        raise ValueError("empty grid")
    return rows


def _neighbour(grid: Grid, cell: Cell, direction: Direction) -> Cell | None:
    dx, dy = direction.value
    x, y = cell[0] + dx, cell[1] + dy
    if 0 <= x < len(grid[0]) and 0 <= y < len(grid):
        return x, y
    return None


def next_cells(grid: Grid, direction: Direction, cell: Cell) -> list[tuple[Direction, Cell]]:
    """Beams leaving ``cell`` after entering it while travelling ``direction``."""
    x, y = cell
    tile = grid[y][x]
    if (
        tile == "."
        or (tile == "|" and direction in _VERTICAL)
        or (tile == "-" and direction in _HORIZONTAL)
    ):
        outgoing: tuple[Direction, ...] = (direction,)
    elif tile == "/":
        outgoing = (_SLASH[direction],)
    elif tile == "\\":
        outgoing = (_BACKSLASH[direction],)
    elif tile == "-":
        outgoing = _HORIZONTAL
    elif tile == "|":
        outgoing = _VERTICAL
    else:
        raise ValueError(f"invalid tile {tile!r} at {cell}")
    return [
        (new_dir, pos)
        for new_dir in outgoing
        if (pos := _neighbour(grid, cell, new_dir)) is not None
    ]


def energized_count(grid: Grid, direction: Direction, start: Cell) -> int:
    """Number of cells a beam entering ``start`` in ``direction`` passes through."""
    beams = [(direction, start)]
    visited: set[tuple[Direction, Cell]] = set()
    while beams:
        following = []
        for beam in beams:
            if beam not in visited:
                visited.add(beam)
                following.extend(next_cells(grid, *beam))
        beams = following
    return len({pos for _, pos in visited})


def part1(text: str) -> int:
    """Energized cells for a beam entering the top-left corner heading east."""
    return energized_count(parse_grid(text), Direction.E, (0, 0))


def part2(text: str) -> int:
    """Best energized count over the candidate entry beams."""
    grid = parse_grid(text)
    width = len(grid[0])
    height = len(grid)
    starts = chain(
        ((Direction.E, (0, y)) for y in range(height)),
        ((Direction.W, (0, height - 1 - y)) for y in range(height)),
        ((Direction.S, (x, 0)) for x in range(width)),
        ((Direction.N, (width - 1 - x, 0)) for x in range(width)),
    )
    return max(energized_count(grid, direction, pos) for direction, pos in starts)