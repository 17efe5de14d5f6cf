"""Lagoon volume from a dig plan, by grid flood fill or by polygon area."""

from __future__ import annotations

from dataclasses import dataclass
from math import gcd

Grid = list[list[str]]

# Screen coordinates: y grows downwards.
_SCREEN_STEPS = {"R": (1, 0), "L": (-1, 0), "U": (0, -1), "D": (0, 1)}
# Cartesian coordinates: y grows upwards.
_CARTESIAN_STEPS = {"R": (1, 0), "L": (-1, 0), "U": (0, 1), "D": (0, -1)}
_HEX_DIRECTIONS = {"0": "R", "1": "D", "2": "L", "3": "U"}


@dataclass(frozen=True)
class DigStep:
    """One instruction of a dig plan."""

    direction: str
    distance: int
    colour: str = ""


def _screen_offset(direction: str) -> tuple[int, int]:
    try:
        return _SCREEN_STEPS[direction]
    except KeyError:
        raise ValueError(f"invalid direction {direction!r}") from None


def parse_plan(text: str) -> list[DigStep]:
    """Parse lines such as ``R 6 (#70c710)``."""
    steps = []
    for line in text.splitlines():
        fields = line.strip().split(" ")
        if len(fields) < 3:
            raise ValueError(f"malformed dig instruction {line!r}")
        direction, distance, colour = fields[0], fields[1], fields[2]
        if len(direction) != 1:
            raise ValueError(f"invalid direction {direction!r}")
        _screen_offset(direction)
        steps.append(DigStep(direction, int(distance), colour))
    return steps


def parse_hex_plan(text: str) -> list[DigStep]:
    """Parse the plan from the hexadecimal codes: five distance digits, then a direction digit."""
    steps = []
    for line in text.splitlines():
        fields = line.split()
        if not fields:
            raise ValueError("empty dig instruction")
        code = fields[-1].lstrip("(").rstrip(")").lstrip("#")
        if len(code) < 5:
            raise ValueError(f"malformed colour code {fields[-1]!r}")
        distance = int(code[:5], 16)
        try:
            direction = _HEX_DIRECTIONS[code[-1]]
        except KeyError:
            raise ValueError(f"invalid direction digit {code[-1]!r}") from None
        steps.append(DigStep(direction, distance, code))
    return steps


def dig_grid(steps: list[DigStep]) -> Grid:
    """Grid just large enough for the trench, with dug cells marked ``#``."""
    x = y = 0
    x_min = x_max = y_min = y_max = 0
    for step in steps:
        dx, dy = _screen_offset(step.direction)
        x += dx * step.distance
        y += dy * step.distance
        x_min, x_max = min(x_min, x), max(x_max, x)
        y_min, y_max = min(y_min, y), max(y_max, y)

    grid = [["."] * (x_max - x_min + 1) for _ in range(y_max - y_min + 1)]
    x, y = -x_min, -y_min
    for step in steps:
        dx, dy = _screen_offset(step.direction)
        for _ in range(step.distance):
            x += dx
            y += dy
            grid[y][x] = "#"
    return grid


def flood_fill_outside(grid: Grid) -> Grid:
    """Copy of ``grid`` with every cell reachable from the border without crossing ``#`` marked ``o``."""
    filled = [list(row) for row in grid]
    if not filled or not filled[0]:
        return filled
    rows, cols = len(filled), len(filled[0])
    stack = [(r, c) for r in range(rows) for c in (0, cols - 1)]
    stack += [(r, c) for c in range(cols) for r in (0, rows - 1)]
    while stack:
        r, c = stack.pop()
        if not (0 <= r < rows and 0 <= c < cols) or filled[r][c] in "#o":
            continue
        filled[r][c] = "o"
        stack.extend(((r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)))
    return filled


def area_and_boundary(vertices: list[tuple[int, int]]) -> tuple[int, int]:
    """Shoelace area of the closed polygon and the lattice points on its edges."""
    if not vertices:
        raise ValueError("polygon has no vertices")
    twice_area = 0
    boundary = 0
    for (x1, y1), (x2, y2) in zip(vertices, vertices[1:] + vertices[:1]):
        twice_area += x1 * y2 - x2 * y1
        boundary += gcd(abs(x1 - x2), abs(y1 - y2))
    return abs(twice_area) // 2, boundary


def part1(text: str) -> int:
    """Cubic metres of lava held, counted cell by cell on the dug grid."""
    grid = flood_fill_outside(dig_grid(parse_plan(text)))
    return sum(cell in "#." for row in grid for cell in row)


def part2(text: str) -> int:
    """Cubic metres of lava held by the plan hidden in the colour codes."""
    position = (0, 0)
    vertices = [position]
    for step in parse_hex_plan(text):
        dx, dy = _CARTESIAN_STEPS[step.direction]
        position = (position[0] + dx * step.distance, position[1] + dy * step.distance)
        vertices.append(position)
    area, boundary = area_and_boundary(vertices)
    interior = area - boundary // 2 + 1
    return interior + boundary