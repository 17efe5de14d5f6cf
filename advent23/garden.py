"""Garden plots reachable in an exact number of steps."""

from __future__ import annotations

from fractions import Fraction
from math import floor

Position = tuple[int, int]

_STEPS = ((0, -1), (1, 0), (0, 1), (-1, 0))


def _rows(text: str) -> list[str]:
    rows = text.splitlines()
    if not rows:
        raise ValueError("empty map")
    if any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("rows of the map differ in length")
    return rows


def _find_start(rows: list[str]) -> Position:
    for y, row in enumerate(rows):
        x = row.find("S")
        if x >= 0:
            return x, y
    return 0, 0


def wrap(x: int, y: int, width: int, height: int) -> Position:
    """Map a position on the infinitely tiled map back onto the original tile."""
    return x % width, y % height


def reachable_plots(text: str, steps: int) -> set[Position]:
    """Positions on the bounded map reachable in exactly ``steps`` steps from ``S``."""
    rows = _rows(text)
    width, height = len(rows[0]), len(rows)
    plots = {_find_start(rows)}
    for _ in range(steps):
        plots = {
            (nx, ny)
            for x, y in plots
            for dx, dy in _STEPS
            if 0 <= (nx := x + dx) < width
            and 0 <= (ny := y + dy) < height
            and rows[ny][nx] != "#"
        }
    return plots


def render(text: str, plots: set[Position]) -> str:
    """The map with every position in ``plots`` drawn as ``O``."""
    rows = _rows(text)
    return "\n".join(
        "".join("O" if (x, y) in plots else tile for x, tile in enumerate(row))
        for y, row in enumerate(rows)
    )


def part1(text: str, steps: int = 64) -> int:
    """Number of plots reachable in exactly ``steps`` steps."""
    return len(reachable_plots(text, steps))


def part2(text: str, steps: int = 26501365) -> int:
    """Plots reachable on the infinitely tiled map, extrapolated by a quadratic fit."""
    rows = _rows(text)
    width, height = len(rows[0]), len(rows)
    if width != height:
        raise ValueError("map must be square")
    start = _find_start(rows)
    open_tiles = {
        (x, y)
        for y, row in enumerate(rows)
        for x, tile in enumerate(row)
        if tile in ".S"
    }

    offset = start[0] - 1
    samples_at = (offset, offset + width, offset + 2 * width)
    values: list[int] = []
    plots = {start}
    for step in range(steps):
        plots = {
            (x + dx, y + dy)
            for x, y in plots
            for dx, dy in _STEPS
            if wrap(x + dx, y + dy, width, height) in open_tiles
        }
        if step in samples_at:
            values.append(len(plots))
            if len(values) == 3:
                break
    if len(values) < 3:
        raise ValueError("too few steps to sample three map widths")

    y0, y1, y2 = (Fraction(v) for v in values)
    a = (y2 - 2 * y1 + y0) / 2
    b = y1 - y0 - a
    c = y0
    a, b, c = (floor(coef + Fraction(1, 2)) for coef in (a, b, c))
    n = (steps - start[0]) // width
    return a * n * n + b * n + c