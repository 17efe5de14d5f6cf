"""Least heat-loss route for a crucible that must turn after limited runs."""

from __future__ import annotations

import heapq
from dataclasses import dataclass

_DIGITS = "0123456789"

# Directions in the order they are tried: left, right, up, down.
_HORIZONTAL_STEPS = ((-1, 0), (1, 0))
_VERTICAL_STEPS = ((0, -1), (0, 1))


@dataclass(frozen=True, order=True)
class Node:
    """A grid position together with the axis the crucible will move along next."""

    x: int
    y: int
    moves_vertically: bool


def parse_map(text: str) -> list[list[int]]:
    """Parse rows of single-digit heat-loss values."""
    rows = []
    for line in text.splitlines():
        row = []
        for char in line:
            if char not in _DIGITS:
                raise ValueError(f"invalid heat-loss digit {char!r}")
            row.append(int(char))
        rows.append(row)
    if not rows or not rows[0]:
        raise ValueError("empty map")
    return rows


def min_heat_loss(text: str, min_run: int, max_run: int) -> int | None:
    """Least total heat loss from the top-left to the bottom-right corner.

    Each straight run covers between ``min_run`` and ``max_run`` blocks before
    the crucible has to turn. Returns None when the corner cannot be reached.
    """
    if min_run < 1 or max_run < min_run:
        raise ValueError("run limits must satisfy 1 <= min_run <= max_run")
    heat = parse_map(text)
    width = len(heat[0])
    height = len(heat)
    target = (width - 1, height - 1)

    queue = [(0, Node(0, 0, False)), (0, Node(0, 0, True))]
    heapq.heapify(queue)
    visited: set[Node] = set()

    while queue:
        distance, node = heapq.heappop(queue)
        if (node.x, node.y) == target:
            return distance
        if node in visited:
            continue
        visited.add(node)

        steps = _HORIZONTAL_STEPS if node.moves_vertically else _VERTICAL_STEPS
        for dx, dy in steps:
            delta = 0
            for i in range(1, max_run + 1):
                x, y = node.x + dx * i, node.y + dy * i
                if not (0 <= x < width and 0 <= y < height):
                    break
                delta += heat[y][x]
                if i >= min_run:
                    heapq.heappush(
                        queue,
                        (distance + delta, Node(x, y, not node.moves_vertically)),
                    )
    return None


def part1(text: str) -> int | None:
    """Heat loss for a normal crucible: runs of one to three blocks."""
    return min_heat_loss(text, 1, 3)


def part2(text: str) -> int | None:
    """Heat loss for an ultra crucible: runs of four to ten blocks."""
    return min_heat_loss(text, 4, 10)