"""Falling sand bricks: which can be removed and how many fall in chain reactions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple


class Point(NamedTuple):
    x: int
    y: int
    z: int


Cube = tuple[int, int, int]


@dataclass(frozen=True)
class Brick:
    """A straight brick between two corner cubes, ``start`` at the bottom."""

    start: Point
    end: Point

    @classmethod
    def parse(cls, line: str) -> Brick:
        """Parse ``1,0,1~1,2,1``."""
        first, sep, second = line.partition("~")
        if not sep:
            raise ValueError(f"malformed brick {line!r}")
        return cls(_parse_point(first), _parse_point(second))

    def lowered(self, dz: int) -> Brick:
        """The same brick ``dz`` units lower."""
        return Brick(self.start._replace(z=self.start.z - dz), self.end._replace(z=self.end.z - dz))

    def overlaps(self, other: Brick) -> bool:
        """Whether the two bricks share any x-y column."""
        return max(self.start.x, other.start.x) <= min(self.end.x, other.end.x) and max(
            self.start.y, other.start.y
        ) <= min(self.end.y, other.end.y)

    @property
    def cubes(self) -> tuple[Cube, ...]:
        """Every unit cube the brick occupies."""
        a, b = self.start, self.end
        if a.x != b.x:
            return tuple((v, a.y, a.z) for v in range(min(a.x, b.x), max(a.x, b.x) + 1))
        if a.y != b.y:
            return tuple((a.x, v, a.z) for v in range(min(a.y, b.y), max(a.y, b.y) + 1))
        if a.z != b.z:
            return tuple((a.x, a.y, v) for v in range(min(a.z, b.z), max(a.z, b.z) + 1))
        return ((a.x, a.y, a.z),)


def _parse_point(text: str) -> Point:
    fields = text.split(",")
    if len(fields) < 3:
        raise ValueError(f"malformed point {text!r}")
    return Point(int(fields[0]), int(fields[1]), int(fields[2]))


def parse_bricks(text: str) -> list[Brick]:
    """Bricks in ascending order of their bottom height."""
    return sorted((Brick.parse(line) for line in text.splitlines()), key=lambda b: b.start.z)


def _overlap_table(bricks: list[Brick]) -> list[list[bool]]:
    return [[brick.overlaps(other) for other in bricks] for brick in bricks]


def _drop_distance(
    bricks: list[Brick], i: int, overlaps: list[list[bool]], skip: int | None = None
) -> int:
    brick = bricks[i]
    return min(
        (
            brick.start.z - other.end.z - 1
            for j, other in enumerate(bricks[:i])
            if j != skip and other.end.z < brick.start.z and overlaps[i][j]
        ),
        default=brick.start.z - 1,
    )


def settle(bricks: list[Brick]) -> list[Brick]:
    """Let bricks, given in ascending bottom order, fall until each rests on something."""
    settled = list(bricks)
    overlaps = _overlap_table(settled)
    for i in range(len(settled)):
        dz = _drop_distance(settled, i, overlaps)
        if dz > 0:
            settled[i] = settled[i].lowered(dz)
    return settled


def fall_step(cubes: list[tuple[Cube, ...]]) -> tuple[list[tuple[Cube, ...]], list[int]]:
    """Lower by one every brick whose cells below are free; return the new bricks and who moved."""
    occupied = {cube: idx for idx, brick in enumerate(cubes) for cube in brick}
    moved = []
    lowered = []
    for idx, brick in enumerate(cubes):
        if all(z != 1 and occupied.get((x, y, z - 1), idx) == idx for x, y, z in brick):
            moved.append(idx)
            lowered.append(tuple((x, y, z - 1) for x, y, z in brick))
        else:
            lowered.append(brick)
    return lowered, moved


def part1(text: str) -> int:
    """Number of bricks that could be removed without any other brick falling."""
    bricks = settle(parse_bricks(text))
    overlaps = _overlap_table(bricks)

    def supports_any(i: int) -> bool:
        brick = bricks[i]
        return any(
            bricks[j].start.z > brick.end.z
            and overlaps[i][j]
            and _drop_distance(bricks, j, overlaps, skip=i) > 0
            for j in range(i + 1, len(bricks))
        )

    return sum(not supports_any(i) for i in range(len(bricks)))


def part2(text: str) -> int:
    """Sum over all bricks of how many other bricks would fall if it were removed."""
    cubes = [Brick.parse(line).cubes for line in text.splitlines()]
    while True:
        cubes, moved = fall_step(cubes)
        if not moved:
            break
    total = 0
    for i in range(len(cubes)):
        remaining = cubes[:i] + cubes[i + 1 :]
        fell: set[int] = set()
        while True:
            remaining, moved = fall_step(remaining)
            if not moved:
                break
            fell.update(moved)
        total += len(fell)
    return total