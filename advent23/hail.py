"""Hailstone paths: crossings in a test area and the rock throw that hits them all."""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from itertools import combinations

Vector = tuple[int, int, int]


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _div_trunc(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def _parse_triple(text: str) -> Vector:
    fields = [field.strip() for field in text.split(",")]
    if len(fields) != 3:
        raise ValueError(f"expected three numbers in {text!r}")
    try:
        x, y, z = (int(field) for field in fields)
    except ValueError:
        raise ValueError(f"not a number in {text!r}") from None
    return x, y, z


@dataclass(frozen=True)
class Hailstone:
    """Position and velocity of one hailstone."""

    x: int
    y: int
    z: int
    dx: int
    dy: int
    dz: int

    @classmethod
    def parse(cls, line: str) -> Hailstone:
        """Parse ``19, 13, 30 @ -2,  1, -2``."""
        position, sep, velocity = line.partition("@")
        if not sep:
            raise ValueError(f"no @ symbol in {line!r}")
        return cls(*_parse_triple(position), *_parse_triple(velocity))

    def to_line(self) -> tuple[int, int, int]:
        """Coefficients (a, b, c) of the path ``a*x + b*y + c = 0`` in the x-y plane."""
        return self.dy, -self.dx, self.dx * self.y - self.dy * self.x

    def intersection(self, other: Hailstone) -> tuple[int, int] | None:
        """Crossing of the two x-y paths, rounded toward zero; None if parallel."""
        a1, b1, c1 = self.to_line()
        a2, b2, c2 = other.to_line()
        det = a1 * b2 - a2 * b1
        if det == 0:
            return None
        return _div_trunc(b1 * c2 - b2 * c1, det), _div_trunc(c1 * a2 - c2 * a1, det)


def parse_hailstones(text: str) -> list[Hailstone]:
    """One hailstone per line."""
    return [Hailstone.parse(line) for line in text.splitlines()]


def count_future_crossings(text: str, low: int, high: int) -> int:
    """Pairs whose x-y paths cross ahead of both stones inside the square ``low..high``."""
    count = 0
    for a, b in combinations(parse_hailstones(text), 2):
        point = a.intersection(b)
        if point is None:
            continue
        x, y = point
        if (
            _sign(x - a.x) != _sign(a.dx)
            or _sign(x - b.x) != _sign(b.dx)
            or _sign(y - a.y) != _sign(a.dy)
            or _sign(y - b.y) != _sign(b.dy)
        ):
            continue
        if low <= x <= high and low <= y <= high:
            count += 1
    return count


def _cross(a: Vector, b: Vector) -> Vector:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _pair_equations(first: Hailstone, second: Hailstone) -> list[list[Fraction]]:
    p1, v1 = (first.x, first.y, first.z), (first.dx, first.dy, first.dz)
    p2, v2 = (second.x, second.y, second.z), (second.dx, second.dy, second.dz)
    dp = tuple(a - b for a, b in zip(p1, p2))
    dv = tuple(a - b for a, b in zip(v1, v2))
    rhs = tuple(a - b for a, b in zip(_cross(p1, v1), _cross(p2, v2)))
    rows = [
        [0, dv[2], -dv[1], 0, -dp[2], dp[1], rhs[0]],
        [-dv[2], 0, dv[0], dp[2], 0, -dp[0], rhs[1]],
        [dv[1], -dv[0], 0, -dp[1], dp[0], 0, rhs[2]],
    ]
    return [[Fraction(value) for value in row] for row in rows]


def _solve(matrix: list[list[Fraction]]) -> list[Fraction]:
    size = len(matrix)
    for col in range(size):
        pivot = next((r for r in range(col, size) if matrix[r][col] != 0), None)
        if pivot is None:
            raise ValueError("hailstone paths do not determine a unique throw")
        matrix[col], matrix[pivot] = matrix[pivot], matrix[col]
        lead = matrix[col][col]
        matrix[col] = [value / lead for value in matrix[col]]
        for r, row in enumerate(matrix):
            if r != col and row[col] != 0:
                factor = row[col]
                matrix[r] = [value - factor * base for value, base in zip(row, matrix[col])]
    return [row[-1] for row in matrix]


def _hit_time(stone: Hailstone, position: Vector, velocity: Vector) -> Fraction | None:
    """Time at which the rock meets ``stone``; None if they travel together."""
    times = set()
    stone_pos = (stone.x, stone.y, stone.z)
    stone_vel = (stone.dx, stone.dy, stone.dz)
    for p, v, sp, sv in zip(position, velocity, stone_pos, stone_vel):
        if sv == v:
            if p != sp:
                raise ValueError("the rock never meets a hailstone")
        else:
            times.add(Fraction(p - sp, sv - v))
    if len(times) > 1:
        raise ValueError("the rock never meets a hailstone")
    return times.pop() if times else None


def throw_position(hailstones: list[Hailstone]) -> Vector:
    """Integer start position of a rock thrown so it hits the first three hailstones."""
    if len(hailstones) < 3:
        raise ValueError("at least three hailstones are needed")
    first, second, third = hailstones[:3]
    solution = _solve(_pair_equations(first, second) + _pair_equations(first, third))
    if any(value.denominator != 1 for value in solution):
        raise ValueError("no integer rock throw exists")
    px, py, pz, vx, vy, vz = (int(value) for value in solution)
    for stone in (first, second, third):
        time = _hit_time(stone, (px, py, pz), (vx, vy, vz))
        if time is not None and (time <= 0 or time.denominator != 1):
            raise ValueError("no rock throw hits the hailstones at positive whole times")
    return px, py, pz


def part1(text: str, low: int = 200_000_000_000_000, high: int = 400_000_000_000_000) -> int:
    """Number of future path crossings inside the test area."""
    return count_future_crossings(text, low, high)


def part2(text: str) -> int:
    """Sum of the coordinates the rock is thrown from."""
    return sum(throw_position(parse_hailstones(text)))