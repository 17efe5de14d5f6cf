"""Command line entry point for solving a puzzle day from an input file."""

from __future__ import annotations

import argparse
import time
from collections.abc import Callable

from advent23 import (
    beams,
    bricks,
    crucible,
    garden,
    hail,
    hiking,
    lagoon,
    pulses,
    snowverload,
    workflows,
)

_SOLVERS: dict[tuple[int, int], Callable[[str], int | None]] = {
    (16, 1): beams.part1,
    (16, 2): beams.part2,
    (17, 1): crucible.part1,
    (17, 2): crucible.part2,
    (18, 1): lagoon.part1,
    (18, 2): lagoon.part2,
    (19, 1): workflows.part1,
    (19, 2): workflows.part2,
    (20, 1): pulses.part1,
    (20, 2): pulses.part2,
    (21, 1): garden.part1,
    (21, 2): garden.part2,
    (22, 1): bricks.part1,
    (22, 2): bricks.part2,
    (23, 1): hiking.part1,
    (23, 2): hiking.part2,
    (24, 1): hail.part1,
    (24, 2): hail.part2,
    (25, 1): snowverload.part1,
}


def solve(day: int, part: int, text: str) -> int:
    """Answer for the given day and part of the puzzle input ``text``."""
    try:
        solver = _SOLVERS[(day, part)]
    except KeyError:
        raise ValueError(f"no solver for day {day} part {part}") from None
    answer = solver(text)
    if answer is None:
        raise ValueError(f"day {day} part {part} has no answer for this input")
    return answer


def main(argv: list[str] | None = None) -> int:
    """Solve one puzzle part, printing the answer and the time taken."""
    parser = argparse.ArgumentParser(description="Solve a puzzle day from its input file.")
    parser.add_argument("day", type=int, help="puzzle day (16-25)")
    parser.add_argument("part", type=int, choices=(1, 2), help="puzzle part")
    parser.add_argument("input", nargs="?", default="input.txt", help="puzzle input file")
    args = parser.parse_args(argv)

    if (args.day, args.part) not in _SOLVERS:
        parser.error(f"no solver for day {args.day} part {args.part}")
    try:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()
    except OSError as exc:
        parser.error(f"cannot read {args.input}: {exc.strerror}")

    start = time.perf_counter()
    try:
        answer = solve(args.day, args.part, text)
    except ValueError as exc:
        parser.error(str(exc))
    elapsed = time.perf_counter() - start

    print(f"Part {args.part} answer: {answer}")
    print(f"took {int(elapsed * 1000)}ms ({int(elapsed * 1_000_000)}us)")
    return 0