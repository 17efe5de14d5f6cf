# advent23

Solvers for days 16 to 25 of a 2023 advent-style puzzle calendar. Each day
has its own module. The package uses only the standard library.

| Day | Module                 | Puzzle                                      |
|-----|------------------------|---------------------------------------------|
| 16  | `advent23.beams`       | Light beams through mirrors and splitters   |
| 17  | `advent23.crucible`    | Least heat loss for a crucible              |
| 18  | `advent23.lagoon`      | Lagoon volume from a dig plan               |
| 19  | `advent23.workflows`   | Part-sorting workflows                      |
| 20  | `advent23.pulses`      | Pulse propagation through a module network  |
| 21  | `advent23.garden`      | Garden plots reachable in a number of steps |
| 22  | `advent23.bricks`      | Falling sand bricks                         |
| 23  | `advent23.hiking`      | Longest hike through the forest             |
| 24  | `advent23.hail`        | Hailstone trajectories                      |
| 25  | `advent23.snowverload` | Cutting three wires to split the graph      |

## Installation

```
pip install .
```

To run the test suite, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Command line

The `advent23` command solves one part of one day. Give it the day, the part
and the puzzle input file; the file defaults to `input.txt` in the current
directory:

```
advent23 16 1 input.txt
```

It prints the answer and the time the solver took:

```
Part 1 answer: 46
took 0ms (412us)
```

An unknown day or part, an unreadable file or input the solver rejects is
reported as a usage error. Run `advent23 --help` for the full usage.

The command always uses each solver's default parameters (1000 button presses
for day 20, 64 and 26501365 steps for day 21, the test area
200000000000000..400000000000000 for day 24).

## Library use

Every module has `part1` and `part2` functions that take the puzzle input as
text. Day 25 has only `part1`.

```python
from advent23 import beams, lagoon

with open("input.txt", encoding="utf-8") as handle:
    text = handle.read()
print(beams.part1(text))
print(lagoon.part2(text))
```

Some puzzles take extra parameters:

- `advent23.pulses.part1(text, presses=1000)` sets how many times the button is pressed.
- `advent23.garden.part1(text, steps=64)` and `advent23.garden.part2(text, steps=26501365)`
  set the step count.
- `advent23.hail.part1(text, low, high)` sets the bounds of the test area.
- `advent23.crucible.min_heat_loss(text, min_run, max_run)` takes any run limits.

To solve a day by number, use `advent23.cli.solve(day, part, text)`; it
raises `ValueError` for a day and part it has no solver for.

The modules also expose their building blocks, for example
`advent23.beams.energized_count`, `advent23.workflows.Workflow`,
`advent23.pulses.ModuleNetwork` and `advent23.pulses.to_graphviz`, which
returns a Graphviz `dot` description of a module network.

## Limits

- `pulses.part2` only gives a meaningful answer for networks made of
  flip-flop chains that feed conjunctions.
- `garden.part2` needs a square map and extrapolates from three samples with a
  quadratic fit; it raises `ValueError` when the step count is too small to
  take them.
- `hail.part2` solves for the rock throw from the first three hailstones only.
- There is no part 2 for day 25, and the command line has no option to print
  the Graphviz description of a day 20 network.