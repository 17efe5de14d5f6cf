import pytest

from advent23.beams import (
    Direction,
    energized_count,
    next_cells,
    parse_grid,
    part1,
    part2,
)

EXAMPLE = r""".|...\....
|.-.\.....
.....|-...
........|.
..........
.........\
..../.\\..
.-.-/..|..
.|....-|.\
..//.|...."""

ANNOTATED = r""".|<2<\....
|v-v\^....
.v.v.|->>>
.v.v.v^.|.
.v.v.v^...
.v.v.v^..\
.v.v/2\\..
<-2-/vv|..
.|<<<2-|.\
.v//.|.v.."""


def test_part1_example():
    assert part1(EXAMPLE) == 46


def test_part2_example():
    assert part2(EXAMPLE) == 51


def test_annotated_grid_has_invalid_tiles():
    with pytest.raises(ValueError):
        part2(ANNOTATED)


def test_energized_count_matches_part1():
    grid = parse_grid(EXAMPLE)
    assert energized_count(grid, Direction.E, (0, 0)) == 46


def test_parse_grid_rows():
    grid = parse_grid("./\n-|")
    assert grid == ("./", "-|")


def test_parse_grid_empty():
    with pytest.raises(ValueError):
        parse_grid("")


def test_empty_tile_keeps_direction():
    grid = parse_grid("...\n...\n...")
    assert next_cells(grid, Direction.E, (1, 1)) == [(Direction.E, (2, 1))]


def test_beam_leaving_grid_ends():
    grid = parse_grid("...\n...\n...")
    assert next_cells(grid, Direction.E, (2, 1)) == []


@pytest.mark.parametrize(
    "entry, expected",
    [
        (Direction.N, Direction.E),
        (Direction.E, Direction.N),
        (Direction.S, Direction.W),
        (Direction.W, Direction.S),
    ],
)
def test_slash_mirror(entry, expected):
    grid = parse_grid("...\n./.\n...")
    result = next_cells(grid, entry, (1, 1))
    assert [d for d, _ in result] == [expected]


@pytest.mark.parametrize(
    "entry, expected",
    [
        (Direction.N, Direction.W),
        (Direction.E, Direction.S),
        (Direction.S, Direction.E),
        (Direction.W, Direction.N),
    ],
)
def test_backslash_mirror(entry, expected):
    grid = parse_grid("...\n.\\.\n...")
    result = next_cells(grid, entry, (1, 1))
    assert [d for d, _ in result] == [expected]


def test_horizontal_splitter_splits_vertical_beam():
    grid = parse_grid("...\n.-.\n...")
    assert next_cells(grid, Direction.S, (1, 1)) == [
        (Direction.E, (2, 1)),
        (Direction.W, (0, 1)),
    ]


def test_vertical_splitter_passes_parallel_beam():
    grid = parse_grid("...\n.|.\n...")
    assert next_cells(grid, Direction.N, (1, 1)) == [(Direction.N, (1, 0))]


def test_vertical_splitter_splits_horizontal_beam():
    grid = parse_grid("...\n.|.\n...")
    assert next_cells(grid, Direction.E, (1, 1)) == [
        (Direction.N, (1, 0)),
        (Direction.S, (1, 2)),
    ]


def test_splitter_at_edge_keeps_remaining_branch():
    grid = parse_grid(".|.")
    assert next_cells(grid, Direction.E, (1, 0)) == []


def test_invalid_tile_raises():
    grid = parse_grid("x")
    with pytest.raises(ValueError):
        next_cells(grid, Direction.E, (0, 0))


def test_straight_row_energizes_every_cell():
    assert part1("....") == 4


def test_loop_terminates():
    grid = parse_grid("/\\\n\\/")
    count = energized_count(grid, Direction.E, (0, 0))
    assert 1 <= count <= 4