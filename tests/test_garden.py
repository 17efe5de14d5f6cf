import pytest

from advent23.garden import part1, part2, reachable_plots, render, wrap

EXAMPLE = """...........
.....###.#.
.###.##..#.
..#.#...#..
....#.#....
.##..S####.
.##..#...#.
.......##..
.##.#.####.
.##..##.##.
..........."""

OPEN = "\n".join(["....."] * 2 + ["..S.."] + ["....."] * 2)


def open_field(size):
    rows = ["." * size for _ in range(size)]
    middle = size // 2
    rows[middle] = "." * middle + "S" + "." * (size - middle - 1)
    return "\n".join(rows)


def test_part1_example():
    assert part1(EXAMPLE, 6) == 16


@pytest.mark.parametrize("steps", [0, 1, 2, 3, 4])
def test_open_field_reaches_diamond(steps):
    assert part1(open_field(11), steps) == (steps + 1) ** 2


def test_walled_in_start():
    text = "###\n#S#\n###"
    assert reachable_plots(text, 0) == {(1, 1)}
    assert reachable_plots(text, 1) == set()


def test_reachable_plots_avoid_rocks():
    plots = reachable_plots(EXAMPLE, 6)
    rows = EXAMPLE.splitlines()
    assert len(plots) == 16
    assert (5, 5) in plots
    assert all(rows[y][x] != "#" for x, y in plots)


def test_render_marks_plots():
    plots = reachable_plots(EXAMPLE, 6)
    rendered = render(EXAMPLE, plots)
    assert rendered.count("O") == len(plots)
    for (x, y), (original, drawn) in (
        ((x, y), (EXAMPLE.splitlines()[y][x], rendered.splitlines()[y][x]))
        for y in range(11)
        for x in range(11)
    ):
        if (x, y) not in plots:
            assert drawn == original


@pytest.mark.parametrize("x,y", [(-1, -1), (-6, 3), (5, 12), (0, 0), (17, -13)])
def test_wrap_lands_on_tile(x, y):
    wx, wy = wrap(x, y, 5, 5)
    assert 0 <= wx < 5 and 0 <= wy < 5
    assert (wx - x) % 5 == 0 and (wy - y) % 5 == 0


@pytest.mark.parametrize("steps", [12, 17, 22, 52])
def test_part2_open_infinite_field(steps):
    assert part2(OPEN, steps) == (steps + 1) ** 2


def test_part2_too_few_steps():
    with pytest.raises(ValueError):
        part2(OPEN, 5)


def test_part2_requires_square_map():
    with pytest.raises(ValueError):
        part2("...\n.S.", 100)


def test_uneven_rows_rejected():
    with pytest.raises(ValueError):
        reachable_plots("...\n.S", 1)