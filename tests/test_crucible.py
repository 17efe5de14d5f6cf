import pytest

from advent23.crucible import Node, min_heat_loss, parse_map, part1, part2

EXAMPLE = """2413432311323
3215453535623
3255245654254
3446585845452
4546657867536
1438598798454
4457876987766
3637877979653
4654967986887
4564679986453
1224686865563
2546548887735
4322674655533"""


def test_part1_example():
    assert part1(EXAMPLE) == 102


def test_part2_example():
    assert part2(EXAMPLE) == 94


def test_part1_is_min_heat_loss_with_short_runs():
    assert part1(EXAMPLE) == min_heat_loss(EXAMPLE, 1, 3)


def test_part2_is_min_heat_loss_with_long_runs():
    assert part2(EXAMPLE) == min_heat_loss(EXAMPLE, 4, 10)


def test_parse_map():
    assert parse_map("12\n34") == [[1, 2], [3, 4]]


def test_parse_map_rejects_non_digit():
    with pytest.raises(ValueError):
        parse_map("12\n3x")


def test_parse_map_rejects_empty():
    with pytest.raises(ValueError):
        parse_map("")


def test_single_cell_costs_nothing():
    assert part1("7") == 0
    assert part2("7") == 0


def test_straight_row_within_run_limit():
    assert part1("123") == 5


def test_row_longer_than_run_is_unreachable():
    assert part1("11111") is None


def test_ultra_crucible_cannot_make_short_run():
    assert part2("123") is None


def test_invalid_run_limits():
    with pytest.raises(ValueError):
        min_heat_loss("12", 3, 2)
    with pytest.raises(ValueError):
        min_heat_loss("12", 0, 2)


def test_wider_runs_never_cost_more():
    assert min_heat_loss(EXAMPLE, 1, 10) <= part1(EXAMPLE)


def test_node_ordering_and_equality():
    assert Node(0, 1, False) < Node(1, 0, False)
    assert Node(2, 3, True) == Node(2, 3, True)
    assert len({Node(2, 3, True), Node(2, 3, True), Node(2, 3, False)}) == 2