import pytest

from advent23.hiking import (
    junction_graph,
    longest_graph_walk,
    longest_walk,
    parse_trail_map,
    part1,
    part2,
)

EXAMPLE = """#.#####################
#.......#########...###
#######.#########.#.###
###.....#.>.>.###.#.###
###v#####.#v#.###.#.###
###.>...#.#.#.....#...#
###v###.#.#.#########.#
###...#.#.#.......#...#
#####.#.#.#######.#.###
#.....#.#.#.......#...#
#.#####.#.#.#########v#
#.#...#...#...###...>.#
#.#.#v#######v###.###v#
#...#.>.#...>.>.#.###.#
#####v#.#.###v#.#.###.#
#.....#...#...#.#.#...#
#.#########.###.#.#.###
#...###...#...#...#.###
###.###.#.###v#####v###
#...#...#.#.>.>.#.>.###
#.###.###.#.###.#.#v###
#.....###...###...#...#
#####################.#"""

CORRIDOR = """#.###
#...#
###.#"""


def test_part1_example():
    assert part1(EXAMPLE) == 94


def test_slow_part2_example():
    assert longest_walk(EXAMPLE, False) == 154


def test_part2_example():
    assert part2(EXAMPLE) == 154


def test_graph_walk_matches_brute_force():
    assert longest_graph_walk(EXAMPLE) == longest_walk(EXAMPLE, False)


def test_corridor_length():
    assert longest_walk(CORRIDOR, True) == 4
    assert longest_graph_walk(CORRIDOR) == 4


def test_junction_graph_endpoints_and_symmetry():
    start, end, edges = junction_graph(EXAMPLE)
    assert start == (0, 1)
    assert end == (22, 21)
    assert len(edges[start]) == 1
    for a, neighbours in edges.items():
        for b, weight in neighbours.items():
            assert edges[b][a] == weight


def test_parse_trail_map_rows():
    rows = parse_trail_map(CORRIDOR)
    assert rows == ["#.###", "#...#", "###.#"]


def test_parse_rejects_unknown_tile():
    with pytest.raises(ValueError):
        parse_trail_map("#.#\n#x#")


def test_parse_rejects_ragged_rows():
    with pytest.raises(ValueError):
        parse_trail_map("#.#\n#..#")


def test_no_route_raises():
    with pytest.raises(ValueError):
        longest_walk("#.###\n#####\n###.#", True)