import pytest

from advent23.snowverload import (
    connected_count,
    find_bridges,
    graph_from_input,
    group_size,
    parse_graph,
    part1,
    search_cut,
    shortest_path,
)

EXAMPLE = """jqt: rhn xhk nvd
rsh: frs pzl lsr
xhk: hfx
cmg: qnr nvd lhk bvb
rhn: xhk bvb hfx
bvb: xhk hfx
pzl: lsr hfx nvd
qnr: nvd
ntq: jqt hfx bvb xhk
nvd: lhk
lsr: lhk
rzs: qnr cmg lsr rsh
frs: qnr lhk lsr
"""

K5 = "a: b c d e\nb: c d e\nc: d e\nd: e"


def test_part1_example():
    assert part1(EXAMPLE) == 54


def test_part1_without_three_cut_is_zero():
    assert part1(K5) == 0


def test_part1_disconnected_raises():
    with pytest.raises(ValueError):
        part1("a: b\nc: d")


def test_parse_graph_is_symmetric():
    graph = parse_graph(EXAMPLE)
    assert len(graph) == 15
    for node, neighbours in graph.items():
        for other in neighbours:
            assert node in graph[other]


def test_parse_graph_malformed():
    with pytest.raises(ValueError):
        parse_graph("abc def")


def test_graph_from_input_numbering():
    assert graph_from_input("a: b c") == {0: {2}, 1: {2}, 2: {0, 1}}


def test_graph_from_input_matches_named_graph_size():
    assert len(graph_from_input(EXAMPLE)) == len(parse_graph(EXAMPLE))


def test_shortest_path_line():
    graph = {1: {2}, 2: {1, 3}, 3: {2, 4}, 4: {3}}
    assert shortest_path(graph, 1, 4) == [1, 2, 3, 4]
    assert shortest_path(graph, 2, 2) == [2]


def test_shortest_path_unreachable():
    assert shortest_path({1: {2}, 2: {1}, 3: set()}, 1, 3) is None


def test_connected_count():
    graph = {1: {2}, 2: {1}, 3: {4}, 4: {3}, 5: set()}
    assert connected_count(graph) == 2


def test_connected_count_empty():
    with pytest.raises(ValueError):
        connected_count({})


def test_find_bridges_path_graph():
    graph = {"a": {"b"}, "b": {"a", "c"}, "c": {"b"}}
    assert {tuple(sorted(edge)) for edge in find_bridges(graph)} == {("a", "b"), ("b", "c")}


def test_find_bridges_triangle_has_none():
    graph = {"a": {"b", "c"}, "b": {"a", "c"}, "c": {"a", "b"}}
    assert find_bridges(graph) == []


def test_find_bridges_with_banned_edge():
    graph = {"a": {"b", "c"}, "b": {"a", "c"}, "c": {"a", "b"}}
    bridges = find_bridges(graph, {("a", "b"), ("b", "a")})
    assert {tuple(sorted(edge)) for edge in bridges} == {("a", "c"), ("b", "c")}


def test_search_cut_finds_example_wires():
    graph = parse_graph(EXAMPLE)
    cut = search_cut(graph)
    assert {tuple(sorted(edge)) for edge in cut} == {("hfx", "pzl"), ("bvb", "cmg"), ("jqt", "nvd")}
    banned = {edge for a, b in cut for edge in ((a, b), (b, a))}
    size = group_size(graph, "jqt", banned)
    assert size * (len(graph) - size) == 54


def test_search_cut_skipping_everything():
    assert search_cut(parse_graph(EXAMPLE), 10**9) == []


def test_group_size_without_bans_is_whole_graph():
    graph = parse_graph(EXAMPLE)
    assert group_size(graph, "rsh", set()) == 15