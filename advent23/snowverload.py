"""Splitting a component wiring diagram into two groups by cutting three wires."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable, Iterable
from typing import TypeVar

Node = TypeVar("Node", bound=Hashable)

NameGraph = dict[str, set[str]]
IdGraph = dict[int, set[int]]


def _split_line(line: str) -> tuple[str, list[str]]:
    name, sep, rest = line.partition(": ")
    if not sep or not name:
        raise ValueError(f"malformed wiring line {line!r}")
    return name, rest.split(" ")


def parse_graph(text: str) -> NameGraph:
    """Undirected graph of component names, each mapped to its neighbours."""
    graph: NameGraph = {}
    for line in text.splitlines():
        name, connected = _split_line(line)
        for other in connected:
            graph.setdefault(name, set()).add(other)
            graph.setdefault(other, set()).add(name)
    return graph


def graph_from_input(text: str) -> IdGraph:
    """Undirected graph with components numbered in order of first appearance.

    On each line the connected components are numbered before the component
    that names the line.
    """
    ids: dict[str, int] = {}
    graph: IdGraph = {}
    for line in text.splitlines():
        name, connected = _split_line(line)
        for other in connected:
            ids.setdefault(other, len(ids))
        ids.setdefault(name, len(ids))
        start = ids[name]
        ends = [ids[other] for other in connected]
        for end in ends:
            graph.setdefault(end, set()).add(start)
        graph.setdefault(start, set()).update(ends)
    return graph


def shortest_path(graph: dict[Node, set[Node]], start: Node, goal: Node) -> list[Node] | None:
    """Breadth-first shortest path from ``start`` to ``goal``, both included; None if unreachable."""
    parents: dict[Node, Node | None] = {start: None}
    queue = deque([start])
    while queue:
        node = queue.popleft()
        if node == goal:
            path = [node]
            while (parent := parents[path[-1]]) is not None:
                path.append(parent)
            path.reverse()
            return path
        for neighbour in graph.get(node, ()):
            if neighbour not in parents:
                parents[neighbour] = node
                queue.append(neighbour)
    return None


def connected_count(graph: dict[Node, set[Node]]) -> int:
    """Size of the component holding the graph's first node."""
    if not graph:
        raise ValueError("empty graph")
    visited: set[Node] = set()
    stack = [next(iter(graph))]
    while stack:
        node = stack.pop()
        if node in visited:
            continue
        visited.add(node)
        stack.extend(graph[node])
    return len(visited)


def _is_banned(banned: Iterable[tuple[Node, Node]] | set, u: Node, v: Node) -> bool:
    return (v, u) in banned or (u, v) in banned


def find_bridges(
    graph: dict[Node, set[Node]], banned: set[tuple[Node, Node]] = frozenset()
) -> list[tuple[Node, Node]]:
    """Edges whose removal disconnects the graph, ignoring the ``banned`` edges."""
    disc: dict[Node, int] = {}
    low: dict[Node, int] = {}
    time = 0
    bridges: list[tuple[Node, Node]] = []
    for root in graph:
        if root in disc:
            continue
        time += 1
        disc[root] = low[root] = time
        stack = [(root, None, iter(graph[root]))]
        while stack:
            u, parent, neighbours = stack[-1]
            for v in neighbours:
                if _is_banned(banned, u, v):
                    continue
                if v not in disc:
                    time += 1
                    disc[v] = low[v] = time
                    stack.append((v, u, iter(graph[v])))
                    break
                if v != parent:
                    low[u] = min(low[u], disc[v])
            else:
                stack.pop()
                if parent is not None:
                    low[parent] = min(low[parent], low[u])
                    if low[u] > disc[parent]:
                        bridges.append((parent, u))
    return bridges


def search_cut(graph: NameGraph, skip: int = 0) -> list[tuple[str, str]]:
    """Three wires whose removal splits the graph, found by removing pairs and looking for a bridge.

    Pairs are tried in sorted order; the first ``skip - 1`` pairs are passed
    over. Returns the bridges found followed by the two removed wires, or an
    empty list when no pair leaves a bridge.
    """
    cables = sorted({tuple(sorted((key, value))) for key, values in graph.items() for value in values})
    count = 0
    for x, first in enumerate(cables):
        for second in cables[x:]:
            count += 1
            if count < skip:
                continue
            banned = {first, second, first[::-1], second[::-1]}
            bridges = find_bridges(graph, banned)
            if bridges:
                return bridges + [first, second]
    return []


def group_size(graph: dict[Node, set[Node]], start: Node, banned: set[tuple[Node, Node]]) -> int:
    """Number of nodes reachable from ``start`` without crossing a ``banned`` edge."""
    group = {start}
    frontier = {start}
    while frontier:
        neighbours = {
            neighbour
            for member in frontier
            for neighbour in graph[member]
            if neighbour not in group and (member, neighbour) not in banned
        }
        group |= neighbours
        frontier = neighbours
    return len(group)


def part1(text: str) -> int:
    """Product of the two group sizes after cutting the three wires; 0 if no such cut exists."""
    graph = graph_from_input(text)
    for target in range(1, len(graph)):
        paths = []
        for _ in range(3):
            path = shortest_path(graph, 0, target)
            if path is None:
                raise ValueError(f"component {target} is not connected to component 0")
            for a, b in zip(path, path[1:]):
                graph[a].discard(b)
                graph[b].discard(a)
            paths.append(path)

        if shortest_path(graph, 0, target) is None:
            size_a = connected_count(graph)
            return size_a * (len(graph) - size_a)

        for path in paths:
            for a, b in zip(path, path[1:]):
                graph[a].add(b)
                graph[b].add(a)
    return 0