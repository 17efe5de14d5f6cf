"""Longest scenic hike through a forest trail map."""

from __future__ import annotations

Position = tuple[int, int]
Graph = dict[Position, dict[Position, int]]

_TILES = set(".#<>^v")
_SLOPE_STEPS = {">": (1, 0), "<": (-1, 0), "^": (0, -1), "v": (0, 1)}
# Row/column offsets in the order up, down, left, right.
_GRAPH_STEPS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def parse_trail_map(text: str) -> list[str]:
    """Rows of the trail map, checked to be rectangular and made of known tiles."""
    rows = text.splitlines()
    if not rows or not rows[0]:
        raise ValueError("empty trail map")
    width = len(rows[0])
    for row in rows:
        if len(row) != width:
            raise ValueError("rows of the trail map differ in length")
        unknown = set(row) - _TILES
        if unknown:
            raise ValueError(f"invalid tile {sorted(unknown)[0]!r}")
    return rows


def _walk_successors(
    grid: list[str], pos: Position, path: set[Position]
) -> list[Position]:
    x, y = pos
    width, height = len(grid[0]), len(grid)
    tile = grid[y][x]
    slope = _SLOPE_STEPS.get(tile)
    if slope is not None:
        nxt = (x + slope[0], y + slope[1])
        if not (0 <= nxt[0] < width and 0 <= nxt[1] < height):
            raise ValueError(f"slope at {pos} points off the map")
        return [] if nxt in path else [nxt]
    candidates = []
    if x > 0:
        candidates.append((x - 1, y))
    if x < width - 1:
        candidates.append((x + 1, y))
    if y > 0:
        candidates.append((x, y - 1))
    if y < height - 1:
        candidates.append((x, y + 1))
    return [
        (cx, cy)
        for cx, cy in candidates
        if grid[cy][cx] != "#" and (cx, cy) not in path
    ]


def longest_walk(text: str, follow_slopes: bool) -> int:
    """Steps of the longest walk from the top-left gap to the bottom-right gap.

    With ``follow_slopes`` a slope tile forces the next step in its direction;
    without it slopes are walked like open ground. Exhaustive search.
    """
    grid = parse_trail_map(text)
    if not follow_slopes:
        grid = ["".join("." if tile in _SLOPE_STEPS else tile for tile in row) for row in grid]
    if len(grid[0]) < 2:
        raise ValueError("trail map is too narrow")
    start = (1, 0)
    end = (len(grid[0]) - 2, len(grid) - 1)
    if start == end:
        return 0

    best: int | None = None
    path: set[Position] = set()
    trail: list[Position] = []
    stack = [iter(_walk_successors(grid, start, path))]
    while stack:
        nxt = next(stack[-1], None)
        if nxt is None:
            stack.pop()
            if stack:
                path.remove(trail.pop())
            continue
        if nxt in path:
            continue
        path.add(nxt)
        trail.append(nxt)
        if nxt == end:
            best = len(path) if best is None else max(best, len(path))
            path.remove(trail.pop())
            continue
        stack.append(iter(_walk_successors(grid, nxt, path)))

    if best is None:
        raise ValueError("no route reaches the end")
    return best


def junction_graph(text: str) -> tuple[Position, Position, Graph]:
    """Start, end and the weighted graph of junctions, as (row, column) positions.

    Corridors between junctions collapse into edges weighted by their length.
    """
    board = parse_trail_map(text)
    height, width = len(board), len(board[0])
    if "." not in board[0] or "." not in board[-1]:
        raise ValueError("trail map has no entrance or exit")
    start = (0, board[0].index("."))
    end = (height - 1, board[-1].index("."))
    if height < 2:
        raise ValueError("trail map is too short")

    edges: Graph = {}

    def connect(a: Position, b: Position, weight: int) -> None:
        edges.setdefault(a, {})[b] = weight
        edges.setdefault(b, {})[a] = weight

    visited = {start}
    stack: list[tuple[Position, Position, int]] = [(start, (start[0] + 1, start[1]), 1)]
    while stack:
        origin, cur, steps = stack.pop()
        if cur == origin:
            continue
        if cur == end:
            connect(origin, cur, steps)
            continue

        next_nodes = []
        for di, dj in _GRAPH_STEPS:
            ni, nj = cur[0] + di, cur[1] + dj
            if not (0 <= ni < height and 0 <= nj < width):
                raise ValueError(f"trail leaves the map at {cur}")
            if board[ni][nj] != "#":
                next_nodes.append((ni, nj))

        if len(next_nodes) != 2:
            connect(origin, cur, steps)

        if cur in visited:
            continue
        visited.add(cur)

        for nxt in next_nodes:
            if len(next_nodes) == 2:
                stack.append((origin, nxt, steps + 1))
            else:
                stack.append((cur, nxt, 1))

    return start, end, edges


def longest_graph_walk(text: str) -> int:
    """Longest walk ignoring slopes, searched over the junction graph."""
    start, end, edges = junction_graph(text)
    result = 0
    stack: list[tuple[Position, frozenset[Position], int]] = [(start, frozenset([start]), 0)]
    while stack:
        cur, seen, steps = stack.pop()
        for nxt, weight in edges.get(cur, {}).items():
            if nxt == end and steps + weight > result:
                result = steps + weight
                continue
            if nxt in seen:
                continue
            stack.append((nxt, seen | {nxt}, steps + weight))
    return result


def part1(text: str) -> int:
    """Longest hike when slopes must be followed downhill."""
    return longest_walk(text, True)


def part2(text: str) -> int:
    """Longest hike when slopes can be climbed."""
    return longest_graph_walk(text)