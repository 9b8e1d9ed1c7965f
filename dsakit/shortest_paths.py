"""Shortest-path problems on weighted graphs, grids and number spaces."""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Iterable, Sequence

_MODULUS = 100_000
_ORTHOGONAL = ((-1, 0), (1, 0), (0, -1), (0, 1))
_ALL_AROUND = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
)


def network_delay_time(times: Iterable[Sequence[int]], n: int, k: int) -> int:
    """Return the time for a signal sent from node ``k`` to reach all ``n`` nodes.

    ``times`` holds directed edges ``(source, target, travel_time)`` between
    nodes labelled 1 to ``n``. Returns -1 if some node is never reached.
    """
    if not 1 <= k <= n:
        raise ValueError(f"source node {k} is not between 1 and {n}")
    graph: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for source, target, weight in times:
        graph[source].append((target, weight))

    dist: list[float] = [math.inf] * (n + 1)
    dist[k] = 0
    heap = [(0, k)]
    while heap:
        cost, node = heapq.heappop(heap)
        if cost > dist[node]:
            continue
        for neighbour, weight in graph[node]:
            candidate = cost + weight
            if candidate < dist[neighbour]:
                dist[neighbour] = candidate
                heapq.heappush(heap, (candidate, neighbour))

    worst = max(dist[1:], default=0)
    return -1 if worst == math.inf else int(worst)


def minimum_effort_path(heights: Sequence[Sequence[int]]) -> int:
    """Return the least effort to walk from the top-left to the bottom-right cell.

    Moves are up, down, left and right. A route's effort is the largest
    absolute height difference between two consecutive cells on it.
    """
    if not heights or not heights[0]:
        raise ValueError("height map must have at least one cell")
    rows, cols = len(heights), len(heights[0])
    effort = [[math.inf] * cols for _ in range(rows)]
    effort[0][0] = 0
    heap = [(0, 0, 0)]
    while heap:
        cost, row, col = heapq.heappop(heap)
        if cost > effort[row][col]:
            continue
        if (row, col) == (rows - 1, cols - 1):
            return int(cost)
        for d_row, d_col in _ORTHOGONAL:
            r, c = row + d_row, col + d_col
            if not (0 <= r < rows and 0 <= c < cols):
                continue
            step = max(cost, abs(heights[r][c] - heights[row][col]))
            if step < effort[r][c]:
                effort[r][c] = step
                heapq.heappush(heap, (step, r, c))
    return int(effort[rows - 1][cols - 1])


def shortest_path_binary_matrix(grid: Sequence[Sequence[int]]) -> int:
    """Return the cell count of the shortest clear path across a square grid.

    Clear cells hold 0. Paths run from the top-left to the bottom-right cell
    in any of the eight directions. Returns -1 if there is no clear path.
    """
    size = len(grid)
    if size == 0:
        raise ValueError("grid must have at least one cell")
    if grid[0][0] == 1:
        return -1
    dist: dict[tuple[int, int], int] = {(0, 0): 1}
    queue = deque([(0, 0)])
    while queue:
        row, col = queue.popleft()
        cost = dist[(row, col)]
        for d_row, d_col in _ALL_AROUND:
            r, c = row + d_row, col + d_col
            if (
                0 <= r < size
                and 0 <= c < size
                and grid[r][c] == 0
                and cost + 1 < dist.get((r, c), math.inf)
            ):
                dist[(r, c)] = cost + 1
                queue.append((r, c))
    return dist.get((size - 1, size - 1), -1)


def dag_shortest_distances(adj: Sequence[Iterable[int]]) -> list[int | None]:
    """Return unit-weight distances from node 0 in a directed acyclic graph.

    Nodes are visited in topological order (Kahn's algorithm). Nodes that
    cannot be reached from node 0 get None.
    """
    count = len(adj)
    if count == 0:
        return []
    edges = [list(targets) for targets in adj]
    indegree = [0] * count
    for targets in edges:
        for target in targets:
            indegree[target] += 1

    distance: list[int | None] = [None] * count
    distance[0] = 0
    queue = deque(node for node in range(count) if indegree[node] == 0)
    while queue:
        node = queue.popleft()
        here = distance[node]
        for neighbour in edges[node]:
            if here is not None:
                there = distance[neighbour]
                if there is None or there > here + 1:
                    distance[neighbour] = here + 1
            indegree[neighbour] -= 1
            if indegree[neighbour] == 0:
                queue.append(neighbour)
    return distance


def minimum_multiplications(factors: Sequence[int], start: int, end: int) -> int:
    """Return the fewest multiplications that turn ``start`` into ``end``.

    Each step multiplies the current number by one of ``factors`` and takes
    the result modulo 100000. Returns -1 if ``end`` cannot be reached.
    """
    if start == end:
        return 0
    steps = {start: 0}
    queue = deque([start])
    while queue:
        node = queue.popleft()
        taken = steps[node] + 1
        for factor in factors:
            number = (node * factor) % _MODULUS
            if number not in steps:
                if number == end:
                    return taken
                steps[number] = taken
                queue.append(number)
    return -1