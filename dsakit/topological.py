"""Topological ordering: course schedules, cycle detection and safe nodes."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterable, Sequence


def _kahn(count: int, edges: Sequence[Sequence[int]]) -> list[int]:
    """Return nodes in Kahn order; fewer than ``count`` means a cycle."""
    indegree = [0] * count
    for targets in edges:
        for target in targets:
            indegree[target] += 1
    queue = deque(node for node in range(count) if indegree[node] == 0)
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for target in edges[node]:
            indegree[target] -= 1
            if indegree[target] == 0:
                queue.append(target)
    return order


def _course_graph(num_courses: int, prerequisites: Iterable[Sequence[int]]) -> list[list[int]]:
    dependents: list[list[int]] = [[] for _ in range(num_courses)]
    for course, required in prerequisites:
        dependents[required].append(course)
    return dependents


def find_order(num_courses: int, prerequisites: Iterable[Sequence[int]]) -> list[int]:
    """Return an order to take every course, or an empty list if none exists.

    Each prerequisite pair ``(a, b)`` means course ``b`` comes before ``a``.
    """
    order = _kahn(num_courses, _course_graph(num_courses, prerequisites))
    return order if len(order) == num_courses else []


def can_finish(num_courses: int, prerequisites: Iterable[Sequence[int]]) -> bool:
    """Return True if every course can be taken given the prerequisites."""
    order = _kahn(num_courses, _course_graph(num_courses, prerequisites))
    return len(order) == num_courses


def has_cycle(adj: Sequence[Iterable[int]]) -> bool:
    """Return True if the directed graph given as adjacency lists has a cycle."""
    edges = [list(targets) for targets in adj]
    return len(_kahn(len(edges), edges)) != len(edges)


def eventual_safe_nodes(graph: Sequence[Iterable[int]]) -> list[int]:
    """Return, in ascending order, the nodes from which every path ends at a terminal node."""
    count = len(graph)
    reversed_edges: list[list[int]] = [[] for _ in range(count)]
    for node, targets in enumerate(graph):
        for target in targets:
            reversed_edges[target].append(node)
    return sorted(_kahn(count, reversed_edges))


def topological_sort(adj: Sequence[Iterable[int]]) -> list[int]:
    """Return a topological order found by depth-first search.

    Searches start from each unvisited node in index order; the order is
    the reverse of the finishing order.
    """
    edges = [list(targets) for targets in adj]
    visited = [False] * len(edges)
    finished: list[int] = []
    for start in range(len(edges)):
        if visited[start]:
            continue
        visited[start] = True
        stack = [(start, iter(edges[start]))]
        while stack:
            node, neighbours = stack[-1]
            for neighbour in neighbours:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    stack.append((neighbour, iter(edges[neighbour])))
                    break
            else:
                stack.pop()
                finished.append(node)
    finished.reverse()
    return finished


def main(argv: Sequence[str] | None = None) -> int:
    """Read a graph and print a topological order of its nodes.

    Input is the node count and edge count, then one ``u v`` pair per edge.
    It is read from the file named by the first argument, or else from
    standard input.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if args:
        with open(args[0], encoding="utf-8") as handle:
            text = handle.read()
    else:
        text = sys.stdin.read()
    numbers = [int(token) for token in text.split()]
    if len(numbers) < 2:
        raise ValueError("expected a node count and an edge count")
    count, edge_count = numbers[0], numbers[1]
    pairs = numbers[2:2 + 2 * edge_count]
    if len(pairs) != 2 * edge_count:
        raise ValueError(f"expected {edge_count} edges")
    adj: list[list[int]] = [[] for _ in range(count)]
    for source, target in zip(pairs[::2], pairs[1::2]):
        adj[source].append(target)
    print(" ".join(str(node) for node in topological_sort(adj)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())