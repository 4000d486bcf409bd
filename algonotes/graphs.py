"""Directed graph with breadth-first traversal, and articulation points of undirected graphs."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable


class Graph:
    """A directed graph on vertices ``0 .. num_vertices - 1`` kept as adjacency lists."""

    def __init__(self, num_vertices: int) -> None:
        if num_vertices < 0:
            raise ValueError("number of vertices must be non-negative")
        self.num_vertices = num_vertices
        self._adjacency: list[list[int]] = [[] for _ in range(num_vertices)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.num_vertices:
            raise ValueError(f"vertex {vertex} is out of range")

    def add_edge(self, v: int, w: int) -> None:
        """Add the directed edge ``v -> w``."""
        self._check(v)
        self._check(w)
        self._adjacency[v].append(w)

    def bfs(self, start: int) -> list[int]:
        """Return vertices in breadth-first order from ``start``."""
        self._check(start)
        visited = {start}
        queue = deque([start])
        order: list[int] = []
        while queue:
            vertex = queue.popleft()
            order.append(vertex)
            for neighbour in self._adjacency[vertex]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    queue.append(neighbour)
        return order


def articulation_points(
    num_vertices: int, edges: Iterable[tuple[int, int]]
) -> list[int]:
    """Return, in ascending order, the cut vertices of an undirected graph on ``1 .. num_vertices``."""
    adjacency: list[list[int]] = [[] for _ in range(num_vertices + 1)]
    for a, b in edges:
        for vertex in (a, b):
            if not 1 <= vertex <= num_vertices:
                raise ValueError(f"vertex {vertex} is out of range")
        adjacency[a].append(b)
        adjacency[b].append(a)

    discovery: dict[int, int] = {}
    low: dict[int, int] = {}
    parent: dict[int, int | None] = {}
    children: dict[int, int] = {}
    points: set[int] = set()
    timer = 0

    for root in range(1, num_vertices + 1):
        if root in discovery:
            continue
        parent[root] = None
        discovery[root] = low[root] = timer
        children[root] = 0
        timer += 1
        stack = [(root, iter(adjacency[root]))]
        while stack:
            u, neighbours = stack[-1]
            for v in neighbours:
                if v not in discovery:
                    parent[v] = u
                    children[u] += 1
                    children[v] = 0
                    discovery[v] = low[v] = timer
                    timer += 1
                    stack.append((v, iter(adjacency[v])))
                    break
                if v != parent[u]:
                    low[u] = min(low[u], discovery[v])
            else:
                stack.pop()
                p = parent[u]
                if p is None:
                    continue
                low[p] = min(low[p], low[u])
                if parent[p] is None:
                    if children[p] > 1:
                        points.add(p)
                elif low[u] >= discovery[p]:
                    points.add(p)

    return sorted(points)