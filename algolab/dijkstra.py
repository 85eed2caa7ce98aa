"""Single-source shortest paths by Dijkstra's greedy vertex selection."""

from __future__ import annotations

import math
from dataclasses import dataclass


class Graph:
    """Adjacency-matrix graph; missing edges weigh ``math.inf``."""

    def __init__(self, num_vertices: int, directed: bool = False) -> None:
        if num_vertices < 0:
            raise ValueError(f"num_vertices must be non-negative, got {num_vertices}")
        self.num_vertices = num_vertices
        self.directed = directed
        self._matrix: list[list[float]] = [
            [0 if i == j else math.inf for j in range(num_vertices)]
            for i in range(num_vertices)
        ]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.num_vertices:
            raise ValueError(f"vertex {vertex} is outside 0..{self.num_vertices - 1}")

    def add_edge(self, src: int, dest: int, weight: int) -> None:
        """Set the edge weight; an undirected graph gets both directions."""
        self._check(src)
        self._check(dest)
        self._matrix[src][dest] = weight
        if not self.directed:
            self._matrix[dest][src] = weight

    def weight(self, src: int, dest: int) -> float:
        """Return the weight of the edge, ``math.inf`` if there is none."""
        self._check(src)
        self._check(dest)
        return self._matrix[src][dest]


@dataclass(frozen=True)
class ShortestPaths:
    """Distances (``math.inf`` when unreachable) and parents from ``start``."""

    start: int
    distances: tuple[float, ...]
    parents: tuple[int | None, ...]

    def path_to(self, vertex: int) -> list[int]:
        """Return the vertices from the start to ``vertex``; empty if unreachable."""
        if self.distances[vertex] == math.inf:
            return []
        path: list[int] = []
        current: int | None = vertex
        while current is not None:
            path.append(current)
            current = self.parents[current]
        path.reverse()
        return path


def dijkstra(graph: Graph, start: int) -> ShortestPaths:
    """Repeatedly settle the closest unvisited vertex and relax its edges."""
    graph._check(start)
    n = graph.num_vertices
    dist: list[float] = [math.inf] * n
    parent: list[int | None] = [None] * n
    visited = [False] * n
    dist[start] = 0

    for _ in range(n - 1):
        candidates = [v for v in range(n) if not visited[v] and dist[v] < math.inf]
        if not candidates:
            break
        u = min(candidates, key=lambda v: dist[v])
        visited[u] = True
        for v in range(n):
            w = graph.weight(u, v)
            if not visited[v] and w != math.inf and dist[u] + w < dist[v]:
                dist[v] = dist[u] + w
                parent[v] = u

    return ShortestPaths(start, tuple(dist), tuple(parent))