"""Single-source shortest paths with negative weights (Bellman-Ford)."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable
from dataclasses import dataclass

Trace = Callable[[str], None]


class NegativeCycleError(ValueError):
    """Raised when a negative cycle is reachable from the source."""


@dataclass(frozen=True)
class BellmanFordResult:
    """Distances (``math.inf`` when unreachable) and predecessors from ``source``."""

    source: int
    distances: tuple[float, ...]
    predecessors: tuple[int | None, ...]

    def path_to(self, vertex: int) -> list[int]:
        """Return the vertices from the source to ``vertex``; empty if unreachable."""
        if self.distances[vertex] == math.inf:
            return []
        path: list[int] = []
        current: int | None = vertex
        while current is not None:
            path.append(current)
            current = self.predecessors[current]
        path.reverse()
        return path


def bellman_ford(
    num_vertices: int,
    edges: Iterable[tuple[int, int, int]],
    source: int,
    trace: Trace | None = None,
) -> BellmanFordResult:
    """Relax every directed edge ``num_vertices - 1`` times, then check for cycles."""
    edge_list = [(u, v, w) for u, v, w in edges]
    if not 0 <= source < num_vertices:
        raise ValueError(f"source {source} is outside 0..{num_vertices - 1}")
    for u, v, _ in edge_list:
        if not (0 <= u < num_vertices and 0 <= v < num_vertices):
            raise ValueError(f"edge {u}->{v} names a vertex outside the graph")

    dist: list[float] = [math.inf] * num_vertices
    prev: list[int | None] = [None] * num_vertices
    dist[source] = 0

    for iteration in range(1, num_vertices):
        if trace:
            trace(f"Iteration {iteration}:")
        for u, v, w in edge_list:
            if dist[u] != math.inf and dist[u] + w < dist[v]:
                dist[v] = dist[u] + w
                prev[v] = u
                if trace:
                    trace(f"Relaxed edge {u}->{v}: dist[{v}] = {dist[v]}")

    for u, v, w in edge_list:
        if dist[u] != math.inf and dist[u] + w < dist[v]:
            raise NegativeCycleError("negative cycle reachable from the source")

    return BellmanFordResult(source, tuple(dist), tuple(prev))