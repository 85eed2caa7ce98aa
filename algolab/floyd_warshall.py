"""All-pairs shortest paths with path reconstruction (Floyd-Warshall)."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

Trace = Callable[[str], None]


def _render_matrix(dist: Sequence[Sequence[float]]) -> str:
    size = len(dist)
    lines = ["    " + "".join(f"{i:4d}" for i in range(size))]
    for i, row in enumerate(dist):
        cells = "".join(" INF" if d == math.inf else f"{d:4d}" for d in row)
        lines.append(f"{i:2d}: {cells}")
    return "\n".join(lines)


@dataclass(frozen=True)
class AllPairsPaths:
    """Distance matrix (``math.inf`` when unreachable) and next-hop matrix."""

    distances: tuple[tuple[float, ...], ...]
    next_hop: tuple[tuple[int | None, ...], ...]

    def path(self, start: int, end: int) -> list[int]:
        """Return the vertices from ``start`` to ``end``; empty when there is no path."""
        if self.next_hop[start][end] is None:
            return [start] if start == end else []
        route = [start]
        current = start
        while current != end:
            current = self.next_hop[current][end]
            if current is None or len(route) > len(self.distances):
                raise ValueError("path runs through a negative cycle")
            route.append(current)
        return route

    def has_negative_cycle(self) -> bool:
        """Return True when some vertex reaches itself at negative cost."""
        return any(self.distances[i][i] < 0 for i in range(len(self.distances)))


def floyd_warshall(
    num_vertices: int,
    edges: Iterable[tuple[int, int, int]],
    trace: Trace | None = None,
) -> AllPairsPaths:
    """Compute shortest distances between every ordered pair of vertices.

    Edges are directed; a later edge between the same pair replaces an earlier one.
    """
    if num_vertices < 0:
        raise ValueError(f"num_vertices must be non-negative, got {num_vertices}")
    dist: list[list[float]] = [
        [0 if i == j else math.inf for j in range(num_vertices)]
        for i in range(num_vertices)
    ]
    for u, v, w in edges:
        if not (0 <= u < num_vertices and 0 <= v < num_vertices):
            raise ValueError(f"edge {u}->{v} names a vertex outside the graph")
        dist[u][v] = w

    nxt: list[list[int | None]] = [
        [j if i != j and dist[i][j] != math.inf else None for j in range(num_vertices)]
        for i in range(num_vertices)
    ]

    for k in range(num_vertices):
        if trace:
            trace(f"Using intermediate vertex {k}:")
        for i in range(num_vertices):
            for j in range(num_vertices):
                if dist[i][k] == math.inf or dist[k][j] == math.inf:
                    continue
                new_dist = dist[i][k] + dist[k][j]
                if new_dist < dist[i][j]:
                    dist[i][j] = new_dist
                    nxt[i][j] = nxt[i][k]
                    if trace:
                        trace(f"{i}->{j} updated: {new_dist} (via {k})")
        if trace:
            trace(_render_matrix(dist))

    return AllPairsPaths(
        tuple(tuple(row) for row in dist),
        tuple(tuple(row) for row in nxt),
    )