"""Minimum spanning tree by Kruskal's greedy edge selection."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Edge:
    """An undirected weighted edge between two vertices."""

    src: int
    dest: int
    weight: int


class DisjointSet:
    """Union-find over ``0..size-1`` with path compression and union by rank."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        self._parent = list(range(size))
        self._rank = [0] * size

    def _check(self, x: int) -> None:
        if not 0 <= x < len(self._parent):
            raise IndexError(f"element {x} is outside 0..{len(self._parent) - 1}")

    def find(self, x: int) -> int:
        """Return the representative of the set holding ``x``."""
        self._check(x)
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        """Join the sets of ``x`` and ``y``; return False if already joined."""
        root_x = self.find(x)
        root_y = self.find(y)
        if root_x == root_y:
            return False
        if self._rank[root_x] < self._rank[root_y]:
            self._parent[root_x] = root_y
        elif self._rank[root_x] > self._rank[root_y]:
            self._parent[root_y] = root_x
        else:
            self._parent[root_y] = root_x
            self._rank[root_x] += 1
        return True


@dataclass(frozen=True)
class SpanningTree:
    """The chosen edges, in selection order, and their total weight."""

    edges: tuple[Edge, ...]
    total_weight: int


def _as_edge(edge: Edge | tuple[int, int, int]) -> Edge:
    return edge if isinstance(edge, Edge) else Edge(*edge)


def kruskal(num_vertices: int, edges: Iterable[Edge | tuple[int, int, int]]) -> SpanningTree:
    """Pick the lightest edges that close no cycle until ``num_vertices - 1`` are chosen.

    On a disconnected graph the result is a minimum spanning forest.
    """
    ordered = sorted((_as_edge(e) for e in edges), key=lambda e: e.weight)
    for edge in ordered:
        for vertex in (edge.src, edge.dest):
            if not 0 <= vertex < num_vertices:
                raise ValueError(f"edge {edge} names vertex {vertex} outside the graph")

    sets = DisjointSet(num_vertices)
    chosen: list[Edge] = []
    for edge in ordered:
        if len(chosen) >= num_vertices - 1:
            break
        if sets.union(edge.src, edge.dest):
            chosen.append(edge)
    return SpanningTree(tuple(chosen), sum(e.weight for e in chosen))