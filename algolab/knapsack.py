"""0/1 knapsack solved with a bottom-up dynamic-programming table."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Item:
    """An indivisible item with a weight and a value."""

    name: str
    weight: int
    value: int


@dataclass(frozen=True)
class KnapsackResult:
    """The best total value and the items chosen, in input order."""

    max_value: int
    selected: tuple[Item, ...]

    def total_weight(self) -> int:
        """Return the combined weight of the chosen items."""
        return sum(item.weight for item in self.selected)


def solve_knapsack(items: Iterable[Item], capacity: int) -> KnapsackResult:
    """Choose items of the greatest total value whose weight fits ``capacity``."""
    items = list(items)
    if capacity < 0:
        raise ValueError(f"capacity must be non-negative, got {capacity}")
    for item in items:
        if item.weight < 0:
            raise ValueError(f"item {item.name!r} has a negative weight")

    table = [[0] * (capacity + 1)]
    taken: list[list[bool]] = [[False] * (capacity + 1)]
    for item in items:
        above = table[-1]
        row = list(above)
        chosen = [False] * (capacity + 1)
        for w in range(item.weight, capacity + 1):
            with_item = above[w - item.weight] + item.value
            if with_item > above[w]:
                row[w] = with_item
                chosen[w] = True
        table.append(row)
        taken.append(chosen)

    picked: list[Item] = []
    i, w = len(items), capacity
    while i > 0 and w > 0:
        if taken[i][w]:
            picked.append(items[i - 1])
            w -= items[i - 1].weight
        i -= 1

    return KnapsackResult(table[-1][capacity], tuple(reversed(picked)))