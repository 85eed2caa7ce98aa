"""Basic divide-and-conquer routines: maximum, binary search and sum."""

from __future__ import annotations

from collections.abc import Sequence


def find_max(values: Sequence[int]) -> int:
    """Return the largest element by splitting the sequence in halves."""
    if not values:
        raise ValueError("find_max() arg is an empty sequence")

    def _max(lo: int, hi: int) -> int:
        if lo == hi:
            return values[lo]
        mid = (lo + hi) // 2
        left_max = _max(lo, mid)
        right_max = _max(mid + 1, hi)
        return left_max if left_max > right_max else right_max

    return _max(0, len(values) - 1)


def binary_search(values: Sequence[int], target: int) -> int | None:
    """Return an index of ``target`` in the ascending ``values``, or None."""

    def _search(lo: int, hi: int) -> int | None:
        if lo > hi:
            return None
        mid = lo + (hi - lo) // 2
        if values[mid] == target:
            return mid
        if values[mid] > target:
            return _search(lo, mid - 1)
        return _search(mid + 1, hi)

    return _search(0, len(values) - 1)


def array_sum(values: Sequence[int]) -> int:
    """Return the sum of ``values``, combining the sums of both halves."""
    if not values:
        return 0

    def _sum(lo: int, hi: int) -> int:
        if lo == hi:
            return values[lo]
        mid = (lo + hi) // 2
        return _sum(lo, mid) + _sum(mid + 1, hi)

    return _sum(0, len(values) - 1)