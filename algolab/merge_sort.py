"""Stable top-down merge sort with an optional step trace."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import Any

Trace = Callable[[str], None]


def _fmt(items: Iterable[Any]) -> str:
    return " ".join(str(item) for item in items)


def _merge_into(arr: list, lo: int, mid: int, hi: int, trace: Trace | None) -> None:
    """Merge the sorted runs ``arr[lo:mid+1]`` and ``arr[mid+1:hi+1]`` in place."""
    left = arr[lo : mid + 1]
    right = arr[mid + 1 : hi + 1]

    if trace:
        trace("Merging subarrays:")
        trace(f"Left:  {_fmt(left)}")
        trace(f"Right: {_fmt(right)}")

    i = j = 0
    k = lo
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            arr[k] = left[i]
            i += 1
        else:
            arr[k] = right[j]
            j += 1
        k += 1
        if trace:
            trace(f"Current array: {_fmt(arr[lo : hi + 1])}")

    tail = left[i:] + right[j:]
    arr[k : k + len(tail)] = tail

    if trace:
        trace(f"Merged result: {_fmt(arr[lo : hi + 1])}")


def merge(left: Sequence[Any], right: Sequence[Any]) -> list:
    """Merge two sorted sequences into one sorted list, keeping ties stable."""
    combined = list(left) + list(right)
    if left and right:
        _merge_into(combined, 0, len(left) - 1, len(combined) - 1, None)
    return combined


def merge_sort(values: Iterable[Any], trace: Trace | None = None) -> list:
    """Return a sorted copy of ``values``; ``trace`` receives each step as text."""
    arr = list(values)

    def _sort(lo: int, hi: int) -> None:
        if lo >= hi:
            return
        if trace:
            trace(f"Dividing array: {_fmt(arr[lo : hi + 1])}")
        mid = lo + (hi - lo) // 2
        _sort(lo, mid)
        _sort(mid + 1, hi)
        _merge_into(arr, lo, mid, hi, trace)

    _sort(0, len(arr) - 1)
    return arr


def is_sorted(values: Sequence[Any]) -> bool:
    """Return True when ``values`` is in non-decreasing order."""
    return all(a <= b for a, b in zip(values, values[1:]))