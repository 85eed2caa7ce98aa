"""N-queens by row-wise backtracking, with board rendering and mirroring."""

from __future__ import annotations

from collections.abc import Iterator, Sequence


def is_safe(placement: Sequence[int], row: int, col: int) -> bool:
    """Return True if a queen at ``(row, col)`` is not attacked by rows above it."""
    for r, c in enumerate(placement[:row]):
        if c == col or abs(c - col) == row - r:
            return False
    return True


def solve_n_queens(n: int) -> Iterator[tuple[int, ...]]:
    """Yield every placement (column per row) in lexicographic order."""
    if n < 0:
        raise ValueError(f"board size must be non-negative, got {n}")
    placement: list[int] = []

    def _place(row: int) -> Iterator[tuple[int, ...]]:
        if row == n:
            yield tuple(placement)
            return
        for col in range(n):
            if is_safe(placement, row, col):
                placement.append(col)
                yield from _place(row + 1)
                placement.pop()

    return _place(0)


def count_solutions(n: int) -> int:
    """Return the number of distinct N-queens placements."""
    return sum(1 for _ in solve_n_queens(n))


def render_board(placement: Sequence[int]) -> str:
    """Draw the board with column and row numbers, ``Q`` for queens and ``.`` elsewhere."""
    size = len(placement)
    header = "   " + "".join(f" {i}" for i in range(size))
    rows = [
        f"{r:2d} " + "".join(" Q" if placement[r] == c else " ." for c in range(size))
        for r in range(size)
    ]
    return "\n".join([header, *rows])


def mirror_horizontal(placement: Sequence[int]) -> tuple[int, ...]:
    """Reflect the board left to right."""
    size = len(placement)
    return tuple(size - 1 - c for c in placement)


def mirror_vertical(placement: Sequence[int]) -> tuple[int, ...]:
    """Reflect the board top to bottom."""
    return tuple(reversed(placement))