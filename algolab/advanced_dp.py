"""Edit distance, matrix-chain ordering and optimal binary search trees."""

from __future__ import annotations

import enum
import math
from collections.abc import Iterable, Sequence
from itertools import accumulate


class EditOperation(enum.Enum):
    """One step of an edit script."""

    MATCH = "M"
    DELETE = "D"
    INSERT = "I"
    REPLACE = "R"


def _edit_tables(first: str, second: str) -> tuple[list[list[int]], list[list[EditOperation]]]:
    m, n = len(first), len(second)
    dp = [[0] * (n + 1) for _ in range(m + 1)]
    ops = [[EditOperation.DELETE] * (n + 1) for _ in range(m + 1)]
    for i in range(m + 1):
        dp[i][0] = i
        ops[i][0] = EditOperation.DELETE
    for j in range(n + 1):
        dp[0][j] = j
        ops[0][j] = EditOperation.INSERT

    for i, a in enumerate(first, start=1):
        for j, b in enumerate(second, start=1):
            if a == b:
                dp[i][j] = dp[i - 1][j - 1]
                ops[i][j] = EditOperation.MATCH
                continue
            dp[i][j] = 1 + min(dp[i - 1][j], dp[i][j - 1], dp[i - 1][j - 1])
            if dp[i][j] == 1 + dp[i - 1][j]:
                ops[i][j] = EditOperation.DELETE
            elif dp[i][j] == 1 + dp[i][j - 1]:
                ops[i][j] = EditOperation.INSERT
            else:
                ops[i][j] = EditOperation.REPLACE
    return dp, ops


def edit_distance(first: str, second: str) -> int:
    """Return the fewest insertions, deletions and replacements turning one into the other."""
    dp, _ = _edit_tables(first, second)
    return dp[-1][-1]


def edit_script(
    first: str, second: str
) -> list[tuple[EditOperation, str | None, str | None]]:
    """Return the edit steps from start to end as ``(operation, source char, target char)``.

    Deletions have no target character and insertions no source character;
    deletion is preferred over insertion, and insertion over replacement.
    """
    _, ops = _edit_tables(first, second)
    i, j = len(first), len(second)
    steps: list[tuple[EditOperation, str | None, str | None]] = []
    while i > 0 or j > 0:
        op = ops[i][j]
        if op is EditOperation.DELETE:
            steps.append((op, first[i - 1], None))
            i -= 1
        elif op is EditOperation.INSERT:
            steps.append((op, None, second[j - 1]))
            j -= 1
        else:
            steps.append((op, first[i - 1], second[j - 1]))
            i -= 1
            j -= 1
    steps.reverse()
    return steps


def _chain_tables(dimensions: Iterable[int]) -> tuple[list[list[float]], list[list[int]]]:
    dims = list(dimensions)
    n = len(dims)
    if n < 2:
        raise ValueError("at least two dimensions (one matrix) are required")
    if any(d <= 0 for d in dims):
        raise ValueError("dimensions must be positive")
    dp: list[list[float]] = [[0] * n for _ in range(n)]
    bracket = [[0] * n for _ in range(n)]
    for length in range(2, n):
        for i in range(1, n - length + 1):
            j = i + length - 1
            best = math.inf
            for k in range(i, j):
                cost = dp[i][k] + dp[k + 1][j] + dims[i - 1] * dims[k] * dims[j]
                if cost < best:
                    best = cost
                    bracket[i][j] = k
            dp[i][j] = best
    return dp, bracket


def matrix_chain_cost(dimensions: Sequence[int]) -> int:
    """Return the fewest scalar multiplications for the chain; matrix i is dims[i-1] x dims[i]."""
    dp, _ = _chain_tables(dimensions)
    return int(dp[1][len(dp) - 1])


def matrix_chain_parenthesization(dimensions: Sequence[int]) -> str:
    """Return the cheapest bracketing, naming the matrices A1, A2, ..."""
    dp, bracket = _chain_tables(dimensions)

    def _paren(i: int, j: int) -> str:
        if i == j:
            return f"A{i}"
        k = bracket[i][j]
        return f"({_paren(i, k)}{_paren(k + 1, j)})"

    return _paren(1, len(dp) - 1)


def optimal_bst_cost(frequencies: Iterable[float]) -> float:
    """Return the least expected search cost over sorted keys with these frequencies.

    A key at depth d (the root at depth 1) costs its frequency times d.
    """
    freq = [float(f) for f in frequencies]
    if any(f < 0 for f in freq):
        raise ValueError("frequencies must be non-negative")
    n = len(freq)
    prefix = [0.0, *accumulate(freq)]
    dp = [[0.0] * (n + 1) for _ in range(n + 1)]
    for i, f in enumerate(freq):
        dp[i][i + 1] = f
    for length in range(2, n + 1):
        for i in range(n - length + 1):
            j = i + length
            dp[i][j] = min(dp[i][r] + dp[r + 1][j] for r in range(i, j)) + (
                prefix[j] - prefix[i]
            )
    return dp[0][n]