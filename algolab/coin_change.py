"""Greedy change making: take as many of each denomination as fit, in order."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

KRW_DENOMINATIONS: tuple[int, ...] = (500, 100, 50, 10, 1)


@dataclass(frozen=True)
class ChangeResult:
    """How many of each denomination were used and what could not be paid out."""

    amount: int
    denominations: tuple[int, ...]
    counts: tuple[int, ...]
    remaining: int

    def total_coins(self) -> int:
        """Return the number of coins handed out."""
        return sum(self.counts)


def make_change(
    amount: int, denominations: Iterable[int] = KRW_DENOMINATIONS
) -> ChangeResult:
    """Pay ``amount`` greedily, visiting ``denominations`` in the given order.

    The order should run from the largest coin to the smallest. Whatever cannot
    be paid with the coins is reported in ``remaining``.
    """
    coins = tuple(denominations)
    if amount < 0:
        raise ValueError(f"amount must be non-negative, got {amount}")
    for coin in coins:
        if coin <= 0:
            raise ValueError(f"denominations must be positive, got {coin}")

    remaining = amount
    counts: list[int] = []
    for coin in coins:
        used, remaining = divmod(remaining, coin)
        counts.append(used)
    return ChangeResult(amount, coins, tuple(counts), remaining)