"""Closest pair of points, Strassen matrix multiplication and modular powers."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from itertools import combinations

Matrix = list[list[int]]

_NAIVE_LIMIT = 64


@dataclass(frozen=True)
class Point:
    """A point in the plane."""

    x: float
    y: float


@dataclass(frozen=True)
class PointPair:
    """Two points and the distance between them."""

    p1: Point
    p2: Point
    distance: float


def distance(p1: Point, p2: Point) -> float:
    """Return the Euclidean distance between two points."""
    return math.sqrt((p1.x - p2.x) ** 2 + (p1.y - p2.y) ** 2)


def _as_point(p: Point | tuple[float, float]) -> Point:
    return p if isinstance(p, Point) else Point(*p)


def _brute_force(points: Sequence[Point]) -> PointPair:
    best: PointPair | None = None
    for a, b in combinations(points, 2):
        d = distance(a, b)
        if best is None or d < best.distance:
            best = PointPair(a, b, d)
    assert best is not None
    return best


def _strip_closest(strip: list[Point], best: PointPair) -> PointPair:
    limit = best.distance
    strip.sort(key=lambda p: p.y)
    for i, a in enumerate(strip):
        for b in strip[i + 1 :]:
            if b.y - a.y >= limit:
                break
            d = distance(a, b)
            if d < best.distance:
                best = PointPair(a, b, d)
    return best


def _closest(points: list[Point]) -> PointPair:
    n = len(points)
    if n <= 3:
        return _brute_force(points)
    mid = n // 2
    mid_point = points[mid]
    left = _closest(points[:mid])
    right = _closest(points[mid:])
    best = left if left.distance < right.distance else right
    strip = [p for p in points if abs(p.x - mid_point.x) < best.distance]
    candidate = _strip_closest(strip, best)
    return candidate if candidate.distance < best.distance else best


def closest_pair(points: Iterable[Point | tuple[float, float]]) -> PointPair:
    """Find the two nearest points by splitting the set at the median x."""
    ordered = sorted((_as_point(p) for p in points), key=lambda p: p.x)
    if len(ordered) < 2:
        raise ValueError("closest_pair() needs at least two points")
    return _closest(ordered)


def _add(a: Matrix, b: Matrix) -> Matrix:
    return [[x + y for x, y in zip(ra, rb)] for ra, rb in zip(a, b)]


def _sub(a: Matrix, b: Matrix) -> Matrix:
    return [[x - y for x, y in zip(ra, rb)] for ra, rb in zip(a, b)]


def _naive(a: Matrix, b: Matrix) -> Matrix:
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, col)) for col in columns] for row in a]


def _strassen(a: Matrix, b: Matrix) -> Matrix:
    n = len(a)
    if n <= _NAIVE_LIMIT:
        return _naive(a, b)
    if n % 2:
        padded_a = [row + [0] for row in a] + [[0] * (n + 1)]
        padded_b = [row + [0] for row in b] + [[0] * (n + 1)]
        product = _strassen(padded_a, padded_b)
        return [row[:n] for row in product[:n]]

    k = n // 2
    a11 = [row[:k] for row in a[:k]]
    a12 = [row[k:] for row in a[:k]]
    a21 = [row[:k] for row in a[k:]]
    a22 = [row[k:] for row in a[k:]]
    b11 = [row[:k] for row in b[:k]]
    b12 = [row[k:] for row in b[:k]]
    b21 = [row[:k] for row in b[k:]]
    b22 = [row[k:] for row in b[k:]]

    p1 = _strassen(_add(a11, a22), _add(b11, b22))
    p2 = _strassen(_add(a21, a22), b11)
    p3 = _strassen(a11, _sub(b12, b22))
    p4 = _strassen(a22, _sub(b21, b11))
    p5 = _strassen(_add(a11, a12), b22)
    p6 = _strassen(_sub(a21, a11), _add(b11, b12))
    p7 = _strassen(_sub(a12, a22), _add(b21, b22))

    c11 = _add(_sub(_add(p1, p4), p5), p7)
    c12 = _add(p3, p5)
    c21 = _add(p2, p4)
    c22 = _add(_sub(_add(p1, p3), p2), p6)

    top = [l + r for l, r in zip(c11, c12)]
    bottom = [l + r for l, r in zip(c21, c22)]
    return top + bottom


def strassen_multiply(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """Multiply two square matrices of the same size with Strassen's scheme.

    Blocks of size 64 or less are multiplied directly.
    """
    n = len(a)
    if len(b) != n:
        raise ValueError("matrices must have the same size")
    left = [list(row) for row in a]
    right = [list(row) for row in b]
    if any(len(row) != n for row in left) or any(len(row) != n for row in right):
        raise ValueError("matrices must be square")
    if n == 0:
        return []
    return _strassen(left, right)


def power_mod(base: int, exponent: int, modulus: int) -> int:
    """Return ``base ** exponent % modulus`` by halving the exponent.

    An exponent of 0 yields 1 whatever the modulus.
    """
    if exponent < 0:
        raise ValueError(f"exponent must be non-negative, got {exponent}")
    if modulus <= 0:
        raise ValueError(f"modulus must be positive, got {modulus}")

    def _power(exp: int) -> int:
        if exp == 0:
            return 1
        if exp == 1:
            return base % modulus
        half = _power(exp // 2)
        result = half * half % modulus
        if exp % 2 == 1:
            result = result * base % modulus
        return result

    return _power(exponent)