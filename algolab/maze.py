"""Grid maze escape by depth-first backtracking."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

Trace = Callable[[str], None]
Point = tuple[int, int]

# up, right, down, left
_DIRECTIONS: tuple[Point, ...] = ((-1, 0), (0, 1), (1, 0), (0, -1))


class Maze:
    """A rectangular grid where truthy cells are walls; points are ``(row, col)``."""

    def __init__(self, grid: Iterable[Iterable[int]], start: Point, end: Point) -> None:
        self.grid = tuple(tuple(bool(cell) for cell in row) for row in grid)
        if not self.grid or not self.grid[0]:
            raise ValueError("maze grid must not be empty")
        if any(len(row) != len(self.grid[0]) for row in self.grid):
            raise ValueError("maze rows must all have the same length")
        self.rows = len(self.grid)
        self.cols = len(self.grid[0])
        self.start = tuple(start)
        self.end = tuple(end)

    def is_open(self, row: int, col: int) -> bool:
        """Return True for an in-bounds cell that is not a wall."""
        return 0 <= row < self.rows and 0 <= col < self.cols and not self.grid[row][col]

    def solve(self, trace: Trace | None = None) -> list[Point] | None:
        """Return the first path found trying up, right, down, left, or None.

        Reaching the end point ends the search even if it lies on a wall.
        """
        if self.start == self.end:
            return [self.start]
        if not self.is_open(*self.start):
            return None

        path: list[Point] = [self.start]
        next_dir = [0]
        visited = {self.start}
        if trace:
            trace(f"Current position: {self.start}")

        while path:
            row, col = path[-1]
            d = next_dir[-1]
            if d == len(_DIRECTIONS):
                path.pop()
                next_dir.pop()
                if trace:
                    trace(f"Backtracking: ({row}, {col})")
                continue
            next_dir[-1] += 1
            dr, dc = _DIRECTIONS[d]
            nxt = (row + dr, col + dc)
            if trace:
                trace(f"Trying direction {d} {nxt}")
            if nxt == self.end:
                path.append(nxt)
                return path
            if nxt not in visited and self.is_open(*nxt):
                visited.add(nxt)
                path.append(nxt)
                next_dir.append(0)
                if trace:
                    trace(f"Current position: {nxt}")
        return None

    def render(self, path: Sequence[Point] | None = None) -> str:
        """Draw the maze: S start, E end, * path, # wall, . open."""
        on_path = set(path or ())
        lines = []
        for r, row in enumerate(self.grid):
            cells = []
            for c, wall in enumerate(row):
                if (r, c) == self.start:
                    mark = "S"
                elif (r, c) == self.end:
                    mark = "E"
                elif (r, c) in on_path:
                    mark = "*"
                elif wall:
                    mark = "#"
                else:
                    mark = "."
                cells.append(f" {mark} ")
            lines.append("".join(cells))
        return "\n".join(lines)