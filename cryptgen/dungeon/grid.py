"""Sparse tile store for a generated layout.

Cells live in a dict keyed by ``(x, y)``; anything not stored is EMPTY. Wings
and wall rings may legitimately land at negative coordinates, so the grid is
unbounded and tracks the rectangle of painted cells separately.
"""
from __future__ import annotations

from typing import Dict, Iterator, List, NamedTuple, Optional, Tuple

from .tiles import EMPTY, FLOOR, WALL

Coord = Tuple[int, int]

NEIGHBOR_OFFSETS: Tuple[Coord, ...] = ((0, 1), (0, -1), (-1, 0), (1, 0))


class Bounds(NamedTuple):
    """Inclusive rectangle of cells."""

    min_x: int
    min_y: int
    max_x: int
    max_y: int

    @property
    def width(self) -> int:
        return self.max_x - self.min_x + 1

    @property
    def height(self) -> int:
        return self.max_y - self.min_y + 1

    def expanded(self, margin: int) -> "Bounds":
        return Bounds(self.min_x - margin, self.min_y - margin, self.max_x + margin, self.max_y + margin)

    def cells(self) -> Iterator[Coord]:
        for y in range(self.min_y, self.max_y + 1):
            for x in range(self.min_x, self.max_x + 1):
                yield x, y

    def to_dict(self):
        return {"min_x": self.min_x, "min_y": self.min_y, "max_x": self.max_x, "max_y": self.max_y}


class Grid:
    __slots__ = ("_cells", "bounds")

    def __init__(self):
        self._cells: Dict[Coord, str] = {}
        self.bounds: Optional[Bounds] = None

    def __len__(self) -> int:
        return len(self._cells)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._cells == other._cells and self.bounds == other.bounds

    def get(self, x: int, y: int) -> str:
        return self._cells.get((x, y), EMPTY)

    def clear(self) -> None:
        self._cells.clear()
        self.bounds = None

    def paint(self, x: int, y: int) -> bool:
        """Set a cell to FLOOR if it is currently EMPTY. Returns True when it changed."""
        if (x, y) in self._cells:
            return False
        self._cells[(x, y)] = FLOOR
        return True

    def paint_rect(self, x: int, y: int, w: int, h: int) -> int:
        painted = 0
        for ix in range(x, x + w):
            for iy in range(y, y + h):
                if self.paint(ix, iy):
                    painted += 1
        return painted

    def set_wall(self, x: int, y: int) -> bool:
        """Set a cell to WALL only if it is currently EMPTY."""
        if (x, y) in self._cells:
            return False
        self._cells[(x, y)] = WALL
        return True

    def is_walkable(self, x: int, y: int, blocking: str = WALL) -> bool:
        tile = self._cells.get((x, y), EMPTY)
        return tile != EMPTY and tile != blocking

    def neighbors(self, x: int, y: int) -> Iterator[Coord]:
        for dx, dy in NEIGHBOR_OFFSETS:
            yield x + dx, y + dy

    def has_floor_neighbor(self, x: int, y: int) -> bool:
        return any(self._cells.get(n) == FLOOR for n in self.neighbors(x, y))

    def compress_bounds(self) -> Optional[Bounds]:
        """Recompute ``bounds`` as the tight rectangle around every non-empty cell."""
        if not self._cells:
            self.bounds = None
            return None
        xs = [x for x, _ in self._cells]
        ys = [y for _, y in self._cells]
        self.bounds = Bounds(min(xs), min(ys), max(xs), max(ys))
        return self.bounds

    def items(self) -> Iterator[Tuple[Coord, str]]:
        return iter(self._cells.items())

    def count(self, tile: str) -> int:
        return sum(1 for t in self._cells.values() if t == tile)

    def copy(self) -> "Grid":
        other = Grid()
        other._cells = dict(self._cells)
        other.bounds = self.bounds
        return other

    def rows(self, bounds: Optional[Bounds] = None) -> List[str]:
        """Tile chars across ``bounds`` (defaults to the tracked bounds), top row = min_y."""
        area = bounds or self.bounds
        if area is None:
            return []
        return [
            "".join(self.get(x, y) for x in range(area.min_x, area.max_x + 1))
            for y in range(area.min_y, area.max_y + 1)
        ]


__all__ = ["Grid", "Bounds", "Coord", "NEIGHBOR_OFFSETS"]
