from typing import List, NamedTuple, Sequence, Tuple

from .grid import Coord, Grid
from .rng import SeededRandom
from .rooms import Room


class Corridor(NamedTuple):
    room_a: int
    room_b: int
    x_first: bool
    cells: Tuple[Coord, ...]

    def to_dict(self):
        return {"rooms": [self.room_a, self.room_b], "x_first": self.x_first, "length": len(self.cells)}


def _step(a: int, b: int) -> int:
    return 1 if b > a else -1


def carve_leg(grid: Grid, start: Coord, end: Coord, axis: str, cells: List[Coord]) -> Coord:
    """Paint a straight run along ``axis`` from ``start`` toward ``end``; returns the turn point.

    The run stops one short of the target coordinate, which the next leg (or the
    destination room) covers. Equal coordinates paint nothing.
    """
    x, y = start
    if axis == "x":
        step = _step(x, end[0])
        while x != end[0]:
            grid.paint(x, y)
            cells.append((x, y))
            x += step
    else:
        step = _step(y, end[1])
        while y != end[1]:
            grid.paint(x, y)
            cells.append((x, y))
            y += step
    return x, y


def carve_corridor(grid: Grid, a: Coord, b: Coord, x_first: bool) -> Tuple[Coord, ...]:
    cells: List[Coord] = []
    first, second = ("x", "y") if x_first else ("y", "x")
    turn = carve_leg(grid, a, b, first, cells)
    carve_leg(grid, turn, b, second, cells)
    return tuple(cells)


def connect_rooms(grid: Grid, rooms: Sequence[Room], rng: SeededRandom) -> List[Corridor]:
    """Link room i to room i+1 in placement order with an L-shaped, one-tile corridor.

    One boolean is drawn per pair to pick the leading axis. Fewer than two rooms
    produce no corridors and consume no randomness.
    """
    corridors: List[Corridor] = []
    for i in range(len(rooms) - 1):
        a, b = rooms[i].center, rooms[i + 1].center
        x_first = rng.next_bool()
        corridors.append(Corridor(i, i + 1, x_first, carve_corridor(grid, a, b, x_first)))
    return corridors


__all__ = ["Corridor", "carve_leg", "carve_corridor", "connect_rooms"]
