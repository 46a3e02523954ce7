"""Room painting with optional wings.

A wing is a second rectangle glued flush to one side of an accepted room,
turning it into an L or T shape. Wings paint straight onto the grid without
another overlap test, so a wing may run into a corridor or a neighbouring
room; the padding guarantee only covers the base rectangles.
"""
from __future__ import annotations

from typing import List, Optional

from .grid import Grid
from .rng import SeededRandom
from .rooms import Room

UP, DOWN, LEFT, RIGHT = "up", "down", "left", "right"
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)

MIN_WING_SIZE = 3
# (width factor, height factor) for wings on the top/bottom edge; swapped for left/right
VERTICAL_FACTORS = (0.66, 0.50)


def wing_size(room: Room, direction: str):
    if direction in (UP, DOWN):
        fw, fh = VERTICAL_FACTORS
    else:
        fh, fw = VERTICAL_FACTORS
    return max(MIN_WING_SIZE, round(room.width * fw)), max(MIN_WING_SIZE, round(room.height * fh))


def wing_rect(room: Room, direction: str, centered: bool) -> Room:
    """Rectangle for a wing on ``direction`` side, edge-aligned to the room's low corner or centered."""
    w, h = wing_size(room, direction)
    if direction in (UP, DOWN):
        x = room.x + (room.width - w) // 2 if centered else room.x
        y = room.y + room.height if direction == UP else room.y - h
    else:
        y = room.y + (room.height - h) // 2 if centered else room.y
        x = room.x + room.width if direction == RIGHT else room.x - w
    return Room(x, y, w, h)


def paint_room(grid: Grid, room: Room, rng: SeededRandom, wing_chance: float = 0.5) -> Optional[Room]:
    """Paint ``room`` and maybe one wing. Returns the wing rectangle if one was attached.

    Draw order: wing roll, then (only when a wing is attached) direction and alignment.
    """
    grid.paint_rect(room.x, room.y, room.width, room.height)
    if rng.next_float01() >= wing_chance:
        return None
    direction = DIRECTIONS[rng.next_int(0, len(DIRECTIONS))]
    centered = rng.next_bool()
    wing = wing_rect(room, direction, centered)
    grid.paint_rect(wing.x, wing.y, wing.width, wing.height)
    return wing


def paint_rooms(grid: Grid, rooms, rng: SeededRandom, wing_chance: float = 0.5) -> List[Optional[Room]]:
    return [paint_room(grid, room, rng, wing_chance) for room in rooms]


__all__ = ["paint_room", "paint_rooms", "wing_rect", "wing_size", "DIRECTIONS", "UP", "DOWN", "LEFT", "RIGHT"]
