"""Public dungeon package interface.

Layout generation (rooms, wings, corridors, walls) plus A* pathfinding over
the finished grid. Nothing here performs I/O.
"""

from .config import DungeonConfig, grid_side_for
from .grid import Bounds, Grid
from .pathfinding import PathFinder, PathResult, find_path
from .pipeline import DungeonLayout, DungeonLayoutGenerator, generate_layout
from .rng import SeededRandom, resolve_seed, seed_from_string
from .rooms import Room, RoomSet
from .tiles import EMPTY, FLOOR, WALL
from .tunnels import Corridor

__all__ = [
    "DungeonConfig",
    "DungeonLayout",
    "DungeonLayoutGenerator",
    "generate_layout",
    "grid_side_for",
    "Grid",
    "Bounds",
    "Room",
    "RoomSet",
    "Corridor",
    "PathFinder",
    "PathResult",
    "find_path",
    "SeededRandom",
    "resolve_seed",
    "seed_from_string",
    "EMPTY",
    "FLOOR",
    "WALL",
]
