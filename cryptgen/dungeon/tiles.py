# Tile constants centralized for modular imports
EMPTY = " "  # unset / void cell, impassable
FLOOR = "."
WALL = "#"

TILE_NAMES = {EMPTY: "empty", FLOOR: "floor", WALL: "wall"}


def char_to_type(ch: str) -> str:
    """Map a tile char to its renderer-facing name ('empty' for anything unknown)."""
    return TILE_NAMES.get(ch, "empty")


__all__ = ["EMPTY", "FLOOR", "WALL", "TILE_NAMES", "char_to_type"]
