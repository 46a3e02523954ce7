from .grid import Grid
from .tiles import EMPTY

WALL_SCAN_MARGIN = 2


def infer_walls(grid: Grid, margin: int = WALL_SCAN_MARGIN) -> int:
    """Turn every EMPTY cell touching FLOOR orthogonally into WALL. Single pass.

    Scans the compressed bounds grown by ``margin``. Only EMPTY->WALL writes
    happen and the test only looks for FLOOR, so scan order cannot change the
    result. Returns the number of walls placed.
    """
    bounds = grid.bounds if grid.bounds is not None else grid.compress_bounds()
    if bounds is None:
        return 0
    placed = 0
    for x, y in bounds.expanded(margin).cells():
        if grid.get(x, y) == EMPTY and grid.has_floor_neighbor(x, y):
            grid.set_wall(x, y)
            placed += 1
    return placed


__all__ = ["infer_walls", "WALL_SCAN_MARGIN"]
