from collections import deque

from cryptgen.dungeon import FLOOR, Grid

OFFSETS = ((0, 1), (0, -1), (-1, 0), (1, 0))


def open_grid(width, height, x0=0, y0=0):
    """Grid whose ``width`` x ``height`` rectangle is all FLOOR, no walls."""
    g = Grid()
    g.paint_rect(x0, y0, width, height)
    g.compress_bounds()
    return g


def neighbors(x, y):
    for dx, dy in OFFSETS:
        yield x + dx, y + dy


def bfs_reachable(grid, start):
    """Return set of (x,y) FLOOR tiles reachable from start."""
    if grid.get(*start) != FLOOR:
        return set()
    q = deque([start])
    vis = {start}
    while q:
        x, y = q.popleft()
        for n in neighbors(x, y):
            if n not in vis and grid.get(*n) == FLOOR:
                vis.add(n)
                q.append(n)
    return vis


def assert_contiguous(path, start):
    """Every step of ``path`` (start excluded) moves exactly one cell orthogonally."""
    prev = start
    for cell in path:
        assert abs(cell[0] - prev[0]) + abs(cell[1] - prev[1]) == 1, f"Jump from {prev} to {cell}"
        prev = cell
