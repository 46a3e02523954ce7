"""A* search over a layout grid.

Four-way movement, unit step cost, Manhattan heuristic. Only FLOOR is
walkable: WALL blocks and EMPTY (outside the painted area) is void.

Node selection scans the open list in insertion order and keeps the first
node with the lowest ``f``, breaking ``f`` ties by lower ``h``. Together with
the fixed neighbour order (up, down, left, right) this makes the returned
path fully deterministic, not merely optimal.

Nodes live in per-call parallel lists indexed by node id; ``parent`` holds
the id of the node we came from (-1 for the start). Nothing survives the call.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set

from ..logging_utils import get_logger
from .grid import Coord, Grid, NEIGHBOR_OFFSETS
from .tiles import WALL

_log = get_logger("cryptgen.pathfinding")


def manhattan(a: Coord, b: Coord) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


@dataclass
class PathResult:
    found: bool
    path: List[Coord] = field(default_factory=list)
    # g cost of each path cell, aligned with ``path``
    costs: List[int] = field(default_factory=list)
    expanded: int = 0

    @property
    def length(self) -> int:
        return len(self.path)

    def as_path(self) -> Optional[List[Coord]]:
        return list(self.path) if self.found else None


class PathFinder:
    """Stateless A* search; safe to reuse across grids and calls."""

    def __init__(self, blocking: str = WALL):
        self.blocking = blocking

    def find_path(self, start: Coord, goal: Coord, grid: Grid) -> Optional[List[Coord]]:
        """Return the cells from ``start`` (exclusive) to ``goal`` (inclusive), or None."""
        return self.search(start, goal, grid).as_path()

    def search(self, start: Coord, goal: Coord, grid: Grid) -> PathResult:
        start = (start[0], start[1])
        goal = (goal[0], goal[1])
        positions: List[Coord] = [start]
        g_cost: List[int] = [0]
        h_cost: List[int] = [manhattan(start, goal)]
        parent: List[int] = [-1]

        open_list: List[int] = [0]
        open_by_pos: Dict[Coord, int] = {start: 0}
        closed: Set[Coord] = set()
        expanded = 0

        while open_list:
            current = open_list[0]
            for node in open_list[1:]:
                f_node = g_cost[node] + h_cost[node]
                f_cur = g_cost[current] + h_cost[current]
                if f_node < f_cur or (f_node == f_cur and h_cost[node] < h_cost[current]):
                    current = node

            open_list.remove(current)
            pos = positions[current]
            del open_by_pos[pos]
            closed.add(pos)
            expanded += 1

            if pos == goal:
                path, costs = self._retrace(current, start, positions, g_cost, parent)
                return PathResult(True, path, costs, expanded)

            cx, cy = pos
            for dx, dy in NEIGHBOR_OFFSETS:
                npos = (cx + dx, cy + dy)
                if npos in closed or not grid.is_walkable(npos[0], npos[1], self.blocking):
                    continue
                tentative = g_cost[current] + 1
                node = open_by_pos.get(npos)
                if node is None:
                    node = len(positions)
                    positions.append(npos)
                    g_cost.append(tentative)
                    h_cost.append(manhattan(npos, goal))
                    parent.append(current)
                    open_list.append(node)
                    open_by_pos[npos] = node
                elif tentative < g_cost[node]:
                    g_cost[node] = tentative
                    parent[node] = current

        _log.debug(event="path_not_found", start=start, goal=goal, expanded=expanded)
        return PathResult(False, expanded=expanded)

    @staticmethod
    def _retrace(node: int, start: Coord, positions, g_cost, parent):
        path: List[Coord] = []
        costs: List[int] = []
        while positions[node] != start:
            path.append(positions[node])
            costs.append(g_cost[node])
            node = parent[node]
        path.reverse()
        costs.reverse()
        return path, costs


def find_path(grid: Grid, start: Coord, goal: Coord, blocking: str = WALL) -> Optional[List[Coord]]:
    return PathFinder(blocking).find_path(start, goal, grid)


__all__ = ["PathFinder", "PathResult", "find_path", "manhattan"]
