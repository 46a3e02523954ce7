"""Pipeline orchestration for dungeon layout generation.

``DungeonLayoutGenerator`` owns one grid, one room set and one random source
and rebuilds all three from scratch on every ``generate()`` call. Phases, in
order:

    * size     - square grid side from room count and average room area
    * place    - rejection-sampled rooms with a one-cell padding ring
    * paint    - floor rectangles plus optional L/T wings
    * connect  - room i to room i+1 with L-shaped corridors
    * compress - bounding rectangle of painted cells
    * walls    - single-pass wall inference around floor
    * finalize - bounds recomputed to include walls, metrics counted

Randomness is drawn strictly in that phase order, which is what makes a
layout reproducible from its seed. The returned ``DungeonLayout`` is a
snapshot; mutating it never touches generator state.
"""
from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from ..logging_utils import get_logger
from .config import DungeonConfig, grid_side_for
from .grid import Bounds, Coord, Grid
from .metrics import init_metrics
from .pathfinding import PathFinder, PathResult
from .rng import SeededRandom, SeedLike, resolve_seed
from .rooms import Room, RoomSet, place_rooms
from .tiles import FLOOR, WALL
from .tunnels import Corridor, connect_rooms
from .walls import infer_walls
from .wings import paint_rooms

_log = get_logger("cryptgen.pipeline")


@dataclass
class DungeonLayout:
    seed: int
    config: DungeonConfig
    grid_width: int
    grid_height: int
    rooms: Tuple[Room, ...]
    wings: Tuple[Optional[Room], ...]
    corridors: Tuple[Corridor, ...]
    grid: Grid
    metrics: Dict[str, Any] = field(default_factory=dict)

    @property
    def bounds(self) -> Optional[Bounds]:
        return self.grid.bounds

    @property
    def start_room(self) -> Optional[Room]:
        return self.rooms[0] if self.rooms else None

    @property
    def end_room(self) -> Optional[Room]:
        return self.rooms[-1] if self.rooms else None

    def room_role(self, index: int) -> str:
        if index == 0:
            return "start"
        if index == len(self.rooms) - 1:
            return "end"
        return "room"

    def search_path(self, start: Optional[Coord] = None, goal: Optional[Coord] = None) -> PathResult:
        """A* between two cells, defaulting to the start and end room centers."""
        if start is None or goal is None:
            if not self.rooms:
                raise ValueError("layout has no rooms; pass explicit start and goal")
            start = self.rooms[0].center if start is None else start
            goal = self.rooms[-1].center if goal is None else goal
        return PathFinder(WALL).search(start, goal, self.grid)

    def find_path(self, start: Optional[Coord] = None, goal: Optional[Coord] = None) -> Optional[List[Coord]]:
        return self.search_path(start, goal).as_path()

    def to_dict(self) -> Dict[str, Any]:
        bounds = self.grid.bounds
        return {
            "seed": self.seed,
            "grid_width": self.grid_width,
            "grid_height": self.grid_height,
            "rooms": [dict(r.to_dict(), index=i, role=self.room_role(i)) for i, r in enumerate(self.rooms)],
            "corridors": [c.to_dict() for c in self.corridors],
            "bounds": bounds.to_dict() if bounds else None,
            "tiles": self.grid.rows(),
            "metrics": dict(self.metrics),
        }


class DungeonLayoutGenerator:
    def __init__(self, config: DungeonConfig | None = None, *, enable_metrics: bool = True):
        self.config = (config or DungeonConfig()).normalized()
        self.enable_metrics = enable_metrics
        self.rng = SeededRandom()
        self.room_set = RoomSet()
        self.grid = Grid()
        self.wings: List[Optional[Room]] = []
        self.corridors: List[Corridor] = []
        self.metrics: Dict[str, Any] = {}
        self.seed: Optional[int] = None

    def _reset(self, seed: int) -> None:
        self.rng.seed(seed)
        self.room_set.clear()
        self.grid.clear()
        self.wings = []
        self.corridors = []
        self.metrics = init_metrics() if self.enable_metrics else {}
        self.seed = seed

    def generate(self, seed: SeedLike = None) -> DungeonLayout:
        """Run every phase and return a snapshot of the result.

        ``seed`` overrides ``config.seed``; when both are missing the wall clock
        is used and the chosen value is reported on the layout.
        """
        cfg = self.config
        resolved = resolve_seed(seed if seed is not None else cfg.seed)
        self._reset(resolved)
        run_log = _log.bind(seed=resolved)

        if self.enable_metrics:
            start = time.perf_counter()
            phase_times = {}

            def _phase(label, fn, *a, **k):
                ps = time.perf_counter()
                r = fn(*a, **k)
                phase_times[label] = int((time.perf_counter() - ps) * 1000)
                return r

        else:

            def _phase(label, fn, *a, **k):
                return fn(*a, **k)

        if cfg.dynamic_grid_size:
            width = height = grid_side_for(cfg)
        else:
            width, height = cfg.grid_width, cfg.grid_height

        placement = _phase("place", place_rooms, self.room_set, cfg, self.rng, width, height)
        if placement.exhausted:
            run_log.info(
                event="room_budget_exhausted",
                placed=placement.placed,
                requested=placement.requested,
                attempts=placement.attempts,
            )
        rooms = self.room_set.snapshot()
        self.wings = _phase("paint", paint_rooms, self.grid, rooms, self.rng, cfg.wing_chance)
        if len(rooms) < 2:
            run_log.debug(event="corridors_skipped", rooms=len(rooms))
        else:
            self.corridors = _phase("connect", connect_rooms, self.grid, rooms, self.rng)
        self.grid.compress_bounds()
        walls = _phase("walls", infer_walls, self.grid)
        self.grid.compress_bounds()

        if self.enable_metrics:
            self.metrics.update(
                rooms_requested=placement.requested,
                rooms_placed=placement.placed,
                placement_attempts=placement.attempts,
                placement_exhausted=placement.exhausted,
                wings_attached=sum(1 for w in self.wings if w is not None),
                corridors=len(self.corridors),
                tiles_floor=self.grid.count(FLOOR),
                tiles_wall=walls,
                grid_side=width,
                runtime_ms=int((time.perf_counter() - start) * 1000),
                phase_ms=phase_times,
            )
        run_log.info(
            event="layout_generated",
            rooms=placement.placed,
            requested=placement.requested,
            corridors=len(self.corridors),
            grid_side=width,
        )
        return DungeonLayout(
            seed=resolved,
            config=cfg,
            grid_width=width,
            grid_height=height,
            rooms=rooms,
            wings=tuple(self.wings),
            corridors=tuple(self.corridors),
            grid=self.grid.copy(),
            metrics=dict(self.metrics),
        )


def generate_layout(config: DungeonConfig | None = None, seed: SeedLike = None) -> DungeonLayout:
    return DungeonLayoutGenerator(config).generate(seed)


__all__ = ["DungeonLayout", "DungeonLayoutGenerator", "generate_layout"]
