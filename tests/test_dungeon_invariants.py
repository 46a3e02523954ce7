"""Layout invariant tests.

Invariants covered:
1. Rooms never sit inside each other's one-cell padding ring.
2. Every WALL touches FLOOR orthogonally and no FLOOR touches the void.
3. Corridors form a single chain in placement order.
4. Start and end room centers are always connected.
5. Metrics agree with the grid and room list.
"""

from __future__ import annotations

from cryptgen.dungeon import EMPTY, FLOOR, WALL, DungeonConfig, DungeonLayoutGenerator
from cryptgen.dungeon.pathfinding import manhattan

from tests.dungeon_test_utils import assert_contiguous, bfs_reachable, neighbors

SEEDS = (111, 222, 333, 444, 555)


def gen(seed: int = 12345, **kw):
    return DungeonLayoutGenerator(DungeonConfig(**kw)).generate(seed)


def test_padding_invariant():
    for s in SEEDS:
        d = gen(s, room_count=12)
        for i, a in enumerate(d.rooms):
            for b in d.rooms[i + 1:]:
                assert not a.inflated(1).overlaps(b), f"Seed {s}: rooms {a} and {b} within padding"


def test_wall_adjacency_rules():
    for s in SEEDS:
        d = gen(s)
        for (x, y), tile in d.grid.items():
            if tile == WALL:
                assert any(d.grid.get(*n) == FLOOR for n in neighbors(x, y)), f"Wall at {(x, y)} not adjacent to floor"
            elif tile == FLOOR:
                assert all(d.grid.get(*n) != EMPTY for n in neighbors(x, y)), f"Floor at {(x, y)} open to void"


def test_rooms_are_painted():
    d = gen(77, room_count=6)
    for r in d.rooms:
        assert all(d.grid.get(x, y) == FLOOR for x, y in r.cells())


def test_corridors_form_room_order_chain():
    for s in SEEDS:
        d = gen(s, room_count=7)
        assert len(d.corridors) == max(0, len(d.rooms) - 1)
        for i, c in enumerate(d.corridors):
            assert (c.room_a, c.room_b) == (i, i + 1)


def test_start_and_end_connected():
    for s in SEEDS:
        d = gen(s, room_count=6)
        if len(d.rooms) < 2:
            continue
        start, end = d.rooms[0].center, d.rooms[-1].center
        assert end in bfs_reachable(d.grid, start)
        result = d.search_path()
        assert result.found, f"Seed {s}: no path between start and end"
        assert len(result.path) >= manhattan(start, end)
        assert result.path[-1] == end
        assert_contiguous(result.path, start)
        assert all(d.grid.get(*p) == FLOOR for p in result.path)


def test_metrics_consistency():
    d = gen(2024, room_count=9)
    m = d.metrics
    assert m["rooms_placed"] == len(d.rooms)
    assert m["rooms_requested"] == 9
    assert m["placement_attempts"] <= 9 * 5
    assert m["placement_exhausted"] == (len(d.rooms) < 9)
    assert m["corridors"] == len(d.corridors)
    assert m["tiles_wall"] == d.grid.count(WALL)
    assert m["tiles_floor"] == d.grid.count(FLOOR)
    assert m["wings_attached"] == sum(1 for w in d.wings if w is not None)
    assert m["grid_side"] == d.grid_width == d.grid_height
    assert set(m["phase_ms"]) >= {"place", "paint", "walls"}


def test_bounds_cover_every_tile():
    d = gen(31)
    b = d.bounds
    for (x, y), _ in d.grid.items():
        assert b.min_x <= x <= b.max_x and b.min_y <= y <= b.max_y
    rows = d.grid.rows()
    assert len(rows) == b.height
    assert all(len(r) == b.width for r in rows)


def test_metrics_can_be_disabled():
    d = DungeonLayoutGenerator(DungeonConfig(room_count=3), enable_metrics=False).generate(5)
    assert d.metrics == {}
    assert d.rooms
