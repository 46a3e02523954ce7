from cryptgen.dungeon import FLOOR, Grid, Room, SeededRandom
from cryptgen.dungeon.tunnels import carve_corridor, connect_rooms


def test_x_first_corridor_cells():
    g = Grid()
    cells = carve_corridor(g, (0, 0), (3, 2), x_first=True)
    assert cells == ((0, 0), (1, 0), (2, 0), (3, 0), (3, 1))
    assert all(g.get(x, y) == FLOOR for x, y in cells)
    # the far end is left to the destination room
    assert g.count(FLOOR) == 5


def test_y_first_corridor_cells():
    g = Grid()
    cells = carve_corridor(g, (0, 0), (3, 2), x_first=False)
    assert cells == ((0, 0), (0, 1), (0, 2), (1, 2), (2, 2))


def test_negative_direction():
    g = Grid()
    assert carve_corridor(g, (3, 0), (0, 0), x_first=True) == ((3, 0), (2, 0), (1, 0))
    assert carve_corridor(g, (0, 3), (0, 1), x_first=True) == ((0, 3), (0, 2))


def test_zero_length_paints_nothing():
    g = Grid()
    assert carve_corridor(g, (4, 4), (4, 4), x_first=True) == ()
    assert len(g) == 0


def test_chain_links_consecutive_rooms_only():
    rooms = [Room(0, 0, 3, 3), Room(10, 0, 3, 3), Room(10, 10, 3, 3), Room(0, 10, 3, 3)]
    g = Grid()
    corridors = connect_rooms(g, rooms, SeededRandom(4))
    assert [(c.room_a, c.room_b) for c in corridors] == [(0, 1), (1, 2), (2, 3)]


def test_fewer_than_two_rooms_skips_and_draws_nothing():
    g = Grid()
    a, b = SeededRandom(8), SeededRandom(8)
    assert connect_rooms(g, [Room(0, 0, 3, 3)], a) == []
    assert connect_rooms(g, [], a) == []
    assert len(g) == 0
    assert a.next_float01() == b.next_float01()


def test_corridor_reaches_next_center():
    rooms = [Room(0, 0, 3, 3), Room(8, 6, 3, 3)]
    g = Grid()
    for r in rooms:
        g.paint_rect(r.x, r.y, r.width, r.height)
    (corridor,) = connect_rooms(g, rooms, SeededRandom(0))
    start, end = rooms[0].center, rooms[1].center
    assert corridor.cells[0] == start
    last = corridor.cells[-1]
    assert abs(last[0] - end[0]) + abs(last[1] - end[1]) == 1
    assert len(corridor.cells) == abs(end[0] - start[0]) + abs(end[1] - start[1])
