from dataclasses import dataclass
from typing import Iterator, List, NamedTuple, Tuple

from .config import DungeonConfig
from .rng import SeededRandom

PADDING = 1  # gap kept around existing rooms so a wall ring always fits


@dataclass(frozen=True)
class Room:
    x: int
    y: int
    width: int
    height: int

    def cells(self):
        for ix in range(self.x, self.x + self.width):
            for iy in range(self.y, self.y + self.height):
                yield ix, iy

    @property
    def center(self) -> Tuple[int, int]:
        return (self.x + self.width // 2, self.y + self.height // 2)

    @property
    def area(self) -> int:
        return self.width * self.height

    def overlaps(self, other: "Room") -> bool:
        return (
            self.x < other.x + other.width
            and self.x + self.width > other.x
            and self.y < other.y + other.height
            and self.y + self.height > other.y
        )

    def inflated(self, pad: int) -> "Room":
        return Room(self.x - pad, self.y - pad, self.width + 2 * pad, self.height + 2 * pad)

    def to_dict(self):
        cx, cy = self.center
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height, "center": [cx, cy]}


class RoomSet:
    """Rooms in placement order. Index 0 is the start room, the last one the end room."""

    def __init__(self):
        self._rooms: List[Room] = []

    def __len__(self) -> int:
        return len(self._rooms)

    def __iter__(self) -> Iterator[Room]:
        return iter(self._rooms)

    def __getitem__(self, idx: int) -> Room:
        return self._rooms[idx]

    def clear(self) -> None:
        self._rooms.clear()

    def collides(self, candidate: Room) -> bool:
        # padding goes on the existing room, not the candidate
        return any(r.inflated(PADDING).overlaps(candidate) for r in self._rooms)

    def try_add(self, candidate: Room) -> bool:
        if self.collides(candidate):
            return False
        self._rooms.append(candidate)
        return True

    def snapshot(self) -> Tuple[Room, ...]:
        return tuple(self._rooms)


class PlacementResult(NamedTuple):
    placed: int
    requested: int
    attempts: int

    @property
    def exhausted(self) -> bool:
        return self.placed < self.requested


def place_rooms(
    room_set: RoomSet, config: DungeonConfig, rng: SeededRandom, grid_width: int, grid_height: int
) -> PlacementResult:
    """Rejection-sample rooms into ``room_set`` until the target or the attempt cap is hit.

    Draw order per attempt: width, height, x, y.
    """
    target = config.room_count
    max_attempts = target * 5
    attempts = 0
    while len(room_set) < target and attempts < max_attempts:
        attempts += 1
        w = rng.next_int(config.min_room_width, config.max_room_width)
        h = rng.next_int(config.min_room_height, config.max_room_height)
        x = rng.next_int(0, grid_width - w)
        y = rng.next_int(0, grid_height - h)
        room_set.try_add(Room(x, y, w, h))
    return PlacementResult(len(room_set), target, attempts)


__all__ = ["Room", "RoomSet", "PlacementResult", "place_rooms", "PADDING"]
