import math
from dataclasses import dataclass, replace
from typing import Optional, Union


@dataclass
class DungeonConfig:
    grid_width: int = 50
    grid_height: int = 50
    room_count: int = 10
    # width/height ranges are low-inclusive, high-exclusive
    min_room_width: int = 5
    max_room_width: int = 15
    min_room_height: int = 5
    max_room_height: int = 15
    seed: Optional[Union[int, str]] = None
    wing_chance: float = 0.5
    dynamic_grid_size: bool = True

    def normalized(self) -> "DungeonConfig":
        """Return a copy with every numeric field clamped into a usable range.

        ``max < min`` collapses to ``max = min``; the generator then always
        draws ``min`` for that axis.
        """
        min_w = max(1, int(self.min_room_width))
        min_h = max(1, int(self.min_room_height))
        return replace(
            self,
            grid_width=max(1, int(self.grid_width)),
            grid_height=max(1, int(self.grid_height)),
            room_count=max(1, int(self.room_count)),
            min_room_width=min_w,
            max_room_width=max(min_w, int(self.max_room_width)),
            min_room_height=min_h,
            max_room_height=max(min_h, int(self.max_room_height)),
            wing_chance=min(1.0, max(0.0, float(self.wing_chance))),
        )


def grid_side_for(config: DungeonConfig) -> int:
    """Square grid side big enough for ``room_count`` average rooms plus corridor slack."""
    mid_w = (config.min_room_width + config.max_room_width) / 2
    mid_h = (config.min_room_height + config.max_room_height) / 2
    return int(math.ceil(math.sqrt(config.room_count * mid_w * mid_h * 2)))


__all__ = ["DungeonConfig", "grid_side_for"]
