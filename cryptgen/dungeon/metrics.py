from typing import Dict


def init_metrics() -> Dict[str, int | float | bool]:
    return {
        'rooms_requested': 0,
        'rooms_placed': 0,
        'placement_attempts': 0,
        'placement_exhausted': False,
        'wings_attached': 0,
        'corridors': 0,
        'tiles_floor': 0,
        'tiles_wall': 0,
        'grid_side': 0,
        'runtime_ms': 0.0,
    }
