"""
project: cryptgen
module: dungeon_api.py

Dungeon layout and pathfinding API routes.

Both endpoints accept the same generation parameters. Values are clamped into
range rather than rejected; only values that are not numbers at all produce a
400.
"""

import threading
from collections import OrderedDict

from flask import Blueprint, current_app, jsonify, request

from cryptgen.dungeon import DungeonConfig, DungeonLayout, DungeonLayoutGenerator
from cryptgen.dungeon.rng import resolve_seed

bp_dungeon = Blueprint("dungeon", __name__)

SIZE_FIELDS = ("min_room_width", "max_room_width", "min_room_height", "max_room_height")
GEN_FIELDS = ("room_count",) + SIZE_FIELDS

# Simple in-process LRU cache (seed, params)->DungeonLayout. Locked because the dev
# server may run requests on threads.
_layout_cache: "OrderedDict[tuple, DungeonLayout]" = OrderedDict()
_layout_cache_lock = threading.Lock()


class ParamError(ValueError):
    pass


def _int_param(data: dict, key: str, default: int) -> int:
    raw = data.get(key, default)
    if isinstance(raw, bool):
        raise ParamError(f"{key} must be an integer")
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise ParamError(f"{key} must be an integer") from None


def _coord_param(data: dict, key: str):
    raw = data.get(key)
    if raw is None:
        return None
    if not isinstance(raw, (list, tuple)) or len(raw) != 2:
        raise ParamError(f"{key} must be [x, y]")
    try:
        return int(raw[0]), int(raw[1])
    except (TypeError, ValueError):
        raise ParamError(f"{key} must be [x, y]") from None


def config_from_payload(data: dict) -> DungeonConfig:
    """Build a normalized config from request JSON.

    ``room_count`` is capped by DUNGEON_MAX_ROOM_COUNT and every room dimension
    by DUNGEON_MAX_ROOM_SIZE, which together bound the grid a request can ask for.
    """
    defaults = DungeonConfig(room_count=current_app.config.get("DUNGEON_DEFAULT_ROOM_COUNT", 10))
    values = {f: _int_param(data, f, getattr(defaults, f)) for f in GEN_FIELDS}
    values["room_count"] = min(values["room_count"], current_app.config.get("DUNGEON_MAX_ROOM_COUNT", 200))
    max_size = current_app.config.get("DUNGEON_MAX_ROOM_SIZE", 40)
    for f in SIZE_FIELDS:
        values[f] = min(values[f], max_size)
    seed = data.get("seed")
    if isinstance(seed, bool) or (seed is not None and not isinstance(seed, (int, str))):
        raise ParamError("seed must be an integer, a string or null")
    cfg = DungeonConfig(seed=resolve_seed(seed), **values)
    return cfg.normalized()


def get_cached_layout(cfg: DungeonConfig) -> DungeonLayout:
    if current_app.config.get("DUNGEON_DISABLE_CACHE"):
        return DungeonLayoutGenerator(cfg).generate()
    key = (cfg.seed,) + tuple(getattr(cfg, f) for f in GEN_FIELDS)
    with _layout_cache_lock:
        layout = _layout_cache.get(key)
        if layout is not None:
            _layout_cache.move_to_end(key)
            return layout
    layout = DungeonLayoutGenerator(cfg).generate()
    with _layout_cache_lock:
        _layout_cache[key] = layout
        while len(_layout_cache) > max(1, current_app.config.get("DUNGEON_CACHE_SIZE", 8)):
            _layout_cache.popitem(last=False)
    return layout


def clear_layout_cache() -> None:
    with _layout_cache_lock:
        _layout_cache.clear()


def _path_json(path):
    return [list(p) for p in path] if path is not None else None


@bp_dungeon.route("/api/dungeon/generate", methods=["POST"])
def generate():
    """
    Generate (or fetch from cache) a layout.
    Body JSON (all optional): seed, room_count, min/max_room_width, min/max_room_height, include_path
    Response: layout dict plus 'path' when include_path is true
    """
    data = request.get_json(silent=True) or {}
    try:
        cfg = config_from_payload(data)
    except ParamError as exc:
        return jsonify({"error": str(exc)}), 400
    layout = get_cached_layout(cfg)
    body = layout.to_dict()
    if data.get("include_path"):
        body["path"] = _path_json(layout.find_path()) if layout.rooms else None
    return jsonify(body)


@bp_dungeon.route("/api/dungeon/path", methods=["POST"])
def path():
    """
    Path between two cells of a layout (defaults: start room center -> end room center).
    Body JSON: generation params plus optional start [x,y] and goal [x,y]
    Response: { 'seed': int, 'path': [[x,y],...] | null, 'length': int }
    """
    data = request.get_json(silent=True) or {}
    try:
        cfg = config_from_payload(data)
        start = _coord_param(data, "start")
        goal = _coord_param(data, "goal")
    except ParamError as exc:
        return jsonify({"error": str(exc)}), 400
    layout = get_cached_layout(cfg)
    if not layout.rooms and (start is None or goal is None):
        return jsonify({"error": "layout has no rooms; start and goal are required"}), 400
    result = layout.search_path(start, goal)
    return jsonify({"seed": layout.seed, "path": _path_json(result.as_path()), "length": result.length})
