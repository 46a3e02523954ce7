"""
project: cryptgen
module: seed_api.py

Seed coercion endpoint.

Lets a client turn whatever the user typed (number, phrase, nothing) into the
integer seed the generator will use, so it can be shown and replayed later.
"""
from flask import Blueprint, jsonify, request

from cryptgen.dungeon.rng import resolve_seed

bp_seed = Blueprint("seed_api", __name__)


def coerce_seed(payload_seed):
    """Convert a provided seed (int, str or None) into an unsigned 32-bit int.

    Strings are always hashed, including all-digit ones, so "12345" typed in a
    text box and 12345 sent as a number are different seeds.
    """
    if payload_seed is None or (isinstance(payload_seed, (int, str)) and not isinstance(payload_seed, bool)):
        return resolve_seed(payload_seed)
    raise ValueError("seed must be an integer, a string or null")


@bp_seed.route("/api/dungeon/seed", methods=["POST"])
def set_seed():
    """Resolve a seed.

    Body JSON (optional): { "seed": <int|str|null> }
    Response: { "seed": <int>, "source": "int"|"string"|"time" }
    """
    data = request.get_json(silent=True) or {}
    provided = data.get("seed")
    try:
        seed = coerce_seed(provided)
    except ValueError as exc:
        return jsonify({"error": str(exc)}), 400
    if isinstance(provided, int):
        source = "int"
    elif isinstance(provided, str) and provided:
        source = "string"
    else:
        source = "time"
    return jsonify({"seed": seed, "source": source})
