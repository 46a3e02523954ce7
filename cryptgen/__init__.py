"""
project: cryptgen
module: __init__.py

Flask application factory.

The dungeon core in ``cryptgen.dungeon`` is plain Python and needs none of
this; the app only exposes it over JSON so an external renderer or game
client can request layouts and paths. Configuration is sourced from
environment variables (optionally via a local ``.env``) with development
defaults, then overridden by anything passed to ``create_app``.
"""

import logging
import os
import uuid

from dotenv import load_dotenv
from flask import Flask, jsonify

__version__ = "0.2.0"


def _env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes", "on")


def create_app(overrides: dict | None = None) -> Flask:
    """Build the Flask app with dungeon routes registered."""
    load_dotenv()

    app = Flask(__name__, instance_relative_config=True)
    try:
        os.makedirs(app.instance_path, exist_ok=True)
    except OSError:
        pass

    app.config.update(
        DUNGEON_DEFAULT_ROOM_COUNT=int(os.getenv("DUNGEON_DEFAULT_ROOM_COUNT", "10")),
        DUNGEON_MAX_ROOM_COUNT=int(os.getenv("DUNGEON_MAX_ROOM_COUNT", "200")),
        DUNGEON_MAX_ROOM_SIZE=int(os.getenv("DUNGEON_MAX_ROOM_SIZE", "40")),
        DUNGEON_CACHE_SIZE=int(os.getenv("DUNGEON_CACHE_SIZE", "8")),
        DUNGEON_DISABLE_CACHE=_env_flag("DUNGEON_DISABLE_CACHE"),
    )
    if overrides:
        app.config.update(overrides)

    from cryptgen.routes.dungeon_api import bp_dungeon
    from cryptgen.routes.seed_api import bp_seed

    app.register_blueprint(bp_dungeon)
    app.register_blueprint(bp_seed)

    @app.errorhandler(500)
    def internal_error(e):
        error_id = uuid.uuid4().hex[:8]
        logging.exception("Unhandled exception (id=%s)", error_id)
        return jsonify({"error": "internal", "error_id": error_id}), 500

    return app
