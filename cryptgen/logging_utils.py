"""Structured event logging for the generator and its front ends.

Every line is one event: ``level=info ts=... event=layout_generated seed=42``
(or a JSON object when ``CRYPTGEN_LOG_JSON`` is set). Loggers carry a name and
an optional set of bound fields; ``bind`` returns a child that repeats those
fields on every event, which is how a generation run tags all of its output
with the seed being replayed.

    log = get_logger("cryptgen.pipeline")
    run_log = log.bind(seed=42)
    run_log.info(event="layout_generated", rooms=9)

Coordinates (2-tuples of ints) render as ``x,y``. ``None`` values are dropped.
Threshold comes from ``CRYPTGEN_LOG_LEVEL`` (debug, info, warn, error).
"""

from __future__ import annotations

import json
import os
import sys
import time
from typing import Any, Dict, Tuple

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}
CURRENT_LEVEL = LEVELS.get(os.getenv("CRYPTGEN_LOG_LEVEL", "info").lower(), 20)
JSON_MODE = os.getenv("CRYPTGEN_LOG_JSON", "0").lower() in ("1", "true", "yes", "on")


def _plain(value: Any) -> Any:
    if isinstance(value, tuple) and len(value) == 2 and all(isinstance(v, int) for v in value):
        return f"{value[0]},{value[1]}"
    return value


def _format(level: str, **fields) -> str:
    fields = {k: _plain(v) for k, v in fields.items() if v is not None}
    if JSON_MODE:
        return json.dumps(dict(level=level, ts=int(time.time()), **fields), separators=(",", ":"), default=str)
    head = f"level={level} ts={int(time.time())}"
    body = " ".join(
        f"{k}={v}" if isinstance(v, (int, float)) else f"{k}={str(v).replace(' ', '_')}" for k, v in fields.items()
    )
    return f"{head} {body}" if body else head


class EventLogger:
    __slots__ = ("name", "context")

    def __init__(self, name: str, context: Tuple[Tuple[str, Any], ...] = ()):
        self.name = name
        self.context = context

    def bind(self, **fields) -> "EventLogger":
        merged: Dict[str, Any] = dict(self.context)
        merged.update(fields)
        return EventLogger(self.name, tuple(merged.items()))

    def enabled(self, level: str) -> bool:
        return LEVELS[level] >= CURRENT_LEVEL

    def emit(self, level: str, **fields) -> None:
        if not self.enabled(level):
            return
        record = dict(self.context)
        record.update(fields)
        record.setdefault("logger", self.name)
        stream = sys.stderr if level == "error" else sys.stdout
        print(_format(level, **record), file=stream)

    def debug(self, **fields):
        self.emit("debug", **fields)

    def info(self, **fields):
        self.emit("info", **fields)

    def warn(self, **fields):
        self.emit("warn", **fields)

    def error(self, **fields):
        self.emit("error", **fields)


_registry: Dict[str, EventLogger] = {}


def get_logger(name: str = "cryptgen") -> EventLogger:
    """Shared unbound logger for ``name``; bind a child for per-run fields."""
    return _registry.setdefault(name, EventLogger(name))


log = get_logger()
