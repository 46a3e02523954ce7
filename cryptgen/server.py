"""
project: cryptgen
module: server.py

Server bootstrap: builds the app, attaches the request/error log file, runs the dev server.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler

from cryptgen import create_app

LOG_FILE = "app.log"
_HANDLER_NAME = "cryptgen-file"


def start_server(host="0.0.0.0", port=5000, debug: bool = False):  # pragma: no cover (runtime only)
    """Run the Flask development server, logging werkzeug and 500s to <instance>/app.log."""
    app = create_app()
    _configure_logging(app.instance_path)
    try:
        print(f"[INFO] Starting dungeon API on {host}:{port}")
        app.run(host=host, port=port, debug=debug)
    except KeyboardInterrupt:
        print("\n[INFO] Server stopped by user (Ctrl+C)")
        sys.exit(0)


def _configure_logging(log_dir: str) -> str:
    """Attach a rotating ``app.log`` handler to the root logger and return its path.

    Generation events go through ``cryptgen.logging_utils`` to stdout; the stdlib
    tree only carries werkzeug access lines and unhandled-exception traces, so
    the file is all that is added here. Calling again swaps our previous
    handler and leaves handlers installed by anything else alone.
    """
    os.makedirs(log_dir, exist_ok=True)
    log_path = os.path.join(log_dir, LOG_FILE)

    root = logging.getLogger()
    for h in [h for h in root.handlers if h.get_name() == _HANDLER_NAME]:
        root.removeHandler(h)
        h.close()

    handler = RotatingFileHandler(log_path, maxBytes=1_000_000, backupCount=3)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
    root.addHandler(handler)
    if root.level == logging.NOTSET or root.level > logging.INFO:
        root.setLevel(logging.INFO)
    return log_path
