"""cryptgen CLI entry point.

Provides subcommands for running the JSON API server and for generating a
layout straight to the terminal. Accepts configuration via flags and
environment variables, with optional .env loading.

Run `python run.py --help` for details.
"""

import argparse
import os
import signal
import sys
from textwrap import dedent

from colorama import Fore, Style
from colorama import init as _color_init
from dotenv import load_dotenv

from cryptgen import __version__

_color_init()
# Disable colors if output is not a real terminal (e.g., during pytest capture)
_COLOR_ENABLED = sys.stdout.isatty()

PATH_CHAR = "*"


def parse_args(argv: list[str]) -> argparse.Namespace:
    description = """
    cryptgen dungeon layout generator

    Run the JSON API server or print a generated layout to the terminal.
    Configuration can be provided via CLI flags or environment variables.
    If both are present, CLI flags take precedence.
    """

    epilog = dedent(
        """
        Environment variables:
          HOST            Bind address for the web server (default: 0.0.0.0)
          PORT            Port for the web server (default: 5000)

        Examples:
          # Run the server on the default host and port
          python run.py server

          # Print a 5 room layout for seed "abc" with the start->end path
          python run.py generate --seed abc --rooms 5 --path

          # Load variables from .env then run the server
          python run.py --env-file .env server
        """
    )

    parser = argparse.ArgumentParser(
        prog="cryptgen",
        description=dedent(description),
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "--env-file",
        dest="env_file",
        help="Path to a .env file to load before processing flags",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"cryptgen {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")

    server_parser = subparsers.add_parser(
        "server",
        help="Run the JSON API server",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    server_parser.add_argument("--host", default=None, help="Host interface to bind (default: env HOST or 0.0.0.0)")
    server_parser.add_argument("--port", type=int, default=None, help="Port to listen on (default: env PORT or 5000)")
    server_parser.add_argument("--debug", action="store_true", help="Enable Flask debug mode")
    server_parser.set_defaults(command="server")

    gen_parser = subparsers.add_parser(
        "generate",
        help="Generate a layout and print it as ASCII",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Generate a layout and print it ('#' wall, '.' floor, '*' path).",
    )
    gen_parser.add_argument("--seed", default=None, help="Seed text (hashed); omit for a time-based seed")
    gen_parser.add_argument("--rooms", dest="room_count", type=int, default=10, help="Target room count")
    gen_parser.add_argument("--min-width", dest="min_room_width", type=int, default=5)
    gen_parser.add_argument("--max-width", dest="max_room_width", type=int, default=15)
    gen_parser.add_argument("--min-height", dest="min_room_height", type=int, default=5)
    gen_parser.add_argument("--max-height", dest="max_room_height", type=int, default=15)
    gen_parser.add_argument("--path", action="store_true", help="Overlay the start->end room path")
    gen_parser.set_defaults(command="generate")

    # If no subcommand provided, default to server
    if len(argv) == 0:
        argv = ["server"]

    return parser.parse_args(argv)


def render_layout(layout, path=None) -> list[str]:
    """ASCII rows of the layout bounds with an optional path overlay."""
    bounds = layout.bounds
    if bounds is None:
        return []
    rows = [list(r) for r in layout.grid.rows()]
    for x, y in path or ():
        rows[y - bounds.min_y][x - bounds.min_x] = PATH_CHAR
    return ["".join(r) for r in rows]


def run_generate(args: argparse.Namespace) -> int:
    from cryptgen.dungeon import DungeonConfig, DungeonLayoutGenerator

    cfg = DungeonConfig(
        room_count=args.room_count,
        min_room_width=args.min_room_width,
        max_room_width=args.max_room_width,
        min_room_height=args.min_room_height,
        max_room_height=args.max_room_height,
        seed=args.seed,
    )
    layout = DungeonLayoutGenerator(cfg).generate()
    path = None
    if args.path and layout.rooms:
        path = layout.find_path()
    for line in render_layout(layout, path):
        print(line)
    m = layout.metrics
    summary = f"seed={layout.seed} rooms={m['rooms_placed']}/{m['rooms_requested']} corridors={m['corridors']}"
    if args.path:
        summary += f" path={'none' if path is None else len(path)}"
    print(f"{Fore.GREEN}{summary}{Style.RESET_ALL}" if _COLOR_ENABLED else summary)
    return 0


def main(argv: list[str]) -> int:
    args = parse_args(argv)
    if getattr(args, "env_file", None):
        load_dotenv(args.env_file)
    else:
        # Load default .env if present (no error if missing)
        load_dotenv()

    mode = (getattr(args, "command", None) or "server").lower()
    if mode == "generate":
        return run_generate(args)

    host = getattr(args, "host", None) or os.getenv("HOST", "0.0.0.0")
    port = int(getattr(args, "port", None) or os.getenv("PORT", "5000"))
    debug = bool(getattr(args, "debug", False))

    def handle_sigint(sig, frame):
        print("\n[INFO] Shutting down server...")
        sys.exit(0)

    signal.signal(signal.SIGINT, handle_sigint)

    # Import server entrypoint only after environment is ready
    from cryptgen.server import start_server

    def label(text: str) -> str:
        return f"{Fore.YELLOW}{text}{Style.RESET_ALL}" if _COLOR_ENABLED else text

    def value(val: str | int) -> str:
        return f"{Fore.GREEN}{val}{Style.RESET_ALL}" if _COLOR_ENABLED else str(val)

    divider = (Fore.MAGENTA + "=" * 40 + Style.RESET_ALL) if _COLOR_ENABLED else "=" * 40
    lines = [
        divider,
        f"  {Fore.CYAN}{Style.BRIGHT}cryptgen API{Style.RESET_ALL}" if _COLOR_ENABLED else "  cryptgen API",
        divider,
        f"  {label('Host:'):12} {value(host)}",
        f"  {label('Port:'):12} {value(port)}",
        f"  {label('Debug:'):12} {value('YES' if debug else 'NO')}",
        divider,
        "",
    ]
    print("\n".join(lines))

    from cryptgen.logging_utils import log

    log.info(event="startup", mode=mode, host=host, port=port)
    start_server(host, port, debug)
    return 0


def _console_main() -> int:  # pragma: no cover - console_scripts shim
    return main(sys.argv[1:])


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main(sys.argv[1:]))
