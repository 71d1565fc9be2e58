from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

import orjson

from .api import api_state
from .data import DatasetUnavailableError
from .logging import configure_logging
from .session.config import build_live_config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Schedule Assistant command line interface.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    gui_parser = subparsers.add_parser("gui", help="Launch the calendar window with the tool-call endpoint.")
    gui_parser.add_argument("--host", default="127.0.0.1")
    gui_parser.add_argument("--port", type=int, default=8000)
    gui_parser.add_argument("--no-api", action="store_true", help="Do not start the tool-call endpoint.")

    api_parser = subparsers.add_parser("api", help="Start the FastAPI server accepting tool-call batches.")
    api_parser.add_argument("--host", default="127.0.0.1")
    api_parser.add_argument("--port", type=int, default=8000)

    mcp_parser = subparsers.add_parser("mcp", help="Start the FastMCP server exposing the schedule tools.")
    mcp_parser.add_argument("--host", default="127.0.0.1")
    mcp_parser.add_argument("--port", type=int, default=8765)

    export_parser = subparsers.add_parser("export", help="Write the current schedule dataset to a JSON file.")
    export_parser.add_argument("--output", type=Path, default=None)

    subparsers.add_parser("session-config", help="Print the live session configuration as JSON.")
    subparsers.add_parser("clear-cache", help="Discard the cached dataset so the next load fetches the remote copy.")

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging()
    logger = logging.getLogger(__name__)
    logger.info("Schedule Assistant CLI starting (%s)", args.command)

    if args.command == "gui":
        from .ui.app import run_gui

        run_gui(serve_api=not args.no_api, host=args.host, port=args.port)
    elif args.command == "api":
        from .services.http import run_local_server

        run_local_server(host=args.host, port=args.port)
    elif args.command == "mcp":
        from .services.mcp import run_mcp_server

        run_mcp_server(host=args.host, port=args.port)
    elif args.command == "export":
        try:
            path = api_state.store.export(api_state.store.load(), args.output)
        except DatasetUnavailableError as exc:
            logger.error("Export failed: %s", exc)
            return 1
        print(path)
    elif args.command == "session-config":
        payload = orjson.dumps(build_live_config(api_state.context.settings), option=orjson.OPT_INDENT_2)
        sys.stdout.write(payload.decode("utf-8") + "\n")
    elif args.command == "clear-cache":
        removed = api_state.store.clear_cache()
        logger.info("Cache %s", "removed" if removed else "was already empty")
    else:  # pragma: no cover - argparse enforces choices
        parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
