"""
Entry point: `ganjinex-mcp TOKEN` starts the MCP server on stdio.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv

from .config import get_log_level, load_config
from .errors import ConfigurationError

log = logging.getLogger("ganjinex_mcp")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ganjinex-mcp",
        description="Serve the Ganjinex exchange API as MCP tools over stdio.",
    )
    parser.add_argument("token", nargs="?", help="Ganjinex API token, sent as X-Token on every request.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()  # take environment variables from .env
    args = build_parser().parse_args(argv)

    # stdout carries the MCP framing, so logs go to stderr only
    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        config = load_config(args.token)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    from .server import serve

    try:
        asyncio.run(serve(config))
    except KeyboardInterrupt:
        log.info("Shutdown requested")
    return 0


if __name__ == "__main__":
    sys.exit(main())
