#!/usr/bin/env python3
"""
Command line entry point for chuk-mcp-chords.

    chuk-mcp-chords                         serve over stdio
    chuk-mcp-chords --transport http        serve over HTTP on --port
    chuk-mcp-chords --load-variables        restore saved chord variables first
"""

import argparse
import asyncio
import logging

from chuk_mcp_chords.session import VariableStore

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chuk-mcp-chords",
        description="Chord notation engine served as MCP tools",
    )
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP port (only for http transport)",
    )
    parser.add_argument(
        "--load-variables",
        action="store_true",
        help="Load chord variables saved by chord_save_variables before serving",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


async def preload_variables(store: VariableStore) -> int:
    """
    Restore saved variables into the store.

    A missing file is not an error: there is simply nothing to restore yet.

    Returns:
        Number of variables loaded
    """
    if store.path is None or not store.path.exists():
        logger.info("No saved variables to load")
        return 0
    return await store.load()


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    # The server module registers tools on import; keep it after --debug
    from chuk_mcp_chords.async_server import mcp, variable_store

    if args.load_variables:
        asyncio.run(preload_variables(variable_store))

    if args.transport == "stdio":
        logger.info("Serving chord tools over stdio")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info("Serving chord tools over http on port %d", args.port)
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
