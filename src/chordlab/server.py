#!/usr/bin/env python3
"""
Command-line entry point for the ChordLab MCP server.

    chordlab                          # stdio, project files under the cwd
    chordlab --transport http --port 8000
    chordlab --project-dir ~/songs    # styles/ and output/ live here
"""

import argparse
import asyncio
import logging
import os

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

PROJECT_DIR_ENV = "CHORDLAB_PROJECT_DIR"


def build_parser() -> argparse.ArgumentParser:
    """Command-line options for the server."""
    parser = argparse.ArgumentParser(description="ChordLab MCP Server")
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
        "--project-dir",
        help=f"Directory holding styles/ and output/ (default: ${PROJECT_DIR_ENV} or the cwd)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main() -> None:
    """Parse options, then start the server on the chosen transport."""
    args = build_parser().parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)
    if args.project_dir:
        os.environ[PROJECT_DIR_ENV] = os.path.expanduser(args.project_dir)

    # The server module reads its paths at import time
    from chordlab.async_server import mcp

    if args.transport == "stdio":
        logger.info("Starting ChordLab MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info("Starting ChordLab MCP Server (http:%d)", args.port)
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
