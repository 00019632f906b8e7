"""Entry point for running the MCP server with ``python -m web2md``."""

from __future__ import annotations

import argparse
import logging
import os
import sys

import uvicorn

from web2md.config import DEFAULT_HTTP_PORT
from web2md.server import mcp

logger = logging.getLogger("web2md")


def _configure_logging(level: str) -> None:
    # stdout carries the stdio transport
    logging.basicConfig(
        stream=sys.stderr,
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Web search and fetch MCP server.")
    parser.add_argument(
        "--transport",
        choices=("stdio", "http"),
        default=os.getenv("WEB2MD_TRANSPORT", "stdio"),
    )
    parser.add_argument("--host", default=os.getenv("HOST", "127.0.0.1"))
    parser.add_argument("--port", type=int, default=int(os.getenv("PORT", str(DEFAULT_HTTP_PORT))))
    parser.add_argument("--log-level", default=os.getenv("WEB2MD_LOG_LEVEL", "INFO"))
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    _configure_logging(args.log_level)

    logger.info(
        "Starting web2md server",
        extra={"transport": args.transport, "host": args.host, "port": args.port},
    )

    if args.transport == "stdio":
        mcp.run(transport="stdio")
        return

    uvicorn.run(
        mcp.streamable_http_app(),
        host=args.host,
        port=args.port,
        log_config=None,  # Keep our logging configuration
    )


if __name__ == "__main__":
    main()
