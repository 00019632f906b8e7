"""MCP server exposing web search and web fetch as Markdown tools.

Both tools return text: formatted Markdown on success, or the error
message when the request or formatting fails.
"""

from __future__ import annotations

import logging
from typing import Optional

from mcp.server.fastmcp import FastMCP

from web2md.config import DEFAULT_MAX_CHARS, SERVER_NAME
from web2md.exceptions import Web2mdError
from web2md.output_formatter import format_fetch_result, format_search_results
from web2md.search import fetch_page, search_web

logger = logging.getLogger(__name__)

mcp = FastMCP(SERVER_NAME)


@mcp.tool()
async def web_search(
    query: str,
    max_results: Optional[int] = None,
    truncate: bool = True,
    max_chars: int = DEFAULT_MAX_CHARS,
) -> str:
    """Search the internet using Ollama's web search API.

    Args:
        query: The search query string
        max_results: Maximum results to return (default 5, max 10)
        truncate: Whether to truncate content (default true)
        max_chars: Maximum characters to return (default 120000)
    """
    try:
        _check_max_chars(max_chars)
        results = await search_web(query, max_results=max_results)
        return format_search_results(
            results,
            query=query,
            options={"truncate": truncate, "max_chars": max_chars},
        )
    except (Web2mdError, ValueError) as exc:
        logger.warning("web_search failed", extra={"query": query, "error": str(exc)})
        return str(exc)


@mcp.tool()
async def web_fetch(
    url: str,
    truncate: bool = True,
    max_chars: int = DEFAULT_MAX_CHARS,
) -> str:
    """Fetch web page content using Ollama's web fetch API.

    Args:
        url: The URL to fetch content from
        truncate: Whether to truncate the content
        max_chars: Maximum number of characters to return
    """
    try:
        _check_max_chars(max_chars)
        result = await fetch_page(url)
        return format_fetch_result(
            result,
            options={"truncate": truncate, "max_chars": max_chars},
        )
    except (Web2mdError, ValueError) as exc:
        logger.warning("web_fetch failed", extra={"url": url, "error": str(exc)})
        return str(exc)


def _check_max_chars(max_chars: int | None) -> None:
    if max_chars is not None and max_chars < 0:
        raise ValueError("max_chars must be greater than or equal to 0")
