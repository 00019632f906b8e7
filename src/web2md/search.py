"""Search and fetch use cases: call the gateway and map raw records."""

from __future__ import annotations

from typing import Any

from web2md import config
from web2md.gateway import OllamaGateway
from web2md.schemas import ContentPointer, RemoteContent, SourceType


async def search_web(
    query: str,
    *,
    max_results: int | None = None,
    gateway: OllamaGateway | None = None,
) -> list[RemoteContent]:
    """Search the web and return the hits as ``RemoteContent``.

    Args:
        query: Search query.
        max_results: Number of hits to request (1-10). Defaults to
            ``WEB2MD_MAX_RESULTS_DEFAULT``.
        gateway: Gateway to use. A default one is created if omitted.

    Raises:
        ValueError: If ``max_results`` is out of range.
        GatewayError: If the upstream request fails.
    """
    if max_results is None:
        max_results = config.WEB2MD_MAX_RESULTS_DEFAULT
    if not 1 <= max_results <= config.MAX_RESULTS_LIMIT:
        raise ValueError(f"max_results must be between 1 and {config.MAX_RESULTS_LIMIT}")

    records = await (gateway or OllamaGateway()).web_search(query, max_results=max_results)
    return [_search_hit(record) for record in records]


async def fetch_page(url: str, *, gateway: OllamaGateway | None = None) -> RemoteContent:
    """Fetch a page and return it as ``RemoteContent``.

    Raises:
        GatewayError: If the upstream request fails.
    """
    record = await (gateway or OllamaGateway()).web_fetch(url)
    return RemoteContent(
        title=record.get("title") or "",
        url=url,
        content=record.get("content") or "",
        related_content=[
            ContentPointer(link=link["url"])
            for link in record.get("related_content") or []
            if link.get("url")
        ],
        source_type=SourceType.FETCH,
    )


def _search_hit(record: dict[str, Any]) -> RemoteContent:
    return RemoteContent(
        title=record.get("title") or "",
        url=record.get("url") or "",
        content=record.get("content") or "",
        source_type=SourceType.SEARCH,
    )
