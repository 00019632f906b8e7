"""Client for the Ollama web search and web fetch API."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from web2md import config
from web2md.exceptions import ConfigurationError
from web2md.http_utils import post_json_with_retries

logger = logging.getLogger(__name__)


class OllamaGateway:
    """Async wrapper around the ``web_search`` and ``web_fetch`` endpoints.

    Configuration defaults come from environment variables:
        WEB2MD_API_BASE_URL - API base URL (default: https://ollama.com/api)
        OLLAMA_API_KEY      - Bearer token, required for every request
    """

    def __init__(
        self,
        *,
        api_key: str | None = None,
        base_url: str | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.api_key = config.OLLAMA_API_KEY if api_key is None else api_key
        self.base_url = (base_url or config.WEB2MD_API_BASE_URL).rstrip("/")
        self._client = client

    @property
    def search_url(self) -> str:
        return f"{self.base_url}/web_search"

    @property
    def fetch_url(self) -> str:
        return f"{self.base_url}/web_fetch"

    async def web_search(self, query: str, *, max_results: int) -> list[dict[str, Any]]:
        """Run a web search and return the raw result records."""
        body = await self._request(self.search_url, {"query": query, "max_results": max_results})
        return body.get("results") or []

    async def web_fetch(self, url: str) -> dict[str, Any]:
        """Fetch a page and return the raw record (title, content, links)."""
        return await self._request(self.fetch_url, {"url": url})

    async def _request(self, url: str, payload: dict[str, Any]) -> dict[str, Any]:
        logger.debug("POST %s", url)
        body = await post_json_with_retries(
            url,
            payload,
            headers=self._headers(),
            client=self._client,
        )
        return body if isinstance(body, dict) else {}

    def _headers(self) -> dict[str, str]:
        if not self.api_key:
            raise ConfigurationError("OLLAMA_API_KEY is not set")
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }
