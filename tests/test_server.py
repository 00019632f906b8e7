"""Tests for the MCP tool functions."""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

import pytest

from web2md import server
from web2md.exceptions import GatewayError
from web2md.schemas import ContentPointer, RemoteContent, SourceType


def _page(content: str = "Page body") -> RemoteContent:
    return RemoteContent(
        title="Example",
        url="https://example.com",
        content=content,
        related_content=[ContentPointer(link="https://example.com/a")],
        source_type=SourceType.FETCH,
    )


class TestWebSearchTool:
    """Tests for the web_search tool."""

    @pytest.mark.asyncio
    async def test_formats_results(self) -> None:
        hits = [RemoteContent(title="Ruby", url="https://ruby-lang.org", content="Ruby is...", source_type=SourceType.SEARCH)]

        with patch("web2md.server.search_web", new=AsyncMock(return_value=hits)) as mock_search:
            output = await server.web_search("ruby", max_results=3)

        mock_search.assert_awaited_once_with("ruby", max_results=3)
        assert output.startswith('Search Results — "ruby"\n### [Ruby](https://ruby-lang.org)')

    @pytest.mark.asyncio
    async def test_gateway_error_is_returned_as_text(self) -> None:
        with patch("web2md.server.search_web", new=AsyncMock(side_effect=GatewayError("Error: HTTP 500 - oops"))):
            output = await server.web_search("ruby")

        assert output == "Error: HTTP 500 - oops"

    @pytest.mark.asyncio
    async def test_rejects_negative_max_chars(self) -> None:
        with patch("web2md.server.search_web", new=AsyncMock()) as mock_search:
            output = await server.web_search("ruby", max_chars=-1)

        assert "max_chars" in output
        mock_search.assert_not_called()


class TestWebFetchTool:
    """Tests for the web_fetch tool."""

    @pytest.mark.asyncio
    async def test_formats_page(self) -> None:
        with patch("web2md.server.fetch_page", new=AsyncMock(return_value=_page())):
            output = await server.web_fetch("https://example.com")

        assert output == (
            "**Source:** fetch\n"
            "**URL:** https://example.com\n"
            "**Content:**\n"
            "---\n"
            "Page body\n"
            "---\n"
            "**Links:**\n"
            "- [https://example.com/a](https://example.com/a)"
        )

    @pytest.mark.asyncio
    async def test_truncates_to_max_chars(self) -> None:
        with patch("web2md.server.fetch_page", new=AsyncMock(return_value=_page("A" * 5_000))):
            output = await server.web_fetch("https://example.com", max_chars=300)

        assert len(output) <= 300

    @pytest.mark.asyncio
    async def test_truncate_disabled(self) -> None:
        with patch("web2md.server.fetch_page", new=AsyncMock(return_value=_page("A" * 5_000))):
            output = await server.web_fetch("https://example.com", truncate=False, max_chars=300)

        assert "A" * 5_000 in output

    @pytest.mark.asyncio
    async def test_budget_too_small_is_returned_as_text(self) -> None:
        with patch("web2md.server.fetch_page", new=AsyncMock(return_value=_page())):
            output = await server.web_fetch("https://example.com", max_chars=5)

        assert output == "Token limit smaller than empty layout size"
