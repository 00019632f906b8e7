"""Remote content models returned by the search/fetch gateway."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class SourceType(str, Enum):
    """Where a piece of remote content came from."""

    SEARCH = "search"
    FETCH = "fetch"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value


class ContentPointer(BaseModel):
    """A link to content related to a fetched page."""

    link: str


class RemoteContent(BaseModel):
    """A search hit or a fetched page.

    Attributes:
        title: Page title.
        url: Page URL.
        content: Page text as returned by the gateway.
        related_content: Links found on the page (fetch only).
        source_type: Operation that produced this content.
    """

    title: str
    url: str
    content: str
    related_content: list[ContentPointer] = Field(default_factory=list)
    source_type: SourceType = SourceType.UNKNOWN
