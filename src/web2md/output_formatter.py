"""Build document trees for search and fetch results and format them."""

from __future__ import annotations

from typing import Sequence

from web2md.pipeline import OptionsLike, format_tree
from web2md.schemas import (
    CONTENT,
    HEADER,
    LINKS,
    METADATA,
    RESULT,
    Node,
    RemoteContent,
    RootNode,
)


def format_search_results(
    results: Sequence[RemoteContent],
    *,
    query: str,
    options: OptionsLike = None,
) -> str:
    """Format search hits as Markdown under the configured size limit."""
    return format_tree(build_search_schema(results, query=query), options)


def format_fetch_result(result: RemoteContent, options: OptionsLike = None) -> str:
    """Format a fetched page as Markdown under the configured size limit."""
    return format_tree(build_fetch_schema(result), options)


def build_search_schema(results: Sequence[RemoteContent], *, query: str) -> RootNode:
    """Create a header followed by one result card per search hit."""
    if not results:
        return RootNode(
            metadata={"query": query, "total_results": 0},
            children=[_header(f"No results found for query: {query}")],
        )

    return RootNode(
        metadata={"query": query, "total_results": len(results)},
        children=[
            _header(f'Search Results — "{query}"'),
            *(_result_node(result) for result in results),
        ],
    )


def build_fetch_schema(result: RemoteContent) -> RootNode:
    """Create metadata, content and related-links sections for a fetched page."""
    has_content = bool(result.content.strip())
    links = [pointer.link for pointer in result.related_content]

    children = [_metadata_node(result)]
    if not has_content and not links:
        children.append(_header(f"No content found for URL: {result.url}"))
    else:
        if has_content:
            children.append(_content_node(result.content))
        if links:
            children.append(Node(kind=LINKS, data={"links": links}))

    return RootNode(
        metadata={"url": result.url, "source": result.source_type},
        children=children,
    )


def _header(text: str) -> Node:
    return Node(kind=HEADER, data={"text": text})


def _metadata_node(result: RemoteContent) -> Node:
    return Node(kind=METADATA, data={"source": result.source_type, "url": result.url})


def _content_node(text: str) -> Node:
    return Node(kind=CONTENT, data={"text": text})


def _result_node(result: RemoteContent) -> Node:
    return Node(
        kind=RESULT,
        data={"title": result.title, "url": result.url, "source": result.source_type},
        children=[_content_node(result.content)],
    )
