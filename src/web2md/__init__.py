"""web2md: format web search and fetch results into bounded Markdown."""

from web2md.exceptions import (
    BudgetTooSmallError,
    ConfigurationError,
    FetchError,
    FormatError,
    GatewayError,
    UnknownNodeTypeError,
    Web2mdError,
)
from web2md.markdown import register_renderer, render_markdown
from web2md.output_formatter import (
    build_fetch_schema,
    build_search_schema,
    format_fetch_result,
    format_search_results,
)
from web2md.pipeline import FormatOptions, format_tree
from web2md.schemas import ContentPointer, Node, RemoteContent, RootNode, SourceType
from web2md.truncation import truncate_content

__all__ = [
    "BudgetTooSmallError",
    "ConfigurationError",
    "ContentPointer",
    "FetchError",
    "FormatError",
    "FormatOptions",
    "GatewayError",
    "Node",
    "RemoteContent",
    "RootNode",
    "SourceType",
    "UnknownNodeTypeError",
    "Web2mdError",
    "build_fetch_schema",
    "build_search_schema",
    "format_fetch_result",
    "format_search_results",
    "format_tree",
    "register_renderer",
    "render_markdown",
    "truncate_content",
]
