"""Render document trees to Markdown."""

from __future__ import annotations

from typing import Callable, Iterable

from web2md.exceptions import UnknownNodeTypeError
from web2md.schemas import CONTENT, HEADER, LINKS, METADATA, RESULT, Node, RootNode

Renderer = Callable[[Node, "_RenderContext"], str]

_RENDERERS: dict[str, Renderer] = {}


class _RenderContext:
    """Per-call rendering options."""

    def __init__(self, *, ignore_content: bool = False) -> None:
        self.ignore_content = ignore_content


def register_renderer(kind: str) -> Callable[[Renderer], Renderer]:
    """Register a render function for a node kind."""

    def decorator(func: Renderer) -> Renderer:
        _RENDERERS[kind] = func
        return func

    return decorator


def render_markdown(root: RootNode, *, ignore_content: bool = False) -> str:
    """Render a document tree into a single Markdown string.

    Parameters
    ----------
    root : RootNode
        The tree to render.
    ignore_content : bool
        If True, every content block is rendered with empty text. The result
        measures the fixed markup around the content.

    Raises
    ------
    UnknownNodeTypeError
        If a node kind has no registered renderer.
    """
    context = _RenderContext(ignore_content=ignore_content)
    return _join_lines(render_node(child, context) for child in root.children)


def render_node(node: Node, context: _RenderContext) -> str:
    renderer = _RENDERERS.get(node.kind)
    if renderer is None:
        raise UnknownNodeTypeError(node.kind)
    return renderer(node, context)


def _join_lines(lines: Iterable[str]) -> str:
    # one line per rendering, without doubling a trailing newline
    return "".join(line if line.endswith("\n") else f"{line}\n" for line in lines).rstrip()


@register_renderer(HEADER)
def _render_header(node: Node, context: _RenderContext) -> str:
    return node.data.get("text") or ""


@register_renderer(RESULT)
def _render_result(node: Node, context: _RenderContext) -> str:
    title = node.data.get("title", "")
    url = node.data.get("url", "")
    lines = [
        f"### [{title}]({url})",
        f"**URL:** {url}",
        f"**Source:** {_source_label(node.data.get('source'))}",
    ]
    lines.extend(render_node(child, context) for child in node.children)
    return _join_lines(lines)


@register_renderer(METADATA)
def _render_metadata(node: Node, context: _RenderContext) -> str:
    return "\n".join(
        [
            f"**Source:** {_source_label(node.data.get('source'))}",
            f"**URL:** {node.data.get('url', '')}",
        ]
    )


@register_renderer(CONTENT)
def _render_content(node: Node, context: _RenderContext) -> str:
    text = "" if context.ignore_content else node.data.get("text", "")
    return f"**Content:**\n---\n{text}\n---"


@register_renderer(LINKS)
def _render_links(node: Node, context: _RenderContext) -> str:
    links = node.data.get("links") or []
    lines = ["**Links:**"]
    if not links:
        lines.append("- None")
    lines.extend(f"- [{link}]({link})" for link in links)
    return _join_lines(lines)


def _source_label(source: object) -> str:
    # str-valued enums render as their value
    value = getattr(source, "value", source)
    return "" if value is None else str(value)
