"""Document tree models."""

from __future__ import annotations

from typing import Any, Iterator

from pydantic import BaseModel, Field

HEADER = "header"
RESULT = "result"
METADATA = "metadata"
CONTENT = "content"
LINKS = "links"


class Node(BaseModel):
    """A single element of the document tree.

    The shape of ``data`` depends on ``kind``:

    - ``header``: ``text``
    - ``result``: ``title``, ``url``, ``source`` (children: usually one ``content``)
    - ``metadata``: ``source``, ``url``
    - ``content``: ``text`` (shortened in place by truncation)
    - ``links``: ``links`` (list of URLs, may be empty)

    Kinds are not checked here; the renderer rejects kinds it does not know.
    """

    kind: str
    data: dict[str, Any] = Field(default_factory=dict)
    children: list["Node"] = Field(default_factory=list)


class RootNode(BaseModel):
    """Entry point of a document tree.

    ``metadata`` is caller bookkeeping (query, URL, result count) and is
    never rendered.
    """

    metadata: dict[str, Any] = Field(default_factory=dict)
    children: list[Node] = Field(default_factory=list)


def iter_nodes(root: RootNode | Node) -> Iterator[Node]:
    """Yield every node below ``root`` depth-first, left to right."""
    for child in root.children:
        yield child
        yield from iter_nodes(child)


def content_nodes(root: RootNode | Node) -> list[Node]:
    """Return all ``content`` nodes in document order."""
    return [node for node in iter_nodes(root) if node.kind == CONTENT]
