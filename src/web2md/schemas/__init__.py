"""Shared schemas for web2md."""

from web2md.schemas.content import ContentPointer, RemoteContent, SourceType
from web2md.schemas.nodes import (
    CONTENT,
    HEADER,
    LINKS,
    METADATA,
    RESULT,
    Node,
    RootNode,
    content_nodes,
    iter_nodes,
)

__all__ = [
    "CONTENT",
    "ContentPointer",
    "HEADER",
    "LINKS",
    "METADATA",
    "Node",
    "RESULT",
    "RemoteContent",
    "RootNode",
    "SourceType",
    "content_nodes",
    "iter_nodes",
]
