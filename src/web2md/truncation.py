"""Fit content text into a character budget."""

from __future__ import annotations

import logging

from web2md.exceptions import BudgetTooSmallError
from web2md.schemas import Node, RootNode, content_nodes

logger = logging.getLogger(__name__)


def truncate_content(root: RootNode, budget: int) -> None:
    """Shorten ``content`` node texts in place so they fit within ``budget``.

    The budget is shared greedily from left to right: each leaf starts with
    an even share, and a leaf shorter than its share hands the unused
    characters to the leaves after it. Leaves that already fit are untouched.

    Args:
        root: Tree whose content leaves are shortened.
        budget: Characters available for content. Zero means no limit is
            applied.

    Raises:
        BudgetTooSmallError: If ``budget`` is negative. The tree is left
            unmodified.
    """
    if budget == 0:
        return
    if budget < 0:
        raise BudgetTooSmallError()

    nodes = content_nodes(root)
    if not nodes:
        return

    share = budget // len(nodes)
    for index, node in enumerate(nodes):
        share = _fit_node(node, share, remaining=len(nodes) - index - 1)


def _fit_node(node: Node, share: int, *, remaining: int) -> int:
    """Fit one leaf into ``share`` and return the share for the next leaf."""
    text = node.data.get("text") or ""
    extra = share - len(text)
    if extra > 0:
        if remaining == 0:
            return share
        return share + extra // remaining

    # str slicing counts code points, never bytes.
    node.data["text"] = text[:share]
    logger.debug("Truncated content from %d to %d characters", len(text), share)
    return share
