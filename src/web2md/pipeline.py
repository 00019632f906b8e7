"""Formatting pipeline: measure markup, truncate content, render."""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from typing import Any, Mapping, Union

from web2md.config import DEFAULT_MAX_CHARS
from web2md.markdown import render_markdown
from web2md.schemas import RootNode
from web2md.truncation import truncate_content

logger = logging.getLogger(__name__)


@dataclass
class FormatOptions:
    """Options for formatting a document tree.

    Attributes:
        truncate: If True, shorten content so the output fits in ``max_chars``.
        max_chars: Maximum length of the rendered output.
    """

    truncate: bool = True
    max_chars: int = DEFAULT_MAX_CHARS

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any] | None) -> FormatOptions:
        """Merge caller options over the defaults, ignoring ``None`` values."""
        known = {f.name for f in fields(cls)}
        provided = {
            key: value
            for key, value in (options or {}).items()
            if key in known and value is not None
        }
        return cls(**provided)


OptionsLike = Union[FormatOptions, Mapping[str, Any], None]


def format_tree(root: RootNode, options: OptionsLike = None) -> str:
    """Render ``root`` to Markdown, truncating content to fit ``max_chars``.

    Overhead is measured by rendering the tree once with content blanked
    out; whatever is left of ``max_chars`` is shared among the content
    leaves before the final render.

    Args:
        root: Freshly built tree. Content leaves are truncated in place.
        options: ``FormatOptions`` or a mapping with ``truncate`` and
            ``max_chars`` keys. Defaults apply to missing or ``None`` values.

    Returns:
        The rendered Markdown.

    Raises:
        BudgetTooSmallError: If the markup alone is longer than ``max_chars``.
        UnknownNodeTypeError: If the tree contains an unrenderable node.
    """
    opts = options if isinstance(options, FormatOptions) else FormatOptions.from_mapping(options)

    if not opts.truncate:
        return render_markdown(root)

    overhead = len(render_markdown(root, ignore_content=True))
    content_budget = opts.max_chars - overhead
    logger.debug(
        "Formatting with max_chars=%d overhead=%d content_budget=%d",
        opts.max_chars,
        overhead,
        content_budget,
    )

    truncate_content(root, content_budget)
    return render_markdown(root)
