"""Test setup for web2md."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from web2md.schemas import Node, RootNode  # noqa: E402


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for pytest.

    This allows running integration tests selectively:
        pytest -m integration       # run only integration tests
        pytest -m "not integration" # skip integration tests
    """
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests (make real network calls)",
    )


@pytest.fixture
def search_tree() -> RootNode:
    """A search-style tree with a header and two result cards."""
    return RootNode(
        metadata={"query": "test query", "total_results": 2},
        children=[
            Node(kind="header", data={"text": 'Search Results — "test query"'}),
            Node(
                kind="result",
                data={"title": "Example Website 1", "url": "https://example1.com", "source": "search"},
                children=[Node(kind="content", data={"text": "This is the content of the first result."})],
            ),
            Node(
                kind="result",
                data={"title": "Example Website 2", "url": "https://example2.com", "source": "search"},
                children=[Node(kind="content", data={"text": "This is the content of the second result."})],
            ),
        ],
    )
