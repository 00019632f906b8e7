"""Tests for the server entry point."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

from web2md.__main__ import main


def test_stdio_transport_runs_mcp() -> None:
    with (
        patch("web2md.__main__.mcp") as mock_mcp,
        patch("web2md.__main__.uvicorn.run") as mock_uvicorn,
        patch("web2md.__main__._configure_logging"),
    ):
        main(["--transport", "stdio"])

    mock_mcp.run.assert_called_once_with(transport="stdio")
    mock_uvicorn.assert_not_called()


def test_http_transport_runs_uvicorn() -> None:
    app = MagicMock()
    with (
        patch("web2md.__main__.mcp") as mock_mcp,
        patch("web2md.__main__.uvicorn.run") as mock_uvicorn,
        patch("web2md.__main__._configure_logging"),
    ):
        mock_mcp.streamable_http_app.return_value = app
        main(["--transport", "http", "--host", "0.0.0.0", "--port", "9000"])

    mock_uvicorn.assert_called_once_with(app, host="0.0.0.0", port=9000, log_config=None)
    mock_mcp.run.assert_not_called()
