"""Local configuration for web2md."""

from __future__ import annotations

import os


DEFAULT_API_BASE_URL = "https://ollama.com/api"
DEFAULT_FETCH_TIMEOUT_S = 30.0
DEFAULT_FETCH_MAX_RETRIES = 2
DEFAULT_FETCH_BACKOFF_S = 0.5
DEFAULT_USER_AGENT = "web2md/0.1"
DEFAULT_MAX_RESULTS = 5
MAX_RESULTS_LIMIT = 10
DEFAULT_MAX_CHARS = 120_000
DEFAULT_HTTP_PORT = 8080
SERVER_NAME = "ollama-web-search"

# Upstream web search / fetch API.
WEB2MD_API_BASE_URL = os.getenv("WEB2MD_API_BASE_URL", DEFAULT_API_BASE_URL).rstrip("/")
OLLAMA_API_KEY = os.getenv("OLLAMA_API_KEY", "")
WEB2MD_FETCH_TIMEOUT_S = float(os.getenv("WEB2MD_FETCH_TIMEOUT_S", str(DEFAULT_FETCH_TIMEOUT_S)))
WEB2MD_FETCH_MAX_RETRIES = int(os.getenv("WEB2MD_FETCH_MAX_RETRIES", str(DEFAULT_FETCH_MAX_RETRIES)))
WEB2MD_FETCH_BACKOFF_S = float(os.getenv("WEB2MD_FETCH_BACKOFF_S", str(DEFAULT_FETCH_BACKOFF_S)))
WEB2MD_USER_AGENT = os.getenv("WEB2MD_USER_AGENT", DEFAULT_USER_AGENT)
WEB2MD_MAX_RESULTS_DEFAULT = int(os.getenv("WEB2MD_MAX_RESULTS_DEFAULT", str(DEFAULT_MAX_RESULTS)))
