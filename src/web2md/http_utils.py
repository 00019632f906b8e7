"""HTTP utilities for calling the upstream API with retry logic."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Final

import httpx

from web2md.config import (
    WEB2MD_FETCH_BACKOFF_S,
    WEB2MD_FETCH_MAX_RETRIES,
    WEB2MD_FETCH_TIMEOUT_S,
    WEB2MD_USER_AGENT,
)
from web2md.exceptions import GatewayError

logger = logging.getLogger(__name__)

RETRY_STATUS_CODES: Final[frozenset[int]] = frozenset({429, 500, 502, 503, 504})

_MAX_REDIRECTS: Final[int] = 5


async def post_json_with_retries(
    url: str,
    payload: dict[str, Any],
    *,
    headers: dict[str, str] | None = None,
    client: httpx.AsyncClient | None = None,
) -> Any:
    """POST a JSON payload and return the decoded JSON response.

    Args:
        url: The URL to post to.
        payload: JSON-serializable request body.
        headers: Extra request headers (e.g. Authorization).
        client: Optional httpx.AsyncClient for connection pooling. If not
            provided, a new client is created for this request.

    Returns:
        The decoded JSON body.

    Raises:
        GatewayError: On a non-retryable HTTP status, a timeout, an invalid
            JSON body, or when all retries are exhausted.
    """
    timeout = httpx.Timeout(WEB2MD_FETCH_TIMEOUT_S)
    request_headers = {"User-Agent": WEB2MD_USER_AGENT, **(headers or {})}
    last_exc: Exception | None = None

    async def do_post(http_client: httpx.AsyncClient) -> Any:
        nonlocal last_exc

        for attempt in range(WEB2MD_FETCH_MAX_RETRIES + 1):
            try:
                response = await http_client.post(url, json=payload, headers=request_headers)

                if response.status_code in RETRY_STATUS_CODES:
                    last_exc = GatewayError(f"HTTP {response.status_code} from {url}")
                elif response.status_code != 200:
                    raise GatewayError(f"Error: HTTP {response.status_code} - {response.text}")
                else:
                    return _decode_json(response)
            except httpx.TimeoutException as exc:
                raise GatewayError(f"HTTP Timeout: {exc}") from exc
            except httpx.RequestError as exc:
                last_exc = exc

            if attempt < WEB2MD_FETCH_MAX_RETRIES:
                backoff = WEB2MD_FETCH_BACKOFF_S * (2**attempt)
                logger.debug("Retrying %s in %.2fs after: %s", url, backoff, last_exc)
                await asyncio.sleep(backoff)

        raise GatewayError(f"Failed to reach {url}: {last_exc}")

    if client is not None:
        return await do_post(client)

    async with httpx.AsyncClient(
        timeout=timeout,
        follow_redirects=True,
        max_redirects=_MAX_REDIRECTS,
    ) as new_client:
        return await do_post(new_client)


def _decode_json(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError as exc:
        raise GatewayError(f"Invalid JSON response: {exc}") from exc
