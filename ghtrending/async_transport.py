"""
Async HTTP Transport for ghtrending.

Same contract as HTTPTransport, using the httpx async client.
"""

import time
from typing import Any

import httpx

from ghtrending.exceptions import FetchError, UpstreamStatusError
from ghtrending.logging import log_http_request, log_http_response
from ghtrending.transport import FetchConfig


class AsyncHTTPTransport:
    """Async HTTP transport layer for reading trending pages."""

    def __init__(self, config: FetchConfig | None = None) -> None:
        """
        Initialize async HTTP transport.

        Args:
            config: Fetch configuration (timeout, user agent, status checking)
        """
        self.config = config or FetchConfig()

        self._client = httpx.AsyncClient(
            timeout=self.config.timeout,
            headers={"User-Agent": self.config.user_agent},
            follow_redirects=True,
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncHTTPTransport":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def get_text(self, url: str) -> str:
        """
        Fetch a page and return its body as text.

        Raises:
            FetchError: On network errors
            UpstreamStatusError: On non-2xx status if check_status is enabled
        """
        log_http_request("GET", url, dict(self._client.headers))
        started = time.monotonic()

        try:
            response = await self._client.get(url)
        except httpx.HTTPError as e:
            raise FetchError("CONNECTION_ERROR", str(e)) from e

        body = response.text
        log_http_response(
            response.status_code,
            url,
            content_length=len(body),
            elapsed_ms=(time.monotonic() - started) * 1000,
        )

        if self.config.check_status and not response.is_success:
            raise UpstreamStatusError(response.status_code, url)

        return body
