"""
HTTP Transport for ghtrending.

Handles the single page read against the trending listing and turns
network failures into typed exceptions.
"""

import time
from dataclasses import dataclass
from typing import Any

import httpx

from ghtrending.exceptions import FetchError, UpstreamStatusError
from ghtrending.logging import log_http_request, log_http_response

DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; ghtrending/0.1)"


@dataclass
class FetchConfig:
    """Configuration for page fetching."""

    timeout: float | None = None  # None waits indefinitely
    user_agent: str = DEFAULT_USER_AGENT
    check_status: bool = False  # treat non-2xx responses as failures


class HTTPTransport:
    """
    HTTP transport layer for reading trending pages.

    Handles:
    - One GET per call, no retry
    - Optional status checking
    - Network error wrapping into FetchError
    """

    def __init__(self, config: FetchConfig | None = None) -> None:
        """
        Initialize HTTP transport.

        Args:
            config: Fetch configuration (timeout, user agent, status checking)
        """
        self.config = config or FetchConfig()

        self._client = httpx.Client(
            timeout=self.config.timeout,
            headers={"User-Agent": self.config.user_agent},
            follow_redirects=True,
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def get_text(self, url: str) -> str:
        """
        Fetch a page and return its body as text.

        Args:
            url: Absolute URL of the page

        Returns:
            Response body decoded as text

        Raises:
            FetchError: On network errors
            UpstreamStatusError: On non-2xx status if check_status is enabled
        """
        log_http_request("GET", url, dict(self._client.headers))
        started = time.monotonic()

        try:
            response = self._client.get(url)
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
