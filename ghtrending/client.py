"""
ghtrending main client.

Provides the primary interface for reading the GitHub trending page.
"""

import os
from typing import Any

from ghtrending.exceptions import ConfigurationError, TrendingError
from ghtrending.extract import DEFAULT_ORIGIN, extract_repositories
from ghtrending.logging import get_logger
from ghtrending.transport import DEFAULT_USER_AGENT, FetchConfig, HTTPTransport
from ghtrending.types.query import Query
from ghtrending.types.trending import ExtractionResult, RepositorySummary

DEFAULT_BASE_URL = "https://github.com/trending"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}

logger = get_logger()


def build_trending_url(query: Query, base_url: str = DEFAULT_BASE_URL) -> str:
    """
    Build the trending page URL for a query.

    Filters are concatenated as-is: the language becomes a path segment
    and the time window a ``since`` query parameter. Values are not escaped.

    Example:
        ```python
        build_trending_url(Query(language="python", since=Since.WEEKLY))
        # "https://github.com/trending/python?since=weekly"
        ```
    """
    url = base_url
    if query.language:
        url += f"/{query.language}"
    if query.since:
        url += f"?since={query.since.value}"
    return url


def describe_failure(error: Exception) -> str:
    """Failure reason recorded on an ExtractionResult."""
    if isinstance(error, TrendingError):
        return str(error)
    return f"{type(error).__name__}: {error}"


def settings_from_env() -> dict[str, Any]:
    """
    Read client settings from environment variables.

    Environment variables:
        GHTRENDING_BASE_URL: Trending page address (optional, default: https://github.com/trending)
        GHTRENDING_ORIGIN: Prefix for repository links (optional, default: https://github.com)
        GHTRENDING_TIMEOUT: Request timeout in seconds (optional, default: no timeout)
        GHTRENDING_USER_AGENT: User-Agent header (optional)
        GHTRENDING_CHECK_STATUS: Treat non-2xx responses as failures (optional, default: false)

    Returns:
        Keyword arguments for TrendingClient / AsyncTrendingClient

    Raises:
        ConfigurationError: If a variable cannot be parsed
    """
    timeout_str = os.environ.get("GHTRENDING_TIMEOUT")
    timeout: float | None = None
    if timeout_str:
        try:
            timeout = float(timeout_str)
        except ValueError:
            raise ConfigurationError(
                f"Invalid GHTRENDING_TIMEOUT: {timeout_str}. Must be a number of seconds"
            ) from None
        if timeout <= 0:
            raise ConfigurationError(
                f"Invalid GHTRENDING_TIMEOUT: {timeout_str}. Must be positive"
            )

    check_status_str = os.environ.get("GHTRENDING_CHECK_STATUS", "false").lower()
    if check_status_str in _TRUE_VALUES:
        check_status = True
    elif check_status_str in _FALSE_VALUES:
        check_status = False
    else:
        raise ConfigurationError(
            f"Invalid GHTRENDING_CHECK_STATUS: {check_status_str}. Must be true or false"
        )

    return {
        "base_url": os.environ.get("GHTRENDING_BASE_URL", DEFAULT_BASE_URL),
        "origin": os.environ.get("GHTRENDING_ORIGIN", DEFAULT_ORIGIN),
        "config": FetchConfig(
            timeout=timeout,
            user_agent=os.environ.get("GHTRENDING_USER_AGENT", DEFAULT_USER_AGENT),
            check_status=check_status,
        ),
    }


class TrendingClient:
    """
    Client for the GitHub trending page.

    Example:
        ```python
        from ghtrending import Query, TrendingClient

        with TrendingClient() as client:
            for repo in client.search_repos(Query(language="python")):
                print(repo.name, repo.today_stars)
        ```
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        origin: str = DEFAULT_ORIGIN,
        config: FetchConfig | None = None,
    ) -> None:
        """
        Initialize the trending client.

        Args:
            base_url: Trending page address (default: https://github.com/trending)
            origin: Prefix joined to repository links (default: https://github.com)
            config: Fetch configuration (optional)
        """
        self.base_url = base_url
        self.origin = origin
        self._transport = HTTPTransport(config)

    @classmethod
    def from_env(cls) -> "TrendingClient":
        """
        Create a client from environment variables.

        See settings_from_env for the variables read.

        Raises:
            ConfigurationError: If a variable cannot be parsed
        """
        return cls(**settings_from_env())

    @property
    def transport(self) -> HTTPTransport:
        """Get the underlying HTTP transport (for advanced use cases)."""
        return self._transport

    def search(self, query: Query) -> ExtractionResult:
        """
        Fetch and extract the trending page for a query.

        Never raises: any failure while fetching, parsing or traversing
        the page is logged and returned as a failed result.

        Args:
            query: Language and time window filters

        Returns:
            ExtractionResult with the summaries in page order, or the failure reason
        """
        url = build_trending_url(query, self.base_url)
        try:
            body = self._transport.get_text(url)
            repos = extract_repositories(body, self.origin)
        except Exception as e:
            reason = describe_failure(e)
            logger.error(f"Error fetching trending repositories from {url}: {reason}")
            return ExtractionResult.failure(reason)

        logger.debug(f"Extracted {len(repos)} trending repositories from {url}")
        return ExtractionResult.success(repos)

    def search_repos(self, query: Query) -> list[RepositorySummary]:
        """
        Get trending repositories for a query.

        Returns:
            Summaries in page order; empty if the page could not be read
        """
        return self.search(query).or_empty()

    def close(self) -> None:
        """Close the client and release resources."""
        self._transport.close()

    def __enter__(self) -> "TrendingClient":
        """Context manager entry."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit - closes the client."""
        self.close()
