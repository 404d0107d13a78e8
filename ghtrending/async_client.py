"""
ghtrending async client.

Async counterpart of TrendingClient; the fetch is the only awaited step.
"""

from typing import Any

from ghtrending.async_transport import AsyncHTTPTransport
from ghtrending.client import DEFAULT_BASE_URL, build_trending_url, describe_failure, settings_from_env
from ghtrending.extract import DEFAULT_ORIGIN, extract_repositories
from ghtrending.logging import get_logger
from ghtrending.transport import FetchConfig
from ghtrending.types.query import Query
from ghtrending.types.trending import ExtractionResult, RepositorySummary

logger = get_logger()


class AsyncTrendingClient:
    """
    Async client for the GitHub trending page.

    Example:
        ```python
        import asyncio
        from ghtrending import AsyncTrendingClient, Query

        async def main():
            async with AsyncTrendingClient() as client:
                repos = await client.search_repos(Query(since="weekly"))
                print(len(repos))

        asyncio.run(main())
        ```
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        origin: str = DEFAULT_ORIGIN,
        config: FetchConfig | None = None,
    ) -> None:
        """
        Initialize the async trending client.

        Args:
            base_url: Trending page address (default: https://github.com/trending)
            origin: Prefix joined to repository links (default: https://github.com)
            config: Fetch configuration (optional)
        """
        self.base_url = base_url
        self.origin = origin
        self._transport = AsyncHTTPTransport(config)

    @classmethod
    def from_env(cls) -> "AsyncTrendingClient":
        """
        Create an async client from environment variables.

        Raises:
            ConfigurationError: If a variable cannot be parsed
        """
        return cls(**settings_from_env())

    @property
    def transport(self) -> AsyncHTTPTransport:
        """Get the underlying async HTTP transport."""
        return self._transport

    async def search(self, query: Query) -> ExtractionResult:
        """
        Fetch and extract the trending page for a query.

        Never raises; failures are logged and returned as a failed result.
        """
        url = build_trending_url(query, self.base_url)
        try:
            body = await self._transport.get_text(url)
            repos = extract_repositories(body, self.origin)
        except Exception as e:
            reason = describe_failure(e)
            logger.error(f"Error fetching trending repositories from {url}: {reason}")
            return ExtractionResult.failure(reason)

        logger.debug(f"Extracted {len(repos)} trending repositories from {url}")
        return ExtractionResult.success(repos)

    async def search_repos(self, query: Query) -> list[RepositorySummary]:
        """Get trending repositories; empty if the page could not be read."""
        result = await self.search(query)
        return result.or_empty()

    async def close(self) -> None:
        """Close the client and release resources."""
        await self._transport.close()

    async def __aenter__(self) -> "AsyncTrendingClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()
