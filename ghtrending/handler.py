"""
Request handler for trending lookups.

Logs the incoming query, runs one fetch-and-extract pass and wraps the
result in a TrendingResponse. Failures never reach the caller; they come
back as an empty ``repos`` list.
"""

import logging
from collections.abc import Mapping
from typing import Any

from ghtrending.async_client import AsyncTrendingClient
from ghtrending.client import TrendingClient
from ghtrending.logging import get_logger, serialize_input
from ghtrending.types.query import Query
from ghtrending.types.trending import TrendingResponse


def _coerce_query(input: Query | Mapping[str, Any]) -> Query:
    if isinstance(input, Query):
        return input
    return Query.from_dict(input)


async def handle(
    input: Query | Mapping[str, Any],
    logger: logging.Logger | None = None,
    client: AsyncTrendingClient | None = None,
) -> TrendingResponse:
    """
    Search the trending GitHub repositories.

    Args:
        input: Query, or a mapping with optional "language" and "since"
        logger: Logging collaborator (default: the "ghtrending.handler" logger)
        client: Client to use; a fresh one is opened and closed when omitted

    Returns:
        TrendingResponse whose repos are in page order

    Raises:
        ValidationError: If a mapping input carries an invalid "since"
    """
    query = _coerce_query(input)
    logger = logger or get_logger("handler")
    logger.info(f"The input is {serialize_input(query)}")

    if client is not None:
        return TrendingResponse(repos=await client.search_repos(query))

    async with AsyncTrendingClient() as owned:
        return TrendingResponse(repos=await owned.search_repos(query))


def handle_sync(
    input: Query | Mapping[str, Any],
    logger: logging.Logger | None = None,
    client: TrendingClient | None = None,
) -> TrendingResponse:
    """Blocking version of handle()."""
    query = _coerce_query(input)
    logger = logger or get_logger("handler")
    logger.info(f"The input is {serialize_input(query)}")

    if client is not None:
        return TrendingResponse(repos=client.search_repos(query))

    with TrendingClient() as owned:
        return TrendingResponse(repos=owned.search_repos(query))
