"""Shared fixtures for the ghtrending test suite."""

from ghtrending.testing.fixtures import (  # noqa: F401
    mock_async_client,
    mock_client,
    sample_query,
    sample_repository,
    sample_trending_html,
)
