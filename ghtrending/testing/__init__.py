"""ghtrending testing utilities.

Provides mock clients and page builders for testing code that uses ghtrending.
"""

from ghtrending.testing.fixtures import (
    create_mock_repository,
    render_trending_entry,
    render_trending_page,
)
from ghtrending.testing.mock import MockAsyncTrendingClient, MockCall, MockTrendingClient

__all__ = [
    # Mock clients
    "MockTrendingClient",
    "MockAsyncTrendingClient",
    "MockCall",
    # Helper functions
    "create_mock_repository",
    "render_trending_entry",
    "render_trending_page",
]
