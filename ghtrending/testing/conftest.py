"""
Pytest plugin for ghtrending testing fixtures.

To use these fixtures in your tests, add this to your conftest.py:

    pytest_plugins = ["ghtrending.testing.conftest"]
"""

# Re-export all fixtures for pytest auto-discovery
from ghtrending.testing.fixtures import (
    mock_async_client,
    mock_client,
    sample_query,
    sample_repository,
    sample_trending_html,
)

__all__ = [
    "mock_client",
    "mock_async_client",
    "sample_query",
    "sample_repository",
    "sample_trending_html",
]
