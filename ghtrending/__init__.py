"""ghtrending - GitHub trending repositories as structured records."""

from ghtrending.async_client import AsyncTrendingClient
from ghtrending.client import DEFAULT_BASE_URL, TrendingClient, build_trending_url
from ghtrending.exceptions import (
    ConfigurationError,
    ExtractionError,
    FetchError,
    TrendingError,
    UpstreamStatusError,
    ValidationError,
)
from ghtrending.extract import DEFAULT_ORIGIN, extract_repositories
from ghtrending.handler import handle, handle_sync
from ghtrending.logging import configure_logging, get_logger
from ghtrending.transport import FetchConfig, HTTPTransport
from ghtrending.types import ExtractionResult, Query, RepositorySummary, Since, TrendingResponse

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Handler
    "handle",
    "handle_sync",
    # Clients
    "TrendingClient",
    "AsyncTrendingClient",
    "build_trending_url",
    "DEFAULT_BASE_URL",
    "DEFAULT_ORIGIN",
    # Extraction
    "extract_repositories",
    # Types
    "Query",
    "Since",
    "RepositorySummary",
    "TrendingResponse",
    "ExtractionResult",
    # Exceptions
    "TrendingError",
    "ConfigurationError",
    "ValidationError",
    "FetchError",
    "UpstreamStatusError",
    "ExtractionError",
    # Transport
    "HTTPTransport",
    "FetchConfig",
    # Logging
    "configure_logging",
    "get_logger",
]
