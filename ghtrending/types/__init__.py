"""ghtrending type definitions.

This module exports all data model types used by the package.
"""

from ghtrending.types.query import Query, Since
from ghtrending.types.trending import ExtractionResult, RepositorySummary, TrendingResponse

__all__ = [
    # Query types
    "Query",
    "Since",
    # Trending types
    "RepositorySummary",
    "TrendingResponse",
    "ExtractionResult",
]
