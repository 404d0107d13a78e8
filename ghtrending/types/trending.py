"""Trending-related data models."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class RepositorySummary:
    """A repository as listed on the trending page."""

    name: str
    description: str
    url: str
    author: str
    language: str
    stars: str  # digits only, commas removed; not converted to int
    today_stars: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "url": self.url,
            "author": self.author,
            "language": self.language,
            "stars": self.stars,
            "todayStars": self.today_stars,
        }


@dataclass
class TrendingResponse:
    """Envelope returned by the handler."""

    repos: list[RepositorySummary] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"repos": [repo.to_dict() for repo in self.repos]}


@dataclass
class ExtractionResult:
    """
    Outcome of one fetch-and-extract pass.

    Either ``repos`` holds the extracted summaries and ``error`` is None,
    or ``error`` holds the failure reason and ``repos`` is empty.
    """

    repos: list[RepositorySummary] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, repos: list[RepositorySummary]) -> "ExtractionResult":
        return cls(repos=repos)

    @classmethod
    def failure(cls, reason: str) -> "ExtractionResult":
        return cls(repos=[], error=reason)

    def or_empty(self) -> list[RepositorySummary]:
        """Extracted summaries, or an empty list if the pass failed."""
        return self.repos if self.ok else []
