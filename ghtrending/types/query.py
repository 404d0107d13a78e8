"""Query data models."""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from ghtrending.exceptions import ValidationError


class Since(str, Enum):
    """Time window of the trending listing."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


@dataclass
class Query:
    """Filters for one trending lookup. ``None`` means no filter."""

    language: str | None = None
    since: Since | None = None

    def __post_init__(self) -> None:
        if self.since is not None and not isinstance(self.since, Since):
            self.since = _parse_since(self.since)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Query":
        """
        Build a query from its wire shape.

        Empty strings are treated as absent filters.

        Args:
            data: Mapping with optional "language" and "since" keys

        Returns:
            Query instance

        Raises:
            ValidationError: If "since" is not daily, weekly or monthly
        """
        language = data.get("language") or None
        since = data.get("since") or None
        return cls(language=language, since=since)

    def to_dict(self) -> dict[str, str]:
        """Wire shape of the query, with unset filters left out."""
        result: dict[str, str] = {}
        if self.language is not None:
            result["language"] = self.language
        if self.since is not None:
            result["since"] = self.since.value
        return result


def _parse_since(value: Any) -> Since:
    try:
        return Since(value)
    except ValueError:
        allowed = ", ".join(s.value for s in Since)
        raise ValidationError(
            f"Invalid since value: {value!r}. Must be one of: {allowed}"
        ) from None
