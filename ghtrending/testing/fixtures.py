"""
Pytest fixtures and page builders for ghtrending testing.

The render helpers produce markup shaped like the GitHub trending page,
so extraction can be exercised without network access.
"""

from html import escape
from typing import Any, Generator

import pytest

from ghtrending.testing.mock import MockAsyncTrendingClient, MockTrendingClient
from ghtrending.types.query import Query, Since
from ghtrending.types.trending import RepositorySummary

# ============================================================================
# Page Builders
# ============================================================================


def render_trending_entry(
    owner: str,
    repo: str,
    description: str | None = None,
    language: str | None = None,
    stars: int | None = 0,
    forks: int = 0,
    today_stars: int | None = 0,
    period: str = "today",
) -> str:
    """
    Render one ``article.Box-row`` trending entry.

    Star counts are written with thousands separators, as on the live page.
    Passing None for description, language, stars or today_stars leaves the
    corresponding element out.
    """
    parts = [
        '<article class="Box-row">',
        '<div class="float-right d-flex">',
        f'<a href="/login?return_to=%2F{escape(owner)}%2F{escape(repo)}" '
        'class="btn-sm btn">Star</a>',
        "</div>",
        '<h2 class="h3 lh-condensed">',
        f'<a href="/{escape(owner)}/{escape(repo)}" class="Link">',
        f'<span class="text-normal">{escape(owner)} /</span> {escape(repo)}',
        "</a>",
        "</h2>",
    ]
    if description is not None:
        parts.append(f'<p class="col-9 color-fg-muted my-1 pr-4">{escape(description)}</p>')

    parts.append('<div class="f6 color-fg-muted mt-2">')
    if language is not None:
        parts.append(
            '<span class="d-inline-block ml-0 mr-3">'
            '<span class="repo-language-color"></span>'
            f'<span itemprop="programmingLanguage">{escape(language)}</span>'
            "</span>"
        )
    if stars is not None:
        parts.append(
            f'<a href="/{escape(owner)}/{escape(repo)}/stargazers" '
            f'class="Link Link--muted d-inline-block mr-3"><svg></svg> {stars:,}</a>'
        )
    parts.append(
        f'<a href="/{escape(owner)}/{escape(repo)}/forks" '
        f'class="Link Link--muted d-inline-block mr-3"><svg></svg> {forks:,}</a>'
    )
    if today_stars is not None:
        parts.append(
            '<span class="d-inline-block float-sm-right">'
            f"<svg></svg> {today_stars:,} stars {period}</span>"
        )
    parts.append("</div>")
    parts.append("</article>")
    return "\n".join(parts)


def render_trending_page(entries: list[str]) -> str:
    """Wrap rendered entries in a minimal trending page."""
    return "\n".join(
        [
            "<!DOCTYPE html>",
            "<html><head><title>Trending repositories on GitHub today</title></head>",
            "<body>",
            '<div class="Box">',
            '<div class="Box-header">Trending</div>',
            *entries,
            "</div>",
            "</body></html>",
        ]
    )


def create_mock_repository(
    name: str = "octocat / hello-world",
    **kwargs: Any,
) -> RepositorySummary:
    """
    Create a RepositorySummary with customizable fields.

    Args:
        name: Repository name as shown on the page
        **kwargs: Additional fields to override

    Returns:
        RepositorySummary object
    """
    defaults: dict[str, Any] = {
        "description": "My first repository on GitHub",
        "url": "https://github.com/octocat/hello-world",
        "author": "octocat",
        "language": "Python",
        "stars": "1234",
        "today_stars": 56,
    }
    defaults.update(kwargs)
    return RepositorySummary(name=name, **defaults)


# ============================================================================
# Mock Client Fixtures
# ============================================================================


@pytest.fixture
def mock_client() -> Generator[MockTrendingClient, None, None]:
    """
    Provide a MockTrendingClient for testing.

    Example:
        ```python
        def test_my_feature(mock_client):
            mock_client.configure_search(repos=[create_mock_repository()])
            result = handle_sync({}, client=mock_client)
            assert mock_client.was_called("search")
        ```
    """
    client = MockTrendingClient()
    yield client
    client.reset()


@pytest.fixture
def mock_async_client() -> Generator[MockAsyncTrendingClient, None, None]:
    """Provide a MockAsyncTrendingClient for testing."""
    client = MockAsyncTrendingClient()
    yield client
    client.reset()


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def sample_query() -> Query:
    """Provide a query with both filters set."""
    return Query(language="python", since=Since.WEEKLY)


@pytest.fixture
def sample_repository() -> RepositorySummary:
    """Provide a sample RepositorySummary object."""
    return create_mock_repository()


@pytest.fixture
def sample_trending_html() -> str:
    """Provide a trending page with three entries."""
    return render_trending_page(
        [
            render_trending_entry(
                "octocat",
                "hello-world",
                description="My first repository on GitHub",
                language="Python",
                stars=1234,
                today_stars=56,
            ),
            render_trending_entry(
                "torvalds",
                "linux",
                description="Linux kernel source tree",
                language="C",
                stars=187654,
                today_stars=321,
            ),
            render_trending_entry("someone", "empty-repo", stars=7, today_stars=None),
        ]
    )


__all__ = [
    # Fixtures (exported for documentation, actual fixtures are auto-discovered)
    "mock_client",
    "mock_async_client",
    "sample_query",
    "sample_repository",
    "sample_trending_html",
    # Helper functions
    "create_mock_repository",
    "render_trending_entry",
    "render_trending_page",
]
