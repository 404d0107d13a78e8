"""
Trending page extraction.

Turns the HTML of a GitHub trending page into RepositorySummary records.
Each field has its own lookup returning ``None`` when the node is missing;
the per-field default is applied in ``extract_repository``.
"""

import re

from bs4 import BeautifulSoup, Tag

from ghtrending.exceptions import ExtractionError
from ghtrending.types.trending import RepositorySummary

DEFAULT_ORIGIN = "https://github.com"

CONTAINER_SELECTOR = "article.Box-row"
HEADING_LINK_SELECTOR = "h2.h3 a"
AUTHOR_SELECTOR = "span.text-normal"
STARGAZERS_SELECTOR = 'a[href*="/stargazers"]'
TODAY_STARS_SELECTOR = ".d-inline-block.float-sm-right"
LANGUAGE_SELECTOR = '[itemprop="programmingLanguage"]'
DESCRIPTION_SELECTOR = "p.color-fg-muted"

# Appended to the origin when the heading link has no href
MISSING_HREF = "undefined"

_DIGITS = re.compile(r"\d+")


def parse_document(html: str) -> BeautifulSoup:
    """Parse page markup into a traversable document."""
    return BeautifulSoup(html, "html.parser")


def _text(container: Tag, selector: str) -> str | None:
    # Text of every match, concatenated, then stripped.
    nodes = container.select(selector)
    if not nodes:
        return None
    return "".join(node.get_text() for node in nodes).strip()


def extract_name(container: Tag) -> str | None:
    return _text(container, HEADING_LINK_SELECTOR)


def extract_href(container: Tag) -> str | None:
    link = container.select_one(HEADING_LINK_SELECTOR)
    if link is None:
        return None
    return link.get("href")


def extract_author(container: Tag) -> str | None:
    text = _text(container, AUTHOR_SELECTOR)
    if text is None:
        return None
    return text.replace(" /", "", 1)


def extract_stars(container: Tag) -> str | None:
    """Text of the last stargazers link, with thousands separators removed."""
    links = container.select(STARGAZERS_SELECTOR)
    if not links:
        return None
    return links[-1].get_text().strip().replace(",", "")


def extract_today_stars(container: Tag) -> int | None:
    """First run of digits in the "N stars today" label."""
    text = _text(container, TODAY_STARS_SELECTOR)
    if text is None:
        return None
    match = _DIGITS.search(text)
    if match is None:
        return None
    return int(match.group(0))


def extract_language(container: Tag) -> str | None:
    return _text(container, LANGUAGE_SELECTOR)


def extract_description(container: Tag) -> str | None:
    return _text(container, DESCRIPTION_SELECTOR)


def extract_repository(container: Tag, origin: str = DEFAULT_ORIGIN) -> RepositorySummary:
    """
    Build one RepositorySummary from a trending entry container.

    Missing nodes default to an empty string, except ``today_stars``
    which defaults to 0 and ``url`` which falls back to the origin
    followed by "undefined".
    """
    href = extract_href(container)
    today_stars = extract_today_stars(container)
    return RepositorySummary(
        name=extract_name(container) or "",
        description=extract_description(container) or "",
        url=origin + (href if href is not None else MISSING_HREF),
        author=extract_author(container) or "",
        language=extract_language(container) or "",
        stars=extract_stars(container) or "",
        today_stars=today_stars if today_stars is not None else 0,
    )


def extract_repositories(html: str, origin: str = DEFAULT_ORIGIN) -> list[RepositorySummary]:
    """
    Extract every trending entry from a page, in document order.

    Args:
        html: Page markup
        origin: Prefix joined to each entry's repository link

    Returns:
        One summary per entry container; empty if the page has none

    Raises:
        ExtractionError: If the markup cannot be parsed or traversed
    """
    try:
        document = parse_document(html)
        return [
            extract_repository(container, origin)
            for container in document.select(CONTAINER_SELECTOR)
        ]
    except Exception as e:
        raise ExtractionError(f"{type(e).__name__}: {e}") from e
