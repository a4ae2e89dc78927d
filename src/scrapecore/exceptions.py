"""
Error hierarchy for the scraper.

Every failure raised out of ``scrapecore.fetch`` derives from ``ScraperError``
so callers can catch the whole family at once. No error is ever raised
alongside partial content.
"""

from __future__ import annotations

from typing import Optional


class ScraperError(Exception):
    """Base class for all scraper failures."""

    kind = "scraper"


class FetchError(ScraperError):
    """Transport or server-side failure during the primary fetch."""

    kind = "fetch"

    def __init__(self, message: str, *, url: str | None = None, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class UnsupportedContentTypeError(ScraperError):
    """The fetched resource is not an HTML document."""

    kind = "unsupported_content_type"

    def __init__(self, content_type: str) -> None:
        super().__init__(f"this resource is not a HTML document ({content_type})")
        self.content_type = content_type


class EncodingError(ScraperError):
    """The response body could not be decoded to text."""

    kind = "encoding"


class ParseError(ScraperError):
    """An extraction engine could not parse its input."""

    kind = "parse"


class ScrapeError(ScraperError):
    """Opaque failure of the alternate readability path."""

    kind = "scrape"

    def __init__(self, message: str = "invalid url") -> None:
        super().__init__(message)
