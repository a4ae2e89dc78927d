"""
Trafilatura-based alternate readability extractor.

Unlike the other engines it does not reuse the primary response: it downloads
the page again with TLS verification disabled and a fixed timeout, then runs
trafilatura with the page URL as base for relative links.
"""

from __future__ import annotations

from typing import Optional
from urllib.parse import urlparse

import httpx
import structlog
import trafilatura

from ..config.config import DEFAULT_USER_AGENT, AlternateReadabilityConfig
from ..exceptions import ScrapeError

logger = structlog.get_logger(__name__)


def is_request_uri(url: str) -> bool:
    """Return True for an absolute http(s) URL with a host."""
    try:
        parsed = urlparse(url)
    except ValueError:
        return False
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


class TrafilaturaExtractor:
    """Extractor using Trafilatura on an independently fetched copy of the page."""

    name = "trafilatura"

    def __init__(
        self,
        config: Optional[AlternateReadabilityConfig] = None,
        *,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.config = config or AlternateReadabilityConfig()
        self.user_agent = user_agent
        self._transport = transport

    def _download(self, url: str) -> str:
        kwargs = {
            "headers": {"User-Agent": self.user_agent},
            "timeout": httpx.Timeout(self.config.timeout),
            "follow_redirects": True,
            "verify": False,
            "trust_env": False,
        }
        if self._transport is not None:
            kwargs["transport"] = self._transport

        with httpx.Client(**kwargs) as client:  # type: ignore[arg-type]
            response = client.get(url)
            response.raise_for_status()
            return response.text

    def extract(self, url: str) -> str:
        """Fetch ``url`` again and extract its main content.

        Every failure is reported as the same opaque ScrapeError; this path is
        best effort and its details are not actionable for callers.

        Raises:
            ScrapeError: invalid URL, download failure or nothing extracted
        """
        if not is_request_uri(url):
            logger.debug("Rejected base URL", url=url)
            raise ScrapeError()

        try:
            html = self._download(url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.debug("Second fetch failed", url=url, error=str(e))
            raise ScrapeError() from e

        try:
            content = trafilatura.extract(
                html,
                url=url,
                output_format="html",
                favor_precision=self.config.favor_precision,
                include_comments=False,
                include_tables=self.config.include_tables,
                include_images=self.config.include_images,
                include_formatting=True,
                include_links=self.config.include_links,
            )
        except Exception as e:
            logger.debug("Trafilatura extraction failed", url=url, error=str(e))
            raise ScrapeError() from e

        if not content:
            logger.debug("Trafilatura found no content", url=url)
            raise ScrapeError()

        return content
