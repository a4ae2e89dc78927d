"""
Readability-based HTML content extractor.
"""

from __future__ import annotations

from typing import Optional

import structlog
from readability import Document
from readability.readability import Unparseable

from ..config.config import ReadabilityConfig
from ..exceptions import ParseError

logger = structlog.get_logger(__name__)


class ReadabilityExtractor:
    """Extractor using readability-lxml for content extraction."""

    name = "readability"

    def __init__(self, config: Optional[ReadabilityConfig] = None) -> None:
        self.config = config or ReadabilityConfig()
        self.positive_keywords = [
            "article",
            "body",
            "content",
            "entry",
            "hentry",
            "main",
            "page",
            "post",
            "text",
            "blog",
            "story",
        ]
        self.negative_keywords = [
            "combx",
            "comment",
            "com-",
            "contact",
            "foot",
            "footer",
            "footnote",
            "masthead",
            "media",
            "meta",
            "outbrain",
            "promo",
            "related",
            "scroll",
            "shoutbox",
            "sidebar",
            "sponsor",
            "shopping",
            "tags",
            "tool",
            "widget",
        ]

    def extract(self, html: str) -> str:
        """Extract the main content of an HTML document.

        Args:
            html: Decoded HTML document

        Returns:
            The best-guess article body as an HTML fragment, empty for a blank document

        Raises:
            ParseError: readability could not parse the document
        """
        if not html.strip():
            logger.debug("Empty HTML, nothing to extract")
            return ""

        try:
            doc = Document(
                html,
                min_text_length=self.config.min_text_length,
                retry_length=self.config.retry_length,
                positive_keywords=self.positive_keywords,
                negative_keywords=self.negative_keywords,
            )
            return doc.summary(html_partial=True)
        except Unparseable as e:
            raise ParseError(f"readability could not parse the document: {e}") from e
