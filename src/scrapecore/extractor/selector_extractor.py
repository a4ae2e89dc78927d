"""
CSS selector extraction backed by selectolax's lexbor engine.
"""

from __future__ import annotations

from typing import List

import structlog
from selectolax.lexbor import LexborHTMLParser, SelectolaxError

from ..exceptions import ParseError

logger = structlog.get_logger(__name__)


class SelectorExtractor:
    """Extracts the nodes matched by a site-specific CSS selector."""

    name = "selector"

    def select(self, html: str, selector: str) -> List[str]:
        """Evaluate ``selector`` against ``html``.

        Args:
            html: Decoded HTML document
            selector: CSS selector, possibly a comma-separated group

        Returns:
            Outer HTML of each matching node in document order (group members
            interleaved as they appear in the page), empty when nothing matches

        Raises:
            ParseError: the selector could not be parsed
        """
        tree = LexborHTMLParser(html)
        try:
            nodes = tree.css(selector)
        except SelectolaxError as e:
            raise ParseError(f"invalid CSS selector {selector!r}: {e}") from e

        matches = [node.html or "" for node in nodes]
        logger.debug("Selector evaluated", selector=selector, matches=len(matches))
        return matches

    def extract(self, html: str, selector: str) -> str:
        """Concatenate the outer HTML of all matches, without separator."""
        return "".join(self.select(html, selector))
