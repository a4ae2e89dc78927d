"""
Protocols for the pluggable extraction engines.
"""

from __future__ import annotations

from typing import List, Protocol, runtime_checkable


@runtime_checkable
class SelectorEngine(Protocol):
    """Evaluates a CSS selector against an HTML document."""

    name: str

    def select(self, html: str, selector: str) -> List[str]:
        """Return the outer HTML of every matching node, in document order."""
        ...

    def extract(self, html: str, selector: str) -> str:
        """Return the outer HTML of all matches concatenated without separator."""
        ...


@runtime_checkable
class ContentExtractor(Protocol):
    """Guesses the main content of an already fetched HTML document."""

    name: str

    def extract(self, html: str) -> str:
        """Return the main-content HTML fragment."""
        ...


@runtime_checkable
class RemoteContentExtractor(Protocol):
    """Fetches a page on its own and extracts its main content."""

    name: str

    def extract(self, url: str) -> str:
        """Return the main-content HTML fragment of the page at ``url``.

        ``url`` must be an absolute http(s) URL; it is also the base for
        resolving relative links.
        """
        ...
