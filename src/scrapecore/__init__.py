"""
ScrapeCore - main-content extraction for web pages.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .config import Config
from .exceptions import (
    EncodingError,
    FetchError,
    ParseError,
    ScrapeError,
    ScraperError,
    UnsupportedContentTypeError,
)
from .extractor.models import ExtractionRequest, Rule, RuleKind
from .scraper import Scraper, fetch, is_allowed_content_type

__all__ = [
    "__version__",
    "Config",
    "EncodingError",
    "ExtractionRequest",
    "FetchError",
    "ParseError",
    "Rule",
    "RuleKind",
    "ScrapeError",
    "Scraper",
    "ScraperError",
    "UnsupportedContentTypeError",
    "fetch",
    "is_allowed_content_type",
]
