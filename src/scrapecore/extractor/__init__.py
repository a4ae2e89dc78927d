"""
ScrapeCore Content Extraction Module

Three interchangeable ways to isolate the main content of a page:
1. Selector: site-specific CSS selectors evaluated with selectolax
2. Readability: heuristic DOM scoring with readability-lxml
3. Trafilatura: alternate readability on an independently fetched copy
"""

from .models import ALTERNATE_READABILITY_SENTINEL, ExtractionRequest, Rule, RuleKind
from .protocols import ContentExtractor, RemoteContentExtractor, SelectorEngine
from .readability_extractor import ReadabilityExtractor
from .selector_extractor import SelectorExtractor
from .trafilatura_extractor import TrafilaturaExtractor

__all__ = [
    "ALTERNATE_READABILITY_SENTINEL",
    "ContentExtractor",
    "ExtractionRequest",
    "ReadabilityExtractor",
    "RemoteContentExtractor",
    "Rule",
    "RuleKind",
    "SelectorEngine",
    "SelectorExtractor",
    "TrafilaturaExtractor",
]
