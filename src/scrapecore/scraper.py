"""
Extraction orchestrator: fetch a page and isolate its main content.

The pipeline runs fetch, content-type check, charset normalization, rule
resolution and exactly one extraction strategy. Any failure stops it with the
stage's error; nothing is retried and no partial content is returned.
"""

from __future__ import annotations

import threading
import time
from typing import Optional

import structlog
from structlog.contextvars import bound_contextvars

from .config.config import Config, settings
from .crawler.http_client import HttpFetcher
from .exceptions import FetchError, ScraperError, UnsupportedContentTypeError
from .extractor.models import ExtractionRequest, Rule, RuleKind
from .extractor.protocols import ContentExtractor, RemoteContentExtractor, SelectorEngine
from .extractor.readability_extractor import ReadabilityExtractor
from .extractor.selector_extractor import SelectorExtractor
from .extractor.trafilatura_extractor import TrafilaturaExtractor
from .observability import histogram, increment
from .rules.resolver import RuleResolver, build_rule_table

logger = structlog.get_logger(__name__)

ALLOWED_CONTENT_TYPES = ("text/html", "application/xhtml+xml")


def is_allowed_content_type(content_type: str) -> bool:
    """Case-insensitive prefix check for HTML and XHTML content types."""
    return content_type.lower().startswith(ALLOWED_CONTENT_TYPES)


class Scraper:
    """
    Resolves which extraction strategy applies to a page and runs it.

    Strategy priority:
    - an explicit rule from the caller (CSS selector, or ``"ra"`` for the
      alternate readability engine)
    - the predefined rule of the page's domain
    - heuristic readability
    """

    def __init__(
        self,
        fetcher: HttpFetcher,
        resolver: RuleResolver,
        selector_engine: SelectorEngine,
        readability: ContentExtractor,
        alternate_readability: RemoteContentExtractor,
    ) -> None:
        self.fetcher = fetcher
        self.resolver = resolver
        self.selector_engine = selector_engine
        self.readability = readability
        self.alternate_readability = alternate_readability

    @classmethod
    def from_config(cls, config: Config) -> Scraper:
        """Wire the default engines from configuration."""
        return cls(
            fetcher=HttpFetcher(config.fetcher),
            resolver=RuleResolver(build_rule_table(config.rules)),
            selector_engine=SelectorExtractor(),
            readability=ReadabilityExtractor(config.readability),
            alternate_readability=TrafilaturaExtractor(
                config.alternate_readability,
                user_agent=config.fetcher.default_user_agent,
            ),
        )

    def resolve_rule(self, request: ExtractionRequest, effective_url: str) -> Rule:
        """An explicit rule wins; otherwise look up the effective URL's domain."""
        rule = request.explicit_rule
        if rule.is_set:
            return rule
        return self.resolver.resolve(effective_url)

    def extract(self, request: ExtractionRequest) -> str:
        """
        Run the extraction pipeline for a single request.

        Args:
            request: Target URL, optional rule and fetch options

        Returns:
            The main-content HTML fragment (possibly empty for a selector
            that matches nothing)

        Raises:
            FetchError: the primary fetch failed or the server answered with an error
            UnsupportedContentTypeError: the resource is not an HTML document
            EncodingError: the body could not be decoded
            ParseError: the selector or readability engine rejected its input
            ScrapeError: the alternate readability path failed
        """
        with bound_contextvars(request_url=request.url):
            try:
                content, strategy = self._run(request)
            except ScraperError as e:
                increment("failures_total", labels={"error": e.kind})
                logger.warning("Extraction failed", error=str(e), error_type=type(e).__name__)
                raise

        increment("extractions_total", labels={"strategy": strategy})
        return content

    def _run(self, request: ExtractionRequest) -> tuple[str, str]:
        start_time = time.time()
        response = self.fetcher.get(
            request.url,
            user_agent=request.user_agent,
            cookie=request.cookie,
            use_proxy=request.use_proxy,
            allow_self_signed_certificates=request.allow_self_signed_certificates,
        )
        histogram("fetch_latency_seconds", time.time() - start_time)

        if response.has_server_failure():
            raise FetchError("unable to download web page", url=request.url, status_code=response.status_code)

        if not is_allowed_content_type(response.content_type):
            raise UnsupportedContentTypeError(response.content_type)

        body = response.ensure_unicode_body()

        # The entry URL could redirect somewhere else.
        website_url = response.effective_url
        rule = self.resolve_rule(request, website_url)

        if rule.kind is RuleKind.ALTERNATE_READABILITY:
            logger.debug("Using alternate readability", rules=str(rule), url=website_url)
            return self.alternate_readability.extract(website_url), self.alternate_readability.name
        if rule.kind is RuleKind.SELECTOR:
            logger.debug("Using rules", rules=rule.selector, url=website_url)
            return self.selector_engine.extract(body, rule.selector), self.selector_engine.name
        if rule.kind is RuleKind.UNSET:
            logger.debug("Using readability", url=website_url)
            return self.readability.extract(body), self.readability.name

        raise AssertionError(f"unhandled rule kind: {rule.kind}")


_default_scraper: Optional[Scraper] = None
_default_lock = threading.Lock()


def get_default_scraper() -> Scraper:
    """Return the process-wide scraper built from ``settings`` on first use."""
    global _default_scraper
    if _default_scraper is None:
        with _default_lock:
            if _default_scraper is None:
                _default_scraper = Scraper.from_config(settings)
    return _default_scraper


def fetch(
    url: str,
    rules: str = "",
    user_agent: str = "",
    cookie: str = "",
    allow_self_signed_certificates: bool = False,
    use_proxy: bool = False,
) -> str:
    """Download a web page and return its main content as an HTML fragment."""
    request = ExtractionRequest(
        url=url,
        rules=rules,
        user_agent=user_agent,
        cookie=cookie,
        allow_self_signed_certificates=allow_self_signed_certificates,
        use_proxy=use_proxy,
    )
    return get_default_scraper().extract(request)
