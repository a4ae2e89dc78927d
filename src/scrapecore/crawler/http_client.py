"""
HTTP fetcher for the primary page download.

Wraps a short-lived ``httpx.Client`` per call so that per-request options
(user agent, cookie, proxy, TLS relaxation) never leak between callers.
"""

from __future__ import annotations

import re
import time
from dataclasses import dataclass
from typing import Dict, Optional

import charset_normalizer
import httpx
import structlog

from scrapecore.config.config import FetcherConfig
from scrapecore.exceptions import EncodingError, FetchError

logger = structlog.get_logger(__name__)

ACCEPT_HEADER = "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"

# HTML5 prescan only looks at the first 1024 bytes for a <meta> charset
_META_PRESCAN_BYTES = 1024
_META_CHARSET_RE = re.compile(rb"""<meta[^>]+charset\s*=\s*["']?\s*([a-zA-Z0-9_:.+-]+)""", re.IGNORECASE)


def charset_from_content_type(content_type: str) -> Optional[str]:
    """Return the ``charset`` parameter of a Content-Type header, if any."""
    for param in content_type.split(";")[1:]:
        key, _, value = param.partition("=")
        if key.strip().lower() == "charset":
            value = value.strip().strip("\"'").strip()
            return value or None
    return None


def charset_from_meta(body: bytes) -> Optional[str]:
    """Return a charset declared by a ``<meta>`` tag near the top of the document."""
    match = _META_CHARSET_RE.search(body[:_META_PRESCAN_BYTES])
    if match:
        return match.group(1).decode("ascii", errors="ignore") or None
    return None


@dataclass
class FetchResponse:
    """Response of the primary fetch."""

    effective_url: str
    status_code: int
    content_type: str
    body: bytes

    def has_server_failure(self) -> bool:
        return self.status_code >= 400

    def ensure_unicode_body(self) -> str:
        """Decode the body to text.

        Valid UTF-8 is returned as is. Otherwise the charset declared by the
        Content-Type header or a ``<meta>`` tag is used, and when that is
        missing or unusable charset-normalizer guesses one.

        Raises:
            EncodingError: no charset could decode the body.
        """
        try:
            return self.body.decode("utf-8-sig")
        except UnicodeDecodeError:
            pass

        declared = charset_from_content_type(self.content_type) or charset_from_meta(self.body)
        if declared:
            try:
                return self.body.decode(declared)
            except LookupError:
                logger.debug("Unknown declared charset", charset=declared, url=self.effective_url)
            except UnicodeDecodeError:
                logger.debug("Body does not match declared charset", charset=declared, url=self.effective_url)

        best = charset_normalizer.from_bytes(self.body).best()
        if best is None:
            raise EncodingError(f"unable to determine the character encoding of {self.effective_url}")

        logger.debug("Detected body charset", charset=best.encoding, url=self.effective_url)
        return str(best)


class HttpFetcher:
    """Blocking HTTP GET with redirects, timeout and body size limit."""

    def __init__(self, config: FetcherConfig, *, transport: Optional[httpx.BaseTransport] = None):
        self.config = config
        self._transport = transport

    def _build_headers(self, user_agent: str, cookie: str) -> Dict[str, str]:
        headers = {
            "User-Agent": user_agent or self.config.default_user_agent,
            "Accept": ACCEPT_HEADER,
        }
        if cookie:
            headers["Cookie"] = cookie
        return headers

    def _client_kwargs(
        self,
        *,
        user_agent: str,
        cookie: str,
        use_proxy: bool,
        allow_self_signed_certificates: bool,
    ) -> Dict[str, object]:
        kwargs: Dict[str, object] = {
            "headers": self._build_headers(user_agent, cookie),
            "timeout": httpx.Timeout(self.config.timeout),
            "follow_redirects": True,
            "verify": not allow_self_signed_certificates,
            "trust_env": False,
        }
        if use_proxy:
            if self.config.proxy_url:
                kwargs["proxy"] = self.config.proxy_url
            else:
                logger.warning("Proxy requested but no proxy_url is configured")
        if self._transport is not None:
            kwargs["transport"] = self._transport
        return kwargs

    def _read_body(self, response: httpx.Response, url: str) -> bytes:
        limit = self.config.max_body_size
        content_length = response.headers.get("Content-Length")
        if content_length and content_length.isdigit() and int(content_length) > limit:
            raise FetchError(f"response body too large ({content_length} bytes)", url=url)

        chunks = []
        received = 0
        for chunk in response.iter_bytes():
            received += len(chunk)
            if received > limit:
                raise FetchError(f"response body exceeds {limit} bytes", url=url)
            chunks.append(chunk)
        return b"".join(chunks)

    def get(
        self,
        url: str,
        *,
        user_agent: str = "",
        cookie: str = "",
        use_proxy: bool = False,
        allow_self_signed_certificates: bool = False,
    ) -> FetchResponse:
        """
        Fetch a URL, following redirects.

        Args:
            url: URL to fetch
            user_agent: User-Agent header, the configured default when empty
            cookie: Raw Cookie header value, omitted when empty
            use_proxy: Route the request through the configured proxy
            allow_self_signed_certificates: Skip TLS certificate verification

        Returns:
            FetchResponse with the post-redirect URL, content type and raw body

        Raises:
            FetchError: the request could not be completed
        """
        kwargs = self._client_kwargs(
            user_agent=user_agent,
            cookie=cookie,
            use_proxy=use_proxy,
            allow_self_signed_certificates=allow_self_signed_certificates,
        )
        start_time = time.time()

        try:
            with httpx.Client(**kwargs) as client:  # type: ignore[arg-type]
                with client.stream("GET", url) as response:
                    body = self._read_body(response, url)
                    result = FetchResponse(
                        effective_url=str(response.url),
                        status_code=response.status_code,
                        content_type=response.headers.get("Content-Type", ""),
                        body=body,
                    )
        except httpx.InvalidURL as e:
            raise FetchError(f"invalid url: {e}", url=url) from e
        except httpx.HTTPError as e:
            logger.warning("Request failed", url=url, error=str(e), error_type=type(e).__name__)
            raise FetchError(f"unable to fetch {url}: {e}", url=url) from e

        logger.debug(
            "Fetched page",
            url=url,
            effective_url=result.effective_url,
            status=result.status_code,
            content_type=result.content_type,
            size=len(result.body),
            elapsed=time.time() - start_time,
        )
        return result
