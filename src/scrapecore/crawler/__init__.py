"""
ScrapeCore Crawler Module - page download and text decoding.

Provides the blocking HTTP fetcher used for the primary page download:
- Per-call httpx client with user agent, cookie, proxy and TLS options
- Redirect following with the effective URL reported back
- Response body size limit
- Charset normalization (header, <meta> prescan, charset-normalizer detection)
"""

from .http_client import FetchResponse, HttpFetcher

__all__ = [
    "FetchResponse",
    "HttpFetcher",
]
