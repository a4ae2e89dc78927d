"""
Unit tests for TrafilaturaExtractor, the alternate readability engine.
"""

from unittest.mock import patch

import httpx
import pytest
from scrapecore.config import AlternateReadabilityConfig
from scrapecore.exceptions import ScrapeError
from scrapecore.extractor.trafilatura_extractor import TrafilaturaExtractor, is_request_uri
from tests.helpers import html_response

URL = "https://news.example/story"


class TestIsRequestUri:
    @pytest.mark.unit
    @pytest.mark.parametrize(
        "url, expected",
        [
            ("https://news.example/story", True),
            ("http://news.example", True),
            ("ftp://news.example/file", False),
            ("/relative/path", False),
            ("news.example/story", False),
            ("https://", False),
            ("", False),
            ("http://[::1", False),
        ],
    )
    def test_is_request_uri(self, url, expected):
        assert is_request_uri(url) is expected


class TestTrafilaturaExtractor:
    """Test cases for TrafilaturaExtractor."""

    def test_init(self):
        extractor = TrafilaturaExtractor()
        assert extractor.name == "trafilatura"
        assert extractor.config.timeout == 60.0

    @pytest.mark.unit
    def test_invalid_url_raises_without_fetching(self, mock_transport):
        transport = mock_transport({})
        extractor = TrafilaturaExtractor(transport=transport)

        with pytest.raises(ScrapeError, match="invalid url"):
            extractor.extract("not-a-valid-url")

        assert transport.requests == []

    @pytest.mark.unit
    def test_download_failure_is_opaque(self, mock_transport):
        transport = mock_transport({URL: httpx.ConnectError("refused")})
        extractor = TrafilaturaExtractor(transport=transport)

        with pytest.raises(ScrapeError) as exc_info:
            extractor.extract(URL)

        assert str(exc_info.value) == "invalid url"

    @pytest.mark.unit
    def test_error_status_is_opaque(self, mock_transport):
        transport = mock_transport({URL: html_response("<p>gone</p>", status=410)})

        with pytest.raises(ScrapeError):
            TrafilaturaExtractor(transport=transport).extract(URL)

    @pytest.mark.unit
    def test_passes_base_url_and_options(self, mock_transport):
        transport = mock_transport({URL: html_response("<html><body><article>Body</article></body></html>")})
        config = AlternateReadabilityConfig(favor_precision=False, include_links=False)

        with patch(
            "scrapecore.extractor.trafilatura_extractor.trafilatura.extract", return_value="<p>Body</p>"
        ) as mock_extract:
            result = TrafilaturaExtractor(config, transport=transport).extract(URL)

        assert result == "<p>Body</p>"
        args, kwargs = mock_extract.call_args
        assert args[0] == "<html><body><article>Body</article></body></html>"
        assert kwargs["url"] == URL
        assert kwargs["output_format"] == "html"
        assert kwargs["favor_precision"] is False
        assert kwargs["include_links"] is False

    @pytest.mark.unit
    def test_second_fetch_disables_tls_verification(self, mock_transport):
        transport = mock_transport({URL: html_response("<p>x</p>")})

        with patch(
            "scrapecore.extractor.trafilatura_extractor.httpx.Client", wraps=httpx.Client
        ) as client_cls, patch(
            "scrapecore.extractor.trafilatura_extractor.trafilatura.extract", return_value="<p>x</p>"
        ):
            TrafilaturaExtractor(AlternateReadabilityConfig(timeout=42.0), transport=transport).extract(URL)

        _, kwargs = client_cls.call_args
        assert kwargs["verify"] is False
        assert kwargs["timeout"] == httpx.Timeout(42.0)

    @pytest.mark.unit
    def test_nothing_extracted_is_opaque(self, mock_transport):
        transport = mock_transport({URL: html_response("<html></html>")})

        with patch("scrapecore.extractor.trafilatura_extractor.trafilatura.extract", return_value=None):
            with pytest.raises(ScrapeError):
                TrafilaturaExtractor(transport=transport).extract(URL)

    @pytest.mark.unit
    def test_parser_exception_is_opaque(self, mock_transport):
        transport = mock_transport({URL: html_response("<html></html>")})

        with patch(
            "scrapecore.extractor.trafilatura_extractor.trafilatura.extract", side_effect=RuntimeError("lxml exploded")
        ):
            with pytest.raises(ScrapeError) as exc_info:
                TrafilaturaExtractor(transport=transport).extract(URL)

        assert str(exc_info.value) == "invalid url"
