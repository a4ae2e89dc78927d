"""
Shared fixtures for the ScrapeCore test suite.

No test touches the network: HTTP traffic goes through ``httpx.MockTransport``
instances built by the ``mock_transport`` fixture.
"""

# Standard library imports
from typing import Callable, Dict, Tuple

# Third-party imports
import pytest

# Local imports
from scrapecore.config import Config
from tests.helpers.http import RecordingTransport, Route

# ============================================================================
# Pytest Configuration
# ============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests across modules")


# ============================================================================
# Core Test Fixtures
# ============================================================================


@pytest.fixture
def mock_transport() -> Callable[[Dict[str, Route]], RecordingTransport]:
    """Factory for recording mock transports."""

    def _factory(routes: Dict[str, Route]) -> RecordingTransport:
        return RecordingTransport(routes)

    return _factory


@pytest.fixture
def config() -> Config:
    """Default configuration plus a custom rule for a test domain."""
    return Config.model_validate({"rules": {"extra": {"rules.example": "div.content"}}})


@pytest.fixture
def article_paragraphs() -> Tuple[str, ...]:
    return (
        "The committee met on Tuesday to review the proposal for a new public library in the "
        "old town district, a project that has been debated by residents for almost a decade.",
        "Supporters argued that the building would give students a quiet place to work after "
        "school, while critics worried about the cost of maintaining the historic facade.",
        "After three hours of discussion the members voted to commission a detailed study of "
        "the site, with a final decision expected before the end of the next budget cycle.",
        "Local businesses near the proposed site said they welcomed the extra foot traffic and "
        "hoped the library would host evening events open to the whole neighbourhood.",
    )


@pytest.fixture
def sample_html(article_paragraphs) -> str:
    """A news page with navigation, an article body and a footer."""
    body = "\n".join(f"<p>{paragraph}</p>" for paragraph in article_paragraphs)
    return f"""
    <!DOCTYPE html>
    <html>
    <head><title>Library plans move forward</title></head>
    <body>
        <nav class="nav"><a href="/">Home</a> <a href="/news">News</a></nav>
        <div class="article">
            <h1>Library plans move forward</h1>
            {body}
        </div>
        <footer class="footer">Copyright Example Media. Subscribe to our newsletter.</footer>
    </body>
    </html>
    """
