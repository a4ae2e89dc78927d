from .http import RecordingTransport, html_response, make_fetch_response, redirect_response
from .metric_delta import histogram_observes, metric_delta

__all__ = [
    "RecordingTransport",
    "html_response",
    "make_fetch_response",
    "histogram_observes",
    "metric_delta",
    "redirect_response",
]
