"""
Defines Prometheus metrics for the scraper.
"""

from __future__ import annotations

from typing import Any, Dict

from prometheus_client import REGISTRY as _PROM_REGISTRY
from prometheus_client import Counter as _OrigCounter
from prometheus_client import Histogram as _OrigHistogram

# ---------------------------------------------------------------------------
# Duplicate-safe Prometheus metric wrappers
# ---------------------------------------------------------------------------
# Reloading this module (tests do) must not register the same collector twice.


def _duplicate_safe_factory(metric_cls):
    """Return a factory that reuses an existing collector if already present."""

    def _factory(name: str, documentation: str, *args, **kwargs):  # type: ignore[override]
        existing = _PROM_REGISTRY._names_to_collectors.get(name)
        if existing is not None:
            return existing  # type: ignore[return-value]

        try:
            return metric_cls(name, documentation, *args, **kwargs)  # type: ignore[call-arg]
        except ValueError:
            # Registration lost the race, fall back to the now-existing collector.
            return _PROM_REGISTRY._names_to_collectors[name]  # type: ignore[return-value]

    return _factory


Counter = _duplicate_safe_factory(_OrigCounter)  # type: ignore[assignment]
Histogram = _duplicate_safe_factory(_OrigHistogram)  # type: ignore[assignment]


def _create_metrics() -> Dict[str, Any]:
    return {
        "extractions_total": Counter(
            "scrapecore_extractions_total",
            "Successful extractions by strategy",
            ["strategy"],
        ),
        "failures_total": Counter(
            "scrapecore_failures_total",
            "Failed extractions by error kind",
            ["error"],
        ),
        "fetch_latency_seconds": Histogram(
            "scrapecore_fetch_latency_seconds",
            "Time taken by the primary page fetch",
            buckets=[0.1, 0.5, 1.0, 2.0, 5.0, 10.0, 20.0, 60.0],
        ),
    }


METRICS: Dict[str, Any] = _create_metrics()
