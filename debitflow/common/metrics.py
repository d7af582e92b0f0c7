"""Prometheus metric definitions for request construction and transport."""

from prometheus_client import Counter, Histogram, generate_latest


standalone_credit_requests_total = Counter(
    "standalone_credit_requests_total",
    "Standalone credit requests handed to transport",
    ["sub_method"],
)
standalone_credit_rejections_total = Counter(
    "standalone_credit_rejections_total",
    "Standalone credit requests rejected before transport",
    ["error_type"],
)
transport_failures_total = Counter(
    "transport_failures_total",
    "Failed API calls",
    ["status_code"],
)
transport_latency_seconds = Histogram(
    "transport_latency_seconds",
    "API call latency seconds",
    ["method"],
)


def metrics_text() -> bytes:
    """Expose all registered Prometheus metrics in text format."""

    return generate_latest()
