"""Prometheus metrics for the MoMo Gateway service.

Business Metrics:
- momo_gateway_payment_requests_total: Payment submissions by outcome
- momo_gateway_callbacks_received_total: Provider callbacks ingested

Technical Metrics:
- momo_gateway_provider_requests_total: Provider calls by operation/status
- momo_gateway_provider_latency_seconds: Provider call latency
- momo_gateway_http_requests_total: HTTP requests by endpoint/status
- momo_gateway_http_request_latency_seconds: HTTP request latency
"""

import time
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST


# =============================================================================
# Business Metrics
# =============================================================================

payment_requests_total = Counter(
    "momo_gateway_payment_requests_total",
    "Total number of request-to-pay submissions",
    ["outcome"],  # submitted, rejected, failed
)

callbacks_received_total = Counter(
    "momo_gateway_callbacks_received_total",
    "Total number of provider callbacks received",
)


# =============================================================================
# Technical Metrics
# =============================================================================

provider_requests_total = Counter(
    "momo_gateway_provider_requests_total",
    "Total number of MoMo API calls",
    ["operation", "status"],  # status: success, failure
)

provider_latency = Histogram(
    "momo_gateway_provider_latency_seconds",
    "MoMo API call latency in seconds",
    ["operation"],
    buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0],
)

http_requests_total = Counter(
    "momo_gateway_http_requests_total",
    "Total HTTP requests by endpoint and status",
    ["method", "endpoint", "status"],
)

http_request_latency = Histogram(
    "momo_gateway_http_request_latency_seconds",
    "HTTP request latency by endpoint",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)


# =============================================================================
# Helper Functions
# =============================================================================

@contextmanager
def track_provider_latency(operation: str) -> Generator[None, None, None]:
    """Context manager to track MoMo API call latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        provider_latency.labels(operation=operation).observe(duration)


def record_provider_success(operation: str) -> None:
    """Record a successful MoMo API call."""
    provider_requests_total.labels(operation=operation, status="success").inc()


def record_provider_failure(operation: str) -> None:
    """Record a failed MoMo API call."""
    provider_requests_total.labels(operation=operation, status="failure").inc()


def record_payment_request(outcome: str) -> None:
    """Record a request-to-pay outcome."""
    payment_requests_total.labels(outcome=outcome).inc()


def record_callback_received() -> None:
    callbacks_received_total.inc()


def record_http_request(method: str, endpoint: str, status: int, duration: float) -> None:
    """Record an HTTP request."""
    http_requests_total.labels(method=method, endpoint=endpoint, status=str(status)).inc()
    http_request_latency.labels(method=method, endpoint=endpoint).observe(duration)


def get_metrics() -> bytes:
    """Get current metrics in Prometheus format."""
    return generate_latest(REGISTRY)


def get_metrics_content_type() -> str:
    """Get the content type for metrics response."""
    return CONTENT_TYPE_LATEST
