"""Prometheus metric definitions for the content layer."""

from __future__ import annotations

from prometheus_client import Counter, Histogram

# --- Content requests ---

content_requests_total = Counter(
    "phoneguard_content_requests_total",
    "Content requests by content type and where the payload came from",
    labelnames=["content_type", "source"],
)

content_request_duration_seconds = Histogram(
    "phoneguard_content_request_duration_seconds",
    "Round-trip time of Contentstack delivery queries",
    labelnames=["content_type"],
    buckets=(0.05, 0.1, 0.25, 0.5, 1, 2, 5, 10, 30),
)
