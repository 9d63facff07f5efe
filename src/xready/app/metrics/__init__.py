"""Prometheus metrics module."""

from prometheus_client import CONTENT_TYPE_LATEST, REGISTRY, CollectorRegistry, generate_latest

from xready.app.metrics.collector import (
    XREADY_CHILDREN_EVALUATED_TOTAL,
    XREADY_CHILDREN_MARKED_READY_TOTAL,
    XREADY_RUN_DURATION,
    XREADY_RUNS_TOTAL,
)


def render_metrics(registry: CollectorRegistry = REGISTRY) -> tuple[bytes, str]:
    """Render metrics in Prometheus exposition format.

    Returns:
        (body, content_type) for whatever serves the scrape endpoint.
    """
    return generate_latest(registry), CONTENT_TYPE_LATEST


__all__ = [
    "XREADY_CHILDREN_EVALUATED_TOTAL",
    "XREADY_CHILDREN_MARKED_READY_TOTAL",
    "XREADY_RUN_DURATION",
    "XREADY_RUNS_TOTAL",
    "render_metrics",
]
