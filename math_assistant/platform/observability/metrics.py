"""Prometheus metrics helpers.

This module provides the shared histogram bucket layout, a histogram
factory, and an optional exposition endpoint for the metrics collected
while the assistant runs.
"""

import logging

import prometheus_client

logger = logging.getLogger(__name__)

BUCKETS = (
    # these are log spaced with 1 sig-fig rounding so there are 3 per decade
    # 3 div/decade = 1,   2.15,   4.64,   10
    0.0002,  # 200 μs
    0.0005,
    0.001,  # 1 ms
    0.002,
    0.005,
    0.01,
    0.02,
    0.05,
    0.1,
    0.2,
    0.5,
    1,
    2,
    5,
    10,
    20,  # model calls time out at 15 seconds, bin up to that time
    float("inf"),
)


def setup_metrics_factory(registry, name, documentation, labelnames):
    """Create a Prometheus histogram with standard bucket configuration.

    Args:
        registry: Prometheus registry to register the metric with
        name: Metric name (e.g., "agent_run_duration_seconds")
        documentation: Human-readable metric description
        labelnames: Tuple of label names for the histogram

    Returns:
        Configured Prometheus Histogram instance
    """
    return prometheus_client.Histogram(
        name=name,
        documentation=documentation,
        labelnames=labelnames,
        registry=registry,
        buckets=BUCKETS,
    )


def start_metrics_server(port: int | None) -> bool:
    """Expose the default registry over HTTP when a port is configured.

    Args:
        port: TCP port for the exposition endpoint, or None to skip

    Returns:
        True if the endpoint was started
    """
    if port is None:
        return False
    prometheus_client.start_http_server(port)
    logger.info("Prometheus metrics exposed on port %s", port)
    return True
