"""Observability infrastructure module.

This module provides monitoring:
- Structured logging with correlation IDs
- Prometheus metrics
"""

from math_assistant.platform.observability.logging import (
    configure_logging,
    correlation_id_ctx,
)
from math_assistant.platform.observability.metrics import (
    BUCKETS,
    start_metrics_server,
)

__all__ = [
    "BUCKETS",
    "configure_logging",
    "correlation_id_ctx",
    "start_metrics_server",
]
