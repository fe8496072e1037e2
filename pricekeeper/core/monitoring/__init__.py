"""Monitoring module - timing spans and metrics."""

from pricekeeper.core.monitoring.metrics import (
    MetricsCollector,
    configure_metrics_collector,
    get_metrics_collector,
)
from pricekeeper.core.monitoring.tracker import PerformanceTracker

__all__ = [
    "MetricsCollector",
    "PerformanceTracker",
    "configure_metrics_collector",
    "get_metrics_collector",
]
