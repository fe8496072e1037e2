"""Prometheus metrics helpers for pricekeeper services."""

from __future__ import annotations

from prometheus_client import CollectorRegistry, Counter, Gauge, Histogram, generate_latest


class MetricsCollector:
    """Collects and exposes core Prometheus metrics for publication cycles."""

    def __init__(self, *, registry: CollectorRegistry | None = None) -> None:
        self.registry = registry or CollectorRegistry()
        self.span_duration_seconds = Histogram(
            "pricekeeper_span_duration_seconds",
            "Duration of tracked publication stages.",
            ("label",),
            buckets=(0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0, float("inf")),
            registry=self.registry,
        )
        self.absorbed_failures_total = Counter(
            "pricekeeper_absorbed_failures_total",
            "Failures caught and logged without reaching the caller.",
            ("operation",),
            registry=self.registry,
        )
        self.last_balance = Gauge(
            "pricekeeper_last_balance",
            "Most recent balance reported by the transaction client.",
            registry=self.registry,
        )

    def observe_span(self, label: str, duration_seconds: float) -> None:
        """Record the duration of a closed span."""

        self.span_duration_seconds.labels(label=label).observe(duration_seconds)

    def increment_absorbed_failure(self, operation: str) -> None:
        self.absorbed_failures_total.labels(operation=operation).inc()

    def record_balance(self, balance: float) -> None:
        self.last_balance.set(balance)

    def sample(self, name: str, labels: dict[str, str] | None = None) -> float | None:
        """Return the current value of a sample from this collector's registry."""

        return self.registry.get_sample_value(name, labels or {})

    def render(self) -> bytes:
        """Render metrics in Prometheus exposition format."""

        return generate_latest(self.registry)


_DEFAULT_COLLECTOR: MetricsCollector | None = None


def get_metrics_collector() -> MetricsCollector:
    """Return the global metrics collector instance."""

    global _DEFAULT_COLLECTOR
    if _DEFAULT_COLLECTOR is None:
        _DEFAULT_COLLECTOR = MetricsCollector()
    return _DEFAULT_COLLECTOR


def configure_metrics_collector(collector: MetricsCollector | None) -> None:
    """Override the global metrics collector for application wiring or tests."""

    global _DEFAULT_COLLECTOR
    _DEFAULT_COLLECTOR = collector
