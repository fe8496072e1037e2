"""Timing spans for publication stages."""

from __future__ import annotations

import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from uuid import uuid4

from loguru import logger

from pricekeeper.core.monitoring.metrics import MetricsCollector, get_metrics_collector


@dataclass(frozen=True, slots=True)
class _OpenSpan:
    label: str
    started_at: float


class PerformanceTracker:
    """Tracks labelled spans and reports their durations to a metrics collector.

    ``track_start`` and ``track_end`` mirror a start/stop API; ``span`` wraps
    them so the span is closed on every exit path.
    """

    def __init__(
        self,
        collector: MetricsCollector | None = None,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        self._collector = collector
        self._clock = clock
        self._open: dict[str, _OpenSpan] = {}

    @property
    def collector(self) -> MetricsCollector:
        return self._collector or get_metrics_collector()

    @property
    def open_spans(self) -> int:
        return len(self._open)

    def track_start(self, label: str) -> str:
        span_id = f"{label}-{uuid4().hex}"
        self._open[span_id] = _OpenSpan(label=label, started_at=self._clock())
        return span_id

    def track_end(self, span_id: str) -> float:
        """Close a span and return its duration in seconds.

        Unknown or already closed span ids are ignored.
        """

        span = self._open.pop(span_id, None)
        if span is None:
            logger.warning("Span {} is not open", span_id)
            return 0.0
        duration = self._clock() - span.started_at
        self.collector.observe_span(span.label, duration)
        logger.debug("Span {} took {:.2f} ms", span.label, duration * 1000)
        return duration

    @contextmanager
    def span(self, label: str) -> Iterator[str]:
        span_id = self.track_start(label)
        try:
            yield span_id
        finally:
            self.track_end(span_id)
