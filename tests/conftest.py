"""Pytest configuration and fixtures for pricekeeper testing."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import pytest
from loguru import logger
from prometheus_client import CollectorRegistry

from pricekeeper.core.clients import InMemoryTransactionClient
from pricekeeper.core.models import PriceRecord
from pricekeeper.core.monitoring import MetricsCollector, PerformanceTracker


@pytest.fixture
def sample_records() -> list[PriceRecord]:
    """Three records sharing timestamp 1000, one carrying a source map."""
    return [
        PriceRecord(
            id="rec-eth",
            symbol="ETH",
            source={"coingecko": {"price": 1850.12, "volume": 10_000}},
            timestamp=1000,
            version="0.4",
            value=1850.1,
        ),
        PriceRecord(id="rec-btc", symbol="BTC", timestamp=1000, version="0.4", value=27123.5),
        PriceRecord(id="rec-ar", symbol="AR", timestamp=1000, version="0.4", value={"mid": 5.2, "spread": 0.01}),
    ]


@pytest.fixture
def metrics() -> MetricsCollector:
    """Collector backed by a private registry so tests do not share samples."""
    return MetricsCollector(registry=CollectorRegistry())


@pytest.fixture
def tracker(metrics: MetricsCollector) -> PerformanceTracker:
    return PerformanceTracker(collector=metrics)


@pytest.fixture
def client() -> InMemoryTransactionClient:
    return InMemoryTransactionClient(signing_key=b"test-signing-key", balance=10.0)


@pytest.fixture
def log_records() -> Iterator[list[dict[str, Any]]]:
    """Capture loguru records emitted during a test."""
    captured: list[dict[str, Any]] = []
    handler_id = logger.add(lambda message: captured.append(message.record), level="DEBUG")
    yield captured
    logger.remove(handler_id)
