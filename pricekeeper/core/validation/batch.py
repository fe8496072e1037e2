"""Consistency checks applied to a price batch before it is signed."""

from __future__ import annotations

from pricekeeper.core.exceptions import EmptyBatchError, InconsistentTimestampsError
from pricekeeper.core.models import PriceBatch


def validate_batch(batch: PriceBatch | None) -> None:
    """Ensure the batch is non-empty and all records share one timestamp.

    Raises:
        EmptyBatchError: The batch is ``None`` or has no records.
        InconsistentTimestampsError: More than one distinct timestamp was found.
    """

    if not batch:
        raise EmptyBatchError()

    timestamps = {record.timestamp for record in batch}
    if len(timestamps) != 1:
        raise InconsistentTimestampsError(len(timestamps), sorted(timestamps))
