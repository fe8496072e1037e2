"""Turn price records into publication payloads."""

from __future__ import annotations

from pricekeeper.core.models import PriceBatch, RecordForPublication

SOURCE_FIELD = "source"


def redact(batch: PriceBatch, omit_source: bool) -> list[RecordForPublication]:
    """Return publication payloads for ``batch``, dropping ``source`` when asked.

    Fields the caller never set are left out, so a record built without a
    ``source`` has no ``source`` key. The payloads are fresh dicts; the input
    records are left untouched.
    """

    if omit_source:
        return [record.model_dump(exclude={SOURCE_FIELD}) for record in batch]
    return [record.model_dump(exclude_unset=True) for record in batch]
