"""In-memory transaction client for tests and local dry runs."""

from __future__ import annotations

import base64
import hashlib
import hmac
import json
from collections.abc import Sequence
from typing import Any

from loguru import logger

from pricekeeper.core.interfaces import TransactionClient
from pricekeeper.core.models import PreparedTransaction, RecordForPublication

APP_NAME = "pricekeeper"


def canonical_payload(records: Sequence[RecordForPublication]) -> bytes:
    """Serialize records deterministically for signing."""

    return json.dumps(list(records), sort_keys=True, separators=(",", ":"), default=str).encode("utf-8")


def _b64url(raw: bytes) -> str:
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")


class InMemoryTransactionClient(TransactionClient):
    """Signs payloads with HMAC-SHA256 and keeps transmitted transactions in memory.

    Any of the three operations can be made to fail by passing an exception
    through ``balance_error``, ``signing_error`` or ``transmit_error``.
    """

    def __init__(
        self,
        signing_key: bytes,
        balance: float = 0.0,
        *,
        balance_error: Exception | None = None,
        signing_error: Exception | None = None,
        transmit_error: Exception | None = None,
    ) -> None:
        if not signing_key:
            raise ValueError("signing_key must not be empty")
        self._signing_key = signing_key
        self.balance = balance
        self.balance_error = balance_error
        self.signing_error = signing_error
        self.transmit_error = transmit_error
        self.prepared: list[PreparedTransaction] = []
        self.transmitted: list[PreparedTransaction] = []

    async def get_balance(self) -> float:
        if self.balance_error is not None:
            raise self.balance_error
        return self.balance

    async def prepare_signed_transaction(
        self, records: Sequence[RecordForPublication]
    ) -> PreparedTransaction:
        if self.signing_error is not None:
            raise self.signing_error

        payload = canonical_payload(records)
        signature = hmac.new(self._signing_key, payload, hashlib.sha256).digest()
        tags: dict[str, str] = {"Content-Type": "application/json", "App-Name": APP_NAME}
        timestamps = {record.get("timestamp") for record in records}
        if len(timestamps) == 1:
            tags["timestamp"] = str(timestamps.pop())

        tx = PreparedTransaction(
            id=_b64url(hashlib.sha256(signature).digest()),
            data=[dict(record) for record in records],
            signature=_b64url(signature),
            tags=tags,
        )
        self.prepared.append(tx)
        logger.debug("Signed transaction {} with {} records", tx.id, len(tx.data))
        return tx

    async def transmit(self, tx: PreparedTransaction) -> None:
        if self.transmit_error is not None:
            raise self.transmit_error
        if not self.verify(tx):
            raise ValueError(f"Transaction {tx.id} has an invalid signature")
        self.transmitted.append(tx)

    def verify(self, tx: PreparedTransaction) -> bool:
        """Check the signature of ``tx`` against this client's key."""

        expected = hmac.new(self._signing_key, canonical_payload(tx.data), hashlib.sha256).digest()
        return hmac.compare_digest(_b64url(expected), tx.signature)

    def stored_records(self) -> list[dict[str, Any]]:
        """Return every record that has been transmitted, in order."""

        return [record for tx in self.transmitted for record in tx.data]
