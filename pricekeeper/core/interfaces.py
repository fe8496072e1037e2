"""
Core interfaces for pricekeeper.

The publication service only talks to the storage network through
:class:`TransactionClient`, so real network clients and test doubles are
interchangeable.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from pricekeeper.core.models import PreparedTransaction, RecordForPublication


class TransactionClient(ABC):
    """
    Abstract client for a blockchain-backed storage network.

    Implementations own signing credentials, transport and any timeout or
    nonce handling.
    """

    @abstractmethod
    async def get_balance(self) -> float:
        """Return the current account balance."""

    @abstractmethod
    async def prepare_signed_transaction(
        self, records: Sequence[RecordForPublication]
    ) -> PreparedTransaction:
        """
        Build and sign a transaction carrying ``records``.

        Args:
            records: Publication-ready records, already redacted if required

        Returns:
            PreparedTransaction with an id assigned by the client
        """

    @abstractmethod
    async def transmit(self, tx: PreparedTransaction) -> None:
        """Send a prepared transaction to the storage network."""
