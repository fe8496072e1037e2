"""Transaction client implementations."""

from pricekeeper.core.clients.memory import InMemoryTransactionClient, canonical_payload

__all__ = ["InMemoryTransactionClient", "canonical_payload"]
