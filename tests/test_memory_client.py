"""测试内存交易客户端."""

import pytest

from pricekeeper.core.clients import InMemoryTransactionClient, canonical_payload


@pytest.fixture
def records():
    return [
        {"id": "a", "symbol": "ETH", "timestamp": 1000, "version": "1", "value": 1850.1},
        {"id": "b", "symbol": "BTC", "timestamp": 1000, "version": "1", "value": 27123.5},
    ]


class TestInMemoryTransactionClient:
    """测试签名、校验与上传."""

    def test_empty_key_rejected(self):
        with pytest.raises(ValueError):
            InMemoryTransactionClient(signing_key=b"")

    def test_canonical_payload_ignores_key_order(self):
        assert canonical_payload([{"b": 1, "a": 2}]) == canonical_payload([{"a": 2, "b": 1}])

    @pytest.mark.asyncio
    async def test_signed_transaction_is_deterministic(self, client, records):
        first = await client.prepare_signed_transaction(records)
        second = await client.prepare_signed_transaction(records)

        assert first.id == second.id
        assert first.signature == second.signature
        assert first.data == records
        assert first.tags["timestamp"] == "1000"
        assert first.tags["Content-Type"] == "application/json"

    @pytest.mark.asyncio
    async def test_different_keys_produce_different_ids(self, records):
        left = InMemoryTransactionClient(signing_key=b"left")
        right = InMemoryTransactionClient(signing_key=b"right")

        left_tx = await left.prepare_signed_transaction(records)
        right_tx = await right.prepare_signed_transaction(records)

        assert left_tx.id != right_tx.id
        assert not right.verify(left_tx)

    @pytest.mark.asyncio
    async def test_tampered_transaction_is_refused(self, client, records):
        tx = await client.prepare_signed_transaction(records)
        tampered = tx.model_copy(update={"data": [{**records[0], "value": 1.0}, records[1]]})

        with pytest.raises(ValueError):
            await client.transmit(tampered)
        assert client.transmitted == []

    @pytest.mark.asyncio
    async def test_transmit_stores_records(self, client, records):
        tx = await client.prepare_signed_transaction(records)

        await client.transmit(tx)

        assert client.stored_records() == records

    @pytest.mark.asyncio
    async def test_configured_failures(self, records):
        client = InMemoryTransactionClient(
            signing_key=b"k",
            balance_error=TimeoutError("slow"),
            signing_error=PermissionError("locked"),
        )

        with pytest.raises(TimeoutError):
            await client.get_balance()
        with pytest.raises(PermissionError):
            await client.prepare_signed_transaction(records)
        assert client.prepared == []
