"""测试发布前的字段移除."""

import copy

from pricekeeper.core.models import PriceRecord
from pricekeeper.core.services import redact


class TestRedact:
    """测试 redact 行为."""

    def test_keep_source_matches_input(self, sample_records):
        result = redact(sample_records, omit_source=False)

        assert result[0] == sample_records[0].model_dump()
        assert result[0]["source"] == {"coingecko": {"price": 1850.12, "volume": 10_000}}

    def test_keep_source_does_not_add_missing_source(self, sample_records):
        result = redact(sample_records, omit_source=False)

        assert [("source" in item) for item in result] == [True, False, False]
        assert result[1] == {"id": "rec-btc", "symbol": "BTC", "timestamp": 1000, "version": "0.4", "value": 27123.5}

    def test_explicit_none_source_is_kept(self):
        record = PriceRecord(id="x", symbol="SOL", source=None, timestamp=5, version="1", value=20.0)

        (item,) = redact([record], omit_source=False)

        assert "source" in item
        assert item["source"] is None

    def test_omit_source_removes_field_everywhere(self, sample_records):
        result = redact(sample_records, omit_source=True)

        assert len(result) == 3
        for record, item in zip(sample_records, result):
            assert "source" not in item
            assert item == {
                "id": record.id,
                "symbol": record.symbol,
                "timestamp": record.timestamp,
                "version": record.version,
                "value": record.value,
            }

    def test_input_records_are_not_mutated(self, sample_records):
        before = copy.deepcopy([record.model_dump() for record in sample_records])

        redact(sample_records, omit_source=True)
        kept = redact(sample_records, omit_source=False)
        kept[0]["source"]["coingecko"]["price"] = 0

        assert [record.model_dump() for record in sample_records] == before
        assert sample_records[0].source is not None

    def test_preserves_order(self, sample_records):
        result = redact(sample_records, omit_source=True)
        assert [item["symbol"] for item in result] == ["ETH", "BTC", "AR"]
