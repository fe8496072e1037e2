"""Data models for price publication."""

from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

RecordForPublication = dict[str, Any]


class PriceRecord(BaseModel):
    """单个聚合价格记录."""

    model_config = ConfigDict(frozen=True)

    id: str
    symbol: str
    source: dict[str, Any] | None = None
    timestamp: int
    version: str
    value: Any


PriceBatch = Sequence[PriceRecord]


class PreparedTransaction(BaseModel):
    """已签名、待上传的交易.

    ``data`` holds the records exactly as they were signed.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    data: list[RecordForPublication]
    signature: str
    tags: dict[str, str] = Field(default_factory=dict)


class BalanceSnapshot(BaseModel):
    """某一时刻的账户余额读数."""

    model_config = ConfigDict(frozen=True)

    balance: float
    is_balance_low: bool


class PublicationResult(BaseModel):
    """一次完整发布周期的结果."""

    model_config = ConfigDict(frozen=True)

    balance: BalanceSnapshot
    transaction_id: str | None = None
    prepared: bool = False


__all__ = [
    "BalanceSnapshot",
    "PreparedTransaction",
    "PriceBatch",
    "PriceRecord",
    "PublicationResult",
    "RecordForPublication",
]
