"""pricekeeper - 价格数据永久存储发布库

在签名上传之前校验价格批次、按需移除来源字段，并检查账户余额。
上传与余额查询失败只记录日志，不会中断调用方的发布循环。
"""

from pricekeeper.core import (
    BalanceSnapshot,
    ConfigManager,
    InMemoryTransactionClient,
    PreparedTransaction,
    PriceRecord,
    PricekeeperConfig,
    PublicationResult,
    PublicationService,
    PublisherConfig,
    TransactionClient,
    redact,
    validate_batch,
)
from pricekeeper.core.exceptions import EmptyBatchError, InconsistentTimestampsError

# 版本信息
__version__ = "0.1.0"

__all__ = [
    "BalanceSnapshot",
    "ConfigManager",
    "EmptyBatchError",
    "InMemoryTransactionClient",
    "InconsistentTimestampsError",
    "PreparedTransaction",
    "PriceRecord",
    "PricekeeperConfig",
    "PublicationResult",
    "PublicationService",
    "PublisherConfig",
    "TransactionClient",
    "redact",
    "validate_batch",
]
