"""pricekeeper 核心模块"""

from pricekeeper.core.clients import InMemoryTransactionClient
from pricekeeper.core.config import ConfigManager, PricekeeperConfig, PublisherConfig
from pricekeeper.core.interfaces import TransactionClient
from pricekeeper.core.models import BalanceSnapshot, PreparedTransaction, PriceRecord, PublicationResult
from pricekeeper.core.services import PublicationService, redact
from pricekeeper.core.validation import validate_batch

__all__ = [
    "BalanceSnapshot",
    "ConfigManager",
    "InMemoryTransactionClient",
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
