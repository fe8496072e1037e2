"""Exception handling module."""

from pricekeeper.core.exceptions.base import ConfigurationError, PricekeeperError
from pricekeeper.core.exceptions.codes import ErrorCode
from pricekeeper.core.exceptions.domain import DomainError, EmptyBatchError, InconsistentTimestampsError

__all__ = [
    "PricekeeperError",
    "ConfigurationError",
    "DomainError",
    "EmptyBatchError",
    "InconsistentTimestampsError",
    "ErrorCode",
]
