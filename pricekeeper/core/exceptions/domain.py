"""Domain-level error hierarchy definitions."""

from __future__ import annotations

from typing import Any, Mapping

from pricekeeper.core.exceptions.base import PricekeeperError
from pricekeeper.core.exceptions.codes import ErrorCode


class DomainError(PricekeeperError):
    """领域错误基类，携带标准化错误上下文."""

    def __init__(
        self,
        message: str,
        code: ErrorCode,
        layer: str,
        retryable: bool = False,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        """构造领域错误实例."""

        payload = dict(context or {})
        details = {**payload, "layer": layer, "retryable": retryable}
        super().__init__(message, code.value, details)
        self.code = code
        self.layer = layer
        self.retryable = retryable
        self.context = payload

    def to_payload(self) -> dict[str, Any]:
        """Return a serializable payload representing the error."""

        return {
            "code": self.code.value,
            "message": self.message,
            "layer": self.layer,
            "retryable": self.retryable,
            "context": dict(self.context),
        }


class EmptyBatchError(DomainError):
    """批次为空，无法发布."""

    def __init__(self, message: str = "Can not keep empty batch of prices in storage") -> None:
        super().__init__(message, ErrorCode.EMPTY_BATCH, layer="validation", retryable=False)


class InconsistentTimestampsError(DomainError):
    """批次中存在多个不同的时间戳."""

    def __init__(self, distinct_count: int, timestamps: list[int] | None = None) -> None:
        context: dict[str, Any] = {"distinct_count": distinct_count}
        if timestamps is not None:
            context["timestamps"] = timestamps
        super().__init__(
            f"All prices should have same timestamps. Found {distinct_count} different timestamps.",
            ErrorCode.INCONSISTENT_TIMESTAMPS,
            layer="validation",
            retryable=False,
            context=context,
        )
        self.distinct_count = distinct_count
