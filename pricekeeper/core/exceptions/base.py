"""pricekeeper核心异常类."""

from typing import Any

from pricekeeper.core.exceptions.codes import ErrorCode


class PricekeeperError(Exception):
    """pricekeeper基础异常类."""

    def __init__(
        self,
        message: str,
        error_code: str = "GENERAL_ERROR",
        details: dict[str, Any] | None = None,
    ):
        """初始化异常.

        Args:
            message: 错误消息
            error_code: 错误代码
            details: 额外详情
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class ConfigurationError(PricekeeperError):
    """配置异常."""

    def __init__(
        self,
        message: str,
        key: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super_details = details or {}
        if key:
            super_details["key"] = key
        super().__init__(message, ErrorCode.CONFIGURATION.value, super_details)
        self.key = key
