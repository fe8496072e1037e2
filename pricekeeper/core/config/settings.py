"""配置管理模块 - 处理pricekeeper发布服务的配置"""

import os
import tomllib
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from loguru import logger

from pricekeeper.core.exceptions import ConfigurationError
from pricekeeper.core.logging import configure_logging

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass
class PublisherConfig:
    """发布配置"""

    min_balance: float = 0.0
    omit_sources: bool = False
    skip_when_balance_low: bool = False

    def __post_init__(self) -> None:
        if self.min_balance < 0:
            raise ConfigurationError("min_balance must not be negative", key="publisher.min_balance")


@dataclass
class LoggingConfig:
    """日志配置"""

    level: str = "INFO"
    file: str | None = None


@dataclass
class PricekeeperConfig:
    """pricekeeper主配置"""

    publisher: PublisherConfig = field(default_factory=PublisherConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "PricekeeperConfig":
        """从字典创建配置"""
        try:
            return cls(
                publisher=PublisherConfig(**config_dict.get("publisher", {})),
                logging=LoggingConfig(**config_dict.get("logging", {})),
            )
        except TypeError as e:
            raise ConfigurationError(f"Unknown configuration key: {e}") from e

    def to_dict(self) -> dict[str, Any]:
        """转换为字典"""
        return {
            "publisher": asdict(self.publisher),
            "logging": asdict(self.logging),
        }


class ConfigManager:
    """配置管理器"""

    def __init__(self, config_path: Path | None = None):
        """初始化配置管理器

        Args:
            config_path: 配置文件路径，如果为None则使用默认路径
        """
        self.config_path = config_path or Path.home() / ".pricekeeper" / "config.toml"
        self.config = self._load_config()

    def _load_config(self) -> PricekeeperConfig:
        """加载配置，并叠加环境变量"""
        config_dict: dict[str, Any] = {}
        if self.config_path.exists():
            try:
                with open(self.config_path, "rb") as f:
                    config_dict = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                # 配置文件有问题时使用默认配置
                logger.warning("Failed to load config from {}: {}", self.config_path, e)
                config_dict = {}

        return PricekeeperConfig.from_dict(_deep_update(config_dict, load_config_from_env()))

    def get_config(self) -> PricekeeperConfig:
        """获取当前配置"""
        return self.config

    def update_config(self, **updates: Any) -> None:
        """更新配置"""
        self.config = PricekeeperConfig.from_dict(_deep_update(self.config.to_dict(), updates))

    def apply_logging(self) -> None:
        """按当前配置初始化结构化日志"""
        logging_config = self.config.logging
        configure_logging(
            logging_config.level,
            file_output=logging_config.file is not None,
            file_path=logging_config.file,
        )


def _deep_update(d: dict[str, Any], u: dict[str, Any]) -> dict[str, Any]:
    """深度更新字典"""
    for k, v in u.items():
        if isinstance(v, dict):
            d[k] = _deep_update(dict(d.get(k, {})), v)
        else:
            d[k] = v
    return d


def _env_float(name: str) -> float | None:
    raw = os.getenv(name)
    if raw is None:
        return None
    try:
        return float(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}", key=name) from e


def _env_bool(name: str) -> bool | None:
    raw = os.getenv(name)
    if raw is None:
        return None
    return raw.strip().lower() in _TRUE_VALUES


def get_default_config() -> PricekeeperConfig:
    """获取默认配置"""
    return PricekeeperConfig()


def load_config_from_env() -> dict[str, Any]:
    """从环境变量加载配置"""
    config: dict[str, Any] = {}

    # 发布配置
    publisher_config: dict[str, Any] = {}
    min_balance = _env_float("PRICEKEEPER_MIN_BALANCE")
    if min_balance is not None:
        publisher_config["min_balance"] = min_balance
    omit_sources = _env_bool("PRICEKEEPER_OMIT_SOURCES")
    if omit_sources is not None:
        publisher_config["omit_sources"] = omit_sources
    skip_when_low = _env_bool("PRICEKEEPER_SKIP_WHEN_BALANCE_LOW")
    if skip_when_low is not None:
        publisher_config["skip_when_balance_low"] = skip_when_low

    if publisher_config:
        config["publisher"] = publisher_config

    # 日志配置
    logging_config: dict[str, Any] = {}
    logging_level = os.getenv("PRICEKEEPER_LOGGING_LEVEL")
    if logging_level is not None:
        logging_config["level"] = logging_level
    logging_file = os.getenv("PRICEKEEPER_LOGGING_FILE")
    if logging_file is not None:
        logging_config["file"] = logging_file

    if logging_config:
        config["logging"] = logging_config

    return config
