"""Configuration management module."""

from pricekeeper.core.config.settings import (
    ConfigManager,
    LoggingConfig,
    PricekeeperConfig,
    PublisherConfig,
    get_default_config,
    load_config_from_env,
)

__all__ = [
    "ConfigManager",
    "PricekeeperConfig",
    "PublisherConfig",
    "LoggingConfig",
    "get_default_config",
    "load_config_from_env",
]
