"""Configuration module."""

from src.config.configuration import (
    AppConfig,
    ConfigurationError,
    DatabaseConfig,
    GeneratorConfig,
    LoggingConfig,
    ServerConfig,
    get_config,
    load_config,
)

__all__ = [
    "AppConfig",
    "ConfigurationError",
    "DatabaseConfig",
    "GeneratorConfig",
    "LoggingConfig",
    "ServerConfig",
    "get_config",
    "load_config",
]
