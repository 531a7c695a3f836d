"""Configuration module for the product catalog service.

Loads settings from environment-specific config files:
- APP_ENV=dev  → config_dev.yaml (file-backed SQLite, debug logging)
- APP_ENV=test → config_test.yaml (in-memory SQLite)
- Default      → config.yaml

Secrets and deployment overrides are loaded from the .env file.
Fails fast with clear error messages if configuration is missing or invalid.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import yaml
from dotenv import load_dotenv


class ConfigurationError(Exception):
    """Raised when required configuration is missing or invalid."""
    pass


def _get_project_root() -> Path:
    """Get the project root directory (where config.yaml lives)."""
    # Navigate from src/config/ up to project root
    return Path(__file__).parent.parent.parent


def _get_app_env() -> str:
    return os.environ.get("APP_ENV", "").lower()


def _get_config_filename() -> str:
    """Get config filename based on APP_ENV environment variable.

    Returns:
        Config filename:
        - APP_ENV=dev  → config_dev.yaml
        - APP_ENV=test → config_test.yaml
        - Default      → config.yaml
    """
    app_env = _get_app_env()

    if app_env == "dev":
        return "config_dev.yaml"
    elif app_env == "test":
        return "config_test.yaml"
    else:
        return "config.yaml"


def _load_yaml_config() -> dict:
    """Load configuration from environment-specific config file."""
    config_filename = _get_config_filename()
    config_path = _get_project_root() / config_filename

    if not config_path.exists():
        raise ConfigurationError(
            f"Configuration file not found: {config_path}. "
            f"Set APP_ENV to 'dev' or 'test', or create {config_filename}."
        )

    with open(config_path, "r") as f:
        return yaml.safe_load(f) or {}


def _get_optional_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """Get optional environment variable with default."""
    return os.environ.get(key, default)


def _as_int(section: str, key: str, value, minimum: int = 0) -> int:
    """Coerce a config value to int or raise ConfigurationError."""
    try:
        result = int(value)
    except (TypeError, ValueError):
        raise ConfigurationError(
            f"'{section}.{key}' must be an integer, got {value!r}"
        ) from None
    if result < minimum:
        raise ConfigurationError(
            f"'{section}.{key}' must be >= {minimum}, got {result}"
        )
    return result


@dataclass(frozen=True)
class DatabaseConfig:
    """Database configuration."""
    path: str


@dataclass(frozen=True)
class GeneratorConfig:
    """Sample data generator configuration."""
    default_count: int
    max_batch_size: int


@dataclass(frozen=True)
class ServerConfig:
    """HTTP server configuration."""
    host: str
    port: int
    cors_origins: List[str]


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""
    level: str


@dataclass(frozen=True)
class AppConfig:
    """Main application configuration container."""
    environment: str
    database: DatabaseConfig
    generator: GeneratorConfig
    server: ServerConfig
    logging: LoggingConfig


def load_config() -> AppConfig:
    """
    Load and validate all application configuration.

    Loads the YAML file selected by APP_ENV, then applies the
    DATABASE_PATH, PORT and LOG_LEVEL environment overrides.

    Returns:
        AppConfig: Validated application configuration.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    # Load environment variables from .env file
    load_dotenv()

    yaml_config = _load_yaml_config()

    db_section = yaml_config.get("database", {})
    database_config = DatabaseConfig(
        path=_get_optional_env("DATABASE_PATH", db_section.get("path", "products.db")),
    )

    generator_section = yaml_config.get("generator", {})
    default_count = _as_int("generator", "default_count", generator_section.get("default_count", 100))
    max_batch_size = _as_int("generator", "max_batch_size", generator_section.get("max_batch_size", 10000))
    if default_count > max_batch_size:
        raise ConfigurationError(
            f"'generator.default_count' ({default_count}) exceeds "
            f"'generator.max_batch_size' ({max_batch_size})"
        )
    generator_config = GeneratorConfig(
        default_count=default_count,
        max_batch_size=max_batch_size,
    )

    server_section = yaml_config.get("server", {})
    cors_origins = server_section.get("cors_origins", ["*"])
    if isinstance(cors_origins, str):
        cors_origins = [cors_origins]
    server_config = ServerConfig(
        host=server_section.get("host", "0.0.0.0"),
        port=_as_int("server", "port", _get_optional_env("PORT", server_section.get("port", 3000)), minimum=1),
        cors_origins=list(cors_origins),
    )

    logging_section = yaml_config.get("logging", {})
    logging_config = LoggingConfig(
        level=_get_optional_env("LOG_LEVEL", logging_section.get("level", "INFO")).upper(),
    )

    return AppConfig(
        environment=yaml_config.get("environment") or _get_app_env() or "production",
        database=database_config,
        generator=generator_config,
        server=server_config,
        logging=logging_config,
    )


# Module-level singleton for convenience
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """
    Get the application configuration singleton.

    Lazy-loads configuration on first access.

    Returns:
        AppConfig: Application configuration.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config
