"""Application configuration helpers."""

from __future__ import annotations

from .env import env_flag, require_env_var, require_env_vars
from .errors import (
    ConfigurationError,
    InvalidConfigurationValueError,
    MissingConfigurationError,
)
from .logging import configure_logging, resolve_log_level
from .metadata import MetadataConfig, get_metadata_config
from .storage import (
    DatabaseConfig,
    StorageConfig,
    get_database_config,
    get_legacy_database_uri,
    get_storage_config,
)

__all__ = [
    "ConfigurationError",
    "DatabaseConfig",
    "InvalidConfigurationValueError",
    "MetadataConfig",
    "MissingConfigurationError",
    "StorageConfig",
    "configure_logging",
    "env_flag",
    "get_database_config",
    "get_legacy_database_uri",
    "get_metadata_config",
    "get_storage_config",
    "require_env_var",
    "require_env_vars",
    "resolve_log_level",
]
