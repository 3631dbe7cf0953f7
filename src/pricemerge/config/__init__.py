"""Application configuration helpers."""

from __future__ import annotations

from .errors import ConfigurationError
from .logging import configure_logging
from .merge import MergeConfig, SplitIdentity, get_merge_config
from .storage import DatabaseConfig, StorageConfig, get_database_config, get_storage_config

__all__ = [
    "ConfigurationError",
    "DatabaseConfig",
    "MergeConfig",
    "SplitIdentity",
    "StorageConfig",
    "configure_logging",
    "get_database_config",
    "get_merge_config",
    "get_storage_config",
]
