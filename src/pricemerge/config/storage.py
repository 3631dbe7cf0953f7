"""Where the price catalog database lives."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

APP_DIR_NAME: Final[str] = "pricemerge"
DEFAULT_DB_FILENAME: Final[str] = "pricemerge.db"


@dataclass(frozen=True, slots=True)
class StorageConfig:
    data_dir: Path
    database_filename: str = DEFAULT_DB_FILENAME

    @property
    def database_path(self) -> Path:
        return self.data_dir.expanduser().resolve() / self.database_filename

    def database_uri(self) -> str:
        """SQLite URI for the catalog file; creates the data directory if missing."""

        path = self.database_path
        path.parent.mkdir(parents=True, exist_ok=True)
        return f"sqlite+pysqlite:///{path}"


@dataclass(frozen=True, slots=True)
class DatabaseConfig:
    uri: str


def get_storage_config() -> StorageConfig:
    """Use ``PRICEMERGE_DATA_DIR`` or fall back to ``$XDG_DATA_HOME/pricemerge``."""

    env_dir = os.getenv("PRICEMERGE_DATA_DIR")
    if env_dir:
        return StorageConfig(data_dir=Path(env_dir))
    data_home = os.getenv("XDG_DATA_HOME") or str(Path.home() / ".local" / "share")
    return StorageConfig(data_dir=Path(data_home) / APP_DIR_NAME)


def get_database_config(*, storage: StorageConfig | None = None) -> DatabaseConfig:
    env_uri = os.getenv("DATABASE_URI")
    if env_uri:
        return DatabaseConfig(uri=env_uri)
    return DatabaseConfig(uri=(storage or get_storage_config()).database_uri())
