"""Data storage configuration helpers."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .env import require_env_var

APP_DIR_NAME: Final[str] = "sidecarpy"
DEFAULT_DB_FILENAME: Final[str] = "sidecarpy.db"
IMAGES_DIR_NAME: Final[str] = "images"
LEGACY_DATABASE_URI_ENV: Final[str] = "LEGACY_DATABASE_URI"


@dataclass(frozen=True, slots=True)
class StorageConfig:
    data_dir: Path
    images_dir: Path | None = None
    database_filename: str = DEFAULT_DB_FILENAME

    def resolve_data_dir(self) -> Path:
        return self.data_dir.expanduser().resolve()

    def ensure_data_dir(self) -> Path:
        data_dir = self.resolve_data_dir()
        data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir

    def resolve_images_dir(self) -> Path:
        if self.images_dir is not None:
            return self.images_dir.expanduser().resolve()
        return self.resolve_data_dir() / IMAGES_DIR_NAME

    def database_path(self, *, ensure: bool = True) -> Path:
        base = self.ensure_data_dir() if ensure else self.resolve_data_dir()
        return base / self.database_filename

    def database_uri(self) -> str:
        return f"sqlite+pysqlite:///{self.database_path()}"


@dataclass(frozen=True, slots=True)
class DatabaseConfig:
    uri: str


def _default_data_dir() -> Path:
    if os.name == "nt":
        base = os.getenv("LOCALAPPDATA")
        base_path = Path(base) if base else (Path.home() / "AppData" / "Local")
    else:
        base = os.getenv("XDG_DATA_HOME")
        base_path = Path(base) if base else (Path.home() / ".local" / "share")
    return (base_path / APP_DIR_NAME).expanduser().resolve()


def get_storage_config() -> StorageConfig:
    env_dir = os.getenv("SIDECARPY_DATA_DIR")
    env_images = os.getenv("SIDECARPY_IMAGES_DIR")
    return StorageConfig(
        data_dir=Path(env_dir) if env_dir else _default_data_dir(),
        images_dir=Path(env_images) if env_images else None,
    )


def get_database_config(*, storage: StorageConfig | None = None) -> DatabaseConfig:
    env_uri = os.getenv("DATABASE_URI")
    if env_uri:
        return DatabaseConfig(uri=env_uri)
    storage_config = storage or get_storage_config()
    return DatabaseConfig(uri=storage_config.database_uri())


def get_legacy_database_uri(uri: str | None = None) -> str:
    """Return ``uri`` or fall back to the required ``LEGACY_DATABASE_URI``."""

    return uri or require_env_var(LEGACY_DATABASE_URI_ENV)
