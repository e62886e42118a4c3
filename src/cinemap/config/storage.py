"""Data storage configuration helpers."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

APP_DIR_NAME: Final[str] = "cinemap"
DATABASE_FILENAME: Final[str] = "movies.json"
OVERRIDES_FILENAME: Final[str] = "missing-movies.json"
REGIONS_FILENAME: Final[str] = "countries.csv"


@dataclass(frozen=True, slots=True)
class StorageConfig:
    """Directory layout of a cinemap data directory."""

    data_dir: Path
    views_dir: Path | None = None

    def resolve_data_dir(self) -> Path:
        return self.data_dir.expanduser().resolve()

    @property
    def input_dir(self) -> Path:
        return self.resolve_data_dir() / "input"

    @property
    def database_path(self) -> Path:
        return self.resolve_data_dir() / "db" / DATABASE_FILENAME

    @property
    def lists_dir(self) -> Path:
        return self.resolve_data_dir() / "lists"

    @property
    def overrides_path(self) -> Path:
        return self.resolve_data_dir() / "manual" / OVERRIDES_FILENAME

    @property
    def regions_path(self) -> Path:
        return self.resolve_data_dir() / "reference" / REGIONS_FILENAME

    @property
    def views_path(self) -> Path:
        if self.views_dir is not None:
            return self.views_dir.expanduser().resolve()
        return self.resolve_data_dir() / "views"


def _default_data_dir() -> Path:
    if os.name == "nt":
        base = os.getenv("LOCALAPPDATA")
        base_path = Path(base) if base else (Path.home() / "AppData" / "Local")
    else:
        base = os.getenv("XDG_DATA_HOME")
        base_path = Path(base) if base else (Path.home() / ".local" / "share")
    return (base_path / APP_DIR_NAME).expanduser().resolve()


def get_storage_config(
    *,
    data_dir: Path | None = None,
    views_dir: Path | None = None,
) -> StorageConfig:
    """Resolve the storage layout; explicit arguments win over the environment."""

    if data_dir is None:
        env_dir = os.getenv("CINEMAP_DATA_DIR")
        data_dir = Path(env_dir) if env_dir else _default_data_dir()
    if views_dir is None:
        env_views = os.getenv("CINEMAP_VIEWS_DIR")
        views_dir = Path(env_views) if env_views else None
    return StorageConfig(data_dir=data_dir, views_dir=views_dir)
