from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

import pytest

from cinemap.config.storage import StorageConfig

if TYPE_CHECKING:
    from pathlib import Path

FIXED_NOW = datetime(2025, 3, 1, 12, 0, tzinfo=UTC)


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def storage(tmp_path: Path) -> StorageConfig:
    return StorageConfig(data_dir=tmp_path / "data", views_dir=tmp_path / "views")


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("TMDB_API_KEY", "CINEMAP_DATA_DIR", "CINEMAP_VIEWS_DIR"):
        monkeypatch.delenv(name, raising=False)
