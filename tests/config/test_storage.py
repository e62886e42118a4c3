from __future__ import annotations

from pathlib import Path  # noqa: TC003

import pytest  # noqa: TC002

from cinemap.config.storage import StorageConfig, get_storage_config


def test_storage_layout_under_data_dir(tmp_path: Path) -> None:
    storage = StorageConfig(data_dir=tmp_path)
    root = tmp_path.resolve()

    assert storage.input_dir == root / "input"
    assert storage.database_path == root / "db" / "movies.json"
    assert storage.lists_dir == root / "lists"
    assert storage.overrides_path == root / "manual" / "missing-movies.json"
    assert storage.regions_path == root / "reference" / "countries.csv"
    assert storage.views_path == root / "views"


def test_get_storage_config_prefers_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("CINEMAP_DATA_DIR", str(tmp_path / "env-data"))
    monkeypatch.setenv("CINEMAP_VIEWS_DIR", str(tmp_path / "site"))

    storage = get_storage_config()

    assert storage.resolve_data_dir() == (tmp_path / "env-data").resolve()
    assert storage.views_path == (tmp_path / "site").resolve()


def test_explicit_arguments_win_over_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("CINEMAP_DATA_DIR", str(tmp_path / "env-data"))

    storage = get_storage_config(data_dir=tmp_path / "cli-data")

    assert storage.database_path.is_relative_to((tmp_path / "cli-data").resolve())


def test_default_data_dir_follows_xdg(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "xdg"))

    storage = get_storage_config()

    assert storage.resolve_data_dir() == (tmp_path / "xdg" / "cinemap").resolve()
