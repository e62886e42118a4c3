"""Whole-file reads and replacements for state files."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING, TypeVar

from pydantic import BaseModel, ValidationError

from cinemap.domain.errors import CatalogueFormatError, PersistenceError

if TYPE_CHECKING:
    from collections.abc import Callable


def write_text_atomic(path: Path, text: str) -> None:
    """Replace ``path`` with ``text``; readers never observe a partial file."""

    tmp_name: str | None = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as handle:
            tmp_name = handle.name
            handle.write(text)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(tmp_name, path)
        tmp_name = None
    except OSError as exc:
        raise PersistenceError(f"Could not write {path}: {exc}") from exc
    finally:
        if tmp_name is not None:
            Path(tmp_name).unlink(missing_ok=True)


def dump_model(model: BaseModel) -> str:
    return model.model_dump_json(by_alias=True, indent=2) + "\n"


TModel = TypeVar("TModel", bound=BaseModel)


def load_model(
    path: Path,
    model: type[TModel],
    *,
    default: Callable[[], TModel],
) -> TModel:
    """Read and validate ``path``; a missing file yields ``default()``."""

    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return default()
    except OSError as exc:
        raise CatalogueFormatError(f"Could not read {path}: {exc}") from exc
    try:
        return model.model_validate_json(text)
    except ValidationError as exc:
        raise CatalogueFormatError(f"Invalid data in {path}: {exc}") from exc
