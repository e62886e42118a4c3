"""Read and write published region views."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cinemap.domain.errors import CatalogueFormatError

from .atomic import dump_model, load_model, write_text_atomic
from .schema import RegionViewDocument
from .translator import view_from_document, view_to_document

if TYPE_CHECKING:
    from pathlib import Path

    from cinemap.domain.views import RegionView


def write_region_view(path: Path, view: RegionView) -> None:
    write_text_atomic(path, dump_model(view_to_document(view)))


def read_region_view(path: Path) -> RegionView:
    """Load a previously published view; the file must exist."""

    return view_from_document(
        load_model(path, RegionViewDocument, default=lambda: _missing_view(path))
    )


def _missing_view(path: Path) -> RegionViewDocument:
    raise CatalogueFormatError(f"View file {path} does not exist")
