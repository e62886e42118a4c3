"""JSON and CSV file storage for the catalogue state."""

from __future__ import annotations

from .atomic import dump_model, load_model, write_text_atomic
from .regions import CsvRegionReferenceRepository
from .repositories import (
    JsonDatabaseRepository,
    JsonListReferenceRepository,
    JsonManualOverrideRepository,
    StagedWrites,
)
from .unit_of_work import FileCatalogueUnitOfWork, UnitOfWorkStateError
from .views import read_region_view, write_region_view

__all__ = [
    "CsvRegionReferenceRepository",
    "FileCatalogueUnitOfWork",
    "JsonDatabaseRepository",
    "JsonListReferenceRepository",
    "JsonManualOverrideRepository",
    "StagedWrites",
    "UnitOfWorkStateError",
    "dump_model",
    "load_model",
    "read_region_view",
    "write_region_view",
    "write_text_atomic",
]
