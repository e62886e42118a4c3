"""Domain primitives: scalar aliases.

Scalar aliases may be promoted to proper value objects later without changing imports.
"""

from __future__ import annotations

from typing import TypeAlias

ImdbId: TypeAlias = str
TmdbId: TypeAlias = int
CountryCode: TypeAlias = str  # ISO 3166-1 alpha-2
ListName: TypeAlias = str
