"""Schema entry definition structures."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SchemaEntryDef:
    """A recognized save-data field or flag and its display metadata."""

    key: str
    display: str
    category: str | None = None
    icon: str | None = None
