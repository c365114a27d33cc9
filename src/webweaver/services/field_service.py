"""Projection of simple save fields."""
from __future__ import annotations

from typing import Any, Dict, Iterable

from webweaver.core.accessor import DEFAULT_ACCESSOR, RecordAccessor
from webweaver.data.repositories import FieldsRepository
from webweaver.domain.defs import SchemaEntryDef
from webweaver.domain.records import ParsedField


class FieldService:
    """Reads schema-listed fields from a save record without transforming them."""

    def __init__(
        self,
        *,
        fields_repo: FieldsRepository | None = None,
        accessor: RecordAccessor | None = None,
    ) -> None:
        self._fields_repo = fields_repo or FieldsRepository()
        self._accessor = accessor or DEFAULT_ACCESSOR

    def project(self, record: Any, entries: Iterable[SchemaEntryDef]) -> Dict[str, ParsedField]:
        """Return one ParsedField per entry, keyed and ordered by the schema."""
        return {
            entry.key: ParsedField(value=self._accessor.get(record, entry.key), display=entry.display)
            for entry in entries
        }

    def project_list(self, record: Any, list_name: str) -> Dict[str, ParsedField]:
        """Project the named field list (``general``, ``current`` or ``misc``)."""
        return self.project(record, self._fields_repo.get(list_name))
