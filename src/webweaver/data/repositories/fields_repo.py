"""Simple field lists repository."""
from __future__ import annotations

from typing import Dict, Tuple

from webweaver.data.repositories.base import RepositoryBase
from webweaver.domain.defs import SchemaEntryDef

ENTRY_REQUIRED = {"key", "display"}
ENTRY_OPTIONAL = {"category", "icon"}


class FieldsRepository(RepositoryBase[Tuple[SchemaEntryDef, ...]]):
    """Loads the general, current and misc field lists."""

    def __init__(self, base_path=None) -> None:
        super().__init__("fields.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, Tuple[SchemaEntryDef, ...]]:
        lists: Dict[str, Tuple[SchemaEntryDef, ...]] = {}
        for list_name, payload in raw.items():
            entries = self._require_list(payload, f"field list '{list_name}'")
            lists[list_name] = build_schema_entries(self, entries, f"field list '{list_name}'")
        return lists


def build_schema_entries(
    repo: RepositoryBase, entries: list[object], context: str
) -> Tuple[SchemaEntryDef, ...]:
    """Validate raw entry payloads and convert them into definitions."""
    result = []
    for index, payload in enumerate(entries):
        entry_context = f"{context}[{index}]"
        mapping = repo._require_mapping(payload, entry_context)
        repo._assert_allowed_fields(
            mapping, required=ENTRY_REQUIRED, optional=ENTRY_OPTIONAL, context=entry_context
        )
        result.append(
            SchemaEntryDef(
                key=repo._require_str(mapping["key"], f"{entry_context} key"),
                display=repo._require_str(mapping["display"], f"{entry_context} display"),
                category=repo._require_optional_str(mapping.get("category"), f"{entry_context} category"),
                icon=repo._require_optional_str(mapping.get("icon"), f"{entry_context} icon"),
            )
        )
    repo._assert_unique((entry.key for entry in result), context)
    return tuple(result)
