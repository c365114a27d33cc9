"""Boolean flag lists repository (bosses, fleas, maps, abilities, skills)."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from webweaver.data.repositories.base import RepositoryBase
from webweaver.data.repositories.fields_repo import build_schema_entries
from webweaver.domain.defs import SchemaEntryDef


@dataclass(frozen=True, slots=True)
class FlagListDef:
    """One flag category and the stat name its set flags are counted under."""

    name: str
    counted_as: str
    entries: Tuple[SchemaEntryDef, ...]


class FlagsRepository(RepositoryBase[FlagListDef]):
    """Loads the flag categories."""

    def __init__(self, base_path=None) -> None:
        super().__init__("flags.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, FlagListDef]:
        categories: Dict[str, FlagListDef] = {}
        for name, payload in raw.items():
            context = f"flag category '{name}'"
            mapping = self._require_mapping(payload, context)
            self._assert_allowed_fields(
                mapping, required={"counted_as", "entries"}, optional=set(), context=context
            )
            entries = self._require_list(mapping["entries"], f"{context} entries")
            categories[name] = FlagListDef(
                name=name,
                counted_as=self._require_str(mapping["counted_as"], f"{context} counted_as"),
                entries=build_schema_entries(self, entries, context),
            )
        return categories
