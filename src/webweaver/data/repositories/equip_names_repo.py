"""Repository for skill and ability names that can occupy equip slots."""
from __future__ import annotations

from typing import Dict

from webweaver.data.errors import DataValidationError
from webweaver.data.repositories.base import RepositoryBase
from webweaver.domain.defs import EquipNameDef

VALID_KINDS = {"skill", "ability"}


class EquipNamesRepository(RepositoryBase[EquipNameDef]):
    """Loads equip-slot names keyed by the raw slot value."""

    def __init__(self, base_path=None) -> None:
        super().__init__("equip_names.json", base_path)

    def find(self, name: str) -> EquipNameDef | None:
        """Return the definition for ``name`` or None when unknown."""
        self._ensure_loaded()
        assert self._definitions is not None
        return self._definitions.get(name)

    def _build(self, raw: dict[str, object]) -> Dict[str, EquipNameDef]:
        self._assert_allowed_fields(raw, required={"entries"}, optional=set(), context="equip_names.json")
        names: Dict[str, EquipNameDef] = {}
        for index, payload in enumerate(self._require_list(raw["entries"], "entries")):
            context = f"equip name[{index}]"
            mapping = self._require_mapping(payload, context)
            self._assert_allowed_fields(
                mapping, required={"name", "display", "icon", "kind"}, optional=set(), context=context
            )
            name = self._require_str(mapping["name"], f"{context} name")
            kind = self._require_str(mapping["kind"], f"equip name '{name}' kind")
            if kind not in VALID_KINDS:
                raise DataValidationError(f"equip name '{name}' kind must be one of {sorted(VALID_KINDS)}.")
            if name in names:
                raise DataValidationError(f"equip names has duplicate keys: ['{name}']")
            names[name] = EquipNameDef(
                name=name,
                display=self._require_str(mapping["display"], f"equip name '{name}' display"),
                icon=self._require_str(mapping["icon"], f"equip name '{name}' icon"),
                kind=kind,  # type: ignore[arg-type]
            )
        return names

