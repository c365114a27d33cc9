"""Tool catalog repository, including upgrade sets and uncounted tools."""
from __future__ import annotations

from types import MappingProxyType
from typing import Dict, FrozenSet, Tuple

from webweaver.data.errors import DataReferenceError, DataValidationError
from webweaver.data.repositories.base import RepositoryBase
from webweaver.domain.defs import ToolDef, UpgradeSetDef

VALID_TOOL_CATEGORIES = {"Red", "Blue", "Yellow"}
MIN_SET_MEMBERS = 2
MAX_SET_MEMBERS = 3


class ToolsRepository(RepositoryBase[ToolDef]):
    """Loads the tool catalog keyed by raw save name."""

    def __init__(self, base_path=None) -> None:
        super().__init__("tools.json", base_path)
        self._upgrade_sets: Tuple[UpgradeSetDef, ...] = ()
        self._other_keys: FrozenSet[str] = frozenset()

    def upgrade_sets(self) -> Tuple[UpgradeSetDef, ...]:
        """Return the upgrade sets in file order."""
        self._ensure_loaded()
        return self._upgrade_sets

    def other_tool_keys(self) -> FrozenSet[str]:
        """Return catalog keys excluded from completion totals."""
        self._ensure_loaded()
        return self._other_keys

    def _build(self, raw: dict[str, object]) -> Dict[str, ToolDef]:
        self._assert_allowed_fields(
            raw, required={"tools"}, optional={"upgrade_sets", "other_tools"}, context="tools.json"
        )
        tools = self._build_tools(self._require_list(raw["tools"], "tools"))
        self._upgrade_sets = self._build_upgrade_sets(
            self._require_list(raw.get("upgrade_sets", []), "upgrade_sets"), tools
        )
        self._other_keys = self._build_other_keys(raw.get("other_tools", []), tools)
        return tools

    def _build_tools(self, entries: list[object]) -> Dict[str, ToolDef]:
        tools: Dict[str, ToolDef] = {}
        for index, payload in enumerate(entries):
            context = f"tool[{index}]"
            mapping = self._require_mapping(payload, context)
            self._assert_allowed_fields(
                mapping, required={"key", "display", "category", "icon"}, optional=set(), context=context
            )
            key = self._require_str(mapping["key"], f"{context} key")
            if key in tools:
                raise DataValidationError(f"tools has duplicate keys: ['{key}']")
            category = self._require_str(mapping["category"], f"tool '{key}' category")
            if category not in VALID_TOOL_CATEGORIES:
                raise DataValidationError(
                    f"tool '{key}' category must be one of {sorted(VALID_TOOL_CATEGORIES)}."
                )
            tools[key] = ToolDef(
                key=key,
                display=self._require_str(mapping["display"], f"tool '{key}' display"),
                category=category,
                icon=self._require_str(mapping["icon"], f"tool '{key}' icon"),
            )
        return tools

    def _build_upgrade_sets(
        self, entries: list[object], tools: Dict[str, ToolDef]
    ) -> Tuple[UpgradeSetDef, ...]:
        sets = []
        claimed: Dict[str, str] = {}
        for index, payload in enumerate(entries):
            context = f"upgrade_sets[{index}]"
            mapping = self._require_mapping(payload, context)
            self._assert_allowed_fields(
                mapping,
                required={"name", "members"},
                optional={"preferred", "variant_labels"},
                context=context,
            )
            name = self._require_str(mapping["name"], f"{context} name")
            context = f"upgrade set '{name}'"
            members = self._require_str_list(mapping["members"], f"{context} members")
            if not MIN_SET_MEMBERS <= len(members) <= MAX_SET_MEMBERS:
                raise DataValidationError(
                    f"{context} must list {MIN_SET_MEMBERS}-{MAX_SET_MEMBERS} members."
                )
            self._assert_unique(members, f"{context} members")
            for member in members:
                if member not in tools:
                    raise DataReferenceError(f"{context} references unknown tool '{member}'.")
                if member in claimed:
                    raise DataValidationError(
                        f"tool '{member}' belongs to both '{claimed[member]}' and '{name}'."
                    )
                claimed[member] = name

            preferred = self._require_optional_str(mapping.get("preferred"), f"{context} preferred")
            if preferred is not None and preferred not in members:
                raise DataReferenceError(f"{context} preferred tool '{preferred}' is not a member.")

            labels_raw = self._require_mapping(mapping.get("variant_labels", {}), f"{context} variant_labels")
            labels: Dict[str, str] = {}
            for member, label in labels_raw.items():
                if member not in members:
                    raise DataReferenceError(f"{context} labels unknown member '{member}'.")
                labels[member] = self._require_str(label, f"{context} label for '{member}'")

            sets.append(
                UpgradeSetDef(
                    name=name,
                    members=tuple(members),
                    preferred=preferred,
                    variant_labels=MappingProxyType(labels),
                )
            )
        return tuple(sets)

    def _build_other_keys(self, value: object, tools: Dict[str, ToolDef]) -> FrozenSet[str]:
        keys = self._require_str_list(value, "other_tools")
        set_members = {member for upgrade_set in self._upgrade_sets for member in upgrade_set.members}
        for key in keys:
            if key not in tools:
                raise DataReferenceError(f"other_tools references unknown tool '{key}'.")
            if key in set_members:
                raise DataValidationError(f"other tool '{key}' cannot belong to an upgrade set.")
        return frozenset(keys)
