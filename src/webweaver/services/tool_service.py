"""
Tool inventory projection.

The save lists tools under ``Tools.savedData`` as ``{"Name": ..., "Data":
{"IsUnlocked": ..., "HasBeenSeen": ..., "HasBeenSelected": ...}}`` entries.
The catalog, not the save, decides which tools are shown: save entries only
contribute unlock state. Upgrade sets collapse into one displayed record and
"other" tools are listed apart from the completion totals.
"""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Dict, Iterable, List, Sequence, Tuple

from webweaver.core.accessor import DEFAULT_ACCESSOR, RecordAccessor
from webweaver.data.repositories import ToolsRepository
from webweaver.domain.defs import ToolDef, UpgradeSetDef
from webweaver.domain.records import ToolRecord, ToolsResult, ToolStats

logger = logging.getLogger(__name__)

TOOLS_KEY = "Tools"
SAVED_DATA_KEY = "savedData"
NAME_KEY = "Name"
DATA_KEY = "Data"
UNLOCKED_KEY = "IsUnlocked"
SEEN_KEY = "HasBeenSeen"
SELECTED_KEY = "HasBeenSelected"


class ToolService:
    """Builds the displayed tool list and its completion stats."""

    def __init__(
        self,
        *,
        tools_repo: ToolsRepository | None = None,
        accessor: RecordAccessor | None = None,
    ) -> None:
        self._tools_repo = tools_repo or ToolsRepository()
        self._accessor = accessor or DEFAULT_ACCESSOR

    def project(self, record: Any) -> ToolsResult:
        """Run every projection step against ``record``."""
        entries = self.saved_entries(record)
        lookup = self.build_lookup(entries)
        records = self.catalog_records(self._tools_repo.all(), lookup)
        collapsed = collapse_upgrade_sets(records, self._tools_repo.upgrade_sets())
        tools, other_tools = partition_other_tools(collapsed, self._tools_repo.other_tool_keys())
        result = ToolsResult(tools=tools, other_tools=other_tools, stats=compute_stats(tools))
        logger.debug(
            "Projected %d tools (%d other) from %d save entries", len(tools), len(other_tools), len(entries)
        )
        return result

    def saved_entries(self, record: Any) -> List[Any]:
        """Return the raw tool entries, or an empty list when the path is missing."""
        container = self._accessor.get(record, TOOLS_KEY)
        return self._accessor.get_list(container, SAVED_DATA_KEY)

    def build_lookup(self, entries: Iterable[Any]) -> Dict[str, Any]:
        """Index tool entries by name; a later entry for a name replaces an earlier one."""
        lookup: Dict[str, Any] = {}
        for entry in entries:
            name = self._accessor.get(entry, NAME_KEY)
            if isinstance(name, str) and name:
                lookup[name] = entry
        return lookup

    def catalog_records(self, catalog: Sequence[ToolDef], lookup: Dict[str, Any]) -> List[ToolRecord]:
        """Emit one ToolRecord per catalog tool, defaulting flags to False."""
        records = []
        for tool in catalog:
            data = self._accessor.get(lookup.get(tool.key), DATA_KEY)
            records.append(
                ToolRecord(
                    key=tool.key,
                    display=tool.display,
                    category=tool.category,
                    icon=tool.icon,
                    unlocked=bool(self._accessor.get(data, UNLOCKED_KEY)),
                    seen=bool(self._accessor.get(data, SEEN_KEY)),
                    selected=bool(self._accessor.get(data, SELECTED_KEY)),
                )
            )
        return records


def choose_representative(members: Sequence[ToolRecord], preferred: str | None) -> ToolRecord:
    """
    Pick the member shown for an upgrade set.

    The preferred tier wins when it is unlocked, then the first unlocked tier,
    and a fully locked set is represented by its base tier.
    """
    unlocked = [member for member in members if member.unlocked]
    if not unlocked:
        return members[0]
    for member in unlocked:
        if member.key == preferred:
            return member
    return unlocked[0]


def collapse_upgrade_sets(
    records: Sequence[ToolRecord], upgrade_sets: Iterable[UpgradeSetDef]
) -> List[ToolRecord]:
    """Replace each upgrade set's members with one decorated record.

    The set record takes the position of the set's first listed member;
    tools outside every set are returned unchanged.
    """
    by_key = {record.key: record for record in records}
    replacements: Dict[str, ToolRecord] = {}
    absorbed: set[str] = set()
    for upgrade_set in upgrade_sets:
        members = [by_key[key] for key in upgrade_set.members if key in by_key]
        if not members:
            continue
        shown = choose_representative(members, upgrade_set.preferred)
        labels = tuple(upgrade_set.variant_labels.get(member.key, member.display) for member in members)
        replacements[members[0].key] = replace(
            shown,
            is_upgrade_set=True,
            upgrade_set_name=upgrade_set.name,
            variant_labels=labels,
            variants=tuple(members),
        )
        absorbed.update(member.key for member in members)

    collapsed = []
    for record in records:
        if record.key in replacements:
            collapsed.append(replacements[record.key])
        elif record.key not in absorbed:
            collapsed.append(record)
    return collapsed


def partition_other_tools(
    records: Iterable[ToolRecord], other_keys: Iterable[str]
) -> Tuple[Tuple[ToolRecord, ...], Tuple[ToolRecord, ...]]:
    """Split records into counted tools and flagged "other" tools."""
    excluded = frozenset(other_keys)
    counted: List[ToolRecord] = []
    other: List[ToolRecord] = []
    for record in records:
        if record.key in excluded:
            other.append(replace(record, is_other=True))
        else:
            counted.append(record)
    return tuple(counted), tuple(other)


def compute_stats(tools: Sequence[ToolRecord]) -> ToolStats:
    return ToolStats(
        total=len(tools),
        unlocked=sum(1 for tool in tools if tool.unlocked),
        seen=sum(1 for tool in tools if tool.seen),
        selected=sum(1 for tool in tools if tool.selected),
    )
