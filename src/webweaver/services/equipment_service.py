"""Resolution of the tools and skills sitting in equip slots."""
from __future__ import annotations

import logging
from typing import Any, Dict, List

from webweaver.core.accessor import DEFAULT_ACCESSOR, RecordAccessor
from webweaver.data.repositories import EquipNamesRepository, ToolsRepository
from webweaver.domain.defs import ToolDef
from webweaver.domain.records import EquippedToolInfo, EquippedToolsResult

logger = logging.getLogger(__name__)

CURRENT_CREST_KEY = "CurrentCrestID"
TOOL_EQUIPS_KEY = "ToolEquips"
EXTRA_TOOL_EQUIPS_KEY = "ExtraToolEquips"
SAVED_DATA_KEY = "savedData"
NAME_KEY = "Name"
DATA_KEY = "Data"
SLOTS_KEY = "Slots"
EQUIPPED_TOOL_KEY = "EquippedTool"

PLACEHOLDER_ICON = "T_straight_pin.png"
TOOL_ICON_GROUP = "tools"
SKILL_ICON_GROUP = "general/skills"
ABILITY_ICON_GROUP = "general/ability"


class EquipmentService:
    """Reads crest slots and extra slots and resolves what each one holds."""

    def __init__(
        self,
        *,
        tools_repo: ToolsRepository | None = None,
        equip_names_repo: EquipNamesRepository | None = None,
        accessor: RecordAccessor | None = None,
    ) -> None:
        self._tools_repo = tools_repo or ToolsRepository()
        self._equip_names_repo = equip_names_repo or EquipNamesRepository()
        self._accessor = accessor or DEFAULT_ACCESSOR

    def project(self, record: Any) -> EquippedToolsResult:
        crest_id = self._accessor.get(record, CURRENT_CREST_KEY)
        tools_by_key = {tool.key: tool for tool in self._tools_repo.all()}

        equipped = [
            self.resolve(name, tools_by_key) for name in self.crest_slot_names(record, crest_id)
        ]
        extra = [
            self.resolve(name, tools_by_key, slot_name=slot_name)
            for slot_name, name in self.extra_slot_names(record)
        ]
        logger.debug("Crest %r: %d equipped, %d extra", crest_id, len(equipped), len(extra))
        return EquippedToolsResult(
            equipped_tools=tuple(equipped),
            extra_equipped_tools=tuple(extra),
            crest_id=crest_id,
        )

    def crest_slot_names(self, record: Any, crest_id: Any) -> List[str]:
        """Return tool names equipped in the active crest's slots, in slot order."""
        if not crest_id:
            return []
        crests = self._accessor.get_list(self._accessor.get(record, TOOL_EQUIPS_KEY), SAVED_DATA_KEY)
        crest = next(
            (entry for entry in crests if self._accessor.get(entry, NAME_KEY) == crest_id),
            None,
        )
        if crest is None:
            return []
        slots = self._accessor.get_list(self._accessor.get(crest, DATA_KEY), SLOTS_KEY)
        names = []
        for slot in slots:
            name = self._accessor.get(slot, EQUIPPED_TOOL_KEY)
            if _is_filled(name):
                names.append(name)
        return names

    def extra_slot_names(self, record: Any) -> List[tuple[Any, str]]:
        """Return ``(slot label, tool name)`` pairs for filled extra slots."""
        entries = self._accessor.get_list(self._accessor.get(record, EXTRA_TOOL_EQUIPS_KEY), SAVED_DATA_KEY)
        pairs = []
        for entry in entries:
            name = self._accessor.get(self._accessor.get(entry, DATA_KEY), EQUIPPED_TOOL_KEY)
            if _is_filled(name):
                pairs.append((self._accessor.get(entry, NAME_KEY), name))
        return pairs

    def resolve(
        self, name: str, tools_by_key: Dict[str, ToolDef] | None = None, *, slot_name: Any = None
    ) -> EquippedToolInfo:
        """Identify an equipped name: catalog tool, then skill/ability, then unknown."""
        if tools_by_key is None:
            tools_by_key = {tool.key: tool for tool in self._tools_repo.all()}
        tool = tools_by_key.get(name)
        if tool is not None:
            return EquippedToolInfo(
                name=name,
                display=tool.display or name,
                icon=tool.icon or PLACEHOLDER_ICON,
                category="Tool",
                icon_group=TOOL_ICON_GROUP,
                slot_name=slot_name,
            )
        named = self._equip_names_repo.find(name)
        if named is not None:
            return EquippedToolInfo(
                name=name,
                display=named.display or name,
                icon=named.icon,
                category="Skill" if named.is_skill else "Ability",
                icon_group=SKILL_ICON_GROUP if named.is_skill else ABILITY_ICON_GROUP,
                slot_name=slot_name,
            )
        logger.info("Unrecognized equipped name %r", name)
        return EquippedToolInfo(
            name=name,
            display=name,
            icon=PLACEHOLDER_ICON,
            category="Unknown",
            icon_group=TOOL_ICON_GROUP,
            slot_name=slot_name,
        )


def _is_filled(value: Any) -> bool:
    return isinstance(value, str) and value != ""
