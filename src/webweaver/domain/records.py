"""Projected, display-ready records built from a decoded save."""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Literal, Mapping, Tuple

from webweaver.core.accessor import to_plain

EquipCategory = Literal["Tool", "Skill", "Ability", "Unknown"]


@dataclass(frozen=True, slots=True)
class ParsedField:
    """Raw value of one schema field alongside its label."""

    value: Any
    display: str

    def to_dict(self) -> Dict[str, Any]:
        return {"value": to_plain(self.value), "display": self.display}


@dataclass(frozen=True, slots=True)
class FlagRecord:
    """A boolean completion flag (boss, flea, map, ability or skill)."""

    key: str
    display: str
    value: bool
    icon: str | None = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class FlagCategory:
    """Flags of one category plus the counts shown next to them."""

    items: Tuple[FlagRecord, ...]
    counted_as: str

    @property
    def total(self) -> int:
        return len(self.items)

    @property
    def counted(self) -> int:
        return sum(1 for item in self.items if item.value)

    @property
    def stats(self) -> Dict[str, int]:
        return {"total": self.total, self.counted_as: self.counted}

    def to_dict(self) -> Dict[str, Any]:
        return {"items": [item.to_dict() for item in self.items], "stats": self.stats}


@dataclass(frozen=True, slots=True)
class ToolRecord:
    """
    Unlock state of a catalog tool.

    When ``is_upgrade_set`` is set the record stands in for a whole upgrade
    set: ``variants`` holds every member (in tier order) and
    ``variant_labels`` their labels in the same order.
    """

    key: str
    display: str
    category: str
    icon: str
    unlocked: bool = False
    seen: bool = False
    selected: bool = False
    is_upgrade_set: bool = False
    upgrade_set_name: str | None = None
    variant_labels: Tuple[str, ...] = ()
    variants: Tuple["ToolRecord", ...] = ()
    is_other: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class ToolStats:
    """Counts over the tools that take part in completion totals."""

    total: int = 0
    unlocked: int = 0
    seen: int = 0
    selected: int = 0


@dataclass(frozen=True, slots=True)
class ToolsResult:
    tools: Tuple[ToolRecord, ...]
    other_tools: Tuple[ToolRecord, ...]
    stats: ToolStats

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tools": [tool.to_dict() for tool in self.tools],
            "other_tools": [tool.to_dict() for tool in self.other_tools],
            "stats": asdict(self.stats),
        }


@dataclass(frozen=True, slots=True)
class EquippedToolInfo:
    """Resolved identity of a value found in an equip slot."""

    name: str
    display: str
    icon: str
    category: EquipCategory
    icon_group: str
    slot_name: str | None = None

    def to_dict(self) -> Dict[str, Any]:
        payload = asdict(self)
        # Only extra slots carry a label.
        if self.slot_name is None:
            del payload["slot_name"]
        else:
            payload["slot_name"] = to_plain(self.slot_name)
        return payload


@dataclass(frozen=True, slots=True)
class EquippedToolsResult:
    equipped_tools: Tuple[EquippedToolInfo, ...] = ()
    extra_equipped_tools: Tuple[EquippedToolInfo, ...] = ()
    crest_id: Any = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "equipped_tools": [info.to_dict() for info in self.equipped_tools],
            "extra_equipped_tools": [info.to_dict() for info in self.extra_equipped_tools],
            "crest_id": to_plain(self.crest_id),
        }


def fields_to_dict(fields: Mapping[str, ParsedField]) -> Dict[str, Dict[str, Any]]:
    """Convert a projected field mapping into plain dicts."""
    return {key: parsed.to_dict() for key, parsed in fields.items()}


__all__ = [
    "EquipCategory",
    "EquippedToolInfo",
    "EquippedToolsResult",
    "FlagCategory",
    "FlagRecord",
    "ParsedField",
    "ToolRecord",
    "ToolStats",
    "ToolsResult",
    "fields_to_dict",
]
