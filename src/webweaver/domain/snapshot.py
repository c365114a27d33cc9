"""Aggregate result of projecting one decoded save."""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping

from .records import EquippedToolsResult, FlagCategory, ParsedField, ToolsResult, fields_to_dict

FIELD_CATEGORIES = ("general", "current", "misc")
FLAG_CATEGORIES = ("bosses", "fleas", "maps", "abilities", "skills")
CATEGORY_NAMES = FIELD_CATEGORIES + ("tools",) + FLAG_CATEGORIES + ("equipped_tools",)


@dataclass(frozen=True, slots=True)
class ParsedSnapshot:
    """Every category projected from one save record.

    ``raw`` is the caller's input object itself, kept for consumers that need
    fields no category covers.
    """

    general: Mapping[str, ParsedField]
    current: Mapping[str, ParsedField]
    misc: Mapping[str, ParsedField]
    tools: ToolsResult
    bosses: FlagCategory
    fleas: FlagCategory
    maps: FlagCategory
    abilities: FlagCategory
    skills: FlagCategory
    equipped_tools: EquippedToolsResult
    raw: Any

    def __post_init__(self) -> None:
        for name in FIELD_CATEGORIES:
            value = getattr(self, name)
            if not isinstance(value, MappingProxyType):
                object.__setattr__(self, name, MappingProxyType(dict(value)))

    def category(self, name: str) -> Any:
        """Return a category result by name."""
        if name not in CATEGORY_NAMES:
            raise KeyError(name)
        return getattr(self, name)

    def as_mapping(self) -> Mapping[str, Any]:
        """Return a read-only name -> result view, including ``raw``."""
        view: Dict[str, Any] = {name: getattr(self, name) for name in CATEGORY_NAMES}
        view["raw"] = self.raw
        return MappingProxyType(view)

    def to_dict(self) -> Dict[str, Any]:
        """Return plain builtins suitable for ``json.dumps`` (``raw`` excluded)."""
        payload: Dict[str, Any] = {name: fields_to_dict(getattr(self, name)) for name in FIELD_CATEGORIES}
        payload["tools"] = self.tools.to_dict()
        for name in FLAG_CATEGORIES:
            payload[name] = getattr(self, name).to_dict()
        payload["equipped_tools"] = self.equipped_tools.to_dict()
        return payload
