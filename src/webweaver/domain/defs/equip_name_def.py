"""Equip-slot name definitions for skills and abilities."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

EquipKind = Literal["skill", "ability"]


@dataclass(frozen=True, slots=True)
class EquipNameDef:
    """Maps a raw equip-slot value to the skill or ability it names."""

    name: str
    display: str
    icon: str
    kind: EquipKind

    @property
    def is_skill(self) -> bool:
        return self.kind == "skill"
