"""Domain definition exports."""

from .equip_name_def import EquipKind, EquipNameDef
from .schema_entry_def import SchemaEntryDef
from .tool_def import ToolDef, UpgradeSetDef

__all__ = [
    "EquipKind",
    "EquipNameDef",
    "SchemaEntryDef",
    "ToolDef",
    "UpgradeSetDef",
]
