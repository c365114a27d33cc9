"""Repository exports."""

from .equip_names_repo import EquipNamesRepository
from .fields_repo import FieldsRepository
from .flags_repo import FlagListDef, FlagsRepository
from .tools_repo import ToolsRepository

__all__ = [
    "EquipNamesRepository",
    "FieldsRepository",
    "FlagListDef",
    "FlagsRepository",
    "ToolsRepository",
]
