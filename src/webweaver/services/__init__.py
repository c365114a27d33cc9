"""Service exports."""

from .equipment_service import EquipmentService
from .errors import SaveLoadError
from .field_service import FieldService
from .flag_service import FlagService
from .save_loader import load_decoded_save
from .snapshot_service import SnapshotService, project_all
from .tool_service import ToolService

__all__ = [
    "EquipmentService",
    "FieldService",
    "FlagService",
    "SaveLoadError",
    "SnapshotService",
    "ToolService",
    "load_decoded_save",
    "project_all",
]
