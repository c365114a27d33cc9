"""Composes every projector into a single ParsedSnapshot."""
from __future__ import annotations

import logging
from typing import Any

from webweaver.core.accessor import DEFAULT_ACCESSOR, RecordAccessor
from webweaver.data.repositories import (
    EquipNamesRepository,
    FieldsRepository,
    FlagsRepository,
    ToolsRepository,
)
from webweaver.domain.snapshot import ParsedSnapshot
from webweaver.services.equipment_service import EquipmentService
from webweaver.services.field_service import FieldService
from webweaver.services.flag_service import FlagService
from webweaver.services.tool_service import ToolService

logger = logging.getLogger(__name__)


class SnapshotService:
    """Projects a decoded save record into every display category."""

    def __init__(
        self,
        *,
        fields_repo: FieldsRepository | None = None,
        flags_repo: FlagsRepository | None = None,
        tools_repo: ToolsRepository | None = None,
        equip_names_repo: EquipNamesRepository | None = None,
        accessor: RecordAccessor | None = None,
    ) -> None:
        accessor = accessor or DEFAULT_ACCESSOR
        tools_repo = tools_repo or ToolsRepository()
        self._field_service = FieldService(fields_repo=fields_repo, accessor=accessor)
        self._flag_service = FlagService(flags_repo=flags_repo, accessor=accessor)
        self._tool_service = ToolService(tools_repo=tools_repo, accessor=accessor)
        self._equipment_service = EquipmentService(
            tools_repo=tools_repo, equip_names_repo=equip_names_repo, accessor=accessor
        )

    def project_all(self, record: Any) -> ParsedSnapshot | None:
        """Return the snapshot for ``record``, or None when there is no record."""
        if record is None:
            return None
        snapshot = ParsedSnapshot(
            general=self._field_service.project_list(record, "general"),
            current=self._field_service.project_list(record, "current"),
            misc=self._field_service.project_list(record, "misc"),
            tools=self._tool_service.project(record),
            bosses=self._flag_service.project_category(record, "bosses"),
            fleas=self._flag_service.project_category(record, "fleas"),
            maps=self._flag_service.project_category(record, "maps"),
            abilities=self._flag_service.project_category(record, "abilities"),
            skills=self._flag_service.project_category(record, "skills"),
            equipped_tools=self._equipment_service.project(record),
            raw=record,
        )
        logger.info(
            "Projected save: %d/%d tools, %d/%d bosses",
            snapshot.tools.stats.unlocked,
            snapshot.tools.stats.total,
            snapshot.bosses.counted,
            snapshot.bosses.total,
        )
        return snapshot


_default_service: SnapshotService | None = None


def _get_default_service() -> SnapshotService:
    global _default_service
    if _default_service is None:
        _default_service = SnapshotService()
    return _default_service


def project_all(record: Any) -> ParsedSnapshot | None:
    """Project ``record`` with the bundled definitions."""
    return _get_default_service().project_all(record)
