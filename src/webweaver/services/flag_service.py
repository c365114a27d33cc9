"""Projection of boolean completion flags."""
from __future__ import annotations

import logging
from typing import Any, Iterable, Tuple

from webweaver.core.accessor import DEFAULT_ACCESSOR, RecordAccessor
from webweaver.data.repositories import FlagsRepository
from webweaver.domain.defs import SchemaEntryDef
from webweaver.domain.records import FlagCategory, FlagRecord

logger = logging.getLogger(__name__)


class FlagService:
    """Turns flag keys into FlagRecords; absent and falsy values both read as False."""

    def __init__(
        self,
        *,
        flags_repo: FlagsRepository | None = None,
        accessor: RecordAccessor | None = None,
    ) -> None:
        self._flags_repo = flags_repo or FlagsRepository()
        self._accessor = accessor or DEFAULT_ACCESSOR

    def project(self, record: Any, entries: Iterable[SchemaEntryDef]) -> Tuple[FlagRecord, ...]:
        return tuple(
            FlagRecord(
                key=entry.key,
                display=entry.display,
                value=bool(self._accessor.get(record, entry.key)),
                icon=entry.icon,
            )
            for entry in entries
        )

    def project_category(self, record: Any, name: str) -> FlagCategory:
        """Project a flag category from the repository along with its stats."""
        flag_list = self._flags_repo.get(name)
        category = FlagCategory(items=self.project(record, flag_list.entries), counted_as=flag_list.counted_as)
        logger.debug("Projected %s: %s", name, category.stats)
        return category
