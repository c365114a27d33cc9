"""Base repository implementation for JSON definition data."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Generic, Iterable, List, TypeVar

from webweaver.data import paths
from webweaver.data.errors import DataValidationError
from webweaver.data.json_loader import load_json

T = TypeVar("T")

logger = logging.getLogger(__name__)


class RepositoryBase(Generic[T]):
    """Common caching and loading behavior for repositories."""

    def __init__(self, filename: str, base_path: Path | str | None = None) -> None:
        self._filename = filename
        self._base_path = Path(base_path) if base_path is not None else None
        self._definitions: Dict[str, T] | None = None

    def _get_file_path(self) -> Path:
        definitions_dir = paths.get_definitions_path(self._base_path)
        return definitions_dir / self._filename

    def _load_raw(self) -> dict[str, object]:
        file_path = self._get_file_path()
        raw = load_json(file_path)
        if not isinstance(raw, dict):
            raise DataValidationError(f"Expected top-level object in {file_path}")
        return raw

    def _build(self, raw: dict[str, object]) -> Dict[str, T]:
        """Convert a raw dict into typed definitions."""
        raise NotImplementedError

    def _ensure_loaded(self) -> None:
        if self._definitions is None:
            raw = self._load_raw()
            self._definitions = self._build(raw)
            logger.debug("Loaded %d definition groups from %s", len(self._definitions), self._filename)

    def get(self, def_id: str) -> T:
        """Return a definition by id."""
        self._ensure_loaded()
        assert self._definitions is not None
        try:
            return self._definitions[def_id]
        except KeyError as exc:
            raise KeyError(def_id) from exc

    def names(self) -> list[str]:
        """Return definition ids in file order."""
        self._ensure_loaded()
        assert self._definitions is not None
        return list(self._definitions.keys())

    def all(self) -> list[T]:
        """Return all definitions in file order."""
        self._ensure_loaded()
        assert self._definitions is not None
        return list(self._definitions.values())

    @staticmethod
    def _require_mapping(value: object, context: str) -> dict[str, object]:
        if not isinstance(value, dict):
            raise DataValidationError(f"{context} must be an object/dict.")
        return value

    @staticmethod
    def _require_list(value: object, context: str) -> list[object]:
        if not isinstance(value, list):
            raise DataValidationError(f"{context} must be a list.")
        return value

    @staticmethod
    def _require_str(value: object, context: str) -> str:
        if not isinstance(value, str) or not value:
            raise DataValidationError(f"{context} must be a non-empty string.")
        return value

    @staticmethod
    def _require_optional_str(value: object, context: str) -> str | None:
        if value is None:
            return None
        if not isinstance(value, str) or not value:
            raise DataValidationError(f"{context} must be a non-empty string or null.")
        return value

    @staticmethod
    def _require_str_list(value: object, context: str) -> List[str]:
        if not isinstance(value, list):
            raise DataValidationError(f"{context} must be a list.")
        result: List[str] = []
        for entry in value:
            if not isinstance(entry, str) or not entry:
                raise DataValidationError(f"{context} entries must be non-empty strings.")
            result.append(entry)
        return result

    @staticmethod
    def _assert_allowed_fields(
        payload: dict[str, object], *, required: set[str], optional: set[str], context: str
    ) -> None:
        missing = required - payload.keys()
        if missing:
            raise DataValidationError(f"{context} missing fields: {sorted(missing)}")
        unknown = payload.keys() - required - optional
        if unknown:
            raise DataValidationError(f"{context} has unknown fields: {sorted(unknown)}")

    @staticmethod
    def _assert_unique(keys: Iterable[str], context: str) -> None:
        seen: set[str] = set()
        duplicates: list[str] = []
        for key in keys:
            if key in seen:
                duplicates.append(key)
            seen.add(key)
        if duplicates:
            raise DataValidationError(f"{context} has duplicate keys: {sorted(set(duplicates))}")
