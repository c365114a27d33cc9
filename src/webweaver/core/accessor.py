"""
Uniform field access over the two shapes a decoded save record can take.

Decoders hand back either plain mappings (``json.loads`` output) or namespace
objects whose fields are instance attributes (``json.loads`` with an object
hook building ``types.SimpleNamespace``). Nested values are decoded
independently, so the shape check happens again at every level of descent.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, List

_MISSING = object()


class RecordAccessor:
    """Reads named fields from mapping or namespace records."""

    def get(self, record: Any, key: str) -> Any:
        """Return ``record[key]`` for either shape, or None when absent."""
        if record is None:
            return None
        if isinstance(record, Mapping):
            return record.get(key)
        # Only instance state counts; methods and class attributes never match.
        fields = getattr(record, "__dict__", None)
        if isinstance(fields, dict):
            return fields.get(key)
        return None

    def get_list(self, record: Any, key: str) -> List[Any]:
        """Return the named value when it is list-shaped, else an empty list."""
        value = self.get(record, key)
        if isinstance(value, (list, tuple)):
            return list(value)
        return []

    def get_path(self, record: Any, *keys: str) -> Any:
        """Descend through nested records one key at a time."""
        current = record
        for key in keys:
            current = self.get(current, key)
            if current is None:
                return None
        return current

    def is_record(self, value: Any) -> bool:
        """Return True for values this accessor can read fields from."""
        if isinstance(value, Mapping):
            return True
        return isinstance(getattr(value, "__dict__", _MISSING), dict) and not isinstance(value, type)


DEFAULT_ACCESSOR = RecordAccessor()


def get_value(record: Any, key: str) -> Any:
    """Module-level shortcut for ``DEFAULT_ACCESSOR.get``."""
    return DEFAULT_ACCESSOR.get(record, key)


def to_plain(value: Any) -> Any:
    """Convert nested namespace/mapping records into JSON-friendly builtins."""
    if isinstance(value, Mapping):
        return {str(key): to_plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_plain(item) for item in value]
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    if DEFAULT_ACCESSOR.is_record(value):
        return {str(key): to_plain(item) for key, item in vars(value).items()}
    return str(value)


__all__ = ["DEFAULT_ACCESSOR", "RecordAccessor", "get_value", "to_plain"]
