"""Low-level JSON helpers for repositories and save loading."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

from .errors import DataLoadError


def load_json(path: Path, *, object_hook: Callable[[dict[str, Any]], Any] | None = None) -> object:
    """Load JSON from disk and raise DataLoadError on failure."""
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise DataLoadError(f"File not found: {path}") from exc
    except OSError as exc:
        raise DataLoadError(f"Unable to read file: {path}") from exc

    try:
        return json.loads(text, object_hook=object_hook)
    except json.JSONDecodeError as exc:
        raise DataLoadError(f"Invalid JSON in {path}: {exc}") from exc
