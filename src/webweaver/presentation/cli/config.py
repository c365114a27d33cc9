"""CLI configuration helpers for options persistence."""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict

_DEFAULT_OUTPUT_FORMAT = "text"
_DEFAULT_LOG_LEVEL = "WARNING"
_VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "Webweaver"
        return Path.home() / "Webweaver"
    return Path.home() / ".config" / "webweaver"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def default_config() -> Dict[str, Any]:
    return {
        "output_format": _DEFAULT_OUTPUT_FORMAT,
        "show_other_tools": False,
        "log_level": _DEFAULT_LOG_LEVEL,
    }


def _normalize(raw: Dict[str, Any]) -> Dict[str, Any]:
    output_format = "json" if raw.get("output_format") == "json" else _DEFAULT_OUTPUT_FORMAT
    log_level = str(raw.get("log_level", _DEFAULT_LOG_LEVEL)).upper()
    return {
        "output_format": output_format,
        "show_other_tools": raw.get("show_other_tools") is True,
        "log_level": log_level if log_level in _VALID_LOG_LEVELS else _DEFAULT_LOG_LEVEL,
    }


def load_config(path: Path | None = None) -> Dict[str, Any]:
    """Load config from disk or return defaults."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return default_config()
    except (OSError, ValueError):
        return default_config()
    if not isinstance(raw, dict):
        return default_config()
    return _normalize(raw)


def save_config(config: Dict[str, Any], path: Path | None = None) -> None:
    """Persist config to disk."""
    config_path = path or get_default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    payload = _normalize(config)
    config_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
