"""Loading of already-decrypted save files from disk."""
from __future__ import annotations

import logging
from pathlib import Path
from types import SimpleNamespace
from typing import Any

from webweaver.core.accessor import DEFAULT_ACCESSOR
from webweaver.data.errors import DataLoadError
from webweaver.data.json_loader import load_json
from webweaver.services.errors import SaveLoadError

logger = logging.getLogger(__name__)

PLAYER_DATA_KEY = "playerData"


def _namespace_hook(payload: dict[str, Any]) -> SimpleNamespace:
    return SimpleNamespace(**payload)


def load_decoded_save(path: Path | str, *, as_namespace: bool = False) -> Any:
    """
    Read a decrypted JSON save and return its player record.

    The ``playerData`` object is returned when the file wraps one; otherwise
    the top-level object is treated as the player record. With
    ``as_namespace`` every JSON object is decoded as a ``SimpleNamespace``.
    """
    save_path = Path(path)
    try:
        payload = load_json(save_path, object_hook=_namespace_hook if as_namespace else None)
    except DataLoadError as exc:
        raise SaveLoadError(str(exc)) from exc

    if not DEFAULT_ACCESSOR.is_record(payload):
        raise SaveLoadError(f"Save data in {save_path} must be a JSON object.")
    player_data = DEFAULT_ACCESSOR.get(payload, PLAYER_DATA_KEY)
    if player_data is None:
        logger.debug("%s has no %s wrapper; using top-level object", save_path, PLAYER_DATA_KEY)
        return payload
    if not DEFAULT_ACCESSOR.is_record(player_data):
        raise SaveLoadError(f"{PLAYER_DATA_KEY} in {save_path} must be a JSON object.")
    return player_data
