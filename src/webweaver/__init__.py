"""Projection of decoded Silksong save data into display-ready categories."""
from __future__ import annotations

from webweaver.presentation.formatting import format_number, format_percent, format_play_time
from webweaver.services.snapshot_service import SnapshotService, project_all

__all__ = [
    "SnapshotService",
    "format_number",
    "format_percent",
    "format_play_time",
    "project_all",
]

__version__ = "0.3.0"
