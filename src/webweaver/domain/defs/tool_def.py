"""Tool catalog definition structures."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Tuple


@dataclass(frozen=True, slots=True)
class ToolDef:
    """One crafted or found tool in the catalog."""

    key: str
    display: str
    category: str
    icon: str


@dataclass(frozen=True, slots=True)
class UpgradeSetDef:
    """
    Groups catalog tools that represent one logical item.

    ``members`` are ordered tiers (base first). ``preferred`` wins when several
    tiers are unlocked at once. ``variant_labels`` is set when the tiers are
    mutually exclusive variants rather than upgrades.
    """

    name: str
    members: Tuple[str, ...]
    preferred: str | None = None
    variant_labels: Mapping[str, str] = field(default_factory=dict)
