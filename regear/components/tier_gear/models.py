"""
Tier gear component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass

from regear.domain.entities import GearPreset


@dataclass(frozen=True)
class ResolveGearInput:
    """Input for resolving a preset against a tier."""

    gear: GearPreset
    tier: int
    role: str


@dataclass(frozen=True)
class ResolveGearOutput:
    """Tier-restricted gear plus the entitlement it was cut to."""

    gear: GearPreset
    description: str
    restricted: bool
