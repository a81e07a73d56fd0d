"""
Presets component - Port interfaces.
"""

from __future__ import annotations

from typing import Protocol

from regear.domain.entities import GearPreset


class PresetRepoPort(Protocol):
    """Repository interface for gear presets."""

    def list_by_role(self, role: str) -> dict[str, GearPreset]:
        """Presets for a role keyed by name."""
        ...

    def save(self, role: str, name: str, gear: GearPreset) -> GearPreset:
        """Save or replace a preset."""
        ...

    def rename(self, role: str, name: str, new_name: str, gear: GearPreset) -> GearPreset:
        """Move a preset to a new name and replace its gear in one step."""
        ...

    def delete(self, role: str, name: str) -> None:
        """Delete a preset."""
        ...
