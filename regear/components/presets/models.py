"""
Presets component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass

from regear.domain.entities import GearPreset

# --- Validation Errors ---


@dataclass(frozen=True)
class PresetValidationError:
    """Preset validation error."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class CreatePresetInput:
    role: str
    name: str
    gear: GearPreset


@dataclass(frozen=True)
class UpdatePresetInput:
    """Replace a preset's gear, optionally renaming it."""

    role: str
    name: str
    gear: GearPreset
    new_name: str | None = None


@dataclass(frozen=True)
class DeletePresetInput:
    role: str
    name: str


# --- Output Models ---


@dataclass(frozen=True)
class PresetOperationOutput:
    """Output from preset operation."""

    name: str | None
    gear: GearPreset | None
    errors: tuple[PresetValidationError, ...]
    success: bool


@dataclass(frozen=True)
class PresetListOutput:
    role: str
    presets: dict[str, GearPreset]
    total: int
