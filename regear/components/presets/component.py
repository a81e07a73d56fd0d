"""
Presets component - Gear preset catalog.

Shell Layer - handles I/O and error conversion.
"""

from __future__ import annotations

from ._impl import PresetService
from .models import (
    CreatePresetInput,
    DeletePresetInput,
    PresetListOutput,
    PresetOperationOutput,
    UpdatePresetInput,
)


def run_list(role: str, service: PresetService) -> PresetListOutput:
    """List a role's presets."""
    presets = service.list_by_role(role)
    return PresetListOutput(role=role, presets=presets, total=len(presets))


def run_create(input_data: CreatePresetInput, service: PresetService) -> PresetOperationOutput:
    """Add a preset to a role."""
    gear, errors = service.create(input_data.role, input_data.name, input_data.gear)
    return PresetOperationOutput(
        name=input_data.name.strip() if gear else None,
        gear=gear,
        errors=tuple(errors),
        success=gear is not None,
    )


def run_update(input_data: UpdatePresetInput, service: PresetService) -> PresetOperationOutput:
    """Replace or rename a preset."""
    gear, errors = service.update(
        input_data.role,
        input_data.name,
        input_data.gear,
        new_name=input_data.new_name,
    )
    name = input_data.new_name.strip() if input_data.new_name is not None else input_data.name
    return PresetOperationOutput(
        name=name if gear else None,
        gear=gear,
        errors=tuple(errors),
        success=gear is not None,
    )


def run_delete(input_data: DeletePresetInput, service: PresetService) -> PresetOperationOutput:
    """Remove a preset."""
    success, errors = service.delete(input_data.role, input_data.name)
    return PresetOperationOutput(
        name=None,
        gear=None,
        errors=tuple(errors),
        success=success,
    )
