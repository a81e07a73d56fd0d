"""
Presets component - Per-role gear preset catalog.
"""

from ._impl import PresetService, validate_preset_data
from .catalog import DEFAULT_PRESETS
from .component import run_create, run_delete, run_list, run_update
from .models import (
    CreatePresetInput,
    DeletePresetInput,
    PresetListOutput,
    PresetOperationOutput,
    PresetValidationError,
    UpdatePresetInput,
)
from .ports import PresetRepoPort

__all__ = [
    # Entry points
    "run_list",
    "run_create",
    "run_update",
    "run_delete",
    # Input models
    "CreatePresetInput",
    "UpdatePresetInput",
    "DeletePresetInput",
    # Output models
    "PresetListOutput",
    "PresetOperationOutput",
    "PresetValidationError",
    # Ports
    "PresetRepoPort",
    # Service
    "PresetService",
    "validate_preset_data",
    "DEFAULT_PRESETS",
]
