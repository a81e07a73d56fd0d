"""Routes for the gear preset catalog."""

from fastapi import APIRouter, Depends

from regear.api.deps import get_preset_service
from regear.api.errors import raise_for_errors
from regear.api.schemas import (
    PresetListResponse,
    PresetRequest,
    PresetResponse,
    PresetUpdateRequest,
)
from regear.components.presets import (
    CreatePresetInput,
    DeletePresetInput,
    PresetService,
    UpdatePresetInput,
    run_create,
    run_delete,
    run_list,
    run_update,
)

router = APIRouter()

NOT_FOUND = "preset_not_found"


@router.get("/{role}", response_model=PresetListResponse)
def list_presets(
    role: str,
    service: PresetService = Depends(get_preset_service),
) -> PresetListResponse:
    """A role's presets, by name."""
    result = run_list(role, service)
    return PresetListResponse(
        role=role,
        items=[
            PresetResponse(role=role, name=name, gear=gear.to_record())
            for name, gear in result.presets.items()
        ],
        total=result.total,
    )


@router.post("/{role}", response_model=PresetResponse, status_code=201)
def create_preset(
    role: str,
    data: PresetRequest,
    service: PresetService = Depends(get_preset_service),
) -> PresetResponse:
    """Add a preset."""
    result = run_create(CreatePresetInput(role=role, name=data.name, gear=data.gear), service)

    if not result.success:
        raise_for_errors(result.errors)

    assert result.gear is not None and result.name is not None
    return PresetResponse(role=role, name=result.name, gear=result.gear.to_record())


@router.put("/{role}/{name}", response_model=PresetResponse)
def update_preset(
    role: str,
    name: str,
    data: PresetUpdateRequest,
    service: PresetService = Depends(get_preset_service),
) -> PresetResponse:
    """Replace a preset's gear, renaming it when new_name is given."""
    result = run_update(
        UpdatePresetInput(role=role, name=name, gear=data.gear, new_name=data.new_name),
        service,
    )

    if not result.success:
        raise_for_errors(result.errors, NOT_FOUND)

    assert result.gear is not None and result.name is not None
    return PresetResponse(role=role, name=result.name, gear=result.gear.to_record())


@router.delete("/{role}/{name}", status_code=204)
def delete_preset(
    role: str,
    name: str,
    service: PresetService = Depends(get_preset_service),
) -> None:
    """Delete a preset."""
    result = run_delete(DeletePresetInput(role=role, name=name), service)

    if not result.success:
        raise_for_errors(result.errors, NOT_FOUND)
