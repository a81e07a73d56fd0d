"""Tier gear resolution endpoint."""

from fastapi import APIRouter

from regear.api.schemas import ResolveGearRequest, ResolveGearResponse
from regear.components.tier_gear import ResolveGearInput, run_resolve

router = APIRouter()


@router.post("/resolve", response_model=ResolveGearResponse)
def resolve_gear(data: ResolveGearRequest) -> ResolveGearResponse:
    """Restrict a preset to what the tier entitles the role to."""
    result = run_resolve(ResolveGearInput(gear=data.gear, tier=data.tier, role=data.role))
    return ResolveGearResponse(
        gear=result.gear.to_record(),
        description=result.description,
        restricted=result.restricted,
    )
