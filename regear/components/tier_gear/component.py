"""
Tier gear component - Tier-based gear entitlement.

Shell Layer - wraps the pure resolver for callers.
"""

from __future__ import annotations

from ._impl import describe_tier, resolve_tier_gear
from .models import ResolveGearInput, ResolveGearOutput


def run_resolve(input_data: ResolveGearInput) -> ResolveGearOutput:
    """Resolve gear for a player's tier and role."""
    gear = resolve_tier_gear(input_data.gear, input_data.tier, input_data.role)
    return ResolveGearOutput(
        gear=gear,
        description=describe_tier(input_data.tier, input_data.role),
        restricted=gear != input_data.gear,
    )
