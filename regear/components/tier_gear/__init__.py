"""
Tier gear component - Restricts gear presets by player tier and role.
"""

from ._impl import FULL_REGEAR, RESTRICTABLE_SLOTS, describe_tier, resolve_tier_gear
from .component import run_resolve
from .models import ResolveGearInput, ResolveGearOutput

__all__ = [
    # Entry points
    "run_resolve",
    # Models
    "ResolveGearInput",
    "ResolveGearOutput",
    # Core
    "resolve_tier_gear",
    "describe_tier",
    "RESTRICTABLE_SLOTS",
    "FULL_REGEAR",
]
