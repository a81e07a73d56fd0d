"""
Tier gear resolver - tier-based gear entitlement.

Functional Core - pure business logic.

Policy:
- Tier 1: dps keeps the weapon; other roles keep weapon + armor
- Tier 2: dps keeps weapon + armor; other roles keep weapon + armor + boots
- Tier 3 and 4: full preset
- Any other tier: full preset, so new tier levels default to unrestricted

The offhand is never restricted. Excluded slots are blanked, not removed.
"""

from __future__ import annotations

import logging

from regear.domain.entities import GearPreset

logger = logging.getLogger(__name__)

RESTRICTABLE_SLOTS: tuple[str, ...] = ("headgear", "armor", "boots")

# (tier, is_dps) -> restrictable slots the player keeps
_KEPT_SLOTS: dict[tuple[int, bool], frozenset[str]] = {
    (1, True): frozenset(),
    (1, False): frozenset({"armor"}),
    (2, True): frozenset({"armor"}),
    (2, False): frozenset({"armor", "boots"}),
}

_TIER_DESCRIPTIONS: dict[tuple[int, bool], str] = {
    (1, True): "Weapon only",
    (1, False): "Weapon + Chest Armor",
    (2, True): "Weapon + Chest Armor",
    (2, False): "Weapon + Chest Armor + Boots",
}

FULL_REGEAR = "Full regear (all items)"


def resolve_tier_gear(full_gear: GearPreset, tier: int, role: str) -> GearPreset:
    """Restrict a full preset to the slots the tier entitles the role to."""
    kept = _KEPT_SLOTS.get((tier, role == "dps"))
    if kept is None:
        return full_gear

    blanked = {slot: "" for slot in RESTRICTABLE_SLOTS if slot not in kept}
    resolved = full_gear.model_copy(update=blanked)
    logger.debug(f"resolve_tier_gear: tier={tier}, role={role}, blanked={sorted(blanked)}")
    return resolved


def describe_tier(tier: int, role: str) -> str:
    """Human-readable entitlement for a tier and role."""
    if tier in (3, 4):
        return FULL_REGEAR
    return _TIER_DESCRIPTIONS.get((tier, role == "dps"), "")
