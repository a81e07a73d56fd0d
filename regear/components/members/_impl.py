"""
MemberService - Guild member roster with officer-assigned roles and tiers.

The roster itself is read-only (an export of the guild list); role and tier
assignments are stored separately and merged on read.

Functional Core - pure business logic.
"""

from __future__ import annotations

import logging

from regear.domain.entities import (
    MEMBER_ROLES,
    VALID_TIERS,
    Member,
    MemberUpdate,
    RosterEntry,
)

from .models import MemberStats, MemberValidationError
from .ports import MemberDefaultsPort, MemberUpdateRepoPort, RosterSourcePort

logger = logging.getLogger(__name__)


# --- Pure Functions ---


def merge_members(
    entries: list[RosterEntry],
    updates: dict[str, MemberUpdate],
    default_role: str,
    default_tier: int,
) -> list[Member]:
    """Combine roster entries with stored assignments, sorted by name."""
    members = []
    for entry in entries:
        update = updates.get(entry.name)
        members.append(
            Member(
                name=entry.name,
                member_id=entry.member_id,
                guild_name=entry.guild_name,
                role=update.role if update else default_role,
                tier=update.tier if update else default_tier,
            )
        )
    return sorted(members, key=lambda m: m.name.casefold())


def filter_members(
    members: list[Member],
    query: str = "",
    role: str | None = None,
    tier: int | None = None,
) -> list[Member]:
    """Case-insensitive name search combined with optional role and tier filters."""
    needle = query.strip().lower()
    return [
        m
        for m in members
        if needle in m.name.lower()
        and (role is None or m.role == role)
        and (tier is None or m.tier == tier)
    ]


def suggest_members(members: list[Member], query: str, limit: int) -> list[Member]:
    """Autocomplete suggestions. A blank query suggests nobody."""
    if not query.strip():
        return []
    needle = query.lower()
    return [m for m in members if needle in m.name.lower()][:limit]


def compute_stats(members: list[Member]) -> MemberStats:
    role_counts = {role: 0 for role in MEMBER_ROLES}
    tier_counts = {tier: 0 for tier in VALID_TIERS}
    for member in members:
        role_counts[member.role] += 1
        tier_counts[member.tier] += 1
    return MemberStats(role_counts=role_counts, tier_counts=tier_counts)


def validate_member_update(role: str, tier: int) -> list[MemberValidationError]:
    errors: list[MemberValidationError] = []
    if role not in MEMBER_ROLES:
        errors.append(
            MemberValidationError(code="role_invalid", message="Invalid role", field="role")
        )
    if tier not in VALID_TIERS:
        errors.append(
            MemberValidationError(code="tier_invalid", message="Invalid tier", field="tier")
        )
    return errors


# --- Member Service ---


class MemberService:
    """
    Member service.

    Reads the roster and manages role/tier assignments.
    """

    def __init__(
        self,
        roster: RosterSourcePort,
        repo: MemberUpdateRepoPort,
        rules: MemberDefaultsPort,
    ) -> None:
        """Initialize service."""
        self._roster = roster
        self._repo = repo
        self._rules = rules

    def get_all(self) -> list[Member]:
        """All members with their current role and tier."""
        return merge_members(
            self._roster.load_entries(),
            self._repo.get_all(),
            self._rules.get_default_role(),
            self._rules.get_default_tier(),
        )

    def get_by_name(self, name: str) -> Member | None:
        return next((m for m in self.get_all() if m.name == name), None)

    def suggest(self, query: str, limit: int | None = None) -> list[Member]:
        limit = self._rules.get_suggestion_limit() if limit is None else limit
        return suggest_members(self.get_all(), query, limit)

    def stats(self) -> MemberStats:
        return compute_stats(self.get_all())

    def update_member(
        self,
        name: str,
        role: str,
        tier: int,
    ) -> tuple[Member | None, list[MemberValidationError]]:
        """
        Assign a role and tier to a member.

        Returns:
            Tuple of (member, errors). Member is None if validation fails.
        """
        errors = validate_member_update(role, tier)
        if errors:
            return None, errors

        member = self.get_by_name(name)
        if member is None:
            return None, [
                MemberValidationError(
                    code="member_not_found",
                    message=f"Member '{name}' is not on the roster",
                    field="name",
                )
            ]

        self._repo.save(MemberUpdate(name=name, role=role, tier=tier))
        logger.info(f"Updated {name} to {role} tier {tier}")
        return member.model_copy(update={"role": role, "tier": tier}), []
