"""
Members component - Port interfaces.
"""

from __future__ import annotations

from typing import Protocol

from regear.domain.entities import MemberUpdate, RosterEntry


class RosterSourcePort(Protocol):
    """Read-only source of the guild roster."""

    def load_entries(self) -> list[RosterEntry]:
        """Load all roster entries."""
        ...


class MemberUpdateRepoPort(Protocol):
    """Repository interface for officer-assigned roles and tiers."""

    def save(self, update: MemberUpdate) -> MemberUpdate:
        """Save or replace the update for a member."""
        ...

    def get_all(self) -> dict[str, MemberUpdate]:
        """All updates keyed by member name."""
        ...


class MemberDefaultsPort(Protocol):
    """Role and tier for members with no assignment."""

    def get_default_role(self) -> str:
        ...

    def get_default_tier(self) -> int:
        ...

    def get_suggestion_limit(self) -> int:
        ...
