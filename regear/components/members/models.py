"""
Members component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass

from regear.domain.entities import Member

# --- Validation Errors ---


@dataclass(frozen=True)
class MemberValidationError:
    """Member validation error."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class ListMembersInput:
    """Filters for the member roster. None means no filter."""

    query: str = ""
    role: str | None = None
    tier: int | None = None


@dataclass(frozen=True)
class SuggestMembersInput:
    """Input for name autocomplete."""

    query: str
    limit: int | None = None


@dataclass(frozen=True)
class UpdateMemberInput:
    """Input for assigning a member's role and tier."""

    name: str
    role: str
    tier: int


# --- Output Models ---


@dataclass(frozen=True)
class MemberListOutput:
    members: tuple[Member, ...]
    total: int
    roster_size: int


@dataclass(frozen=True)
class MemberOperationOutput:
    member: Member | None
    errors: tuple[MemberValidationError, ...]
    success: bool


@dataclass(frozen=True)
class MemberStats:
    """Member counts per role and per tier, zero-filled."""

    role_counts: dict[str, int]
    tier_counts: dict[int, int]
