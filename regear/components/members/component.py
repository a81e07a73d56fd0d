"""
Members component - Guild member roster.

Shell Layer - handles I/O and error conversion.
"""

from __future__ import annotations

from ._impl import MemberService, filter_members
from .models import (
    ListMembersInput,
    MemberListOutput,
    MemberOperationOutput,
    MemberStats,
    SuggestMembersInput,
    UpdateMemberInput,
)


def run_list(input_data: ListMembersInput, service: MemberService) -> MemberListOutput:
    """List members matching the filters."""
    members = service.get_all()
    matches = filter_members(members, input_data.query, input_data.role, input_data.tier)
    return MemberListOutput(
        members=tuple(matches),
        total=len(matches),
        roster_size=len(members),
    )


def run_suggest(input_data: SuggestMembersInput, service: MemberService) -> MemberListOutput:
    """Name suggestions for roster entry."""
    matches = service.suggest(input_data.query, input_data.limit)
    return MemberListOutput(
        members=tuple(matches),
        total=len(matches),
        roster_size=len(service.get_all()),
    )


def run_update(input_data: UpdateMemberInput, service: MemberService) -> MemberOperationOutput:
    """Assign a member's role and tier."""
    member, errors = service.update_member(input_data.name, input_data.role, input_data.tier)
    return MemberOperationOutput(
        member=member,
        errors=tuple(errors),
        success=member is not None,
    )


def run_stats(service: MemberService) -> MemberStats:
    """Member counts per role and tier."""
    return service.stats()
