"""Routes for the guild member roster."""

from fastapi import APIRouter, Depends

from regear.api.deps import get_member_service
from regear.api.errors import raise_for_errors
from regear.api.schemas import (
    MemberListResponse,
    MemberResponse,
    MemberStatsResponse,
    MemberUpdateRequest,
    MemberUpdateResponse,
)
from regear.components.members import (
    ListMembersInput,
    MemberService,
    SuggestMembersInput,
    UpdateMemberInput,
    run_list,
    run_stats,
    run_suggest,
    run_update,
)

router = APIRouter()


@router.get("", response_model=MemberListResponse)
def list_members(
    q: str = "",
    role: str | None = None,
    tier: int | None = None,
    service: MemberService = Depends(get_member_service),
) -> MemberListResponse:
    """Members matching the search and filters, by name."""
    result = run_list(ListMembersInput(query=q, role=role, tier=tier), service)
    return MemberListResponse(
        items=[MemberResponse.from_member(m) for m in result.members],
        total=result.total,
        roster_size=result.roster_size,
    )


@router.get("/stats", response_model=MemberStatsResponse)
def member_stats(service: MemberService = Depends(get_member_service)) -> MemberStatsResponse:
    """Member counts per role and tier."""
    stats = run_stats(service)
    return MemberStatsResponse(role_stats=stats.role_counts, tier_stats=stats.tier_counts)


@router.get("/suggest", response_model=MemberListResponse)
def suggest_members(
    q: str = "",
    service: MemberService = Depends(get_member_service),
) -> MemberListResponse:
    """Name autocomplete for roster entry."""
    result = run_suggest(SuggestMembersInput(query=q), service)
    return MemberListResponse(
        items=[MemberResponse.from_member(m) for m in result.members],
        total=result.total,
        roster_size=result.roster_size,
    )


def _update(
    member_name: str,
    data: MemberUpdateRequest,
    service: MemberService,
) -> MemberUpdateResponse:
    result = run_update(
        UpdateMemberInput(name=member_name, role=data.role, tier=data.tier), service
    )

    if not result.success:
        raise_for_errors(result.errors, "member_not_found")

    member = result.member
    assert member is not None
    return MemberUpdateResponse(
        success=True,
        message=f"Updated {member.name} to {member.role} tier {member.tier}",
        member=MemberResponse.from_member(member),
    )


@router.put("/{member_name}", response_model=MemberUpdateResponse)
def update_member(
    member_name: str,
    data: MemberUpdateRequest,
    service: MemberService = Depends(get_member_service),
) -> MemberUpdateResponse:
    """Assign a member's role and tier."""
    return _update(member_name, data, service)


@router.post("/{member_name}", response_model=MemberUpdateResponse)
def update_member_post(
    member_name: str,
    data: MemberUpdateRequest,
    service: MemberService = Depends(get_member_service),
) -> MemberUpdateResponse:
    """Same as PUT, for clients that post updates."""
    return _update(member_name, data, service)
