"""
Members component - Guild member roster with role and tier assignments.
"""

from ._impl import (
    MemberService,
    compute_stats,
    filter_members,
    merge_members,
    suggest_members,
    validate_member_update,
)
from .component import run_list, run_stats, run_suggest, run_update
from .models import (
    ListMembersInput,
    MemberListOutput,
    MemberOperationOutput,
    MemberStats,
    MemberValidationError,
    SuggestMembersInput,
    UpdateMemberInput,
)
from .ports import MemberDefaultsPort, MemberUpdateRepoPort, RosterSourcePort

__all__ = [
    # Entry points
    "run_list",
    "run_suggest",
    "run_update",
    "run_stats",
    # Input models
    "ListMembersInput",
    "SuggestMembersInput",
    "UpdateMemberInput",
    # Output models
    "MemberListOutput",
    "MemberOperationOutput",
    "MemberStats",
    "MemberValidationError",
    # Ports
    "RosterSourcePort",
    "MemberUpdateRepoPort",
    "MemberDefaultsPort",
    # Service and pure helpers
    "MemberService",
    "merge_members",
    "filter_members",
    "suggest_members",
    "compute_stats",
    "validate_member_update",
]
