"""
Members component unit tests.

Tests roster merging, search, stats and role/tier assignment.
"""

from __future__ import annotations

import pytest

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
from regear.domain.entities import MemberUpdate, RosterEntry

# --- Mock Adapters ---


class MockRosterSource:
    def __init__(self, names: list[str]) -> None:
        self._entries = [
            RosterEntry(name=name, member_id=f"id-{i}", guild_name="Maharlika")
            for i, name in enumerate(names)
        ]

    def load_entries(self) -> list[RosterEntry]:
        return list(self._entries)


class MockMemberUpdateRepo:
    def __init__(self) -> None:
        self._updates: dict[str, MemberUpdate] = {}

    def save(self, update: MemberUpdate) -> MemberUpdate:
        self._updates[update.name] = update
        return update

    def get_all(self) -> dict[str, MemberUpdate]:
        return dict(self._updates)


class StubMemberRules:
    def get_default_role(self) -> str:
        return "villager"

    def get_default_tier(self) -> int:
        return 1

    def get_suggestion_limit(self) -> int:
        return 3


@pytest.fixture
def repo() -> MockMemberUpdateRepo:
    return MockMemberUpdateRepo()


@pytest.fixture
def service(repo: MockMemberUpdateRepo) -> MemberService:
    roster = MockRosterSource(["zephyr", "Aldric", "brann", "Alana", "Kal", "Alrik", "Aly"])
    return MemberService(roster=roster, repo=repo, rules=StubMemberRules())


class TestListMembers:
    def test_defaults_and_sorting(self, service: MemberService) -> None:
        result = run_list(ListMembersInput(), service)

        assert result.total == 7
        assert result.roster_size == 7
        assert [m.name for m in result.members] == [
            "Alana",
            "Aldric",
            "Alrik",
            "Aly",
            "brann",
            "Kal",
            "zephyr",
        ]
        assert all(m.role == "villager" and m.tier == 1 for m in result.members)

    def test_filters_combine(self, service: MemberService) -> None:
        run_update(UpdateMemberInput(name="Aldric", role="tank", tier=3), service)
        run_update(UpdateMemberInput(name="Alrik", role="tank", tier=2), service)

        result = run_list(ListMembersInput(query="AL", role="tank", tier=3), service)

        assert [m.name for m in result.members] == ["Aldric"]
        assert result.roster_size == 7


class TestSuggest:
    def test_blank_query_suggests_nobody(self, service: MemberService) -> None:
        assert run_suggest(SuggestMembersInput(query="  "), service).members == ()

    def test_limit_from_rules(self, service: MemberService) -> None:
        result = run_suggest(SuggestMembersInput(query="al"), service)

        assert [m.name for m in result.members] == ["Alana", "Aldric", "Alrik"]

    def test_explicit_limit(self, service: MemberService) -> None:
        result = run_suggest(SuggestMembersInput(query="a", limit=10), service)

        assert result.total == 6
        assert "zephyr" not in [m.name for m in result.members]


class TestUpdateMember:
    def test_update_success(self, service: MemberService, repo: MockMemberUpdateRepo) -> None:
        result = run_update(UpdateMemberInput(name="Kal", role="bsquad", tier=4), service)

        assert result.success is True
        assert result.member is not None
        assert result.member.role == "bsquad"
        assert result.member.tier == 4
        assert repo.get_all()["Kal"].role == "bsquad"

    def test_invalid_role_and_tier(self, service: MemberService) -> None:
        result = run_update(UpdateMemberInput(name="Kal", role="wizard", tier=9), service)

        assert result.success is False
        assert [e.code for e in result.errors] == ["role_invalid", "tier_invalid"]

    def test_unknown_member(self, service: MemberService) -> None:
        result = run_update(UpdateMemberInput(name="Nobody", role="dps", tier=2), service)

        assert result.success is False
        assert result.errors[0].code == "member_not_found"


class TestStats:
    def test_zero_filled_counts(self, service: MemberService) -> None:
        run_update(UpdateMemberInput(name="Kal", role="healer", tier=4), service)

        stats = run_stats(service)

        assert stats.role_counts == {
            "tank": 0,
            "dps": 0,
            "support": 0,
            "healer": 1,
            "villager": 6,
            "bsquad": 0,
        }
        assert stats.tier_counts == {1: 6, 2: 0, 3: 0, 4: 1}
