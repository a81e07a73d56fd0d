"""
Threads component unit tests.

Tests thread CRUD, roster validation and gear re-resolution.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from uuid import UUID, uuid4

import pytest

from regear.adapters.clock import FixedClock
from regear.components.threads import (
    CreateThreadInput,
    DeleteThreadInput,
    GetThreadInput,
    ThreadService,
    UpdateThreadInput,
    build_player,
    change_role,
    retier_player,
    run_create,
    run_delete,
    run_export,
    run_get,
    run_list,
    run_summary,
    run_update,
)
from regear.domain.entities import GearPreset, Player, Thread

NOW = datetime(2025, 3, 1, 12, 0, tzinfo=UTC)

# --- Mock Repository ---


class MockThreadRepo:
    """In-memory thread repository for testing."""

    def __init__(self) -> None:
        self._threads: dict[UUID, Thread] = {}

    def save(self, thread: Thread) -> Thread:
        self._threads[thread.id] = thread
        return thread

    def get_all(self) -> list[Thread]:
        return list(self._threads.values())

    def get_by_id(self, thread_id: UUID) -> Thread | None:
        return self._threads.get(thread_id)

    def delete(self, thread_id: UUID) -> None:
        self._threads.pop(thread_id, None)


@pytest.fixture
def repo() -> MockThreadRepo:
    return MockThreadRepo()


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(NOW)


@pytest.fixture
def service(repo: MockThreadRepo, clock: FixedClock) -> ThreadService:
    return ThreadService(repo=repo, clock=clock)


@pytest.fixture
def b_tank() -> GearPreset:
    return GearPreset(
        weapon="Hammer",
        offhand="Leering Cane",
        headgear="Judicator Helmet",
        armor="Guardian Armor",
        boots="Royal Shoes",
    )


def tank(name: str, gear: GearPreset, tier: int = 4, quantity: int = 1) -> Player:
    return Player(name=name, tier=tier, role="tank", gear=gear, quantity=quantity)


# --- Creation Tests ---


class TestCreateThread:
    def test_create_thread_success(self, service: ThreadService, b_tank: GearPreset) -> None:
        inp = CreateThreadInput(
            event_time=datetime(2025, 3, 7, 19, 0, tzinfo=UTC),
            content_label=" CASTLE ",
            roles={"tank": [tank("Bulwark", b_tank)]},
        )
        result = run_create(inp, service)

        assert result.success is True
        assert result.thread is not None
        assert result.thread.content_label == "CASTLE"
        assert result.thread.created_at == NOW
        assert result.thread.last_modified == NOW
        assert set(result.thread.roles) == {"tank", "dps", "support", "healer"}
        assert result.thread.roles["dps"] == ()
        assert len(result.errors) == 0

    def test_create_resolves_gear_for_tier(
        self, service: ThreadService, b_tank: GearPreset
    ) -> None:
        inp = CreateThreadInput(
            event_time=NOW,
            content_label="CASTLE",
            roles={"tank": [tank("A", b_tank, tier=1)]},
        )
        result = run_create(inp, service)

        assert result.thread is not None
        assert result.thread.roles["tank"][0].gear.to_record() == {
            "weapon": "Hammer",
            "offhand": "Leering Cane",
            "headgear": "",
            "armor": "Guardian Armor",
            "boots": "",
        }

    def test_naive_event_time_is_treated_as_utc(
        self, service: ThreadService, b_tank: GearPreset
    ) -> None:
        inp = CreateThreadInput(
            event_time=datetime(2025, 3, 7, 19, 0),
            content_label="CASTLE",
            roles={"tank": [tank("A", b_tank)]},
        )
        result = run_create(inp, service)

        assert result.thread is not None
        assert result.thread.event_time == datetime(2025, 3, 7, 19, 0, tzinfo=UTC)

    def test_create_rejects_empty_roster(self, service: ThreadService) -> None:
        inp = CreateThreadInput(event_time=NOW, content_label="CASTLE", roles={"tank": []})
        result = run_create(inp, service)

        assert result.success is False
        assert result.thread is None
        assert [e.code for e in result.errors] == ["roster_empty"]

    def test_create_rejects_missing_label(
        self, service: ThreadService, b_tank: GearPreset
    ) -> None:
        inp = CreateThreadInput(
            event_time=NOW,
            content_label="   ",
            roles={"tank": [tank("A", b_tank)]},
        )
        result = run_create(inp, service)

        assert result.success is False
        assert result.errors[0].code == "content_label_required"

    def test_create_rejects_blank_player_name(
        self, service: ThreadService, b_tank: GearPreset
    ) -> None:
        inp = CreateThreadInput(
            event_time=NOW,
            content_label="CASTLE",
            roles={"tank": [tank(" ", b_tank)]},
        )
        result = run_create(inp, service)

        assert result.success is False
        assert result.errors[0].code == "player_name_required"
        assert result.errors[0].field == "roles.tank[0].name"

    def test_create_rejects_unknown_role_bucket(
        self, service: ThreadService, b_tank: GearPreset
    ) -> None:
        inp = CreateThreadInput(
            event_time=NOW,
            content_label="CASTLE",
            roles={"villager": [tank("A", b_tank)]},
        )
        result = run_create(inp, service)

        codes = [e.code for e in result.errors]
        assert "role_invalid" in codes
        assert "roster_empty" in codes

    def test_create_rejects_player_in_wrong_bucket(
        self, service: ThreadService, b_tank: GearPreset
    ) -> None:
        inp = CreateThreadInput(
            event_time=NOW,
            content_label="CASTLE",
            roles={"dps": [tank("A", b_tank)]},
        )
        result = run_create(inp, service)

        assert result.errors[0].code == "role_mismatch"


# --- Update Tests ---


class TestUpdateThread:
    def test_update_replaces_roles(
        self, service: ThreadService, clock: FixedClock, b_tank: GearPreset
    ) -> None:
        created = run_create(
            CreateThreadInput(
                event_time=NOW,
                content_label="CASTLE",
                roles={"tank": [tank("A", b_tank)]},
            ),
            service,
        ).thread
        assert created is not None

        later = NOW + timedelta(hours=1)
        clock.advance_to(later)
        healer = Player(
            name="Mender",
            tier=3,
            role="healer",
            gear=GearPreset(weapon="Hallowfall", offhand="Censer"),
        )
        result = run_update(
            UpdateThreadInput(
                thread_id=created.id,
                content_label="HELLGATE",
                roles={"healer": [healer]},
            ),
            service,
        )

        assert result.success is True
        assert result.thread is not None
        assert result.thread.content_label == "HELLGATE"
        assert result.thread.roles["tank"] == ()
        assert result.thread.roles["healer"][0].name == "Mender"
        assert result.thread.created_at == NOW
        assert result.thread.last_modified == later
        assert result.thread.event_time == created.event_time

    def test_update_not_found(self, service: ThreadService) -> None:
        result = run_update(UpdateThreadInput(thread_id=uuid4(), content_label="X"), service)

        assert result.success is False
        assert result.errors[0].code == "thread_not_found"

    def test_update_rejects_empty_roster(
        self, service: ThreadService, b_tank: GearPreset
    ) -> None:
        created = run_create(
            CreateThreadInput(
                event_time=NOW,
                content_label="CASTLE",
                roles={"tank": [tank("A", b_tank)]},
            ),
            service,
        ).thread
        assert created is not None

        result = run_update(UpdateThreadInput(thread_id=created.id, roles={}), service)

        assert result.success is False
        assert result.errors[0].code == "roster_empty"


# --- Delete / Get / List Tests ---


class TestThreadLifecycle:
    def test_delete(self, service: ThreadService, b_tank: GearPreset) -> None:
        created = run_create(
            CreateThreadInput(
                event_time=NOW,
                content_label="CASTLE",
                roles={"tank": [tank("A", b_tank)]},
            ),
            service,
        ).thread
        assert created is not None

        assert run_delete(DeleteThreadInput(thread_id=created.id), service).success is True
        assert run_get(GetThreadInput(thread_id=created.id), service).success is False

    def test_delete_not_found(self, service: ThreadService) -> None:
        result = run_delete(DeleteThreadInput(thread_id=uuid4()), service)

        assert result.success is False
        assert result.errors[0].code == "thread_not_found"

    def test_list_latest_event_first(self, service: ThreadService, b_tank: GearPreset) -> None:
        for day in (3, 9, 5):
            run_create(
                CreateThreadInput(
                    event_time=datetime(2025, 3, day, tzinfo=UTC),
                    content_label=f"DAY{day}",
                    roles={"tank": [tank("A", b_tank)]},
                ),
                service,
            )

        result = run_list(service)

        assert result.total == 3
        assert [t.content_label for t in result.threads] == ["DAY9", "DAY5", "DAY3"]


# --- Summary / Export Tests ---


class TestThreadViews:
    def test_summary_of_tier_one_tank(self, service: ThreadService, b_tank: GearPreset) -> None:
        created = run_create(
            CreateThreadInput(
                event_time=NOW,
                content_label="CASTLE",
                roles={"tank": [tank("A", b_tank, tier=1)]},
            ),
            service,
        ).thread
        assert created is not None

        result = run_summary(GetThreadInput(thread_id=created.id), service)

        assert result.success is True
        assert result.tally is not None
        assert result.tally.as_dict() == {
            "Hammer": 1,
            "Leering Cane": 1,
            "Guardian Armor": 1,
        }

    def test_summary_not_found(self, service: ThreadService) -> None:
        result = run_summary(GetThreadInput(thread_id=uuid4()), service)

        assert result.success is False
        assert result.tally is None

    def test_export(self, service: ThreadService, b_tank: GearPreset) -> None:
        created = run_create(
            CreateThreadInput(
                event_time=datetime(2025, 3, 7, 19, 0, tzinfo=UTC),
                content_label="CASTLE",
                roles={"tank": [tank("Bulwark", b_tank, tier=2)]},
            ),
            service,
        ).thread
        assert created is not None

        result = run_export(GetThreadInput(thread_id=created.id), service)

        assert result.success is True
        assert result.text is not None
        assert "bulwark - 1 hammer, 1 leering cane, 1 guardian armor, 1 royal shoes" in result.text


# --- Roster Player Tests ---


class TestRosterPlayers:
    def test_build_player_resolves_gear(self, b_tank: GearPreset) -> None:
        player, errors = build_player("  Bulwark ", 2, "tank", b_tank, quantity=3)

        assert errors == []
        assert player is not None
        assert player.name == "Bulwark"
        assert player.quantity == 3
        assert player.gear.headgear == ""
        assert player.gear.boots == "Royal Shoes"

    def test_build_player_validation(self, b_tank: GearPreset) -> None:
        player, errors = build_player("", 5, "villager", b_tank, quantity=0)

        assert player is None
        assert [e.code for e in errors] == [
            "player_name_required",
            "tier_invalid",
            "role_invalid",
            "quantity_invalid",
        ]

    def test_retier_restricts_held_gear(self, b_tank: GearPreset) -> None:
        player = tank("A", b_tank, tier=4)

        lowered, errors = retier_player(player, 1)

        assert errors == []
        assert lowered is not None
        assert lowered.tier == 1
        assert lowered.gear.headgear == ""
        assert lowered.gear.boots == ""
        assert lowered.gear.offhand == "Leering Cane"
        assert player.gear == b_tank

    def test_change_role_uses_new_preset(self, b_tank: GearPreset) -> None:
        player = tank("A", b_tank, tier=1)
        bow = GearPreset(weapon="Longbow", headgear="Mistwalker Hood", armor="Mistwalker Jacket")

        moved, errors = change_role(player, "dps", bow)

        assert errors == []
        assert moved is not None
        assert moved.role == "dps"
        assert moved.gear.to_record() == {
            "weapon": "Longbow",
            "headgear": "",
            "armor": "",
            "boots": "",
        }

    def test_retier_rejects_unknown_tier(self, b_tank: GearPreset) -> None:
        player = tank("A", b_tank)

        moved, errors = retier_player(player, 9)

        assert moved is None
        assert [e.code for e in errors] == ["tier_invalid"]

    def test_change_role_rejects_non_combat_role(self, b_tank: GearPreset) -> None:
        player = tank("A", b_tank)

        moved, errors = change_role(player, "villager", b_tank)

        assert moved is None
        assert [e.code for e in errors] == ["role_invalid"]
