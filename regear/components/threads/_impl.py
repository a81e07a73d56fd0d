"""
ThreadService - Regear thread (event roster) management.

Handles thread creation, edits, deletion and roster player construction.
Every stored player carries gear already resolved for its tier and role,
so aggregation never needs tier logic.

Functional Core - pure business logic.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from datetime import UTC, datetime
from typing import Any
from uuid import UUID, uuid4

from regear.components.tier_gear import resolve_tier_gear
from regear.domain.entities import (
    COMBAT_ROLES,
    VALID_TIERS,
    CombatRole,
    GearPreset,
    Player,
    Thread,
)
from regear.ports.clock import ClockPort

from .models import ThreadValidationError
from .ports import ThreadRepoPort

logger = logging.getLogger(__name__)


def _not_found(thread_id: UUID) -> ThreadValidationError:
    return ThreadValidationError(
        code="thread_not_found",
        message=f"Thread with ID {thread_id} not found",
    )


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


# --- Validation Functions ---


def validate_thread_data(
    content_label: str | None = None,
    roles: Mapping[str, Sequence[Player]] | None = None,
) -> list[ThreadValidationError]:
    """Validate thread data."""
    errors: list[ThreadValidationError] = []

    if content_label is not None and not content_label.strip():
        errors.append(
            ThreadValidationError(
                code="content_label_required",
                message="Content label is required",
                field="content_label",
            )
        )

    if roles is None:
        return errors

    total_players = 0
    for role, players in roles.items():
        if role not in COMBAT_ROLES:
            errors.append(
                ThreadValidationError(
                    code="role_invalid",
                    message=f"Unknown roster role '{role}'",
                    field=f"roles.{role}",
                )
            )
            continue

        for index, player in enumerate(players):
            total_players += 1
            if not player.name.strip():
                errors.append(
                    ThreadValidationError(
                        code="player_name_required",
                        message="Player name is required",
                        field=f"roles.{role}[{index}].name",
                    )
                )
            if player.role != role:
                errors.append(
                    ThreadValidationError(
                        code="role_mismatch",
                        message=f"Player '{player.name}' is a {player.role}, not a {role}",
                        field=f"roles.{role}[{index}].role",
                    )
                )

    if total_players == 0:
        errors.append(
            ThreadValidationError(
                code="roster_empty",
                message="Thread needs at least one player",
                field="roles",
            )
        )

    return errors


def validate_player_data(
    name: str,
    tier: int,
    role: str,
    quantity: int,
) -> list[ThreadValidationError]:
    """Validate raw roster slot values before building a player."""
    errors: list[ThreadValidationError] = []

    if not name or not name.strip():
        errors.append(
            ThreadValidationError(
                code="player_name_required",
                message="Player name is required",
                field="name",
            )
        )
    if tier not in VALID_TIERS:
        errors.append(
            ThreadValidationError(
                code="tier_invalid",
                message="Tier must be 1, 2, 3 or 4",
                field="tier",
            )
        )
    if role not in COMBAT_ROLES:
        errors.append(
            ThreadValidationError(
                code="role_invalid",
                message=f"Role must be one of {', '.join(COMBAT_ROLES)}",
                field="role",
            )
        )
    if quantity < 1:
        errors.append(
            ThreadValidationError(
                code="quantity_invalid",
                message="Quantity must be at least 1",
                field="quantity",
            )
        )

    return errors


# --- Roster Players ---


def build_player(
    name: str,
    tier: int,
    role: str,
    base_gear: GearPreset,
    quantity: int = 1,
) -> tuple[Player | None, list[ThreadValidationError]]:
    """
    Build a roster player from a base preset.

    Returns:
        Tuple of (player, errors). Player is None if validation fails.
    """
    errors = validate_player_data(name, tier, role, quantity)
    if errors:
        return None, errors

    player = Player(
        name=name.strip(),
        tier=tier,
        role=role,
        gear=resolve_tier_gear(base_gear, tier, role),
        quantity=quantity,
    )
    return player, []


def retier_player(
    player: Player,
    tier: int,
) -> tuple[Player | None, list[ThreadValidationError]]:
    """Change a player's tier, re-resolving the gear they already hold."""
    return build_player(player.name, tier, player.role, player.gear, player.quantity)


def change_role(
    player: Player,
    role: str,
    base_gear: GearPreset,
) -> tuple[Player | None, list[ThreadValidationError]]:
    """Move a player to another role with that role's preset."""
    return build_player(player.name, player.tier, role, base_gear, player.quantity)


def resolve_roles(
    roles: Mapping[str, Sequence[Player]],
) -> dict[CombatRole, tuple[Player, ...]]:
    """Normalise a roles map: every bucket present, names trimmed, gear resolved."""
    resolved: dict[CombatRole, tuple[Player, ...]] = {}
    for role in COMBAT_ROLES:
        resolved[role] = tuple(
            player.model_copy(
                update={
                    "name": player.name.strip(),
                    "gear": resolve_tier_gear(player.gear, player.tier, player.role),
                }
            )
            for player in roles.get(role, ())
        )
    return resolved


# --- Thread Service ---


class ThreadService:
    """
    Thread service.

    Manages saved regear threads.
    """

    def __init__(self, repo: ThreadRepoPort, clock: ClockPort) -> None:
        """Initialize service."""
        self._repo = repo
        self._clock = clock

    def get_all(self) -> list[Thread]:
        """Get all threads, latest event first."""
        return sorted(self._repo.get_all(), key=lambda t: t.event_time, reverse=True)

    def get_by_id(self, thread_id: UUID) -> Thread | None:
        """Get thread by ID."""
        return self._repo.get_by_id(thread_id)

    def create(
        self,
        event_time: datetime,
        content_label: str,
        roles: Mapping[str, Sequence[Player]],
    ) -> tuple[Thread | None, list[ThreadValidationError]]:
        """
        Create a new thread.

        Returns:
            Tuple of (thread, errors). Thread is None if validation fails.
        """
        errors = validate_thread_data(content_label=content_label, roles=roles)
        if errors:
            return None, errors

        now = self._clock.now_utc()
        thread = Thread(
            id=uuid4(),
            event_time=_as_utc(event_time),
            content_label=content_label.strip(),
            roles=resolve_roles(roles),
            created_at=now,
            last_modified=now,
        )

        saved = self._repo.save(thread)
        logger.info(f"Thread created: id={saved.id}, players={saved.player_count}")
        return saved, []

    def update(
        self,
        thread_id: UUID,
        updates: dict[str, Any],
    ) -> tuple[Thread | None, list[ThreadValidationError]]:
        """
        Update an existing thread.

        Returns:
            Tuple of (thread, errors). Thread is None if not found or validation fails.
        """
        thread = self.get_by_id(thread_id)
        if not thread:
            return None, [_not_found(thread_id)]

        errors = validate_thread_data(
            content_label=updates.get("content_label"),
            roles=updates.get("roles"),
        )
        if errors:
            return None, errors

        changes: dict[str, Any] = {"last_modified": self._clock.now_utc()}
        if "event_time" in updates:
            changes["event_time"] = _as_utc(updates["event_time"])
        if "content_label" in updates:
            changes["content_label"] = str(updates["content_label"]).strip()
        if "roles" in updates:
            changes["roles"] = resolve_roles(updates["roles"])

        saved = self._repo.save(thread.model_copy(update=changes))
        logger.info(f"Thread updated: id={saved.id}, fields={sorted(changes)}")
        return saved, []

    def delete(self, thread_id: UUID) -> tuple[bool, list[ThreadValidationError]]:
        """
        Delete a thread.

        Returns:
            Tuple of (success, errors).
        """
        if not self.get_by_id(thread_id):
            return False, [_not_found(thread_id)]

        self._repo.delete(thread_id)
        logger.info(f"Thread deleted: id={thread_id}")
        return True, []

