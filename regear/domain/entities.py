from datetime import UTC, datetime
from typing import Annotated, Any, Literal
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator

# --- Enums / Literals ---
CombatRole = Literal["tank", "dps", "support", "healer"]
MemberRole = Literal["tank", "dps", "support", "healer", "villager", "bsquad"]
Tier = Annotated[int, Field(ge=1, le=4)]

COMBAT_ROLES: tuple[CombatRole, ...] = ("tank", "dps", "support", "healer")
MEMBER_ROLES: tuple[MemberRole, ...] = ("tank", "dps", "support", "healer", "villager", "bsquad")
VALID_TIERS: tuple[int, ...] = (1, 2, 3, 4)

DEFAULT_CONTENT_LABEL = "CASTLE"

# Tally of item name -> total count. Derived, never persisted.
ItemTally = dict[str, int]


def _utcnow() -> datetime:
    return datetime.now(UTC)


# --- Gear ---

class GearPreset(BaseModel):
    """
    A full or tier-restricted loadout.

    `offhand` is None for presets without a secondary hand item; a string
    otherwise. The other slots are always present, "" meaning no item;
    blank strings are stored as "".
    """

    model_config = ConfigDict(frozen=True)

    weapon: str
    offhand: str | None = None
    headgear: str = ""
    armor: str = ""
    boots: str = ""

    @field_validator("offhand", mode="before")
    @classmethod
    def _blank_offhand_is_absent(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("weapon", "headgear", "armor", "boots", mode="before")
    @classmethod
    def _missing_slot_is_empty(cls, value: Any) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            return ""
        return value

    @property
    def has_offhand(self) -> bool:
        return self.offhand is not None

    def slots(self) -> tuple[str, ...]:
        """Slot values in display order, skipping an absent offhand."""
        if self.offhand is None:
            return (self.weapon, self.headgear, self.armor, self.boots)
        return (self.weapon, self.offhand, self.headgear, self.armor, self.boots)

    def to_record(self) -> dict[str, str]:
        """Serialize, omitting the offhand key when there is none."""
        record = {"weapon": self.weapon}
        if self.offhand is not None:
            record["offhand"] = self.offhand
        record["headgear"] = self.headgear
        record["armor"] = self.armor
        record["boots"] = self.boots
        return record


# --- Roster ---

class Player(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    tier: Tier
    role: CombatRole
    gear: GearPreset
    quantity: int = Field(default=1, ge=1)

    def to_record(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "tier": self.tier,
            "role": self.role,
            "gear": self.gear.to_record(),
            "quantity": self.quantity,
        }


def empty_roles() -> dict[CombatRole, tuple[Player, ...]]:
    return {role: () for role in COMBAT_ROLES}


class Thread(BaseModel):
    """A saved event grouping role assignments for one date and content."""

    model_config = ConfigDict(frozen=True)

    id: UUID = Field(default_factory=uuid4)
    event_time: datetime
    content_label: str = DEFAULT_CONTENT_LABEL
    roles: dict[CombatRole, tuple[Player, ...]] = Field(default_factory=empty_roles)
    created_at: datetime = Field(default_factory=_utcnow)
    last_modified: datetime = Field(default_factory=_utcnow)

    @field_validator("roles", mode="after")
    @classmethod
    def _all_buckets_present(
        cls, value: dict[CombatRole, tuple[Player, ...]]
    ) -> dict[CombatRole, tuple[Player, ...]]:
        return {role: tuple(value.get(role, ())) for role in COMBAT_ROLES}

    def players(self) -> list[Player]:
        return [player for role in COMBAT_ROLES for player in self.roles[role]]

    @property
    def player_count(self) -> int:
        return sum(len(players) for players in self.roles.values())

    def roles_record(self) -> dict[str, list[dict[str, Any]]]:
        return {
            role: [player.to_record() for player in self.roles[role]] for role in COMBAT_ROLES
        }


# --- Members ---

class RosterEntry(BaseModel):
    """A row of the guild roster export."""

    model_config = ConfigDict(frozen=True)

    name: str
    member_id: str
    guild_name: str


class MemberUpdate(BaseModel):
    """Officer-assigned role and tier for a member."""

    model_config = ConfigDict(frozen=True)

    name: str
    role: MemberRole
    tier: Tier
    updated_at: datetime = Field(default_factory=_utcnow)


class Member(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    member_id: str
    guild_name: str
    role: MemberRole = "villager"
    tier: Tier = 1
