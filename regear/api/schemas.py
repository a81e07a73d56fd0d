from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from regear.domain.entities import CombatRole, GearPreset, Member, Player, Thread

# --- Gear ---


class ResolveGearRequest(BaseModel):
    gear: GearPreset
    tier: int
    role: CombatRole


class ResolveGearResponse(BaseModel):
    gear: dict[str, str]
    description: str
    restricted: bool


# --- Threads ---


class PlayerRequest(BaseModel):
    name: str
    tier: int | None = None  # rules default when omitted
    gear: GearPreset
    quantity: int = 1


class ThreadCreateRequest(BaseModel):
    event_time: datetime
    content_label: str | None = None
    roles: dict[str, list[PlayerRequest]] = Field(default_factory=dict)


class ThreadUpdateRequest(BaseModel):
    event_time: datetime | None = None
    content_label: str | None = None
    roles: dict[str, list[PlayerRequest]] | None = None


class PlayerResponse(BaseModel):
    name: str
    tier: int
    role: str
    gear: dict[str, str]
    quantity: int

    @classmethod
    def from_player(cls, player: Player) -> "PlayerResponse":
        return cls(**player.to_record())


class ThreadResponse(BaseModel):
    id: UUID
    event_time: datetime
    content_label: str
    roles: dict[str, list[PlayerResponse]]
    player_count: int
    created_at: datetime
    last_modified: datetime

    @classmethod
    def from_thread(cls, thread: Thread) -> "ThreadResponse":
        return cls(
            id=thread.id,
            event_time=thread.event_time,
            content_label=thread.content_label,
            roles={
                role: [PlayerResponse.from_player(p) for p in players]
                for role, players in thread.roles.items()
            },
            player_count=thread.player_count,
            created_at=thread.created_at,
            last_modified=thread.last_modified,
        )


class ThreadListResponse(BaseModel):
    items: list[ThreadResponse]
    total: int


class TallyItem(BaseModel):
    item: str
    count: int


class TallyResponse(BaseModel):
    thread_id: UUID
    items: list[TallyItem]
    total_items: int
    distinct_items: int


# --- Members ---


class MemberResponse(BaseModel):
    name: str
    id: str
    guild_name: str
    role: str
    tier: int

    @classmethod
    def from_member(cls, member: Member) -> "MemberResponse":
        return cls(
            name=member.name,
            id=member.member_id,
            guild_name=member.guild_name,
            role=member.role,
            tier=member.tier,
        )


class MemberListResponse(BaseModel):
    items: list[MemberResponse]
    total: int
    roster_size: int


class MemberUpdateRequest(BaseModel):
    role: str
    tier: int


class MemberUpdateResponse(BaseModel):
    success: bool
    message: str
    member: MemberResponse


class MemberStatsResponse(BaseModel):
    role_stats: dict[str, int]
    tier_stats: dict[int, int]


# --- Presets ---


class PresetRequest(BaseModel):
    name: str
    gear: GearPreset


class PresetUpdateRequest(BaseModel):
    gear: GearPreset
    new_name: str | None = None


class PresetResponse(BaseModel):
    role: str
    name: str
    gear: dict[str, str]


class PresetListResponse(BaseModel):
    role: str
    items: list[PresetResponse]
    total: int
