from pydantic import BaseModel, Field, field_validator

from regear.domain.entities import MEMBER_ROLES, VALID_TIERS


class ProjectRules(BaseModel):
    slug: str
    rules_version: str


class MembersRules(BaseModel):
    roster_csv: str = "members.csv"
    default_role: str = "villager"
    default_tier: int = 1
    suggestion_limit: int = Field(default=10, ge=1)

    @field_validator("default_role")
    @classmethod
    def _known_role(cls, value: str) -> str:
        if value not in MEMBER_ROLES:
            raise ValueError(f"default_role must be one of {', '.join(MEMBER_ROLES)}")
        return value

    @field_validator("default_tier")
    @classmethod
    def _known_tier(cls, value: int) -> int:
        if value not in VALID_TIERS:
            raise ValueError("default_tier must be 1, 2, 3 or 4")
        return value


class ThreadsRules(BaseModel):
    default_content_label: str = "CASTLE"
    default_player_tier: int = Field(default=4, ge=1, le=4)


class OpsRules(BaseModel):
    required_env: list[str] = Field(default_factory=list)
    seed_presets_on_startup: bool = True


class Rules(BaseModel):
    project: ProjectRules
    members: MembersRules = Field(default_factory=MembersRules)
    threads: ThreadsRules = Field(default_factory=ThreadsRules)
    ops: OpsRules = Field(default_factory=OpsRules)
