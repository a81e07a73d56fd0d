import os
from functools import lru_cache
from pathlib import Path

from fastapi import Depends

from regear.adapters.clock import SystemClock
from regear.adapters.csv_roster import CsvRosterSource
from regear.adapters.sqlite.repos import (
    SQLiteMemberUpdateRepo,
    SQLitePresetRepo,
    SQLiteThreadRepo,
)

# Components are stateless; dependencies are injected as repos/adapters.
from regear.components.members import MemberService
from regear.components.presets import PresetService
from regear.components.threads import ThreadService
from regear.rules.loader import load_rules
from regear.rules.models import MembersRules, Rules


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.data_dir = Path(os.environ.get("REGEAR_DATA_DIR", "./data"))
        self.db_path = str(self.data_dir / "regear.db")
        self.rules_path = Path(os.environ.get("REGEAR_RULES_PATH", self.base_dir / "rules.yaml"))
        self.migrations_dir = str(
            os.environ.get("REGEAR_MIGRATIONS_DIR", self.base_dir / "migrations")
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def _load_rules_cached(rules_path: Path) -> Rules:
    return load_rules(rules_path)


def get_rules(settings: Settings = Depends(get_settings)) -> Rules:
    return _load_rules_cached(settings.rules_path)


class MembersRulesAdapter:
    """Adapter to map generic Rules to the members component MemberDefaultsPort."""

    def __init__(self, rules: MembersRules):
        self._rules = rules

    def get_default_role(self) -> str:
        return self._rules.default_role

    def get_default_tier(self) -> int:
        return self._rules.default_tier

    def get_suggestion_limit(self) -> int:
        return self._rules.suggestion_limit


# --- Repos ---
def get_thread_repo(settings: Settings = Depends(get_settings)) -> SQLiteThreadRepo:
    return SQLiteThreadRepo(settings.db_path)


def get_preset_repo(settings: Settings = Depends(get_settings)) -> SQLitePresetRepo:
    return SQLitePresetRepo(settings.db_path)


def get_member_update_repo(settings: Settings = Depends(get_settings)) -> SQLiteMemberUpdateRepo:
    return SQLiteMemberUpdateRepo(settings.db_path)


def get_roster_source(
    settings: Settings = Depends(get_settings),
    rules: Rules = Depends(get_rules),
) -> CsvRosterSource:
    return CsvRosterSource(settings.data_dir / rules.members.roster_csv)


# Time adapter for deterministic time operations
_clock_instance: SystemClock | None = None


def get_clock() -> SystemClock:
    """Get clock singleton."""
    global _clock_instance
    if _clock_instance is None:
        _clock_instance = SystemClock()
    return _clock_instance


# --- Component Services ---
def get_thread_service(
    repo: SQLiteThreadRepo = Depends(get_thread_repo),
    clock: SystemClock = Depends(get_clock),
) -> ThreadService:
    """Get thread component service."""
    return ThreadService(repo=repo, clock=clock)


def get_preset_service(
    repo: SQLitePresetRepo = Depends(get_preset_repo),
) -> PresetService:
    """Get preset component service."""
    return PresetService(repo=repo)


def get_member_service(
    roster: CsvRosterSource = Depends(get_roster_source),
    repo: SQLiteMemberUpdateRepo = Depends(get_member_update_repo),
    rules: Rules = Depends(get_rules),
) -> MemberService:
    """Get member component service."""
    return MemberService(roster=roster, repo=repo, rules=MembersRulesAdapter(rules.members))
