import argparse
import logging
import sys
from uuid import UUID

from regear.adapters.clock import SystemClock
from regear.adapters.csv_roster import CsvRosterSource
from regear.adapters.sqlite.migrator import SQLiteMigrator
from regear.adapters.sqlite.repos import (
    SQLiteMemberUpdateRepo,
    SQLitePresetRepo,
    SQLiteThreadRepo,
)
from regear.api.deps import MembersRulesAdapter, Settings
from regear.components.members import MemberService, UpdateMemberInput, run_stats, run_update
from regear.components.presets import PresetService
from regear.components.threads import GetThreadInput, ThreadService, run_export, run_summary
from regear.rules.loader import load_rules

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("cli")


def _thread_service(settings: Settings) -> ThreadService:
    return ThreadService(repo=SQLiteThreadRepo(settings.db_path), clock=SystemClock())


def _member_service(settings: Settings) -> MemberService:
    rules = load_rules(settings.rules_path)
    return MemberService(
        roster=CsvRosterSource(settings.data_dir / rules.members.roster_csv),
        repo=SQLiteMemberUpdateRepo(settings.db_path),
        rules=MembersRulesAdapter(rules.members),
    )


def _thread_id(raw: str) -> UUID:
    try:
        return UUID(raw)
    except ValueError:
        logger.error(f"Not a thread ID: {raw}")
        sys.exit(1)


def handle_migrate(settings: Settings, args: argparse.Namespace) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    applied = SQLiteMigrator(settings.db_path, settings.migrations_dir).run_migrations()
    print(f"Applied {len(applied)} migrations.")


def handle_seed_presets(settings: Settings, args: argparse.Namespace) -> None:
    count = PresetService(repo=SQLitePresetRepo(settings.db_path)).seed_defaults()
    print(f"Seeded {count} presets.")


def handle_tally(settings: Settings, args: argparse.Namespace) -> None:
    input_data = GetThreadInput(thread_id=_thread_id(args.thread_id))
    result = run_summary(input_data, _thread_service(settings))
    if not result.success or result.tally is None:
        logger.error(result.errors[0].message)
        sys.exit(1)

    for item, count in result.tally.items:
        print(f"{count:>4}  {item}")
    print(f"{result.tally.total_items:>4}  total ({result.tally.distinct_items} distinct)")


def handle_export(settings: Settings, args: argparse.Namespace) -> None:
    input_data = GetThreadInput(thread_id=_thread_id(args.thread_id))
    result = run_export(input_data, _thread_service(settings))
    if not result.success:
        logger.error(result.errors[0].message)
        sys.exit(1)
    print(result.text)


def handle_member_stats(settings: Settings, args: argparse.Namespace) -> None:
    stats = run_stats(_member_service(settings))
    for role, count in stats.role_counts.items():
        print(f"{role:<10}{count:>5}")
    for tier, count in stats.tier_counts.items():
        print(f"T{tier:<9}{count:>5}")


def handle_set_member(settings: Settings, args: argparse.Namespace) -> None:
    result = run_update(
        UpdateMemberInput(name=args.name, role=args.role, tier=args.tier),
        _member_service(settings),
    )
    if not result.success:
        for err in result.errors:
            logger.error(err.message)
        sys.exit(1)
    print(f"Updated {args.name} to {args.role} tier {args.tier}")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Guild Regear Planner CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("migrate", help="Apply database migrations")
    subparsers.add_parser("seed-presets", help="Load the default preset catalog")

    tally_parser = subparsers.add_parser("tally", help="Print the items a thread needs")
    tally_parser.add_argument("thread_id")

    export_parser = subparsers.add_parser("export", help="Print a thread formatted for chat")
    export_parser.add_argument("thread_id")

    subparsers.add_parser("member-stats", help="Member counts per role and tier")

    member_parser = subparsers.add_parser("set-member", help="Assign a member's role and tier")
    member_parser.add_argument("name")
    member_parser.add_argument("role")
    member_parser.add_argument("tier", type=int)

    args = parser.parse_args(argv)
    settings = Settings()

    handlers = {
        "migrate": handle_migrate,
        "seed-presets": handle_seed_presets,
        "tally": handle_tally,
        "export": handle_export,
        "member-stats": handle_member_stats,
        "set-member": handle_set_member,
    }
    handlers[args.command](settings, args)


if __name__ == "__main__":
    main()
