import json
import sqlite3
from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import ValidationError

from regear.domain.entities import GearPreset, MemberUpdate, Player, Thread


# Helper to convert sqlite rows to dicts
def dict_factory(cursor: sqlite3.Cursor, row: Any) -> dict[str, Any]:
    d = {}
    for idx, col in enumerate(cursor.description):
        d[col[0]] = row[idx]
    return d


class _SQLiteRepo:
    def __init__(self, db_path: str):
        self.db_path = db_path

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = dict_factory
        conn.execute("PRAGMA foreign_keys = ON;")
        return conn


class SQLiteThreadRepo(_SQLiteRepo):
    """Threads with their roster stored as a JSON document."""

    def save(self, thread: Thread) -> Thread:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO threads (
                    id, event_time, content_label, roles_json, created_at, last_modified
                ) VALUES (?, ?, ?, ?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    event_time=excluded.event_time,
                    content_label=excluded.content_label,
                    roles_json=excluded.roles_json,
                    last_modified=excluded.last_modified
            """,
                (
                    str(thread.id),
                    thread.event_time.isoformat(),
                    thread.content_label,
                    json.dumps(thread.roles_record()),
                    thread.created_at.isoformat(),
                    thread.last_modified.isoformat(),
                ),
            )
            conn.commit()
            return thread
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def get_by_id(self, thread_id: UUID) -> Thread | None:
        conn = self._get_conn()
        try:
            row = conn.execute("SELECT * FROM threads WHERE id = ?", (str(thread_id),)).fetchone()
            return self._map_row(row) if row else None
        finally:
            conn.close()

    def get_all(self) -> list[Thread]:
        conn = self._get_conn()
        try:
            rows = conn.execute("SELECT * FROM threads ORDER BY event_time DESC").fetchall()
            return [self._map_row(row) for row in rows]
        finally:
            conn.close()

    def delete(self, thread_id: UUID) -> None:
        conn = self._get_conn()
        try:
            conn.execute("DELETE FROM threads WHERE id = ?", (str(thread_id),))
            conn.commit()
        finally:
            conn.close()

    def _map_row(self, row: dict[str, Any]) -> Thread:
        try:
            roles = json.loads(row["roles_json"])
            return Thread(
                id=UUID(row["id"]),
                event_time=datetime.fromisoformat(row["event_time"]),
                content_label=row["content_label"],
                roles={
                    role: [Player.model_validate(p) for p in players]
                    for role, players in roles.items()
                },
                created_at=datetime.fromisoformat(row["created_at"]),
                last_modified=datetime.fromisoformat(row["last_modified"]),
            )
        except (json.JSONDecodeError, ValidationError) as e:
            raise ValueError(f"Stored thread {row['id']} is malformed: {e}") from e


class SQLitePresetRepo(_SQLiteRepo):
    def list_by_role(self, role: str) -> dict[str, GearPreset]:
        conn = self._get_conn()
        try:
            rows = conn.execute(
                "SELECT * FROM gear_presets WHERE role = ? ORDER BY name ASC", (role,)
            ).fetchall()
            return {
                row["name"]: GearPreset(
                    weapon=row["weapon"],
                    offhand=row["offhand"],
                    headgear=row["headgear"],
                    armor=row["armor"],
                    boots=row["boots"],
                )
                for row in rows
            }
        finally:
            conn.close()

    def save(self, role: str, name: str, gear: GearPreset) -> GearPreset:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO gear_presets (role, name, weapon, offhand, headgear, armor, boots)
                VALUES (?, ?, ?, ?, ?, ?, ?)
                ON CONFLICT(role, name) DO UPDATE SET
                    weapon=excluded.weapon,
                    offhand=excluded.offhand,
                    headgear=excluded.headgear,
                    armor=excluded.armor,
                    boots=excluded.boots
            """,
                (role, name, gear.weapon, gear.offhand, gear.headgear, gear.armor, gear.boots),
            )
            conn.commit()
            return gear
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def rename(self, role: str, name: str, new_name: str, gear: GearPreset) -> GearPreset:
        conn = self._get_conn()
        try:
            cursor = conn.execute(
                """
                UPDATE gear_presets
                SET name = ?, weapon = ?, offhand = ?, headgear = ?, armor = ?, boots = ?
                WHERE role = ? AND name = ?
            """,
                (
                    new_name,
                    gear.weapon,
                    gear.offhand,
                    gear.headgear,
                    gear.armor,
                    gear.boots,
                    role,
                    name,
                ),
            )
            if cursor.rowcount != 1:
                raise ValueError(f"No {role} preset named '{name}' to rename")
            conn.commit()
            return gear
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def delete(self, role: str, name: str) -> None:
        conn = self._get_conn()
        try:
            conn.execute("DELETE FROM gear_presets WHERE role = ? AND name = ?", (role, name))
            conn.commit()
        finally:
            conn.close()


class SQLiteMemberUpdateRepo(_SQLiteRepo):
    def save(self, update: MemberUpdate) -> MemberUpdate:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO member_updates (name, role, tier, updated_at)
                VALUES (?, ?, ?, ?)
                ON CONFLICT(name) DO UPDATE SET
                    role=excluded.role,
                    tier=excluded.tier,
                    updated_at=excluded.updated_at
            """,
                (update.name, update.role, update.tier, update.updated_at.isoformat()),
            )
            conn.commit()
            return update
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def get_all(self) -> dict[str, MemberUpdate]:
        conn = self._get_conn()
        try:
            rows = conn.execute("SELECT * FROM member_updates").fetchall()
            return {
                row["name"]: MemberUpdate(
                    name=row["name"],
                    role=row["role"],
                    tier=row["tier"],
                    updated_at=datetime.fromisoformat(row["updated_at"]),
                )
                for row in rows
            }
        finally:
            conn.close()
