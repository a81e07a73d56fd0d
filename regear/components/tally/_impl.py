"""
Item tally - Aggregates the items a thread needs.

Functional Core - pure business logic.

Key behaviors:
- Each non-empty slot adds the player's quantity to that item's total
- Item identity is the exact slot string (case-sensitive)
- Recomputed from scratch on every call; the thread is never modified
"""

from __future__ import annotations

from datetime import UTC

from regear.domain.entities import CombatRole, ItemTally, Player, Thread

# Role order used by the chat export
EXPORT_ROLE_ORDER: tuple[CombatRole, ...] = ("tank", "support", "healer", "dps")
EXPORT_SEPARATOR = "-" * 54


def aggregate(thread: Thread) -> ItemTally:
    """Total count of each distinct item across every role bucket."""
    tally: ItemTally = {}
    for players in thread.roles.values():
        for player in players:
            for item in player.gear.slots():
                if item:
                    tally[item] = tally.get(item, 0) + player.quantity
    return tally


def sorted_tally(tally: ItemTally) -> list[tuple[str, int]]:
    """Items by count descending, then name."""
    return sorted(tally.items(), key=lambda entry: (-entry[1], entry[0]))


def _player_line(player: Player) -> str | None:
    counts: dict[str, int] = {}
    for item in player.gear.slots():
        if item:
            key = item.lower()
            counts[key] = counts.get(key, 0) + player.quantity

    if not counts:
        return None
    items = ", ".join(f"{count} {item}" for item, count in counts.items())
    return f"{player.name.lower()} - {items}"


def format_thread_for_copy(thread: Thread) -> str:
    """
    Render a thread as the plain-text listing officers paste into chat.

    Header is `M/D | CONTENT | HH:MM UTC`, followed by one section per role.
    """
    event_time = thread.event_time
    if event_time.tzinfo is not None:
        event_time = event_time.astimezone(UTC)

    lines = [
        f"{event_time.month}/{event_time.day} | {thread.content_label} | "
        f"{event_time.hour:02d}:{event_time.minute:02d} UTC",
        "",
    ]

    for role in EXPORT_ROLE_ORDER:
        lines.append(f"{role.capitalize()}:")
        lines.append("")
        for player in thread.roles[role]:
            line = _player_line(player)
            if line:
                lines.append(line)
        lines.append("")

    lines.append(EXPORT_SEPARATOR)
    return "\n".join(lines)
