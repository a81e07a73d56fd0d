"""
Tally component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass

from regear.domain.entities import Thread


@dataclass(frozen=True)
class AggregateInput:
    """Input for tallying a thread."""

    thread: Thread


@dataclass(frozen=True)
class TallyOutput:
    """Tally of a thread, sorted for display."""

    items: tuple[tuple[str, int], ...]
    total_items: int
    distinct_items: int

    def as_dict(self) -> dict[str, int]:
        return dict(self.items)


@dataclass(frozen=True)
class ExportOutput:
    """Chat export of a thread."""

    text: str
