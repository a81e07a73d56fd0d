"""
Threads component - Data models.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from regear.components.tally import TallyOutput
from regear.domain.entities import Player, Thread

# --- Validation Errors ---


@dataclass(frozen=True)
class ThreadValidationError:
    """Thread validation error."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class CreateThreadInput:
    """Input for saving a new thread."""

    event_time: datetime
    content_label: str
    roles: Mapping[str, Sequence[Player]] = field(default_factory=dict)


@dataclass(frozen=True)
class UpdateThreadInput:
    """Input for editing a thread. `roles` replaces the whole roles map."""

    thread_id: UUID
    event_time: datetime | None = None
    content_label: str | None = None
    roles: Mapping[str, Sequence[Player]] | None = None


@dataclass(frozen=True)
class DeleteThreadInput:
    thread_id: UUID


@dataclass(frozen=True)
class GetThreadInput:
    thread_id: UUID


# --- Output Models ---


@dataclass(frozen=True)
class ThreadOperationOutput:
    """Output from thread operation."""

    thread: Thread | None
    errors: tuple[ThreadValidationError, ...]
    success: bool


@dataclass(frozen=True)
class ThreadListOutput:
    """Output from list operation."""

    threads: tuple[Thread, ...]
    total: int


@dataclass(frozen=True)
class ThreadSummaryOutput:
    """Item tally of a saved thread."""

    tally: TallyOutput | None
    errors: tuple[ThreadValidationError, ...]
    success: bool


@dataclass(frozen=True)
class ThreadExportOutput:
    """Chat export of a saved thread."""

    text: str | None
    errors: tuple[ThreadValidationError, ...]
    success: bool
