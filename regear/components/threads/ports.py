"""
Threads component - Port interfaces.
"""

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from regear.domain.entities import Thread


class ThreadRepoPort(Protocol):
    """Repository interface for threads."""

    def save(self, thread: Thread) -> Thread:
        """Save or replace thread."""
        ...

    def get_by_id(self, thread_id: UUID) -> Thread | None:
        """Get thread by ID."""
        ...

    def get_all(self) -> list[Thread]:
        """List all threads."""
        ...

    def delete(self, thread_id: UUID) -> None:
        """Delete thread."""
        ...
