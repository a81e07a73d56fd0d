"""
Threads component - Regear event rosters.

Handles thread CRUD plus the tally and export views of a saved thread.

Shell Layer - handles I/O and error conversion.
"""

from __future__ import annotations

from typing import Any

from regear.components.tally import AggregateInput, run_aggregate
from regear.components.tally import run_export as run_tally_export

from ._impl import ThreadService
from .models import (
    CreateThreadInput,
    DeleteThreadInput,
    GetThreadInput,
    ThreadExportOutput,
    ThreadListOutput,
    ThreadOperationOutput,
    ThreadSummaryOutput,
    ThreadValidationError,
    UpdateThreadInput,
)


def _not_found(input_data: GetThreadInput) -> tuple[ThreadValidationError, ...]:
    return (
        ThreadValidationError(
            code="thread_not_found",
            message=f"Thread with ID {input_data.thread_id} not found",
        ),
    )


def run_create(
    input_data: CreateThreadInput,
    service: ThreadService,
) -> ThreadOperationOutput:
    """Create a new thread."""
    thread, errors = service.create(
        event_time=input_data.event_time,
        content_label=input_data.content_label,
        roles=input_data.roles,
    )

    return ThreadOperationOutput(
        thread=thread,
        errors=tuple(errors),
        success=thread is not None,
    )


def run_update(
    input_data: UpdateThreadInput,
    service: ThreadService,
) -> ThreadOperationOutput:
    """Update an existing thread."""
    # Build updates dict from non-None fields
    updates: dict[str, Any] = {}
    if input_data.event_time is not None:
        updates["event_time"] = input_data.event_time
    if input_data.content_label is not None:
        updates["content_label"] = input_data.content_label
    if input_data.roles is not None:
        updates["roles"] = input_data.roles

    thread, errors = service.update(input_data.thread_id, updates)

    return ThreadOperationOutput(
        thread=thread,
        errors=tuple(errors),
        success=thread is not None,
    )


def run_delete(
    input_data: DeleteThreadInput,
    service: ThreadService,
) -> ThreadOperationOutput:
    """Delete a thread."""
    success, errors = service.delete(input_data.thread_id)

    return ThreadOperationOutput(
        thread=None,
        errors=tuple(errors),
        success=success,
    )


def run_get(
    input_data: GetThreadInput,
    service: ThreadService,
) -> ThreadOperationOutput:
    """Get a thread by ID."""
    thread = service.get_by_id(input_data.thread_id)

    if thread is None:
        return ThreadOperationOutput(thread=None, errors=_not_found(input_data), success=False)

    return ThreadOperationOutput(thread=thread, errors=(), success=True)


def run_list(service: ThreadService) -> ThreadListOutput:
    """List all threads."""
    threads = service.get_all()
    return ThreadListOutput(
        threads=tuple(threads),
        total=len(threads),
    )


def run_summary(
    input_data: GetThreadInput,
    service: ThreadService,
) -> ThreadSummaryOutput:
    """Shopping list for a saved thread."""
    thread = service.get_by_id(input_data.thread_id)
    if thread is None:
        return ThreadSummaryOutput(tally=None, errors=_not_found(input_data), success=False)

    return ThreadSummaryOutput(
        tally=run_aggregate(AggregateInput(thread=thread)),
        errors=(),
        success=True,
    )


def run_export(
    input_data: GetThreadInput,
    service: ThreadService,
) -> ThreadExportOutput:
    """Chat export for a saved thread."""
    thread = service.get_by_id(input_data.thread_id)
    if thread is None:
        return ThreadExportOutput(text=None, errors=_not_found(input_data), success=False)

    return ThreadExportOutput(
        text=run_tally_export(AggregateInput(thread=thread)).text,
        errors=(),
        success=True,
    )
