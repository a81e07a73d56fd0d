"""Routes for regear threads."""

from uuid import UUID

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from regear.api.deps import get_rules, get_thread_service
from regear.api.errors import raise_for_errors
from regear.api.schemas import (
    PlayerRequest,
    TallyItem,
    TallyResponse,
    ThreadCreateRequest,
    ThreadListResponse,
    ThreadResponse,
    ThreadUpdateRequest,
)
from regear.components.threads import (
    CreateThreadInput,
    DeleteThreadInput,
    GetThreadInput,
    ThreadService,
    ThreadValidationError,
    UpdateThreadInput,
    build_player,
    run_create,
    run_delete,
    run_export,
    run_get,
    run_list,
    run_summary,
    run_update,
)
from regear.domain.entities import Player
from regear.rules.models import Rules

router = APIRouter()

NOT_FOUND = "thread_not_found"


def _build_roles(
    roles: dict[str, list[PlayerRequest]],
    default_tier: int,
) -> dict[str, list[Player]]:
    """Build roster players, resolving each preset for the player's tier."""
    built: dict[str, list[Player]] = {}
    errors: list[ThreadValidationError] = []

    for role, requests in roles.items():
        built[role] = []
        for index, req in enumerate(requests):
            tier = req.tier if req.tier is not None else default_tier
            player, player_errors = build_player(req.name, tier, role, req.gear, req.quantity)
            if player is None:
                errors.extend(
                    ThreadValidationError(
                        code=err.code,
                        message=err.message,
                        field=f"roles.{role}[{index}].{err.field}",
                    )
                    for err in player_errors
                )
                continue
            built[role].append(player)

    if errors:
        raise_for_errors(errors)
    return built


# --- Routes ---


@router.get("", response_model=ThreadListResponse)
def list_threads(service: ThreadService = Depends(get_thread_service)) -> ThreadListResponse:
    """List all threads, latest event first."""
    result = run_list(service)
    return ThreadListResponse(
        items=[ThreadResponse.from_thread(t) for t in result.threads],
        total=result.total,
    )


@router.post("", response_model=ThreadResponse, status_code=201)
def create_thread(
    data: ThreadCreateRequest,
    service: ThreadService = Depends(get_thread_service),
    rules: Rules = Depends(get_rules),
) -> ThreadResponse:
    """Save a new thread."""
    input_data = CreateThreadInput(
        event_time=data.event_time,
        content_label=(
            data.content_label
            if data.content_label is not None
            else rules.threads.default_content_label
        ),
        roles=_build_roles(data.roles, rules.threads.default_player_tier),
    )

    result = run_create(input_data, service)

    if not result.success:
        raise_for_errors(result.errors)

    thread = result.thread
    assert thread is not None  # Success guarantees thread is not None
    return ThreadResponse.from_thread(thread)


@router.get("/{thread_id}", response_model=ThreadResponse)
def get_thread(
    thread_id: UUID,
    service: ThreadService = Depends(get_thread_service),
) -> ThreadResponse:
    """Get a thread by ID."""
    result = run_get(GetThreadInput(thread_id=thread_id), service)

    if not result.success:
        raise_for_errors(result.errors, NOT_FOUND)

    thread = result.thread
    assert thread is not None
    return ThreadResponse.from_thread(thread)


@router.put("/{thread_id}", response_model=ThreadResponse)
def update_thread(
    thread_id: UUID,
    data: ThreadUpdateRequest,
    service: ThreadService = Depends(get_thread_service),
    rules: Rules = Depends(get_rules),
) -> ThreadResponse:
    """Edit a thread. A roles map replaces the whole roster."""
    input_data = UpdateThreadInput(
        thread_id=thread_id,
        event_time=data.event_time,
        content_label=data.content_label,
        roles=(
            _build_roles(data.roles, rules.threads.default_player_tier)
            if data.roles is not None
            else None
        ),
    )

    result = run_update(input_data, service)

    if not result.success:
        raise_for_errors(result.errors, NOT_FOUND)

    thread = result.thread
    assert thread is not None
    return ThreadResponse.from_thread(thread)


@router.delete("/{thread_id}", status_code=204)
def delete_thread(
    thread_id: UUID,
    service: ThreadService = Depends(get_thread_service),
) -> None:
    """Delete a thread."""
    result = run_delete(DeleteThreadInput(thread_id=thread_id), service)

    if not result.success:
        raise_for_errors(result.errors, NOT_FOUND)


@router.get("/{thread_id}/tally", response_model=TallyResponse)
def get_thread_tally(
    thread_id: UUID,
    service: ThreadService = Depends(get_thread_service),
) -> TallyResponse:
    """Items needed for the thread, most-needed first."""
    result = run_summary(GetThreadInput(thread_id=thread_id), service)

    if not result.success:
        raise_for_errors(result.errors, NOT_FOUND)

    tally = result.tally
    assert tally is not None
    return TallyResponse(
        thread_id=thread_id,
        items=[TallyItem(item=item, count=count) for item, count in tally.items],
        total_items=tally.total_items,
        distinct_items=tally.distinct_items,
    )


@router.get("/{thread_id}/export", response_class=PlainTextResponse)
def export_thread(
    thread_id: UUID,
    service: ThreadService = Depends(get_thread_service),
) -> str:
    """Thread formatted for pasting into chat."""
    result = run_export(GetThreadInput(thread_id=thread_id), service)

    if not result.success:
        raise_for_errors(result.errors, NOT_FOUND)

    assert result.text is not None
    return result.text
