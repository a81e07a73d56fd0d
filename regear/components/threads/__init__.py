"""
Threads component - Regear event rosters.
"""

from ._impl import (
    ThreadService,
    build_player,
    change_role,
    resolve_roles,
    retier_player,
    validate_player_data,
    validate_thread_data,
)
from .component import (
    run_create,
    run_delete,
    run_export,
    run_get,
    run_list,
    run_summary,
    run_update,
)
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
from .ports import ThreadRepoPort

__all__ = [
    # Entry points
    "run_create",
    "run_update",
    "run_delete",
    "run_get",
    "run_list",
    "run_summary",
    "run_export",
    # Input models
    "CreateThreadInput",
    "UpdateThreadInput",
    "DeleteThreadInput",
    "GetThreadInput",
    # Output models
    "ThreadOperationOutput",
    "ThreadListOutput",
    "ThreadSummaryOutput",
    "ThreadExportOutput",
    "ThreadValidationError",
    # Ports
    "ThreadRepoPort",
    # Service and roster helpers
    "ThreadService",
    "build_player",
    "retier_player",
    "change_role",
    "resolve_roles",
    "validate_thread_data",
    "validate_player_data",
]
