"""
Tally component - Shopping list for a thread.

Shell Layer - wraps the pure aggregation for callers.
"""

from __future__ import annotations

import logging

from ._impl import aggregate, format_thread_for_copy, sorted_tally
from .models import AggregateInput, ExportOutput, TallyOutput

logger = logging.getLogger(__name__)


def run_aggregate(input_data: AggregateInput) -> TallyOutput:
    """Aggregate the items a thread needs."""
    tally = aggregate(input_data.thread)
    logger.debug(
        f"run_aggregate: thread={input_data.thread.id}, distinct_items={len(tally)}"
    )
    return TallyOutput(
        items=tuple(sorted_tally(tally)),
        total_items=sum(tally.values()),
        distinct_items=len(tally),
    )


def run_export(input_data: AggregateInput) -> ExportOutput:
    """Render a thread for pasting into chat."""
    return ExportOutput(text=format_thread_for_copy(input_data.thread))
