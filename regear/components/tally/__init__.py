"""
Tally component - Item totals and exports for a thread.
"""

from ._impl import EXPORT_ROLE_ORDER, aggregate, format_thread_for_copy, sorted_tally
from .component import run_aggregate, run_export
from .models import AggregateInput, ExportOutput, TallyOutput

__all__ = [
    # Entry points
    "run_aggregate",
    "run_export",
    # Models
    "AggregateInput",
    "TallyOutput",
    "ExportOutput",
    # Core
    "aggregate",
    "sorted_tally",
    "format_thread_for_copy",
    "EXPORT_ROLE_ORDER",
]
