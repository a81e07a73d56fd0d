"""
CSV roster adapter.

Reads the guild roster export: a header row, then `name,id,guild` rows.
Implements RosterSourcePort.
"""

from __future__ import annotations

import csv
import io
import logging
from pathlib import Path

from regear.domain.entities import RosterEntry

logger = logging.getLogger(__name__)

# Spreadsheet formula error left in some exports
BROKEN_CELL_MARKER = "#NAME?"


def parse_roster_csv(text: str) -> list[RosterEntry]:
    """Parse roster rows, skipping the header, blanks and broken rows."""
    entries: list[RosterEntry] = []
    rows = csv.reader(io.StringIO(text))
    next(rows, None)

    for line_no, row in enumerate(rows, start=2):
        cells = [cell.strip() for cell in row]
        if not any(cells):
            continue
        if any(BROKEN_CELL_MARKER in cell for cell in cells):
            logger.debug(f"Skipping roster line {line_no}: broken cell")
            continue
        if len(cells) < 3 or not cells[0]:
            logger.debug(f"Skipping roster line {line_no}: expected name,id,guild")
            continue
        entries.append(RosterEntry(name=cells[0], member_id=cells[1], guild_name=cells[2]))

    return entries


class CsvRosterSource:
    """Roster read from a CSV file on each call."""

    def __init__(self, csv_path: str | Path) -> None:
        self.csv_path = Path(csv_path)

    def load_entries(self) -> list[RosterEntry]:
        if not self.csv_path.exists():
            logger.warning(f"Roster file not found at {self.csv_path}; roster is empty")
            return []
        return parse_roster_csv(self.csv_path.read_text(encoding="utf-8"))
