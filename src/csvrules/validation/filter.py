"""Row filter: derive the subset of rows that produced no findings."""

from __future__ import annotations

from loguru import logger

from csvrules.models.table import Table
from csvrules.validation.report import invalid_row_numbers
from csvrules.validation.rules.base import ValidationFinding


def filter_valid_rows(table: Table, findings: list[ValidationFinding]) -> Table:
    """Return a new Table holding only the rows without findings.

    Row numbers are computed as for the engine, with a header line counted
    when the table has headers. Headers and relative row order are kept.

    Args:
        table: The validated table.
        findings: Findings produced for it.

    Returns:
        A new Table; the input is not modified.
    """
    bad_rows = invalid_row_numbers(findings)
    kept = [
        list(row)
        for index, row in enumerate(table.rows)
        if table.row_number(index) not in bad_rows
    ]
    logger.debug("Kept {} of {} rows", len(kept), len(table.rows))
    return Table(headers=list(table.headers), rows=kept, row_count=len(kept))
