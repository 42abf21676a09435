"""Validation report model.

Reduces a list of findings plus the validated table into a summary: overall
validity, row counts and provenance. Serializes with camelCase keys for the
JSON report consumed by front ends.
"""

from __future__ import annotations

import json
import os
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from csvrules.models.table import Table
from csvrules.validation.rules.base import ValidationFinding

UNKNOWN_SOURCE = "unknown"


def invalid_row_numbers(findings: list[ValidationFinding]) -> set[int]:
    """Distinct row numbers of findings attributable to a data row."""
    return {f.row_number for f in findings if f.row_number > 0}


def _display_path(path: str | Path | None) -> str:
    """Render a provenance path relative to the working directory when possible."""
    if path is None or str(path) == "":
        return UNKNOWN_SOURCE
    try:
        return os.path.relpath(Path(path).resolve(), Path.cwd())
    except ValueError:
        # Different drive on Windows.
        return str(path)


class ValidationReport(BaseModel):
    """Summary of a validation run.

    ``valid`` is True exactly when there are no findings. ``valid_rows``
    counts data rows without any finding; table-level findings (row 0) do
    not reduce it.
    """

    model_config = ConfigDict(populate_by_name=True)

    valid: bool = Field(..., description="True iff no findings were produced")
    total_rows: int = Field(..., ge=0, alias="totalRows", description="Data rows validated")
    valid_rows: int = Field(..., ge=0, alias="validRows", description="Data rows with no findings")
    errors: list[ValidationFinding] = Field(
        default_factory=list, description="All findings in discovery order"
    )
    timestamp: str = Field(default="", description="ISO 8601 timestamp of report generation")
    input_file: str = Field(
        default=UNKNOWN_SOURCE, alias="inputFile", description="Validated data source"
    )
    rules_file: str = Field(
        default=UNKNOWN_SOURCE, alias="rulesFile", description="Rule schema source"
    )

    @property
    def invalid_rows(self) -> int:
        """Number of data rows with at least one finding."""
        return self.total_rows - self.valid_rows

    @property
    def table_level_errors(self) -> list[ValidationFinding]:
        """Findings not attributable to a data row."""
        return [f for f in self.errors if f.row_number == 0]

    @classmethod
    def from_findings(
        cls,
        findings: list[ValidationFinding],
        table: Table,
        *,
        input_file: str | Path | None = None,
        rules_file: str | Path | None = None,
    ) -> ValidationReport:
        """Create a ValidationReport from engine findings.

        Args:
            findings: Findings returned by ValidationEngine.validate.
            table: The table that was validated.
            input_file: Where the table came from, if known.
            rules_file: Where the rule set came from, if known.

        Returns:
            A fully populated ValidationReport.
        """
        bad_rows = invalid_row_numbers(findings)
        return cls(
            valid=len(findings) == 0,
            total_rows=table.row_count,
            valid_rows=max(table.row_count - len(bad_rows), 0),
            errors=list(findings),
            timestamp=datetime.now(tz=UTC).isoformat(),
            input_file=_display_path(input_file),
            rules_file=_display_path(rules_file),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize with camelCase keys."""
        return self.model_dump(by_alias=True)

    def to_json(self, indent: int = 2) -> str:
        """Serialize to JSON with camelCase keys."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)


def build_report(
    findings: list[ValidationFinding],
    table: Table,
    input_file: str | Path | None = None,
    rules_file: str | Path | None = None,
) -> ValidationReport:
    """Build a ValidationReport. See ValidationReport.from_findings."""
    return ValidationReport.from_findings(
        findings, table, input_file=input_file, rules_file=rules_file
    )
