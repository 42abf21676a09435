"""In-memory table model.

A Table is the parsed form of delimited text: an optional header row plus
data rows of string fields. Rows are not required to match the header width;
a field that is absent reads as the empty string.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Table(BaseModel):
    """Immutable headers + rows representation consumed by the engine."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    headers: list[str] = Field(
        default_factory=list, description="Header names in column order (empty if none)"
    )
    rows: list[list[str]] = Field(default_factory=list, description="Data rows in file order")
    row_count: int = Field(
        default=0, ge=0, alias="rowCount", description="Number of data rows"
    )

    @model_validator(mode="before")
    @classmethod
    def _default_row_count(cls, data: Any) -> Any:
        """Derive row_count from rows when the caller does not supply it."""
        if isinstance(data, dict) and "row_count" not in data and "rowCount" not in data:
            data = {**data, "row_count": len(data.get("rows") or [])}
        return data

    @property
    def has_header(self) -> bool:
        """True if the table carries a header row."""
        return bool(self.headers)

    def header_index(self, name: str) -> int | None:
        """Return the position of an exact header match, or None."""
        try:
            return self.headers.index(name)
        except ValueError:
            return None

    def column_label(self, index: int) -> str:
        """Display name for a positional column."""
        if 0 <= index < len(self.headers) and self.headers[index]:
            return self.headers[index]
        return f"Column {index}"

    def cell(self, row_index: int, column_index: int) -> str:
        """Return the field at (row, column), or "" when the row is short."""
        row = self.rows[row_index]
        if 0 <= column_index < len(row):
            return row[column_index] or ""
        return ""

    def row_number(self, row_index: int, *, has_header: bool | None = None) -> int:
        """1-based file line number of a data row.

        Args:
            row_index: Zero-based index into ``rows``.
            has_header: Whether a header line precedes the data. Defaults to
                whether this table has headers.
        """
        header = self.has_header if has_header is None else has_header
        return row_index + (2 if header else 1)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Table:
        """Build a Table from its ``{headers, rows, rowCount}`` wire form."""
        return cls.model_validate(data)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the ``{headers, rows, rowCount}`` wire form."""
        return self.model_dump(by_alias=True)
