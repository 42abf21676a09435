"""Tests for the Table model."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from csvrules.models.table import Table


@pytest.fixture
def table() -> Table:
    return Table(
        headers=["name", "age", ""],
        rows=[["John", "30", "x"], ["Jane"]],
    )


class TestTableConstruction:
    def test_row_count_defaults_to_rows(self, table: Table) -> None:
        assert table.row_count == 2

    def test_explicit_row_count_kept(self) -> None:
        t = Table(headers=[], rows=[["a"]], row_count=1)
        assert t.row_count == 1

    def test_empty_table(self) -> None:
        t = Table()
        assert t.headers == []
        assert t.rows == []
        assert t.row_count == 0
        assert t.has_header is False

    def test_from_dict_wire_form(self) -> None:
        t = Table.from_dict({"headers": ["a"], "rows": [["1"], ["2"]], "rowCount": 2})
        assert t.row_count == 2
        assert t.rows[1] == ["2"]

    def test_to_dict_uses_camel_case(self, table: Table) -> None:
        data = table.to_dict()
        assert data["rowCount"] == 2
        assert data["headers"] == ["name", "age", ""]

    def test_frozen(self, table: Table) -> None:
        with pytest.raises(ValidationError):
            table.headers = ["other"]  # type: ignore[misc]


class TestTableLookups:
    def test_header_index(self, table: Table) -> None:
        assert table.header_index("age") == 1
        assert table.header_index("missing") is None

    def test_header_index_is_exact(self, table: Table) -> None:
        assert table.header_index("Name") is None

    def test_column_label_in_range(self, table: Table) -> None:
        assert table.column_label(0) == "name"

    def test_column_label_out_of_range(self, table: Table) -> None:
        assert table.column_label(7) == "Column 7"

    def test_column_label_blank_header(self, table: Table) -> None:
        assert table.column_label(2) == "Column 2"

    def test_cell_present(self, table: Table) -> None:
        assert table.cell(0, 1) == "30"

    def test_cell_short_row_is_empty(self, table: Table) -> None:
        assert table.cell(1, 1) == ""

    def test_cell_negative_index_is_empty(self, table: Table) -> None:
        assert table.cell(0, -1) == ""

    def test_row_number_with_header(self, table: Table) -> None:
        assert table.row_number(1) == 3

    def test_row_number_without_header(self) -> None:
        t = Table(rows=[["a"], ["b"]])
        assert t.row_number(1) == 2

    def test_row_number_override(self, table: Table) -> None:
        assert table.row_number(0, has_header=False) == 1
