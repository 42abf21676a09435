"""Tests for the CSV and rule-file readers."""

from pathlib import Path

import pytest

from csvrules.errors import RuleSchemaError, TableReadError
from csvrules.io.csv_reader import parse_csv_text, read_csv_table, read_rules_file
from csvrules.models.config import ValidatorConfig


class TestParseCsvText:
    """Tests for parse_csv_text."""

    def test_header_and_rows(self) -> None:
        table = parse_csv_text("name,age\nJohn,30\nJane,25\n")
        assert table.headers == ["name", "age"]
        assert table.rows == [["John", "30"], ["Jane", "25"]]
        assert table.row_count == 2

    def test_fields_and_headers_trimmed(self) -> None:
        table = parse_csv_text(" name , age \n  John Doe ,  30\n")
        assert table.headers == ["name", "age"]
        assert table.rows == [["John Doe", "30"]]

    def test_blank_lines_skipped(self) -> None:
        table = parse_csv_text("a,b\n1,2\n\n3,4\n")
        assert table.rows == [["1", "2"], ["3", "4"]]

    def test_values_stay_text(self) -> None:
        table = parse_csv_text("code,flag\n007,NA\n1e3,\n")
        assert table.rows == [["007", "NA"], ["1e3", ""]]

    def test_quoted_fields(self) -> None:
        table = parse_csv_text('name,note\n"Doe, John","line1\nline2"\n"say ""hi""",x\n')
        assert table.rows == [["Doe, John", "line1\nline2"], ['say "hi"', "x"]]

    def test_no_header(self) -> None:
        table = parse_csv_text("1,2\n3,4\n", ValidatorConfig(has_header=False))
        assert table.headers == []
        assert table.rows == [["1", "2"], ["3", "4"]]

    def test_custom_delimiter(self) -> None:
        table = parse_csv_text("a;b\n1;2,5\n", ValidatorConfig(delimiter=";"))
        assert table.headers == ["a", "b"]
        assert table.rows == [["1", "2,5"]]

    def test_header_only(self) -> None:
        table = parse_csv_text("a,b\n")
        assert table.headers == ["a", "b"]
        assert table.rows == []
        assert table.row_count == 0

    @pytest.mark.parametrize("content", ["", "   ", "\n\n"])
    def test_blank_input(self, content: str) -> None:
        table = parse_csv_text(content)
        assert table.headers == []
        assert table.rows == []

    def test_malformed_raises(self) -> None:
        with pytest.raises(TableReadError, match="Failed to parse CSV"):
            parse_csv_text("a,b\n1,2\n3,4,5\n")

    def test_wide_first_data_row_raises(self) -> None:
        with pytest.raises(TableReadError, match="Failed to parse CSV"):
            parse_csv_text("a,b\n1,2,3\n4,5\n")

    def test_wide_row_without_header_raises(self) -> None:
        with pytest.raises(TableReadError):
            parse_csv_text("1,2\n3,4,5\n", ValidatorConfig(has_header=False))

    def test_short_rows_read_empty(self) -> None:
        table = parse_csv_text("a,b,c\n1,2\n")
        assert table.rows == [["1", "2", ""]]

    def test_empty_header_cell_kept(self) -> None:
        table = parse_csv_text("id,,name\n1,x,Al\n")
        assert table.headers == ["id", "", "name"]
        assert table.rows == [["1", "x", "Al"]]

    def test_duplicate_header_cells_kept(self) -> None:
        table = parse_csv_text("a,a\n1,2\n")
        assert table.headers == ["a", "a"]
        assert table.header_index("a") == 0

    def test_numeric_header_stays_text(self) -> None:
        table = parse_csv_text("0,1\nx,y\n")
        assert table.headers == ["0", "1"]
        assert table.rows == [["x", "y"]]


class TestReadCsvTable:
    """Tests for read_csv_table."""

    def test_reads_file(self, tmp_path: Path) -> None:
        path = tmp_path / "people.csv"
        path.write_text("name,email\nJohn,john@example.com\n", encoding="utf-8")
        table = read_csv_table(path)
        assert table.headers == ["name", "email"]
        assert table.rows == [["John", "john@example.com"]]

    def test_strips_byte_order_mark(self, tmp_path: Path) -> None:
        path = tmp_path / "bom.csv"
        path.write_text("name\nJohn\n", encoding="utf-8-sig")
        assert read_csv_table(path).headers == ["name"]

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="CSV file not found"):
            read_csv_table(tmp_path / "nope.csv")

    def test_invalid_encoding(self, tmp_path: Path) -> None:
        path = tmp_path / "latin.csv"
        path.write_bytes(b"name\n\xe9t\xe9\n")
        with pytest.raises(TableReadError):
            read_csv_table(path)


class TestReadRulesFile:
    """Tests for read_rules_file."""

    def test_reads_rules(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.json"
        path.write_text(
            '{"rules": [{"column": "age", "type": "min", "value": 18}],'
            ' "settings": {"strictHeaders": true}}',
            encoding="utf-8",
        )
        rule_set = read_rules_file(path)
        assert len(rule_set.rules) == 1
        assert rule_set.rules[0].column == "age"
        assert rule_set.settings.strict_headers is True

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="Rules file not found"):
            read_rules_file(tmp_path / "rules.json")

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(RuleSchemaError, match="Failed to parse JSON rules"):
            read_rules_file(path)

    def test_missing_rules_array(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.json"
        path.write_text('{"settings": {}}', encoding="utf-8")
        with pytest.raises(RuleSchemaError, match='missing or invalid "rules" array'):
            read_rules_file(path)
