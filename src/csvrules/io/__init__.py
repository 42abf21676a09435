"""CSV reader and writer front ends for the validation core."""

from csvrules.io.csv_reader import parse_csv_text, read_csv_table, read_rules_file
from csvrules.io.csv_writer import format_csv, write_csv_table

__all__ = [
    "parse_csv_text",
    "read_csv_table",
    "read_rules_file",
    "format_csv",
    "write_csv_table",
]
