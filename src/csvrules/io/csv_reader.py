"""CSV and rule-file readers.

Reads delimited text into a Table of trimmed string fields using pandas.
Every field is read as text: no type inference, no NA conversion.
"""

from __future__ import annotations

import io
from pathlib import Path

import pandas as pd
from loguru import logger

from csvrules.errors import RuleSchemaError, TableReadError
from csvrules.models.config import ValidatorConfig
from csvrules.models.rules import RuleSet, parse_rules
from csvrules.models.table import Table


def _clean(field: object) -> str:
    if field is None or (isinstance(field, float) and pd.isna(field)):
        return ""
    return str(field).strip()


def parse_csv_text(content: str, config: ValidatorConfig | None = None) -> Table:
    """Parse delimited text into a Table.

    Fields and header names are trimmed and blank lines skipped. With
    ``config.has_header`` the first record becomes the headers, trimmed but
    otherwise as written (empty and duplicate names included); otherwise the
    table has no headers.

    Raises:
        TableReadError: If the text is not well-formed delimited data, or a
            record has more fields than the first one.
    """
    config = config or ValidatorConfig()
    if not content.strip():
        return Table()

    # header=None: pandas neither renames header cells nor infers an index
    # column, and any record wider than the first raises ParserError.
    try:
        df = pd.read_csv(
            io.StringIO(content),
            sep=config.delimiter,
            header=None,
            dtype=str,
            keep_default_na=False,
            na_filter=False,
            skip_blank_lines=True,
            engine="python",
        )
    except (pd.errors.ParserError, pd.errors.EmptyDataError, ValueError) as e:
        msg = f"Failed to parse CSV: {e}"
        raise TableReadError(msg) from e

    records = [[_clean(v) for v in record] for record in df.itertuples(index=False, name=None)]
    if config.has_header and records:
        headers, rows = records[0], records[1:]
    else:
        headers, rows = [], records
    return Table(headers=headers, rows=rows, row_count=len(rows))


def read_csv_table(path: str | Path, config: ValidatorConfig | None = None) -> Table:
    """Read a CSV file into a Table.

    Raises:
        FileNotFoundError: If the file does not exist.
        TableReadError: If the file cannot be decoded or parsed.
    """
    path = Path(path)
    if not path.is_file():
        msg = f"CSV file not found: {path}"
        raise FileNotFoundError(msg)

    logger.info("Reading CSV file: {}", path.name)
    try:
        content = path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as e:
        msg = f"Failed to parse CSV: {path.name} is not valid UTF-8"
        raise TableReadError(msg) from e

    table = parse_csv_text(content, config)
    logger.info("Read {}: {} rows x {} cols", path.name, table.row_count, len(table.headers))
    return table


def read_rules_file(path: str | Path) -> RuleSet:
    """Load a JSON rule schema from disk.

    Raises:
        FileNotFoundError: If the file does not exist.
        RuleSchemaError: If the file is not a valid rule schema.
    """
    path = Path(path)
    if not path.is_file():
        msg = f"Rules file not found: {path}"
        raise FileNotFoundError(msg)
    try:
        content = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        msg = f"Failed to parse JSON rules: {path.name} is not valid UTF-8"
        raise RuleSchemaError(msg) from e
    return parse_rules(content)
