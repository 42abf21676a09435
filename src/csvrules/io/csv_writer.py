"""CSV writer for tables, used to export the valid-row subset."""

from __future__ import annotations

import csv
from pathlib import Path

import pandas as pd
from loguru import logger

from csvrules.models.table import Table


def table_to_dataframe(table: Table) -> pd.DataFrame:
    """Convert a Table to a string DataFrame, padding short rows with "".

    Rows wider than the headers get extra unnamed columns.
    """
    width = max([len(table.headers), *(len(row) for row in table.rows)], default=0)
    headers = list(table.headers) + [""] * (width - len(table.headers))
    rows = [list(row) + [""] * (width - len(row)) for row in table.rows]
    return pd.DataFrame(rows, columns=headers if table.headers else None, dtype=str)


def format_csv(table: Table, delimiter: str = ",") -> str:
    """Render a Table as delimited text.

    The header line is written only if the table has headers. A field is
    quoted only when it contains the delimiter, a quote or a line break.
    """
    if not table.headers and not table.rows:
        return ""
    df = table_to_dataframe(table)
    return df.to_csv(
        sep=delimiter,
        header=table.has_header,
        index=False,
        quoting=csv.QUOTE_MINIMAL,
        lineterminator="\n",
    )


def write_csv_table(table: Table, path: str | Path, delimiter: str = ",") -> Path:
    """Write a Table to ``path`` and return the path."""
    path = Path(path)
    path.write_text(format_csv(table, delimiter), encoding="utf-8")
    logger.info("Wrote {} rows to {}", table.row_count, path.name)
    return path
