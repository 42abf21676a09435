"""csvrules CLI application entry point.

Validates CSV files against JSON rule schemas, either one file at a time or
a whole directory in batch.

Usage:
    csvrules validate -i data.csv -r rules.json [-o report.json] [-v valid.csv]
    csvrules batch -i data/ -r rules.json -o out/
    csvrules version

Exit codes: 0 when every file is valid, 1 when validation found problems,
2 when validation could not be attempted (bad rules, unreadable input).
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape

from csvrules.errors import CsvRulesError
from csvrules.models.config import ValidatorConfig

app = typer.Typer(
    name="csvrules",
    help="Validate CSV data against declarative JSON rules.",
    no_args_is_help=True,
)

console = Console()

EXIT_INVALID = 1
EXIT_FATAL = 2


def _configure_logging(verbose: bool) -> None:
    """Route loguru output to stderr at DEBUG (verbose) or WARNING."""
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


def _fail(message: str) -> typer.Exit:
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")
    return typer.Exit(code=EXIT_FATAL)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Show debug logging on stderr"),
    ] = False,
) -> None:
    """Validate CSV data against declarative JSON rules."""
    _configure_logging(verbose)


@app.command()
def version() -> None:
    """Show the current version."""
    from csvrules import __version__

    console.print(f"csvrules {__version__}")


@app.command()
def validate(
    input_path: Annotated[
        Path,
        typer.Option("--input", "-i", help="Path to input CSV file"),
    ],
    rules_path: Annotated[
        Path,
        typer.Option("--rules", "-r", help="Path to JSON validation rules"),
    ],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the JSON validation report to this file"),
    ] = None,
    valid_output: Annotated[
        Path | None,
        typer.Option("--valid-output", "-v", help="Export valid rows to this CSV file"),
    ] = None,
    summary: Annotated[
        bool,
        typer.Option("--summary", "-s", help="Print a summary report to the console"),
    ] = False,
    fail_fast: Annotated[
        bool,
        typer.Option("--fail-fast", "-f", help="Stop validation on the first error"),
    ] = False,
    delimiter: Annotated[
        str,
        typer.Option("--delimiter", "-d", help="CSV delimiter character"),
    ] = ",",
    header: Annotated[
        bool,
        typer.Option("--header/--no-header", help="CSV contains a header row"),
    ] = True,
) -> None:
    """Validate one CSV file against a rules file.

    Prints a summary unless a report file is requested (use --summary to get
    both). Exits 1 if the data is invalid.
    """
    from csvrules.cli.display import display_validation_errors, display_validation_summary
    from csvrules.io.csv_reader import read_csv_table, read_rules_file
    from csvrules.io.csv_writer import write_csv_table
    from csvrules.validation.engine import ValidationEngine
    from csvrules.validation.filter import filter_valid_rows
    from csvrules.validation.report import build_report

    config = ValidatorConfig(delimiter=delimiter, has_header=header, fail_fast=fail_fast)

    try:
        table = read_csv_table(input_path, config)
        rule_set = read_rules_file(rules_path)
        findings = ValidationEngine().validate(table, rule_set, config)
    except (CsvRulesError, FileNotFoundError) as e:
        raise _fail(str(e)) from e

    report = build_report(findings, table, input_path, rules_path)

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(report.to_json())
        console.print(f"[green]Validation report saved to {escape(str(output))}[/green]")

    if valid_output is not None:
        valid_output.parent.mkdir(parents=True, exist_ok=True)
        write_csv_table(filter_valid_rows(table, findings), valid_output, delimiter)
        console.print(f"[green]Valid rows exported to {escape(str(valid_output))}[/green]")

    if summary or output is None:
        console.print()
        display_validation_summary(report, console)
        if report.errors:
            display_validation_errors(report.errors, console=console)

    if not report.valid:
        raise typer.Exit(code=EXIT_INVALID)


@app.command()
def batch(
    input_dir: Annotated[
        Path,
        typer.Option("--input", "-i", help="Directory containing input CSV files"),
    ],
    rules_path: Annotated[
        Path,
        typer.Option("--rules", "-r", help="Path to JSON validation rules"),
    ],
    output_dir: Annotated[
        Path,
        typer.Option("--output", "-o", help="Directory for reports and valid-row exports"),
    ],
    pattern: Annotated[
        str,
        typer.Option("--pattern", "-p", help="File pattern to match"),
    ] = "*.csv",
    summary: Annotated[
        bool,
        typer.Option("--summary", "-s", help="Print a summary for each file"),
    ] = False,
    fail_fast: Annotated[
        bool,
        typer.Option("--fail-fast", "-f", help="Stop each file's validation on its first error"),
    ] = False,
    delimiter: Annotated[
        str,
        typer.Option("--delimiter", "-d", help="CSV delimiter character"),
    ] = ",",
    header: Annotated[
        bool,
        typer.Option("--header/--no-header", help="CSV files contain a header row"),
    ] = True,
) -> None:
    """Validate every matching CSV file in a directory.

    Writes <name>-report.json and <name>-valid.csv per file to the output
    directory. A file that cannot be read counts as failed and the batch
    continues. Exits 1 if any file failed.
    """
    from csvrules.cli.display import display_batch_totals, display_validation_summary
    from csvrules.io.csv_reader import read_csv_table, read_rules_file
    from csvrules.io.csv_writer import write_csv_table
    from csvrules.validation.engine import ValidationEngine
    from csvrules.validation.filter import filter_valid_rows
    from csvrules.validation.report import build_report

    if not input_dir.is_dir():
        raise _fail(f"Directory not found: {input_dir}")

    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise _fail(f"Failed to create output directory: {output_dir}") from e

    try:
        rule_set = read_rules_file(rules_path)
    except (CsvRulesError, FileNotFoundError) as e:
        raise _fail(f"Error reading rules file: {e}") from e

    files = sorted(p for p in input_dir.glob(pattern) if p.is_file())
    if not files:
        console.print(f"[yellow]No matching files found in {escape(str(input_dir))}[/yellow]")
        return

    console.print(f"[blue]Found {len(files)} files to process.[/blue]")

    config = ValidatorConfig(delimiter=delimiter, has_header=header, fail_fast=fail_fast)
    engine = ValidationEngine()
    outcomes: dict[str, bool | None] = {}

    for csv_path in files:
        console.print(f"\n[blue]Processing: {escape(csv_path.name)}[/blue]")
        report_path = output_dir / f"{csv_path.stem}-report.json"
        valid_path = output_dir / f"{csv_path.stem}-valid.csv"

        try:
            table = read_csv_table(csv_path, config)
            findings = engine.validate(table, rule_set, config)
        except (CsvRulesError, FileNotFoundError) as e:
            console.print(f"  [red]Error processing {escape(csv_path.name)}: {escape(str(e))}[/red]")
            outcomes[csv_path.name] = None
            continue

        report = build_report(findings, table, csv_path, rules_path)
        report_path.write_text(report.to_json())
        console.print(f"  [green]Validation report saved to {escape(str(report_path))}[/green]")

        write_csv_table(filter_valid_rows(table, findings), valid_path, delimiter)
        console.print(f"  [green]Valid rows exported to {escape(str(valid_path))}[/green]")

        if summary:
            display_validation_summary(report, console)

        outcomes[csv_path.name] = report.valid

    console.print("\n[blue]Batch processing complete.[/blue]")
    display_batch_totals(outcomes, console)

    if not all(outcomes.values()):
        raise typer.Exit(code=EXIT_INVALID)
