"""Rich display helpers for terminal output.

Provides formatted display functions for validation reports, their
findings, and batch run totals using Rich tables.
"""

from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.text import Text

from csvrules.validation.report import ValidationReport
from csvrules.validation.rules.base import ValidationFinding


def display_validation_summary(report: ValidationReport, console: Console) -> None:
    """Print a validation report summary with Rich formatting.

    Shows validity status and row counts in a structured table.

    Args:
        report: ValidationReport to display.
        console: Rich Console for output.
    """
    table = Table(title="CSV Validation Summary", show_lines=True)
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")

    status = Text("VALID", style="bold green") if report.valid else Text("INVALID", style="bold red")
    table.add_row("Status", status)
    table.add_row("Rows processed", str(report.total_rows))
    table.add_row("Valid rows", str(report.valid_rows))

    invalid = report.invalid_rows if report.errors else 0
    table.add_row(
        "Invalid rows",
        Text(str(invalid), style="bold red" if invalid > 0 else "green"),
    )
    table.add_row("Findings", str(len(report.errors)))

    console.print(table)


def display_validation_errors(
    findings: list[ValidationFinding],
    *,
    console: Console,
    limit: int = 50,
) -> None:
    """Print findings in discovery order.

    Args:
        findings: Findings to display.
        console: Rich Console for output.
        limit: Maximum number of findings to show (default 50).
    """
    if not findings:
        console.print("[dim]No validation errors found.[/dim]")
        return

    shown = findings[:limit]
    table = Table(title=f"Validation Errors ({len(shown)} shown)", show_lines=True)
    table.add_column("#", justify="right", style="dim", width=4)
    table.add_column("Row", justify="right", no_wrap=True)
    table.add_column("Column", style="bold cyan", no_wrap=True)
    table.add_column("Value")
    table.add_column("Rule", style="bold", no_wrap=True)
    table.add_column("Message", max_width=60)

    for idx, finding in enumerate(shown, 1):
        row_text = "-" if finding.row_number == 0 else str(finding.row_number)
        table.add_row(
            str(idx),
            row_text,
            Text(str(finding.column)),
            Text(f'"{finding.value}"'),
            Text(finding.rule),
            Text(finding.message),
        )

    console.print(table)

    hidden = len(findings) - len(shown)
    if hidden > 0:
        console.print(f"[dim]{hidden} more finding(s) not shown[/dim]")


def display_batch_totals(
    results: dict[str, bool | None], console: Console
) -> None:
    """Print per-file outcomes and totals for a batch run.

    Args:
        results: File name -> True (valid), False (invalid) or None (could not
            be processed).
        console: Rich Console for output.
    """
    table = Table(title="Batch Results", show_lines=False)
    table.add_column("File", style="bold cyan")
    table.add_column("Status")

    for name in sorted(results):
        outcome = results[name]
        if outcome is True:
            status = Text("VALID", style="green")
        elif outcome is False:
            status = Text("INVALID", style="red")
        else:
            status = Text("ERROR", style="bold red")
        table.add_row(Text(name), status)

    console.print(table)

    succeeded = sum(1 for v in results.values() if v is True)
    console.print(f"Files processed: {len(results)}")
    console.print(f"Success: [green]{succeeded}[/green]")
    console.print(f"Failed: [red]{len(results) - succeeded}[/red]")
