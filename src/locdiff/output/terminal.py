"""Rich terminal reporter — status pills, value columns, summary."""

from __future__ import annotations

from typing import List, Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from locdiff.diff.engine import summarize
from locdiff.diff.models import ComparisonRecord, DiffStatus, DiffSummary
from locdiff.output.formatting import truncate_value

_STATUS_STYLE = {
    DiffStatus.MISSING_LEFT: "bold white on red",
    DiffStatus.MISSING_RIGHT: "bold white on dark_orange",
    DiffStatus.DIFFERENT: "bold black on yellow",
    DiffStatus.IDENTICAL: "bold black on green",
}

_STATUS_LABEL = {
    DiffStatus.MISSING_LEFT: "MISSING ←",
    DiffStatus.MISSING_RIGHT: "MISSING →",
    DiffStatus.DIFFERENT: "DIFFERENT",
    DiffStatus.IDENTICAL: "IDENTICAL",
}


def _status_pill(status: DiffStatus) -> Text:
    return Text(f" {_STATUS_LABEL[status]} ", style=_STATUS_STYLE[status])


def render(
    records: List[ComparisonRecord],
    *,
    left_name: str = "left",
    right_name: str = "right",
    show_summary: bool = True,
    max_value_length: int = 50,
    summary: Optional[DiffSummary] = None,
    console: Optional[Console] = None,
) -> None:
    """Print comparison records to the terminal using Rich.

    *summary* describes the full comparison when *records* is a filtered
    subset; it defaults to a summary of *records*.
    """
    console = console or Console()
    summary = summary or summarize(records)

    if not records:
        console.print()
        console.print("[dim]No keys to show.[/dim]")
        if show_summary:
            _print_summary(console, summary)
        return

    console.print()
    table = Table(
        title=f"{left_name} ↔ {right_name}",
        show_lines=False,
        title_style="bold",
        border_style="dim",
    )
    table.add_column("Status", justify="center", width=13)
    table.add_column("Key", style="cyan", min_width=20)
    table.add_column(left_name, style="magenta")
    table.add_column(right_name, style="green")

    for record in records:
        table.add_row(
            _status_pill(record.status),
            record.key_path,
            truncate_value(record.left_value, max_value_length),
            truncate_value(record.right_value, max_value_length),
        )

    console.print(table)

    if show_summary:
        _print_summary(console, summary)

    console.print()
    if not summary.has_differences:
        console.print("[bold green]✅ Files match — every key is present and identical.[/bold green]")
    elif summary.has_missing:
        console.print(
            f"[bold red]❌ {summary.missing_left + summary.missing_right} "
            "key(s) missing on one side.[/bold red]"
        )
    else:
        console.print(
            f"[bold yellow]⚠️  {summary.different} key(s) differ.[/bold yellow]"
        )


def _print_summary(console: Console, summary: DiffSummary) -> None:
    console.print()
    console.print(f"[dim]Keys compared:[/dim]  {summary.total}")
    console.print(f"[dim]Identical:[/dim]      {summary.identical}")
    console.print(f"[dim]Different:[/dim]      {summary.different}")
    console.print(f"[dim]Missing left:[/dim]   {summary.missing_left}")
    console.print(f"[dim]Missing right:[/dim]  {summary.missing_right}")
