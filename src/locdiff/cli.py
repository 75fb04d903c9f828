"""locdiff CLI — Typer application with compare, apply, and init commands."""

from __future__ import annotations

import json
import time
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from locdiff import __version__

app = typer.Typer(
    name="locdiff",
    help="Compare localization JSON files key by key.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)


def _load_config(config: Optional[str]):
    """Load config from the working directory, exit 2 on failure."""
    from locdiff.config.loader import ConfigError, load_config

    try:
        return load_config(Path.cwd(), config)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc


def _load_document(path: Path, max_size_kb: int, verbose: bool):
    from locdiff.document.loader import DocumentError, load_document

    try:
        loaded = load_document(path, max_size_kb=max_size_kb)
    except DocumentError as exc:
        console.print(f"[bold red]Document error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    if verbose:
        console.print(f"[dim]Loaded {loaded.file_name}: {loaded.key_count} keys[/dim]")
    return loaded


def _load_ledger(edits: str, verbose: bool):
    """Build an EditLedger from a YAML journal, exit 2 on failure."""
    from locdiff.edits.journal import JournalError, load_journal, replay_journal
    from locdiff.edits.ledger import EditLedger, InvalidSlotError

    ledger = EditLedger()
    try:
        count = replay_journal(ledger, load_journal(edits))
    except (JournalError, InvalidSlotError) as exc:
        console.print(f"[bold red]Journal error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    if verbose:
        console.print(f"[dim]Edits replayed: {count}[/dim]")
    return ledger


def _gate_tripped(summary, fail_on: str) -> bool:
    if fail_on == "missing":
        return summary.has_missing
    if fail_on == "different":
        return summary.has_differences
    return False


# ── compare ───────────────────────────────────────────────────────────────────


@app.command()
def compare(
    left: Path = typer.Argument(..., help="Left (reference) JSON file — slot1"),
    right: Path = typer.Argument(..., help="Right (translated) JSON file — slot2"),
    edits: Optional[str] = typer.Option(None, "--edits", "-e", help="YAML edit journal applied before comparing"),
    only: Optional[List[str]] = typer.Option(
        None, "--only", help="Show only this status (repeatable): missing-left | missing-right | identical | different",
    ),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .locdiff.toml"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: terminal | json"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Write JSON report to file"),
    fail_on: Optional[str] = typer.Option(None, "--fail-on", help="Exit 1 on: never | missing | different"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    debug: bool = typer.Option(False, "--debug", help="Debug output with timing"),
) -> None:
    """Compare two localization files and classify every key."""
    from locdiff.config.schema import FAIL_ON_LEVELS, OUTPUT_FORMATS
    from locdiff.diff.engine import compare as run_compare, filter_records, summarize
    from locdiff.diff.models import DiffStatus
    from locdiff.edits.models import SLOT_LEFT, SLOT_RIGHT
    from locdiff.output import json_report, terminal

    cfg = _load_config(config)

    # --- CLI overrides ---
    if format:
        if format not in OUTPUT_FORMATS:
            console.print(f"[bold red]Invalid format:[/bold red] {format}")
            raise typer.Exit(code=2)
        cfg.output.format = format  # type: ignore[assignment]
    if fail_on:
        if fail_on not in FAIL_ON_LEVELS:
            console.print(f"[bold red]Invalid fail-on level:[/bold red] {fail_on}")
            raise typer.Exit(code=2)
        cfg.compare.fail_on = fail_on  # type: ignore[assignment]

    statuses: List[DiffStatus] = []
    for s in only or []:
        try:
            statuses.append(DiffStatus(s))
        except ValueError:
            console.print(f"[bold red]Invalid status:[/bold red] {s}")
            raise typer.Exit(code=2)
    if not statuses and not cfg.compare.show_identical:
        statuses = [s for s in DiffStatus if s is not DiffStatus.IDENTICAL]

    if verbose or debug:
        console.print(f"[dim]Output format: {cfg.output.format}[/dim]")
        console.print(f"[dim]Fail on: {cfg.compare.fail_on}[/dim]")

    # --- Load documents ---
    start = time.perf_counter()
    verbose = verbose or debug
    max_kb = cfg.input.max_file_size_kb
    left_doc = _load_document(left, max_kb, verbose)
    right_doc = _load_document(right, max_kb, verbose)

    left_data = left_doc.data
    right_data = right_doc.data

    # --- Reconcile pending edits ---
    if edits:
        ledger = _load_ledger(edits, verbose)
        if ledger.has_edits(SLOT_LEFT):
            left_data = ledger.apply_edit(SLOT_LEFT, left_data)
        if ledger.has_edits(SLOT_RIGHT):
            right_data = ledger.apply_edit(SLOT_RIGHT, right_data)

    # --- Compare ---
    records = run_compare(left_data, right_data)
    summary = summarize(records)
    shown = filter_records(records, statuses)

    if debug:
        elapsed = (time.perf_counter() - start) * 1000
        console.print(f"[dim]Compare duration: {elapsed:.0f}ms[/dim]")

    # --- Output ---
    names = {"left_name": left_doc.file_name, "right_name": right_doc.file_name}
    report_text: Optional[str] = None

    if cfg.output.format == "terminal":
        terminal.render(
            shown,
            summary=summary,
            show_summary=cfg.output.show_summary,
            max_value_length=cfg.output.max_value_length,
            **names,
        )
    else:
        report_text = json_report.render(shown, summary=summary, **names)
        print(report_text)

    if output:
        if report_text is None:
            report_text = json_report.render(shown, summary=summary, **names)
        Path(output).write_text(report_text, encoding="utf-8")
        if verbose:
            console.print(f"[dim]Report written to {output}[/dim]")

    # --- Exit code ---
    if _gate_tripped(summary, cfg.compare.fail_on):
        raise typer.Exit(code=1)
    raise typer.Exit(code=0)


# ── apply ─────────────────────────────────────────────────────────────────────


@app.command()
def apply(
    base: Path = typer.Argument(..., help="JSON file to reconcile"),
    edits: str = typer.Argument(..., help="YAML edit journal"),
    slot: str = typer.Option("slot1", "--slot", "-s", help="Slot the base file occupies: slot1 | slot2"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Write the result to file instead of stdout"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .locdiff.toml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Write BASE with the journal's edits for one slot applied."""
    from locdiff.edits.ledger import InvalidSlotError

    cfg = _load_config(config)
    loaded = _load_document(base, cfg.input.max_file_size_kb, verbose)
    ledger = _load_ledger(edits, verbose)

    try:
        reconciled = ledger.apply_edit(slot, loaded.data)
    except InvalidSlotError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    if verbose:
        console.print(f"[dim]Edits applied to {slot}: {len(ledger.get_file_edits(slot))}[/dim]")

    text = json.dumps(reconciled, indent=cfg.output.indent, ensure_ascii=False) + "\n"
    if output:
        Path(output).write_text(text, encoding="utf-8")
        console.print(f"[green]✓[/green] Wrote {output}")
    else:
        print(text, end="")


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init() -> None:
    """Generate a starter .locdiff.toml in the current directory."""
    from locdiff.config.defaults import CONFIG_FILENAME, DEFAULT_TOML

    config_path = Path.cwd() / CONFIG_FILENAME

    if config_path.exists():
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"locdiff {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """locdiff — audit translation completeness between two JSON files."""
