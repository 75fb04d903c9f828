"""Load edit journals from YAML and replay them into a ledger.

Journal format (a bare list of entries is accepted too)::

    edits:
      - slot: slot2
        path: app.title
        value: "Titre"
      - slot: slot2
        path: app.new_key
        value: "Nouveau"
        type: add
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, List

import yaml

from locdiff.document.paths import normalize_path
from locdiff.edits.ledger import EditLedger
from locdiff.edits.models import EditType


class JournalError(Exception):
    """Raised when an edit journal is unreadable or malformed."""


@dataclass(frozen=True)
class JournalEntry:
    slot: str
    key_path: str
    value: Any
    edit_type: EditType = EditType.MODIFY


def _parse_entry(entry: Any, index: int, source: str) -> JournalEntry:
    if not isinstance(entry, dict):
        raise JournalError(f"{source}: entry {index} is not a mapping")
    for required in ("slot", "path"):
        if required not in entry:
            raise JournalError(f"{source}: entry {index} is missing '{required}'")

    key_path = normalize_path(entry["path"])
    if not key_path:
        raise JournalError(f"{source}: entry {index} has an empty path")

    try:
        edit_type = EditType(entry.get("type", EditType.MODIFY.value))
    except ValueError as exc:
        raise JournalError(
            f"{source}: entry {index} has unknown type {entry.get('type')!r}"
        ) from exc

    return JournalEntry(
        slot=entry["slot"],
        key_path=key_path,
        value=entry.get("value"),
        edit_type=edit_type,
    )


def parse_journal(data: Any, source: str = "<journal>") -> List[JournalEntry]:
    if data is None:
        return []
    if isinstance(data, dict):
        if "edits" not in data:
            raise JournalError(f"{source}: missing 'edits' list")
        data = data["edits"] or []
    if not isinstance(data, list):
        raise JournalError(f"{source}: expected a list of edits")
    return [_parse_entry(entry, i, source) for i, entry in enumerate(data, start=1)]


def load_journal(path: Path | str) -> List[JournalEntry]:
    """Read a YAML journal file. Entries keep file order."""
    p = Path(path)
    try:
        with open(p, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as exc:
        raise JournalError(f"Failed to read {p}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise JournalError(f"Failed to parse {p}: {exc}") from exc
    return parse_journal(data, source=p.name)


def replay_journal(ledger: EditLedger, entries: Iterable[JournalEntry]) -> int:
    """Feed *entries* into *ledger* in order. Returns the number replayed."""
    count = 0
    for entry in entries:
        ledger.add_edit(entry.slot, entry.key_path, entry.value, entry.edit_type)
        count += 1
    return count
