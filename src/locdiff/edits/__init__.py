"""Edit ledger — pending corrections and reconciliation."""

from locdiff.edits.journal import (
    JournalEntry,
    JournalError,
    load_journal,
    parse_journal,
    replay_journal,
)
from locdiff.edits.ledger import EditLedger, InvalidSlotError
from locdiff.edits.models import SLOT_LEFT, SLOT_RIGHT, VALID_SLOTS, EditRecord, EditType

__all__ = [
    "EditLedger",
    "EditRecord",
    "EditType",
    "InvalidSlotError",
    "JournalEntry",
    "JournalError",
    "SLOT_LEFT",
    "SLOT_RIGHT",
    "VALID_SLOTS",
    "load_journal",
    "parse_journal",
    "replay_journal",
]
