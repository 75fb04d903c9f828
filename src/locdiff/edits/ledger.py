"""Edit ledger — pending corrections per document slot.

Each slot holds at most one edit per key path (last write wins) and a
snapshot of the most recent reconciliation. Adding an edit does not
refresh the snapshot; call :meth:`EditLedger.apply_edit` again for that.

Reads through :meth:`~EditLedger.get_file_edits` and
:meth:`~EditLedger.get_current_data` tolerate an unknown slot and
return an empty/unchanged result. All other slot-scoped methods raise
:class:`InvalidSlotError`.
"""

from __future__ import annotations

import copy
import threading
import time
from typing import Any, Dict, Optional, Union

from locdiff.document.paths import set_value_by_path
from locdiff.edits.models import VALID_SLOTS, EditRecord, EditType


class InvalidSlotError(ValueError):
    """Raised when a slot identifier is not one of the two known slots."""

    def __init__(self, slot: Any) -> None:
        self.slot = slot
        valid = " or ".join(repr(s) for s in VALID_SLOTS)
        super().__init__(f"Invalid slot: {slot!r}. Must be {valid}")


class EditLedger:
    """Edit journal for the two compared documents.

    Usage::

        ledger = EditLedger()
        ledger.add_edit("slot1", "app.title", "Bonjour")
        fixed = ledger.apply_edit("slot1", original)
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._edits: Dict[str, Dict[str, EditRecord]] = {s: {} for s in VALID_SLOTS}
        self._snapshots: Dict[str, Optional[Dict[str, Any]]] = {s: None for s in VALID_SLOTS}

    @staticmethod
    def _check_slot(slot: Any) -> str:
        if slot not in VALID_SLOTS:
            raise InvalidSlotError(slot)
        return slot

    # ---- recording ----

    def add_edit(
        self,
        slot: str,
        key_path: str,
        new_value: Any,
        edit_type: Union[EditType, str] = EditType.MODIFY,
    ) -> EditRecord:
        """Record *new_value* for *key_path*, replacing any earlier edit."""
        self._check_slot(slot)
        record = EditRecord(
            key_path=key_path,
            new_value=new_value,
            edit_type=EditType(edit_type),
            timestamp=time.time(),
        )
        with self._lock:
            self._edits[slot][key_path] = record
        return record

    # ---- queries ----

    def get_edit(self, slot: str, key_path: str) -> Optional[EditRecord]:
        self._check_slot(slot)
        with self._lock:
            return self._edits[slot].get(key_path)

    def get_file_edits(self, slot: str) -> Dict[str, EditRecord]:
        """Edits for *slot* keyed by path; empty for an unknown slot."""
        if slot not in VALID_SLOTS:
            return {}
        with self._lock:
            return dict(self._edits[slot])

    def has_edits(self, slot: str) -> bool:
        if slot not in VALID_SLOTS:
            return False
        with self._lock:
            return bool(self._edits[slot])

    def has_any_edits(self) -> bool:
        with self._lock:
            return any(self._edits[s] for s in VALID_SLOTS)

    # ---- reconciliation ----

    def apply_edit(self, slot: str, base: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        """Return a copy of *base* with every pending edit for *slot* written in.

        Missing intermediate mappings are created. *base* is left
        untouched; the result is cached as the slot's current data.
        """
        self._check_slot(slot)
        reconciled = copy.deepcopy(base) if base is not None else {}
        with self._lock:
            for key_path, record in self._edits[slot].items():
                set_value_by_path(reconciled, key_path, copy.deepcopy(record.new_value))
            self._snapshots[slot] = reconciled
        return reconciled

    def get_current_data(self, slot: str, base: Any) -> Any:
        """The last reconciled snapshot for *slot*, else *base* unchanged."""
        if slot not in VALID_SLOTS:
            return base
        with self._lock:
            snapshot = self._snapshots[slot]
        return snapshot if snapshot is not None else base

    # ---- clearing ----

    def clear_edits(self, slot: str) -> None:
        self._check_slot(slot)
        with self._lock:
            self._edits[slot].clear()
            self._snapshots[slot] = None

    def clear_all_edits(self) -> None:
        with self._lock:
            for slot in VALID_SLOTS:
                self._edits[slot].clear()
                self._snapshots[slot] = None
