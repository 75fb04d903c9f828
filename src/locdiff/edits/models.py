"""Edit record model and slot identifiers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

SLOT_LEFT = "slot1"
SLOT_RIGHT = "slot2"
VALID_SLOTS = (SLOT_LEFT, SLOT_RIGHT)


class EditType(str, Enum):
    MODIFY = "modify"
    ADD = "add"  # key copied over from the other document
    DELETE = "delete"


@dataclass(frozen=True)
class EditRecord:
    """A pending correction to one key of one document."""

    key_path: str
    new_value: Any
    edit_type: EditType = EditType.MODIFY
    timestamp: float = 0.0  # informational only, never used to resolve conflicts
