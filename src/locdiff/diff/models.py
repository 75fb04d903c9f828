"""Comparison record and summary models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from locdiff.document.models import ABSENT


class DiffStatus(str, Enum):
    MISSING_LEFT = "missing-left"    # only in the right document
    MISSING_RIGHT = "missing-right"  # only in the left document
    IDENTICAL = "identical"
    DIFFERENT = "different"


@dataclass(frozen=True)
class ComparisonRecord:
    """One row of diff output for a single key path."""

    key_path: str
    status: DiffStatus
    left_value: Any = ABSENT
    right_value: Any = ABSENT

    @property
    def left_present(self) -> bool:
        return self.left_value is not ABSENT

    @property
    def right_present(self) -> bool:
        return self.right_value is not ABSENT

    @property
    def is_missing(self) -> bool:
        return self.status in (DiffStatus.MISSING_LEFT, DiffStatus.MISSING_RIGHT)


@dataclass
class DiffSummary:
    """Record counts per status."""

    missing_left: int = 0
    missing_right: int = 0
    identical: int = 0
    different: int = 0

    @property
    def total(self) -> int:
        return self.missing_left + self.missing_right + self.identical + self.different

    @property
    def has_missing(self) -> bool:
        return self.missing_left > 0 or self.missing_right > 0

    @property
    def has_differences(self) -> bool:
        return self.has_missing or self.different > 0

    def count(self, status: DiffStatus) -> int:
        return getattr(self, status.name.lower())
