"""JSON value model shared by the diff engine and the edit ledger."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Union

JsonValue = Union[str, int, float, bool, None, List[Any], Dict[str, Any]]
Document = Dict[str, Any]


class ValueKind(str, Enum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    ARRAY = "array"
    OBJECT = "object"


class _Absent:
    """Marker for a key that does not exist on one side of a comparison.

    Distinct from JSON ``null`` (``None``), which is a present value.
    """

    _instance: "_Absent | None" = None

    def __new__(cls) -> "_Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"

    def __copy__(self) -> "_Absent":
        return self

    def __deepcopy__(self, memo: dict) -> "_Absent":
        return self


ABSENT = _Absent()


def kind_of(value: Any) -> ValueKind:
    """Return the JSON kind of a parsed value."""
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):  # before numbers: bool subclasses int
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (list, tuple)):
        return ValueKind.ARRAY
    if isinstance(value, dict):
        return ValueKind.OBJECT
    raise TypeError(f"Not a JSON value: {type(value).__name__}")


def is_mapping(value: Any) -> bool:
    """True for nested documents only (not arrays, not null)."""
    return isinstance(value, dict)


def count_keys(document: Any) -> int:
    """Count every key at every level, container keys included.

    ``{"app": {"title": "x", "welcome": "y"}}`` has 3 keys.
    Arrays are opaque and contribute no keys.
    """
    if not is_mapping(document):
        return 0
    count = len(document)
    for value in document.values():
        if is_mapping(value):
            count += count_keys(value)
    return count
