"""Short, single-line renderings of JSON values for tables."""

from __future__ import annotations

import json
from typing import Any

from locdiff.document.models import ABSENT

ABSENT_MARK = "—"


def format_value(value: Any) -> str:
    """Render *value* for display.

    ``None`` → ``null``, absent → ``—``, strings quoted, arrays as
    compact JSON, objects as ``{...}``.
    """
    if value is ABSENT:
        return ABSENT_MARK
    if value is None:
        return "null"
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    if isinstance(value, dict):
        return "{...}"
    return str(value)


def truncate_value(value: Any, max_length: int = 50) -> str:
    formatted = format_value(value)
    if len(formatted) <= max_length:
        return formatted
    if max_length <= 3:
        return formatted[: max(max_length, 0)]
    return formatted[: max_length - 3] + "..."
