"""Dot-notation key paths — split, join, read and upsert."""

from __future__ import annotations

import re
from typing import Any, Iterable, List

from locdiff.document.models import ABSENT, is_mapping

_SEPARATOR = "."
_DOTS_RE = re.compile(r"\s*\.[\s.]*")


def split_path(path: Any) -> List[str]:
    """``"app.title"`` → ``["app", "title"]``. Empty segments are dropped."""
    if not path or not isinstance(path, str):
        return []
    return [segment for segment in path.split(_SEPARATOR) if segment]


def build_path(segments: Iterable[Any]) -> str:
    """Join segments with dots, skipping empty ones."""
    return _SEPARATOR.join(str(s) for s in segments if s is not None and s != "")


def join_path(prefix: str, key: str) -> str:
    """Child path of *key* under *prefix*; the root prefix is ``""``."""
    return f"{prefix}{_SEPARATOR}{key}" if prefix else key


def normalize_path(path: Any) -> str:
    """Clean up a user-supplied path: ``" .app .. title. "`` → ``"app.title"``."""
    if not path or not isinstance(path, str):
        return ""
    collapsed = _DOTS_RE.sub(_SEPARATOR, path.strip())
    return build_path(segment.strip() for segment in collapsed.split(_SEPARATOR))


def get_value_by_path(document: Any, path: str, default: Any = ABSENT) -> Any:
    """Return the value at *path*, or *default* if any segment is missing."""
    segments = split_path(path)
    if not segments or not is_mapping(document):
        return default

    current = document
    for segment in segments:
        if not is_mapping(current) or segment not in current:
            return default
        current = current[segment]
    return current


def set_value_by_path(document: Any, path: str, value: Any) -> Any:
    """Write *value* at *path*, creating intermediate mappings as needed.

    Any non-mapping value found on the way is replaced by an empty
    mapping. Mutates and returns *document*.
    """
    segments = split_path(path)
    if not segments or not is_mapping(document):
        return document

    current = document
    for segment in segments[:-1]:
        child = current.get(segment)
        if not is_mapping(child):
            child = {}
            current[segment] = child
        current = child
    current[segments[-1]] = value
    return document
