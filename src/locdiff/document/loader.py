"""Read and validate localization JSON files.

Only syntactic JSON validity is checked, plus the requirement that the
root is an object. No schema validation is performed.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from locdiff.document.models import count_keys, is_mapping


class DocumentError(Exception):
    """Raised when a file cannot be read or is not a JSON object."""


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    error: Optional[str] = None
    line: Optional[int] = None
    column: Optional[int] = None


@dataclass(frozen=True)
class LoadedDocument:
    """A parsed document plus the metadata shown alongside it."""

    data: Dict[str, Any]
    key_count: int
    file_name: str
    file_size: int


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def _loads(text: str) -> Any:
    # json.loads accepts NaN and Infinity by default; RFC 8259 does not.
    return json.loads(text, parse_constant=_reject_constant)


def validate_json(text: Any) -> ValidationResult:
    """Check *text* for JSON syntax errors. Never raises."""
    if not text or not isinstance(text, str):
        return ValidationResult(is_valid=False, error="Input must be a non-empty string")
    try:
        _loads(text)
    except json.JSONDecodeError as exc:
        return ValidationResult(
            is_valid=False, error=exc.msg, line=exc.lineno, column=exc.colno
        )
    except ValueError as exc:
        return ValidationResult(is_valid=False, error=str(exc))
    return ValidationResult(is_valid=True)


def parse_document(text: str, source: str = "<string>") -> Dict[str, Any]:
    """Parse *text* into a document, raising DocumentError on bad input."""
    text = text.lstrip("\ufeff")
    validation = validate_json(text)
    if not validation.is_valid:
        if validation.line is not None:
            raise DocumentError(
                f"{source}: invalid JSON at line {validation.line}, "
                f"column {validation.column}: {validation.error}"
            )
        raise DocumentError(f"{source}: {validation.error}")

    data = _loads(text)
    if not is_mapping(data):
        raise DocumentError(
            f"{source}: top-level value must be an object, got {type(data).__name__}"
        )
    return data


def load_document(path: Path | str, max_size_kb: int = 1024) -> LoadedDocument:
    """Load a JSON document from disk."""
    p = Path(path)
    if not p.is_file():
        raise DocumentError(f"File not found: {p}")

    size = p.stat().st_size
    if max_size_kb and size > max_size_kb * 1024:
        raise DocumentError(
            f"{p.name}: file is {size / 1024:.0f} KB, limit is {max_size_kb} KB"
        )

    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentError(f"Failed to read {p}: {exc}") from exc

    data = parse_document(text, source=p.name)
    return LoadedDocument(
        data=data,
        key_count=count_keys(data),
        file_name=p.name,
        file_size=size,
    )
