"""Document layer — JSON value model, key paths, loading."""

from locdiff.document.loader import (
    DocumentError,
    LoadedDocument,
    ValidationResult,
    load_document,
    parse_document,
    validate_json,
)
from locdiff.document.models import ABSENT, ValueKind, count_keys, is_mapping, kind_of
from locdiff.document.paths import (
    build_path,
    get_value_by_path,
    join_path,
    normalize_path,
    set_value_by_path,
    split_path,
)

__all__ = [
    "ABSENT",
    "DocumentError",
    "LoadedDocument",
    "ValidationResult",
    "ValueKind",
    "build_path",
    "count_keys",
    "get_value_by_path",
    "is_mapping",
    "join_path",
    "kind_of",
    "load_document",
    "normalize_path",
    "parse_document",
    "set_value_by_path",
    "split_path",
    "validate_json",
]
