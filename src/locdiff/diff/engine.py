"""Recursive structural diff of two documents.

Nested mappings present on both sides are walked key by key; everything
else (scalars, arrays, mapping-vs-non-mapping pairs) is compared as a
whole value. Containers never produce a record of their own, so the
output is a flat list of leaf rows addressed by dot-joined key paths.

Key order: left-document keys first, then right-only keys in
right-document order.
"""

from __future__ import annotations

from typing import Any, Collection, Iterable, List, Optional

from locdiff.diff.models import ComparisonRecord, DiffStatus, DiffSummary
from locdiff.document.models import ABSENT, ValueKind, is_mapping, kind_of
from locdiff.document.paths import join_path


def deep_equal(a: Any, b: Any) -> bool:
    """Kind-aware structural equality of two JSON values.

    Kinds are compared first, so ``1`` and ``True`` differ while ``1``
    and ``1.0`` are equal. Arrays are order-sensitive; object key order
    is ignored.
    """
    kind = kind_of(a)
    if kind is not kind_of(b):
        return False

    if kind is ValueKind.ARRAY:
        if len(a) != len(b):
            return False
        return all(deep_equal(x, y) for x, y in zip(a, b))

    if kind is ValueKind.OBJECT:
        if a.keys() != b.keys():
            return False
        return all(deep_equal(a[k], b[k]) for k in a)

    return a == b


def _union_keys(left: dict, right: dict) -> List[str]:
    keys = list(left)
    keys.extend(k for k in right if k not in left)
    return keys


def compare(
    left: Optional[dict],
    right: Optional[dict],
    path_prefix: str = "",
) -> List[ComparisonRecord]:
    """Compare two documents and return one record per leaf key path.

    ``None`` on either side stands for a document (or branch) that does
    not exist yet; all of the other side's keys are then reported as
    missing.
    """
    left = left if is_mapping(left) else {}
    right = right if is_mapping(right) else {}
    records: List[ComparisonRecord] = []

    for key in _union_keys(left, right):
        key_path = join_path(path_prefix, key)

        if key not in left:
            records.append(
                ComparisonRecord(key_path, DiffStatus.MISSING_LEFT, ABSENT, right[key])
            )
            continue
        if key not in right:
            records.append(
                ComparisonRecord(key_path, DiffStatus.MISSING_RIGHT, left[key], ABSENT)
            )
            continue

        left_value = left[key]
        right_value = right[key]

        if is_mapping(left_value) and is_mapping(right_value):
            records.extend(compare(left_value, right_value, key_path))
            continue

        status = (
            DiffStatus.IDENTICAL
            if deep_equal(left_value, right_value)
            else DiffStatus.DIFFERENT
        )
        records.append(ComparisonRecord(key_path, status, left_value, right_value))

    return records


def summarize(records: Iterable[ComparisonRecord]) -> DiffSummary:
    summary = DiffSummary()
    for record in records:
        field_name = record.status.name.lower()
        setattr(summary, field_name, getattr(summary, field_name) + 1)
    return summary


def filter_records(
    records: Iterable[ComparisonRecord],
    statuses: Collection[DiffStatus],
) -> List[ComparisonRecord]:
    """Keep records whose status is selected. No selection keeps all."""
    if not statuses:
        return list(records)
    wanted = {DiffStatus(s) for s in statuses}
    return [r for r in records if r.status in wanted]
