"""Diff engine — structural comparison of two documents."""

from locdiff.diff.engine import compare, deep_equal, filter_records, summarize
from locdiff.diff.models import ComparisonRecord, DiffStatus, DiffSummary

__all__ = [
    "ComparisonRecord",
    "DiffStatus",
    "DiffSummary",
    "compare",
    "deep_equal",
    "filter_records",
    "summarize",
]
