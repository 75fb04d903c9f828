"""JSON reporter for scripts and CI pipelines."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

from locdiff.diff.engine import summarize
from locdiff.diff.models import ComparisonRecord, DiffSummary


def to_dict(
    records: List[ComparisonRecord],
    *,
    left_name: Optional[str] = None,
    right_name: Optional[str] = None,
    summary: Optional[DiffSummary] = None,
) -> Dict[str, Any]:
    """Convert comparison records to a JSON-serialisable dict."""
    summary = summary or summarize(records)
    records_list: List[Dict[str, Any]] = []
    for r in records:
        records_list.append({
            "key": r.key_path,
            "status": r.status.value,
            **({"left": r.left_value} if r.left_present else {}),
            **({"right": r.right_value} if r.right_present else {}),
        })

    return {
        "version": "1.0",
        "left": left_name,
        "right": right_name,
        "summary": {
            "total": summary.total,
            "missing_left": summary.missing_left,
            "missing_right": summary.missing_right,
            "identical": summary.identical,
            "different": summary.different,
        },
        "records": records_list,
    }


def render(records: List[ComparisonRecord], **kwargs: Any) -> str:
    """Return formatted JSON string."""
    return json.dumps(to_dict(records, **kwargs), indent=2, ensure_ascii=False)
