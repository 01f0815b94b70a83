"""Type and priority distributions (pure functions).

Every function accepts a records DataFrame, a sequence of ``IssueRecord`` or a
sequence of raw issue mappings. Percentages are ``count / total * 100`` where
``total`` is the number of input records, left as unrounded floats; use
:func:`format_percentage` for display. Empty input yields zero-filled results
rather than NaN.
"""

from __future__ import annotations

from collections.abc import Sequence

import pandas as pd

from service_desk_app.core.config import KNOWN_TYPES, MISSING_PRIORITY_LABEL, TYPE_RESPONSE_KEYS
from service_desk_app.core.mappers import as_frame


def _percent(count: int, total: int) -> float:
    if total <= 0:
        return 0.0
    return count / total * 100


def _column(df: pd.DataFrame, name: str) -> pd.Series:
    if name in df.columns:
        return df[name]
    return pd.Series([None] * len(df), index=df.index, dtype=object)


def _fixed_buckets(values: pd.Series, buckets: Sequence[str], label: str, total: int) -> pd.DataFrame:
    counts = values.value_counts()
    rows = []
    for bucket in buckets:
        count = int(counts.get(bucket, 0))
        rows.append({label: bucket, "count": count, "percentage": _percent(count, total)})
    return pd.DataFrame(rows, columns=[label, "count", "percentage"])


def type_percentages(data) -> pd.DataFrame:
    """Count and percentage of each known issue type.

    Unknown types are left out of the rows but still count toward the total,
    so the percentages sum to 100 only when every record has a known type.
    """
    df = as_frame(data)
    return _fixed_buckets(_column(df, "type"), KNOWN_TYPES, "type", len(df))


def type_percentage_triple(data) -> dict[str, float]:
    """Type percentages keyed the way the HTTP endpoint reports them."""
    table = type_percentages(data)
    return {
        TYPE_RESPONSE_KEYS[row.type]: float(row.percentage)
        for row in table.itertuples(index=False)
    }


def priority_percentages(data, buckets: Sequence[str] | None = None) -> pd.DataFrame:
    """Count and percentage per priority.

    With ``buckets=None`` every observed priority gets its own row (records
    without a priority are bucketed as ``"none"``), so nothing is lost and the
    percentages sum to 100. Passing ``buckets`` restricts the rows to those
    labels, in that order, dropping anything else from the numerator.
    """
    df = as_frame(data)
    total = len(df)
    values = _column(df, "priority")
    if buckets is not None:
        return _fixed_buckets(values, buckets, "priority", total)

    labels = values.where(values.notna(), MISSING_PRIORITY_LABEL).astype(str)
    counts = labels.value_counts()
    out = pd.DataFrame({"priority": counts.index.astype(str), "count": counts.to_numpy(dtype=int)})
    out["percentage"] = [_percent(int(c), total) for c in out["count"]]
    out = out.sort_values(by=["count", "priority"], ascending=[False, True], kind="stable")
    return out.reset_index(drop=True)


def format_percentage(value: float) -> str:
    return f"{value:.2f}"
