"""Resolution-time metrics (pure functions)."""

from __future__ import annotations

import logging

import pandas as pd

from service_desk_app.core.config import HIGH_PRIORITY
from service_desk_app.core.mappers import as_frame

logger = logging.getLogger(__name__)

MS_PER_HOUR = 3_600_000


def _durations_ms(df: pd.DataFrame) -> pd.Series:
    if "created" not in df.columns or "updated" not in df.columns:
        return pd.Series([float("nan")] * len(df), index=df.index, dtype=float)
    created = pd.to_datetime(df["created"], utc=True, errors="coerce")
    updated = pd.to_datetime(df["updated"], utc=True, errors="coerce")
    return (updated - created).dt.total_seconds() * 1000.0


def add_resolution_metrics(df: pd.DataFrame) -> pd.DataFrame:
    """Add a signed ``resolution_hours`` column (NaN when a timestamp is missing)."""
    if df.empty:
        return df
    out = df.copy()
    out["resolution_hours"] = _durations_ms(out) / MS_PER_HOUR
    return out


def average_resolution_hours(data, priority: str = HIGH_PRIORITY) -> float:
    """Mean hours between ``created`` and ``updated`` for issues of ``priority``.

    Records with a missing timestamp or with ``updated`` before ``created`` are
    rejected individually. Returns 0.0 when no valid record remains; otherwise
    the mean rounded to two decimals.
    """
    df = as_frame(data)
    if df.empty or "priority" not in df.columns:
        return 0.0
    subset = df[df["priority"] == priority]
    if subset.empty:
        return 0.0
    durations = _durations_ms(subset)
    valid = durations[durations.notna() & (durations >= 0)]
    rejected = len(durations) - len(valid)
    if rejected:
        logger.warning(
            "Rejected %d %s-priority record(s) with missing or inverted timestamps",
            rejected,
            priority,
        )
    if valid.empty:
        return 0.0
    return round(float(valid.mean()) / MS_PER_HOUR, 2)


def longest_resolution_satisfaction_score(data) -> float | None:
    """Satisfaction score of the record with the longest ``|updated - created|``.

    Ties keep the first record seen and a zero duration never wins. None when
    there is no winner or the winner carries no rating.
    """
    df = as_frame(data)
    if df.empty:
        return None
    durations = _durations_ms(df).abs()
    if "satisfaction_score" in df.columns:
        scores = pd.to_numeric(df["satisfaction_score"], errors="coerce")
    else:
        scores = pd.Series([float("nan")] * len(df), index=df.index, dtype=float)

    longest = 0.0
    score: float | None = None
    for duration, rating in zip(durations, scores):
        if pd.isna(duration):
            continue
        if duration > longest:
            longest = duration
            score = None if pd.isna(rating) else float(rating)
    return score
