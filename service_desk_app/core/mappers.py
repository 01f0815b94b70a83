"""Mapping raw service desk JSON into IssueRecord instances and DataFrames."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import asdict
from datetime import datetime
from typing import Any

import pandas as pd

from .config import RECORD_COLUMNS
from .models import IssueRecord

logger = logging.getLogger(__name__)

BLANK_RECORD = IssueRecord(id=None, type=None, priority=None, created=None, updated=None)


def _clean_label(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip().lower()
    return text or None


def _clean_text(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def parse_dt(val):
    if isinstance(val, bool) or not isinstance(val, str | int | float | datetime):
        return None
    if val == "":
        return None
    ts = pd.to_datetime(val, utc=True, errors="coerce")
    if ts is None or pd.isna(ts):
        return None
    return ts.to_pydatetime()


def extract_satisfaction_score(raw: Mapping[str, Any]) -> float | None:
    """Return ``satisfaction_rating.score`` as a float, or None when absent."""
    rating = raw.get("satisfaction_rating")
    if not isinstance(rating, Mapping):
        return None
    score = rating.get("score")
    if score is None or isinstance(score, bool):
        return None
    try:
        return float(score)
    except (TypeError, ValueError):
        return None


def map_record(raw: Mapping[str, Any]) -> IssueRecord:
    raw_id = raw.get("id")
    return IssueRecord(
        id=str(raw_id) if raw_id is not None else None,
        type=_clean_label(raw.get("type")),
        priority=_clean_label(raw.get("priority")),
        created=parse_dt(raw.get("created")),
        updated=parse_dt(raw.get("updated")),
        satisfaction_score=extract_satisfaction_score(raw),
        status=_clean_label(raw.get("status")),
        subject=_clean_text(raw.get("subject")),
    )


def map_records(raw_items: Iterable[Any]) -> list[IssueRecord]:
    """Map every entry of ``raw_items``.

    Entries that are not mappings become blank records so they still count
    toward percentage totals while matching no type, priority or timestamp.
    """
    records: list[IssueRecord] = []
    malformed = 0
    for item in raw_items or []:
        if isinstance(item, IssueRecord):
            records.append(item)
            continue
        if not isinstance(item, Mapping):
            malformed += 1
            records.append(BLANK_RECORD)
            continue
        records.append(map_record(item))
    if malformed:
        logger.warning("Kept %d malformed issue record(s) as blank entries", malformed)
    return records


def records_to_dataframe(records: Iterable[IssueRecord]) -> pd.DataFrame:
    rows = [asdict(r) for r in records]
    df = pd.DataFrame(rows, columns=list(RECORD_COLUMNS))
    for col in ("created", "updated"):
        df[col] = pd.to_datetime(df[col], utc=True, errors="coerce")
    df["satisfaction_score"] = pd.to_numeric(df["satisfaction_score"], errors="coerce")
    return df


def as_frame(data) -> pd.DataFrame:
    """Coerce a DataFrame, a sequence of IssueRecord, or raw mappings into a records frame."""
    if isinstance(data, pd.DataFrame):
        return data
    return records_to_dataframe(map_records(data))
