"""Pure helpers to build the overview page context (no Streamlit)."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import pandas as pd

from service_desk_app.analytics.distribution import priority_percentages, type_percentages
from service_desk_app.analytics.resolution import (
    add_resolution_metrics,
    average_resolution_hours,
    longest_resolution_satisfaction_score,
)
from service_desk_app.core.client import SampleDataError
from service_desk_app.core.mappers import map_records, records_to_dataframe
from service_desk_app.core.service import IssueService, ProgressCallback

logger = logging.getLogger(__name__)


class FetchStatus(str, Enum):
    PENDING = "pending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(slots=True)
class FetchResult:
    status: FetchStatus = FetchStatus.PENDING
    payload: dict[str, Any] | None = None
    error: str | None = None

    @property
    def is_pending(self) -> bool:
        return self.status is FetchStatus.PENDING

    @property
    def succeeded(self) -> bool:
        return self.status is FetchStatus.SUCCEEDED


@dataclass(slots=True)
class OverviewContext:
    record_count: int
    type_breakdown: pd.DataFrame
    priority_breakdown: pd.DataFrame
    average_high_priority_hours: float
    longest_resolution_score: float | None
    records: pd.DataFrame
    payload: dict[str, Any] = field(default_factory=dict)


def load_sample(
    service: IssueService,
    *,
    fresh: bool = False,
    progress: ProgressCallback | None = None,
) -> FetchResult:
    """Run the remote fetch and report it as a FetchResult instead of raising."""
    try:
        payload = service.fetch_payload(fresh=fresh, progress=progress)
    except SampleDataError as exc:
        logger.error("Sample fetch failed: %s", exc)
        return FetchResult(FetchStatus.FAILED, error=str(exc))
    return FetchResult(FetchStatus.SUCCEEDED, payload=payload)


def build_overview_context(payload: dict[str, Any]) -> OverviewContext:
    records = map_records((payload or {}).get("results", []))
    df = records_to_dataframe(records)
    return OverviewContext(
        record_count=len(df),
        type_breakdown=type_percentages(df),
        priority_breakdown=priority_percentages(df),
        average_high_priority_hours=average_resolution_hours(df),
        longest_resolution_score=longest_resolution_satisfaction_score(df),
        records=add_resolution_metrics(df),
        payload=payload or {},
    )
