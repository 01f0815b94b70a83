"""IssueService: orchestrates fetching and mapping of the service desk sample."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

import pandas as pd

from .client import SampleDataAPI
from .config import DEFAULT_DATAPOINTS
from .mappers import map_records, records_to_dataframe
from .models import IssueRecord

ProgressCallback = Callable[[str, int | None, int | None], None]

logger = logging.getLogger(__name__)


class IssueService:
    def __init__(self, api: SampleDataAPI, datapoints: int = DEFAULT_DATAPOINTS):
        self.api = api
        self.datapoints = datapoints

    # ------------------ Fetch Methods ------------------
    def fetch_payload(
        self,
        *,
        fresh: bool = False,
        progress: ProgressCallback | None = None,
    ) -> dict[str, Any]:
        """Return the raw ``{"results": [...]}`` payload from the data source."""
        if fresh and hasattr(self.api, "clear_cache"):
            self.api.clear_cache()
        if progress:
            progress(f"Requesting {self.datapoints} data points", None, None)
        payload = self.api.fetch_sample(self.datapoints, fresh=fresh)
        if progress:
            progress("Sample received", 1, 1)
        return payload

    def fetch_records(
        self,
        *,
        fresh: bool = False,
        progress: ProgressCallback | None = None,
    ) -> list[IssueRecord]:
        payload = self.fetch_payload(fresh=fresh, progress=progress)
        return map_records(payload.get("results", []))

    def fetch_frame(
        self,
        *,
        fresh: bool = False,
        progress: ProgressCallback | None = None,
    ) -> pd.DataFrame:
        records = self.fetch_records(fresh=fresh, progress=progress)
        if progress:
            progress("Mapping issue records", None, None)
        df = records_to_dataframe(records)
        logger.debug("Built records frame with %d rows", len(df))
        return df
