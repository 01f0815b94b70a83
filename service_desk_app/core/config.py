"""Central configuration, constants, and shared column definitions."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

# =============================================================================
# Remote Data Source
# =============================================================================
DATA_URL = "https://sampleapi.squaredup.com/integrations/v1/service-desk"
DEFAULT_DATAPOINTS: int = 500
DEFAULT_REQUEST_TIMEOUT: float = 30.0  # seconds
DEFAULT_CACHE_TTL: float = 300.0  # seconds
TIMEZONE = "UTC"

# Opaque message returned to HTTP callers when the remote fetch fails
FETCH_ERROR_MESSAGE = "Issue fetching data..."

# =============================================================================
# Issue Types
# =============================================================================
# Canonical display order for the type distribution
KNOWN_TYPES: Sequence[str] = ("problem", "question", "task")

# Keys used by the type-percentage endpoint
TYPE_RESPONSE_KEYS: dict[str, str] = {
    "problem": "problem",
    "question": "questions",
    "task": "tasks",
}

TYPE_LABELS: dict[str, str] = {
    "problem": "Problems",
    "question": "Questions",
    "task": "Tasks",
}

# =============================================================================
# Priority Configuration
# =============================================================================
KNOWN_PRIORITIES: Sequence[str] = ("high", "normal", "low")
HIGH_PRIORITY = "high"
MISSING_PRIORITY_LABEL = "none"

PRIORITY_LABELS: dict[str, str] = {
    "high": "High",
    "normal": "Normal",
    "low": "Low",
}

# =============================================================================
# Table Columns
# =============================================================================
RECORD_COLUMNS: Sequence[str] = (
    "id",
    "subject",
    "type",
    "priority",
    "status",
    "created",
    "updated",
    "satisfaction_score",
)

DISPLAY_ORDER_RECORDS: Sequence[str] = (
    "id",
    "subject",
    "type",
    "priority",
    "status",
    "resolution_hours",
    "satisfaction_score",
    "created",
    "updated",
)


@dataclass(slots=True)
class AppSettings:
    data_url: str = DATA_URL
    datapoints: int = DEFAULT_DATAPOINTS
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    cache_ttl: float = DEFAULT_CACHE_TTL
    log_level: str = "INFO"
    max_table_rows: int = 1000
    api_host: str = "127.0.0.1"
    api_port: int = 5000


SETTINGS = AppSettings()
