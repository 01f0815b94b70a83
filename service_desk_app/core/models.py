"""Domain data models for service desk issue records."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class IssueRecord:
    id: str | None
    type: str | None
    priority: str | None
    created: datetime | None
    updated: datetime | None
    satisfaction_score: float | None = None
    status: str | None = None
    subject: str | None = None

    @property
    def resolution_seconds(self) -> float | None:
        """Signed seconds between creation and last update (None if a timestamp is missing)."""
        if self.created is None or self.updated is None:
            return None
        return (self.updated - self.created).total_seconds()
