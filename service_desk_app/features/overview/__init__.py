"""Overview feature module: fetch state and dashboard summaries."""

from service_desk_app.features.overview.context import (
    FetchResult,
    FetchStatus,
    OverviewContext,
    build_overview_context,
    load_sample,
)

__all__ = [
    "FetchResult",
    "FetchStatus",
    "OverviewContext",
    "build_overview_context",
    "load_sample",
]
