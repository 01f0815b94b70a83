"""Progress and fetch-state rendering for Streamlit pages."""

from __future__ import annotations

import streamlit as st

from service_desk_app.features.overview.context import FetchResult, FetchStatus


class ProgressReporter:
    """Banner + progress bar driven by IssueService progress callbacks."""

    def __init__(self, title: str):
        self._container = st.container()
        self._container.info(title)
        self._message_placeholder = self._container.empty()
        self._progress_placeholder = self._container.progress(0.0)
        self._finalized = False

    def callback(self, message: str, current: int | None = None, total: int | None = None) -> None:
        if self._finalized:
            return
        self._message_placeholder.write(message)
        if total:
            ratio = min(max((current or 0) / total, 0.0), 1.0)
            self._progress_placeholder.progress(ratio)

    def finish(self, result: FetchResult) -> None:
        if self._finalized:
            return
        if result.status is FetchStatus.SUCCEEDED:
            self._progress_placeholder.progress(1.0)
            count = len((result.payload or {}).get("results", []))
            self._container.success(f"Loaded {count} issue record(s).")
        elif result.status is FetchStatus.FAILED:
            self._container.error("Error fetching data")
        self._finalized = True


def render_fetch_state(result: FetchResult | None) -> bool:
    """Render the pending/failed states; True when the dashboard can be drawn."""
    if result is None or result.is_pending:
        st.info("Loading data...")
        return False
    if result.status is FetchStatus.FAILED:
        st.error("Error fetching data")
        if result.error:
            st.caption(result.error)
        return False
    return True
