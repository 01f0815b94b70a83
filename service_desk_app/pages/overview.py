"""Overview page.

Fetches the service desk sample once per session (or on demand) and renders
the type and priority distributions, the average resolution time of
high-priority issues, the satisfaction score of the slowest-resolved issue,
and the raw payload.
"""

from __future__ import annotations

import streamlit as st

from service_desk_app.app import register_page
from service_desk_app.core.config import PRIORITY_LABELS, TYPE_LABELS
from service_desk_app.core.service import IssueService
from service_desk_app.features.overview import build_overview_context, load_sample
from service_desk_app.visual.charts import priority_chart, type_chart
from service_desk_app.visual.progress import ProgressReporter, render_fetch_state
from service_desk_app.visual.tables import prepare_breakdown_table, render_records_table


def _fetch(service: IssueService, *, fresh: bool) -> None:
    reporter = ProgressReporter("Fetching service desk sample")
    result = load_sample(service, fresh=fresh, progress=reporter.callback)
    reporter.finish(result)
    st.session_state["sample_result"] = result


@register_page("Service Desk Overview")
def overview_page():
    st.title("Service Desk Overview")
    service: IssueService | None = st.session_state.get("issue_service")
    if service is None:
        st.warning("Configure the data source on the Setup page first.")
        return
    st.caption(f"{service.datapoints} data points from {service.api.url}")

    refresh = st.button("Refresh data", type="primary")
    if refresh or "sample_result" not in st.session_state:
        _fetch(service, fresh=refresh)

    result = st.session_state.get("sample_result")
    if not render_fetch_state(result):
        return

    ctx = build_overview_context(result.payload)
    if ctx.record_count == 0:
        st.info("The data source returned no issue records.")

    col_type, col_priority = st.columns(2)
    with col_type:
        st.subheader("Issue Type Percentages")
        st.dataframe(prepare_breakdown_table(ctx.type_breakdown, "type", TYPE_LABELS), hide_index=True)
        chart = type_chart(ctx.type_breakdown)
        if chart is not None:
            st.altair_chart(chart, use_container_width=True)
    with col_priority:
        st.subheader("Priority Percentages")
        st.dataframe(
            prepare_breakdown_table(ctx.priority_breakdown, "priority", PRIORITY_LABELS),
            hide_index=True,
        )
        chart = priority_chart(ctx.priority_breakdown)
        if chart is not None:
            st.altair_chart(chart, use_container_width=True)

    m1, m2, m3 = st.columns(3)
    m1.metric("Issues fetched", ctx.record_count)
    m2.metric("Avg resolution, high priority", f"{ctx.average_high_priority_hours:.2f} h")
    score = ctx.longest_resolution_score
    m3.metric("Satisfaction of longest resolution", "n/a" if score is None else f"{score:g}")

    st.markdown("---")
    st.subheader("Issue Records")
    render_records_table(ctx.records)

    with st.expander("Raw Data"):
        st.json(ctx.payload)
