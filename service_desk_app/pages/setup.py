"""Data source setup page: configure the sample API and initialize IssueService."""

from __future__ import annotations

import streamlit as st

from service_desk_app.app import register_page
from service_desk_app.core.client import SampleDataAPI
from service_desk_app.core.config import AppSettings
from service_desk_app.core.service import IssueService
from service_desk_app.core.settings import load_settings


def initial_cache_ttl(current: IssueService | None, settings: AppSettings) -> int:
    """TTL shown in the form: the active client's value, else the configured default."""
    ttl = getattr(current.api, "cache_ttl", None) if current else None
    return int(settings.cache_ttl if ttl is None else ttl)


@register_page("Setup / Data Source")
def setup_page():
    st.title("Data Source Setup")
    st.caption("Point the dashboard at a service desk sample endpoint.")
    settings = load_settings()
    current: IssueService | None = st.session_state.get("issue_service")

    url = st.text_input(
        "Data URL",
        value=current.api.url if current else settings.data_url,
    )
    datapoints = st.number_input(
        "Data points",
        min_value=1,
        max_value=5000,
        value=int(current.datapoints if current else settings.datapoints),
    )
    ttl = st.number_input(
        "Client cache TTL (seconds)",
        min_value=0,
        max_value=3600,
        value=initial_cache_ttl(current, settings),
    )
    apply_btn = st.button("Apply", type="primary")

    if apply_btn:
        if not url:
            st.error("Data URL is required.")
            return
        api = SampleDataAPI(url, timeout=float(settings.request_timeout), cache_ttl=float(ttl))
        st.session_state["issue_service"] = IssueService(api, datapoints=int(datapoints))
        st.session_state.pop("sample_result", None)
        st.success("Data source updated.")

    if "issue_service" in st.session_state:
        st.info("IssueService ready.")
