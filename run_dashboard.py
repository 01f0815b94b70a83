"""Convenience launcher for the Streamlit app.

Usage:
  streamlit run run_dashboard.py

Automatically imports every module in ``service_desk_app/pages`` so each page
decorated with ``@register_page`` registers itself without manual edits here.
"""

import logging
from importlib import import_module
from pathlib import Path

import streamlit as st

from service_desk_app.app import main

st.set_page_config(layout="wide")

logger = logging.getLogger(__name__)


def _auto_init_issue_service():
    """Initialize the data source from settings, letting Streamlit secrets override the URL."""
    if "issue_service" in st.session_state:
        return

    from service_desk_app.core.client import SampleDataAPI
    from service_desk_app.core.service import IssueService
    from service_desk_app.core.settings import load_settings

    settings = load_settings()
    try:
        secrets = st.secrets.get("service_desk", {})
        url = secrets.get("DATA_URL") or st.secrets.get("DATA_URL") or settings.data_url
    except FileNotFoundError:
        url = settings.data_url

    api = SampleDataAPI(url, timeout=float(settings.request_timeout), cache_ttl=float(settings.cache_ttl))
    st.session_state["issue_service"] = IssueService(api, datapoints=int(settings.datapoints))


_auto_init_issue_service()

PAGES_DIR = Path(__file__).parent / "service_desk_app" / "pages"
for py in sorted(PAGES_DIR.glob("[!_]*.py")):
    mod_name = f"service_desk_app.pages.{py.stem}"
    try:
        import_module(mod_name)
    except ImportError as e:
        logger.error("Failed importing page %s: %s", mod_name, e)

if __name__ == "__main__":
    main()
