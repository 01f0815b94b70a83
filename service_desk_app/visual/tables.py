"""Reusable table helpers for Streamlit rendering."""

from __future__ import annotations

import pandas as pd
import pytz
import streamlit as st

from service_desk_app.analytics.distribution import format_percentage
from service_desk_app.core.config import DISPLAY_ORDER_RECORDS, TIMEZONE
from service_desk_app.core.settings import load_settings


def prepare_breakdown_table(df: pd.DataFrame, category: str, labels: dict[str, str]) -> pd.DataFrame:
    """Human-readable breakdown: label, count and a two-decimal percentage string."""
    if df.empty:
        return pd.DataFrame(columns=[category.title(), "Count", "Percentage"])
    out = pd.DataFrame(
        {
            category.title(): df[category].astype(str).map(lambda v: labels.get(v, v.title())),
            "Count": df["count"].astype(int),
            "Percentage": df["percentage"].map(lambda p: f"{format_percentage(p)}%"),
        }
    )
    return out.reset_index(drop=True)


def prepare_records_table(df: pd.DataFrame) -> tuple[pd.DataFrame, list[str]]:
    if df.empty:
        return df, []
    out = df.copy()
    tz = pytz.timezone(TIMEZONE)
    for col in ("created", "updated"):
        if col in out.columns:
            out[col] = pd.to_datetime(out[col], utc=True, errors="coerce").dt.tz_convert(tz)
    if "resolution_hours" in out.columns:
        out["resolution_hours"] = pd.to_numeric(out["resolution_hours"], errors="coerce").round(2)
    display_cols = [c for c in DISPLAY_ORDER_RECORDS if c in out.columns]
    return out, display_cols


def row_limit(limit: int | None = None) -> int:
    return int(limit or load_settings().max_table_rows)


def render_records_table(df: pd.DataFrame, limit: int | None = None):
    table, cols = prepare_records_table(df)
    if not cols:
        st.info("No issue records to display.")
        return
    cfg = {
        "resolution_hours": st.column_config.NumberColumn("Resolution (h)", format="%.2f"),
        "satisfaction_score": st.column_config.NumberColumn("Satisfaction"),
    }
    st.dataframe(
        table[cols].head(row_limit(limit)),
        hide_index=True,
        column_config=cfg,
    )
