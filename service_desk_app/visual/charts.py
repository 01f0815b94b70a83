"""Chart builders (Altair) for distributions."""

from __future__ import annotations

import altair as alt
import pandas as pd

from service_desk_app.core.config import PRIORITY_LABELS, TYPE_LABELS


def distribution_chart(df: pd.DataFrame, category: str, *, labels: dict[str, str] | None = None, title=None):
    """Horizontal bar chart of ``percentage`` per ``category`` row (None when empty)."""
    if df.empty or category not in df.columns:
        return None
    tmp = df.copy()
    labels = labels or {}
    tmp["label"] = tmp[category].astype(str).map(lambda v: labels.get(v, v.title()))
    order = list(tmp["label"])
    chart = (
        alt.Chart(tmp)
        .mark_bar(color="#1f77b4")
        .encode(
            x=alt.X("percentage:Q", title="Share of issues (%)", scale=alt.Scale(domain=[0, 100])),
            y=alt.Y("label:N", title=title or category.title(), sort=order),
            tooltip=[
                alt.Tooltip("label:N", title=category.title()),
                alt.Tooltip("count:Q", title="Count"),
                alt.Tooltip("percentage:Q", title="Percentage", format=".2f"),
            ],
        )
        .properties(height=40 * max(len(tmp), 1) + 20)
    )
    return chart


def type_chart(df: pd.DataFrame):
    return distribution_chart(df, "type", labels=TYPE_LABELS, title="Issue type")


def priority_chart(df: pd.DataFrame):
    return distribution_chart(df, "priority", labels=PRIORITY_LABELS, title="Priority")
