from service_desk_app.analytics.distribution import priority_percentages, type_percentages
from service_desk_app.analytics.resolution import add_resolution_metrics
from service_desk_app.core.config import TYPE_LABELS
from service_desk_app.core.mappers import as_frame
from service_desk_app.visual.charts import priority_chart, type_chart
from service_desk_app.visual.tables import prepare_breakdown_table, prepare_records_table


def _sample():
    return [
        {
            "type": "problem",
            "priority": "high",
            "created": "2024-01-01T00:00:00Z",
            "updated": "2024-01-01T03:00:00Z",
        },
        {
            "type": "task",
            "priority": "low",
            "created": "2024-01-01T00:00:00Z",
            "updated": "2024-01-01T01:00:00Z",
        },
    ]


def test_type_chart_builds():
    chart = type_chart(type_percentages(_sample()))
    assert chart is not None
    assert chart.to_dict()["mark"]["type"] == "bar"


def test_priority_chart_empty_is_none():
    assert priority_chart(priority_percentages([])) is None


def test_breakdown_table_formats_percentages():
    table = prepare_breakdown_table(type_percentages(_sample()), "type", TYPE_LABELS)
    assert list(table["Type"]) == ["Problems", "Questions", "Tasks"]
    assert list(table["Percentage"]) == ["50.00%", "0.00%", "50.00%"]


def test_records_table_columns():
    table, cols = prepare_records_table(add_resolution_metrics(as_frame(_sample())))
    assert cols[0] == "id"
    assert "resolution_hours" in cols
    assert table.loc[0, "resolution_hours"] == 3.0
