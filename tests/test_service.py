from service_desk_app.core.client import SampleDataAPI
from service_desk_app.core.service import IssueService


class DummyAPI(SampleDataAPI):
    def __init__(self):
        self.url = "https://example.test/service-desk"
        self.requested = []
        self.cleared = 0

    def clear_cache(self):
        self.cleared += 1

    def fetch_sample(self, datapoints=500, *, fresh=False):
        self.requested.append((datapoints, fresh))
        return {
            "results": [
                {
                    "id": 1,
                    "type": "problem",
                    "priority": "high",
                    "created": "2024-09-01T10:00:00Z",
                    "updated": "2024-09-01T12:00:00Z",
                    "satisfaction_rating": {"score": 5},
                },
                {"id": 2, "type": "task", "priority": "low"},
            ]
        }


def test_fetch_records_maps_payload():
    api = DummyAPI()
    svc = IssueService(api, datapoints=250)
    records = svc.fetch_records()
    assert [r.type for r in records] == ["problem", "task"]
    assert api.requested == [(250, False)]


def test_fetch_frame_builds_dataframe_and_reports_progress():
    messages = []
    svc = IssueService(DummyAPI())
    df = svc.fetch_frame(progress=lambda msg, cur, tot: messages.append(msg))
    assert len(df) == 2
    assert df.loc[0, "satisfaction_score"] == 5
    assert messages


def test_fresh_fetch_clears_cache():
    api = DummyAPI()
    IssueService(api).fetch_payload(fresh=True)
    assert api.cleared == 1
    assert api.requested == [(500, True)]
