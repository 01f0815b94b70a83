import pytest
import requests

from service_desk_app.api.server import create_app
from service_desk_app.core.client import SampleDataAPI, SampleDataError
from service_desk_app.core.service import IssueService


class StubAPI(SampleDataAPI):
    def __init__(self, payload=None, error=None):
        self.url = "https://example.test/service-desk"
        self.payload = payload
        self.error = error

    def clear_cache(self):
        pass

    def fetch_sample(self, datapoints=500, *, fresh=False):
        if self.error is not None:
            raise self.error
        return self.payload


def _client(api):
    app = create_app(IssueService(api))
    app.testing = True
    return app.test_client()


def test_type_percentages_endpoint_three_records():
    payload = {"results": [{"type": "problem"}, {"type": "question"}, {"type": "task"}]}
    resp = _client(StubAPI(payload)).get("/api/type-of-issues-percentage")
    assert resp.status_code == 200
    body = resp.get_json()
    assert set(body) == {"problem", "questions", "tasks"}
    for value in body.values():
        assert value == pytest.approx(33.3333, rel=1e-4)
    assert sum(body.values()) == pytest.approx(100.0)


def test_type_percentages_endpoint_empty_results():
    resp = _client(StubAPI({"results": []})).get("/api/type-of-issues-percentage")
    assert resp.status_code == 200
    assert resp.get_json() == {"problem": 0.0, "questions": 0.0, "tasks": 0.0}


@pytest.mark.parametrize("path", ["/api/type-of-issues-percentage", "/api/data"])
def test_fetch_failure_returns_opaque_500(path):
    api = StubAPI(error=SampleDataError("GET failed 500: upstream"))
    resp = _client(api).get(path)
    assert resp.status_code == 500
    assert resp.get_json() == {"error": "Issue fetching data..."}


def test_raw_data_endpoint_returns_payload():
    payload = {"results": [{"type": "task", "priority": "low"}]}
    resp = _client(StubAPI(payload)).get("/api/data")
    assert resp.status_code == 200
    assert resp.get_json() == payload


def test_type_percentages_endpoint_tolerates_non_scalar_timestamps():
    payload = {"results": [{"type": "task", "created": {"when": "x"}}, {"type": "problem"}]}
    resp = _client(StubAPI(payload)).get("/api/type-of-issues-percentage")
    assert resp.status_code == 200
    assert resp.get_json() == {"problem": 50.0, "questions": 0.0, "tasks": 50.0}


def test_type_percentages_endpoint_counts_malformed_entries():
    resp = _client(StubAPI({"results": [{"type": "task"}, None]})).get("/api/type-of-issues-percentage")
    assert resp.get_json()["tasks"] == pytest.approx(50.0)


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=""):
        self.status_code = status_code
        self._payload = payload
        self.text = text

    def json(self):
        return self._payload


class FakeSession:
    def __init__(self, response=None, exc=None):
        self.headers = {}
        self.response = response
        self.exc = exc

    def get(self, url, params=None, timeout=None):
        if self.exc is not None:
            raise self.exc
        return self.response


@pytest.mark.parametrize(
    "session",
    [
        FakeSession(exc=requests.ConnectionError("connection refused")),
        FakeSession(FakeResponse(status_code=500, text="upstream down")),
    ],
    ids=["network-error", "upstream-500"],
)
@pytest.mark.parametrize("path", ["/api/type-of-issues-percentage", "/api/data"])
def test_remote_failure_through_client_returns_opaque_500(session, path):
    api = SampleDataAPI("https://example.test/service-desk", session=session)
    resp = _client(api).get(path)
    assert resp.status_code == 500
    assert resp.get_json() == {"error": "Issue fetching data..."}
