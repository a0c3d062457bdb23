from typing import Any

import pytest
from fastapi import HTTPException
from fastapi.testclient import TestClient

from conftest import LANGCHAIN, PYTHON, REACT, YEAR

from releasecheck import api
from releasecheck.config import CatalogConfig
from releasecheck.io.submission import RelayResult

JD = "Looking for a LangChain expert with 10+ years of experience"


class StubRelay:
    def __init__(self, result: RelayResult):
        self.result = result
        self.submitted = []

    def submit(self, submission: Any) -> RelayResult:
        self.submitted.append(submission)
        return self.result


@pytest.fixture
def client():
    api.app.dependency_overrides[api.get_catalog] = lambda: [REACT, LANGCHAIN, PYTHON]
    yield TestClient(api.app)
    api.app.dependency_overrides.clear()


def test_scan_endpoint(client) -> None:
    response = client.post("/jd/scan", json={"text": JD, "current_year": YEAR})

    assert response.status_code == 200
    payload = response.json()
    assert payload["corrected_text"] == "Looking for a LangChain expert with 2+ years of experience"
    assert payload["requirements"][0]["technology"] == "LangChain"
    assert payload["requirements"][0]["is_valid"] is False


def test_scan_endpoint_rejects_blank_text(client) -> None:
    response = client.post("/jd/scan", json={"text": "   "})

    assert response.status_code == 400


def test_upload_endpoint(client) -> None:
    response = client.post("/jd/upload", files={"file": ("jd.txt", JD.encode("utf-8"), "text/plain")})

    assert response.status_code == 200
    payload = response.json()
    assert payload["job_file"] == "jd.txt"
    assert payload["changelog"][0]["technology"] == "LangChain"
    assert payload["changelog"][0]["original"] == 10


def test_upload_endpoint_rejects_unknown_type(client) -> None:
    response = client.post("/jd/upload", files={"file": ("jd.exe", b"MZ", "application/octet-stream")})

    assert response.status_code == 400


def test_technologies_claim_check(client) -> None:
    response = client.get("/technologies", params={"q": "LangChain 10", "year": YEAR})

    payload = response.json()
    assert payload["validation"]["is_valid"] is False
    assert payload["validation"]["max_possible_years"] == 2
    assert [t["name"] for t in payload["technologies"]] == ["LangChain"]


def test_technologies_search(client) -> None:
    payload = client.get("/technologies", params={"q": "py"}).json()

    assert payload["validation"] is None
    assert [t["name"] for t in payload["technologies"]] == ["Python"]


def test_bookmarks_toggle(client) -> None:
    client.delete("/bookmarks")

    assert client.post("/bookmarks/React").json() == {"name": "React", "bookmarked": True}
    assert client.post("/bookmarks/Python").json()["bookmarked"] is True
    assert client.get("/bookmarks").json() == {"bookmarks": ["React", "Python"]}

    assert client.post("/bookmarks/React").json()["bookmarked"] is False
    assert client.get("/bookmarks").json() == {"bookmarks": ["Python"]}

    assert client.delete("/bookmarks").json() == {"removed": 1}
    assert client.get("/bookmarks").json() == {"bookmarks": []}


def test_submission_relayed(client) -> None:
    relay = StubRelay(RelayResult(ok=True))
    api.app.dependency_overrides[api.get_relay] = lambda: relay

    response = client.post("/submissions", json={"name": "Bun", "category": "Backend", "releaseYear": "2022"})

    assert response.status_code == 200
    assert response.json() == {"ok": True}
    assert relay.submitted[0].name == "Bun"
    assert relay.submitted[0].release_year == "2022"


def test_submission_failure_is_bad_gateway(client) -> None:
    api.app.dependency_overrides[api.get_relay] = lambda: StubRelay(RelayResult(ok=False, error="Bad credentials"))

    response = client.post("/submissions", json={"name": "Bun", "category": "Backend", "releaseYear": "2022"})

    assert response.status_code == 502
    assert response.json()["detail"] == "Bad credentials"


def test_scan_endpoint_honours_year_zero(client) -> None:
    response = client.post("/jd/scan", json={"text": JD, "current_year": 0})

    assert response.status_code == 200
    payload = response.json()
    assert payload["current_year"] == 0
    assert payload["requirements"][0]["max_possible_years"] == -2022


def test_empty_upstream_catalog_is_unavailable_without_refetch(monkeypatch) -> None:
    calls = []

    def fake_fetch(**kwargs):
        calls.append(kwargs)
        return []

    monkeypatch.setattr(api, "_catalog_cache", [])
    monkeypatch.setattr(api, "_catalog_failed_at", None)
    monkeypatch.setattr(api, "fetch_catalog", fake_fetch)
    monkeypatch.setattr(CatalogConfig, "PATH", "")
    monkeypatch.setattr(CatalogConfig, "RETRY_INTERVAL", 300.0)

    for _ in range(2):
        with pytest.raises(HTTPException) as exc:
            api.get_catalog()
        assert exc.value.status_code == 503

    assert len(calls) == 1
