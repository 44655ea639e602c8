import pytest
from fastapi.testclient import TestClient

from conftest import FakeProvider, make_provider_offer

from stopfinder.main import app
from stopfinder.services.amadeus_client import ProviderError
from stopfinder.services.multi_leg_synthesizer import multi_leg_synthesizer
from stopfinder.services.search_orchestrator import search_orchestrator


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def provider(monkeypatch):
    fake = FakeProvider(error=ProviderError("offline"))
    monkeypatch.setattr(search_orchestrator, "provider", fake)
    return fake


def _body(**overrides):
    body = {"origins": ["PL"], "destinations": ["TH"], "dateRange": {"from": "2025-03-01"}}
    body.update(overrides)
    return body


def test_search_with_stopovers(client, provider):
    resp = client.post("/api/flights/search", json=_body(autoRecommendStopovers=True, searchId="abc123"))

    assert resp.status_code == 200
    data = resp.json()
    assert data["success"] is True
    assert data["meta"]["dataSource"] == "mock"
    assert data["meta"]["searchId"] == "abc123"
    assert data["meta"]["count"] == len(data["flights"])
    assert any(f["multiLeg"] and f["stopoverInfo"]["hub"]["iata"] in ("DXB", "DOH", "IST") for f in data["flights"])
    assert data["dictionaries"]["carriers"]["EK"] == "Emirates"


def test_search_with_provider_offers(client, monkeypatch):
    fake = FakeProvider(offers=[make_provider_offer(f"P{i}", 1500.0 + i) for i in range(12)])
    monkeypatch.setattr(search_orchestrator, "provider", fake)

    resp = client.post("/api/flights/search", json=_body(origins=["WAW"], destinations=["BKK"], maxResults=5))

    data = resp.json()
    assert [f["id"] for f in data["flights"]] == ["P0", "P1", "P2", "P3", "P4"]
    assert data["meta"]["dataSource"] == "provider"


def test_missing_origins_is_rejected(client, provider):
    resp = client.post("/api/flights/search", json={"destinations": ["TH"], "dateRange": {"from": "2025-03-01"}})

    assert resp.status_code == 400
    data = resp.json()
    assert data["success"] is False
    assert data["error"] == "Validation failed"
    assert [d["field"] for d in data["details"]] == ["origins"]
    assert provider.calls == []


def test_invalid_date_is_rejected(client, provider):
    resp = client.post("/api/flights/search", json=_body(dateRange={"from": "03/01/2025"}))

    assert resp.status_code == 400
    assert {"field": "dateRange.from", "message": "Invalid date format"} in resp.json()["details"]


def test_return_before_departure_is_rejected(client, provider):
    resp = client.post("/api/flights/search", json=_body(dateRange={"from": "2025-03-10", "to": "2025-03-01"}))

    assert resp.status_code == 400
    assert resp.json()["details"][0]["field"] == "dateRange"


def test_bad_codes_and_counts_are_reported_per_field(client, provider):
    resp = client.post("/api/flights/search", json=_body(origins=["P1"], maxResults=0, adults=0))

    assert resp.status_code == 400
    fields = {d["field"] for d in resp.json()["details"]}
    assert {"origins", "maxResults", "adults"} <= fields


def test_unexpected_failure_returns_server_error(client, provider, monkeypatch):
    def explode(*args, **kwargs):
        raise RuntimeError("ranking broke")

    monkeypatch.setattr(multi_leg_synthesizer, "synthesize", explode)
    resp = client.post("/api/flights/search", json=_body(autoRecommendStopovers=True))

    assert resp.status_code == 500
    data = resp.json()
    assert data["success"] is False
    assert data["error"] == "Search failed"
    assert data["message"] == "ranking broke"
    assert "timestamp" in data


def test_expand_endpoint(client):
    resp = client.get("/api/airports/expand/pl")
    assert resp.json()["airports"][:2] == ["WAW", "KRK"]

    wide = client.get("/api/airports/expand/PL", params={"includeNeighbors": "true"}).json()
    assert wide["includeNeighbors"] is True
    assert len(wide["airports"]) == 10


def test_health(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"
