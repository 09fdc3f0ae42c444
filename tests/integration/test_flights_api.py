from __future__ import annotations

import logging

import httpx
from fastapi.testclient import TestClient

from api.main import create_app
from tools.aviationstack_client import AviationStackClient

RECORD = {
    "flight_status": "scheduled",
    "departure": {"airport": "Dallas/Fort Worth International", "iata": "DFW"},
    "arrival": {"airport": "Los Angeles International", "iata": "LAX"},
    "flight": {"number": "1234", "iata": "AA1234"},
}


def _client(status_code=200, json_body=None, content=None, key="test-key"):
    calls: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        if content is not None:
            return httpx.Response(status_code, content=content)
        return httpx.Response(status_code, json=json_body)

    flight_client = AviationStackClient(base_url="https://aviation.test/v1", transport=httpx.MockTransport(handler))
    app = create_app(credential_resolver=lambda: key, flight_client=flight_client)
    return TestClient(app), calls


def test_found_flight_returns_provider_payload_verbatim():
    body = {"pagination": {"count": 1}, "data": [RECORD]}
    client, calls = _client(json_body=body)
    resp = client.post("/api/v1/flights/track", json={"flight_number": "AA1234"})
    assert resp.status_code == 200, resp.text
    assert resp.headers["content-type"].startswith("application/json")
    assert resp.json() == body
    assert calls[0].url.params["flight_iata"] == "AA1234"


def test_empty_result_is_404():
    client, _ = _client(json_body={"data": []})
    resp = client.post("/api/v1/flights/track", json={"flight_number": "ZZ0000"})
    assert resp.status_code == 404
    assert resp.json() == {"error": "No flight data found for flight ZZ0000"}


def test_missing_flight_number_is_400_with_details():
    client, calls = _client(json_body={"data": [RECORD]})
    resp = client.post("/api/v1/flights/track", json={})
    assert resp.status_code == 400
    data = resp.json()
    assert data["error"] == "Invalid request parameters"
    assert len(data["details"]) >= 1
    assert calls == []


def test_non_string_flight_number_is_400():
    client, _ = _client(json_body={"data": [RECORD]})
    resp = client.post("/api/v1/flights/track", json={"flight_number": 1234})
    assert resp.status_code == 400


def test_unset_credential_is_500_without_outbound_call():
    client, calls = _client(json_body={"data": [RECORD]}, key=None)
    resp = client.post("/api/v1/flights/track", json={"flight_number": "AA1234"})
    assert resp.status_code == 500
    assert resp.json() == {"error": "Aviation Stack API key not configured"}
    assert calls == []


def test_provider_failure_is_generic_500():
    client, _ = _client(status_code=401, json_body={"data": [RECORD]})
    resp = client.post("/api/v1/flights/track", json={"flight_number": "AA1234"})
    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to track flight. Please try again later."}


def test_malformed_provider_json_is_generic_500():
    client, _ = _client(content=b"{not json")
    resp = client.post("/api/v1/flights/track", json={"flight_number": "AA1234"})
    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to track flight. Please try again later."}


def test_malformed_request_body_is_generic_500():
    client, calls = _client(json_body={"data": [RECORD]})
    resp = client.post("/api/v1/flights/track", content=b"flight_number=AA1234", headers={"Content-Type": "application/json"})
    assert resp.status_code == 500
    assert "error" in resp.json()
    assert calls == []


def test_health_reports_credential_presence_only():
    client, _ = _client(key="super-secret")
    resp = client.get("/health")
    assert resp.status_code == 200
    data = resp.json()
    assert data["ok"] is True
    assert data["credential_configured"] is True
    assert "super-secret" not in resp.text
    assert "X-Process-Time-Ms" in resp.headers


def test_access_key_never_reaches_the_logs(caplog):
    caplog.set_level(logging.INFO)
    for status_code, body in [(200, {"data": [RECORD]}), (503, {"error": "down"})]:
        client, calls = _client(status_code=status_code, json_body=body, key="TOP-SECRET-KEY")
        client.post("/api/v1/flights/track", json={"flight_number": "AA1234"})
        assert calls[0].url.params["access_key"] == "TOP-SECRET-KEY"
    leaked = [f"{r.name}: {r.getMessage()}" for r in caplog.records if "TOP-SECRET-KEY" in r.getMessage()]
    assert leaked == []


def test_request_log_line_carries_its_context(caplog):
    caplog.set_level(logging.INFO)
    client, _ = _client(json_body={"data": []})
    client.post("/api/v1/flights/track", json={"flight_number": "ZZ0000"})
    messages = [r.getMessage() for r in caplog.records]
    assert any(
        m.startswith("request_completed method=POST path=/api/v1/flights/track status_code=404") for m in messages
    )
    assert "flight_tracking_unsuccessful status_code=404 outcome=TrackingNotFound" in messages


def test_create_app_leaves_logging_configuration_alone():
    root = logging.getLogger()
    handlers_before = list(root.handlers)
    level_before = root.level
    _client(json_body={"data": []})
    assert root.handlers == handlers_before
    assert root.level == level_before
