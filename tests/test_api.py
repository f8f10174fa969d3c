import pytest
from fastapi.testclient import TestClient

from schema_detection.api.app import app


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def event_rows(events_df):
    return events_df.to_dicts()


def test_health(client):
    resp = client.get("/api/v1/health")

    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "ok"
    assert "time" in body and "version" in body


def test_list_detectors(client):
    resp = client.get("/api/v1/detectors")

    assert resp.status_code == 200
    items = resp.json()["items"]
    assert items[0]["name"] == "default"
    assert items[0]["isDefault"] is True
    assert items[0]["label"] == "Default Detector"


def test_detect_from_rows(client, event_rows):
    resp = client.post("/api/v1/schema/detect", json={"rows": event_rows})

    assert resp.status_code == 200
    body = resp.json()
    assert body["language"]["code"] == "eng"
    assert body["fieldMappings"]["title"]["path"] == "title"
    assert body["fieldMappings"]["timestamp"]["path"] == "date"
    assert body["fieldMappings"]["geo"]["type"] == "separate"
    assert body["fieldMappings"]["geo"]["latitude"]["path"] == "latitude"
    assert "id" in body["patterns"]["idFields"]
    assert "status" in body["patterns"]["enumFields"]


def test_detect_from_field_stats(client):
    payload = {
        "detector": "default",
        "fieldStats": {
            "title": {
                "occurrences": 100,
                "uniqueValues": 90,
                "typeDistribution": {"string": 100},
            },
            "id": {
                "occurrences": 100,
                "uniqueValues": 100,
                "typeDistribution": {"number": 100},
                "numericStats": {"min": 1, "max": 100, "avg": 50.5, "isInteger": True},
            },
            "coordinates": {
                "occurrences": 100,
                "uniqueValues": 3,
                "typeDistribution": {"string": 100},
                "uniqueSamples": ["52.52,13.405", "48.8566,2.3522", "40.7128,-74.006"],
            },
        },
    }

    resp = client.post("/api/v1/schema/detect", json=payload)

    assert resp.status_code == 200
    body = resp.json()
    assert body["fieldMappings"]["title"]["path"] == "title"
    assert body["fieldMappings"]["geo"] == {
        "type": "combined",
        "confidence": 1.0,
        "combined": {"path": "coordinates", "format": "lat,lng"},
    }
    assert body["patterns"]["idFields"] == ["id"]
    assert body["patterns"]["enumFields"] == ["coordinates"]


def test_unknown_detector_falls_back(client, event_rows):
    resp = client.post("/api/v1/schema/detect", json={"detector": "nope", "rows": event_rows})

    assert resp.status_code == 200
    assert resp.json()["fieldMappings"]["title"]["path"] == "title"


def test_config_options_are_applied(client, event_rows):
    payload = {"rows": event_rows, "config": {"options": {"enum_threshold": 2}}}

    resp = client.post("/api/v1/schema/detect", json=payload)

    assert resp.status_code == 200
    assert "status" not in resp.json()["patterns"]["enumFields"]


def test_invalid_enum_options_fall_back_to_settings(client, event_rows):
    payload = {"rows": event_rows, "config": {"options": {"enum_mode": "ratio", "enum_threshold": "lots"}}}

    resp = client.post("/api/v1/schema/detect", json=payload)

    assert resp.status_code == 200
    assert "status" in resp.json()["patterns"]["enumFields"]


def test_invalid_body_is_rejected(client):
    resp = client.post("/api/v1/schema/detect", json={"rows": "not a list"})

    assert resp.status_code == 422


def test_empty_request_returns_complete_result(client):
    resp = client.post("/api/v1/schema/detect", json={})

    assert resp.status_code == 200
    body = resp.json()
    assert body["language"] == {"code": "eng", "name": "English", "confidence": 0.0, "isReliable": False}
    assert body["patterns"] == {"idFields": [], "enumFields": []}


def test_detect_flattens_nested_rows(client):
    rows = [
        {"title": "Jazz Night", "venue": {"name": "Hall", "city": "Berlin", "geo": {"lat": 52.52, "lng": 13.405}}},
        {"title": "Open Air", "venue": {"name": "Park", "city": "Paris", "geo": {"lat": 48.8566, "lng": 2.3522}}},
    ]

    resp = client.post("/api/v1/schema/detect", json={"rows": rows})

    assert resp.status_code == 200
    geo = resp.json()["fieldMappings"]["geo"]
    assert geo["latitude"]["path"] == "venue.geo.lat"
    assert geo["locationField"]["path"] == "venue.city"
