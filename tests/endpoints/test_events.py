from datetime import datetime, timedelta

from fastapi.testclient import TestClient


def _create_event(client, headers, **overrides):
    payload = {
        "title": "UK Universities Fair",
        "event_type": "EDUCATION_FAIR",
        "start_date": (datetime.utcnow() + timedelta(days=10)).isoformat(),
        "country": "United Kingdom",
        "is_published": True,
        **overrides,
    }
    response = client.post("/api/admin/events", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["data"]


def test_public_listing_shows_published_events_by_timeframe(client: TestClient, admin_headers):
    _create_event(client, admin_headers)
    _create_event(
        client, admin_headers,
        title="Germany Visa Webinar",
        event_type="WEBINAR",
        is_online=True,
        start_date=(datetime.utcnow() - timedelta(days=5)).isoformat(),
    )
    _create_event(client, admin_headers, title="Unannounced Workshop", is_published=False)

    upcoming = client.get("/api/events", params={"timeframe": "upcoming"}).json()["data"]
    assert [e["title"] for e in upcoming] == ["UK Universities Fair"]

    past = client.get("/api/events", params={"timeframe": "past"}).json()["data"]
    assert [e["title"] for e in past] == ["Germany Visa Webinar"]

    everything = client.get("/api/events").json()["data"]
    assert len(everything) == 2

    online = client.get("/api/events", params={"is_online": True}).json()["data"]
    assert [e["title"] for e in online] == ["Germany Visa Webinar"]


def test_unknown_timeframe_is_rejected(client: TestClient):
    response = client.get("/api/events", params={"timeframe": "someday"})
    assert response.status_code == 400
    assert response.json()["error"]["message"] == "timeframe must be one of: all, upcoming, past"


def test_event_by_slug(client: TestClient, admin_headers):
    event = _create_event(client, admin_headers)
    assert event["slug"] == "uk-universities-fair"

    response = client.get(f"/api/events/{event['slug']}")
    assert response.status_code == 200
    assert response.json()["data"]["id"] == event["id"]


def test_draft_event_is_hidden_by_slug(client: TestClient, admin_headers):
    event = _create_event(client, admin_headers, is_published=False)
    response = client.get(f"/api/events/{event['slug']}")
    assert response.status_code == 404
    assert response.json()["error"]["message"] == "Event not found"


def test_event_changes_invalidate_cached_listing(client: TestClient, admin_headers):
    event = _create_event(client, admin_headers)
    assert len(client.get("/api/events").json()["data"]) == 1

    response = client.put(f"/api/admin/events/{event['id']}", json={"is_published": False}, headers=admin_headers)
    assert response.status_code == 200, response.text
    assert client.get("/api/events").json()["data"] == []


def test_deleted_event_disappears(client: TestClient, admin_headers):
    event = _create_event(client, admin_headers)
    response = client.delete(f"/api/admin/events/{event['id']}", headers=admin_headers)
    assert response.status_code == 200

    assert client.get(f"/api/events/{event['slug']}").status_code == 404
    assert client.get("/api/admin/events", headers=admin_headers).json()["data"] == []
