"""Integration tests for the notification endpoints."""

from __future__ import annotations

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient

from app.config import Settings, get_settings
from app.infrastructure.database import Base, SessionLocal, engine, initialize_database
from app.infrastructure.repositories import StorageEntryRepository
from app.interfaces.api.dependencies import get_app_settings
from main import create_app


@pytest.fixture(autouse=True)
def reset_database() -> None:
    """Ensure the test database starts from a clean state for each test."""

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def app():
    return create_app()


@pytest.fixture()
def client(app):
    with TestClient(app) as test_client:
        yield test_client


def _stored_value() -> str | None:
    with SessionLocal() as session:
        return StorageEntryRepository(session).get_item(
            get_settings().notification_storage_key
        )


def _set_stored_value(value: str) -> None:
    with SessionLocal() as session:
        StorageEntryRepository(session).set_item(
            get_settings().notification_storage_key, value
        )


def test_first_visit_returns_seed_notifications(client: TestClient) -> None:
    response = client.get("/notifications/")

    assert response.status_code == 200
    body = response.json()
    assert body["unread_count"] == 3
    assert [item["id"] for item in body["items"]] == ["1", "2", "3", "4"]
    first = body["items"][0]
    assert first["icon"] == "calendar"
    assert first["icon_color"] == "purple"
    assert first["target"] == "/dashboard/student/leave?id=682792223b1ede91426bc71b"
    assert first["time_ago"].endswith("minutes ago")
    assert _stored_value() is not None


def test_read_state_survives_between_requests(client: TestClient) -> None:
    first = client.post("/notifications/2/read")
    assert first.json() == {"changed": True, "unread_count": 2}

    again = client.post("/notifications/2/read")
    assert again.json() == {"changed": False, "unread_count": 2}

    unknown = client.post("/notifications/missing/read")
    assert unknown.status_code == 200
    assert unknown.json() == {"changed": False, "unread_count": 2}

    listing = client.get("/notifications/").json()
    assert {item["id"]: item["read"] for item in listing["items"]} == {
        "1": False,
        "2": True,
        "3": False,
        "4": True,
    }


def test_seed_scenario_through_api(client: TestClient) -> None:
    assert client.post("/notifications/1/read").json()["unread_count"] == 2

    read_all = client.post("/notifications/read-all")
    assert read_all.json() == {"changed": True, "unread_count": 0}
    assert client.post("/notifications/read-all").json() == {
        "changed": False,
        "unread_count": 0,
    }

    deleted = client.delete("/notifications/3")
    assert deleted.status_code == 200
    assert deleted.json() == {
        "message": "Notification deleted",
        "deleted": True,
        "unread_count": 0,
    }

    listing = client.get("/notifications/").json()
    assert len(listing["items"]) == 3
    assert all(item["read"] for item in listing["items"])


def test_visit_returns_target_and_marks_read(client: TestClient) -> None:
    response = client.post("/notifications/2/visit")

    assert response.status_code == 200
    assert response.json() == {
        "location": "/dashboard/student/complaints?id=582792223b1ede91426bc72c",
        "unread_count": 2,
    }


def test_visit_unknown_notification_returns_404(client: TestClient) -> None:
    response = client.post("/notifications/missing/visit")

    assert response.status_code == 404
    assert response.json()["detail"] == "Notification not found"


def test_create_notification_is_prepended_unread(client: TestClient) -> None:
    payload = {
        "type": "notice",
        "title": "Mess menu updated",
        "message": "The mess menu for next week is available",
        "link": "/dashboard/student/mess",
    }

    response = client.post("/notifications/", json=payload)

    assert response.status_code == 201
    created = response.json()
    assert created["read"] is False
    assert created["entity_id"] is None
    assert created["target"] == "/dashboard/student/mess"
    assert created["id"]

    listing = client.get("/notifications/").json()
    assert listing["items"][0]["id"] == created["id"]
    assert listing["unread_count"] == 4


def test_create_notification_with_existing_id_conflicts(client: TestClient) -> None:
    payload = {
        "id": "1",
        "type": "leave",
        "title": "Duplicate",
        "message": "Duplicate",
        "link": "/dashboard/student/leave",
    }

    response = client.post("/notifications/", json=payload)

    assert response.status_code == 409


def test_create_notification_rejects_unknown_type(client: TestClient) -> None:
    payload = {
        "type": "fees",
        "title": "Fee due",
        "message": "Fee due",
        "link": "/dashboard/student/fees",
    }

    assert client.post("/notifications/", json=payload).status_code == 422


def test_deleting_every_notification_clears_storage(client: TestClient) -> None:
    for notification_id in ("1", "2", "3", "4"):
        assert client.delete(f"/notifications/{notification_id}").json()["deleted"] is True

    assert _stored_value() is None


def test_delete_unknown_notification_is_noop(client: TestClient) -> None:
    response = client.delete("/notifications/missing")

    assert response.status_code == 200
    assert response.json()["deleted"] is False
    assert response.json()["message"] is None
    assert response.json()["unread_count"] == 3


def test_corrupt_storage_is_discarded(client: TestClient) -> None:
    _set_stored_value("{corrupt")

    response = client.get("/notifications/")

    assert response.status_code == 200
    assert response.json() == {"items": [], "unread_count": 0}
    assert _stored_value() is None


def test_seeding_can_be_disabled(app) -> None:
    app.dependency_overrides[get_app_settings] = lambda: Settings(
        notification_seed_enabled=False
    )
    with TestClient(app) as client:
        response = client.get("/notifications/")

    assert response.json() == {"items": [], "unread_count": 0}
    assert _stored_value() is None


def test_health(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "database": True}
