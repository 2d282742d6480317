"""Tests for the stored notification JSON format."""

from __future__ import annotations

import json
from datetime import datetime, timezone

import pytest

from app.domain.entities import Notification
from app.infrastructure.notifications import (
    NotificationDecodeError,
    dump_notifications,
    load_notifications,
    serialize_notification,
)


def _notification(**overrides) -> Notification:
    values = {
        "id": "1",
        "type": "leave",
        "title": "Leave Request Approved",
        "message": "Your leave request for home visit has been approved",
        "link": "/dashboard/student/leave",
        "entity_id": "682792223b1ede91426bc71b",
        "created_at": datetime(2024, 5, 10, 11, 30, tzinfo=timezone.utc),
        "read": False,
    }
    values.update(overrides)
    return Notification(**values)


def test_serialize_uses_dashboard_field_names():
    payload = serialize_notification(_notification())

    assert payload == {
        "id": "1",
        "type": "leave",
        "title": "Leave Request Approved",
        "message": "Your leave request for home visit has been approved",
        "read": False,
        "link": "/dashboard/student/leave",
        "entityId": "682792223b1ede91426bc71b",
        "createdAt": "2024-05-10T11:30:00+00:00",
    }


def test_dump_and_load_preserve_order_and_state():
    notifications = [_notification(id="2", read=True), _notification(id="1")]

    loaded = load_notifications(dump_notifications(notifications))

    assert loaded == notifications


def test_load_accepts_browser_timestamps_and_missing_entity_id():
    raw = json.dumps(
        [
            {
                "id": "9",
                "type": "notice",
                "title": "New Notice Posted",
                "message": "Hostel maintenance",
                "read": False,
                "link": "/dashboard/student/notices",
                "createdAt": "2024-05-10T07:00:00.000Z",
            }
        ]
    )

    (notification,) = load_notifications(raw)

    assert notification.entity_id is None
    assert notification.created_at == datetime(2024, 5, 10, 7, 0, tzinfo=timezone.utc)
    assert notification.target() == "/dashboard/student/notices"


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "{not json",
        '{"id": "1"}',
        json.dumps([{"id": "1", "type": "leave"}]),
        json.dumps([dict(serialize_notification(_notification()), type="fees")]),
        json.dumps([dict(serialize_notification(_notification()), read="maybe")]),
    ],
)
def test_load_rejects_malformed_values(raw):
    with pytest.raises(NotificationDecodeError):
        load_notifications(raw)


def test_load_rejects_duplicate_ids():
    raw = dump_notifications([_notification(), _notification(title="Copy")])

    with pytest.raises(NotificationDecodeError, match="duplicate"):
        load_notifications(raw)


def test_load_empty_array_is_empty_collection():
    assert load_notifications("[]") == []
