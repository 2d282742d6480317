"""Conversion between notifications and their persisted JSON representation.

The stored value is a JSON array of flat objects using the dashboard's field
names (``entityId``, ``createdAt``) so the same entry can be read by the web
client. Only strings and booleans are stored.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from app.domain.entities import Notification
from app.utils import ensure_app_timezone


class NotificationDecodeError(ValueError):
    """Raised when a stored notification collection cannot be decoded."""


class StoredNotification(BaseModel):
    """Shape of a single persisted notification record."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = Field(min_length=1)
    type: Literal["leave", "complaint", "notice", "attendance"]
    title: str
    message: str
    read: bool = False
    link: str
    entity_id: str | None = Field(default=None, alias="entityId")
    created_at: datetime = Field(alias="createdAt")


_collection_adapter = TypeAdapter(list[StoredNotification])


def serialize_notification(notification: Notification) -> dict[str, Any]:
    """Return the persisted representation for ``notification``."""

    return {
        "id": notification.id,
        "type": notification.type,
        "title": notification.title,
        "message": notification.message,
        "read": notification.read,
        "link": notification.link,
        "entityId": notification.entity_id,
        "createdAt": notification.created_at.isoformat(),
    }


def dump_notifications(notifications: Iterable[Notification]) -> str:
    """Serialize ``notifications`` into the stored JSON array."""

    return json.dumps([serialize_notification(n) for n in notifications])


def load_notifications(raw: str) -> list[Notification]:
    """Decode a stored JSON array back into notifications.

    Raises :class:`NotificationDecodeError` for anything that is not a list of
    well-formed records with unique identifiers.
    """

    try:
        records = _collection_adapter.validate_json(raw)
    except ValidationError as exc:
        raise NotificationDecodeError(
            f"Stored notifications are malformed: {exc.error_count()} error(s)"
        ) from exc

    seen: set[str] = set()
    notifications: list[Notification] = []
    for record in records:
        if record.id in seen:
            raise NotificationDecodeError(
                f"Stored notifications contain duplicate id {record.id!r}"
            )
        seen.add(record.id)
        notifications.append(_to_entity(record))
    return notifications


def _to_entity(record: StoredNotification) -> Notification:
    return Notification(
        id=record.id,
        type=record.type,
        title=record.title,
        message=record.message,
        read=record.read,
        link=record.link,
        entity_id=record.entity_id,
        created_at=ensure_app_timezone(record.created_at),
    )


__all__ = [
    "NotificationDecodeError",
    "StoredNotification",
    "dump_notifications",
    "load_notifications",
    "serialize_notification",
]
