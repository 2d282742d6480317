"""Use cases driving the notification store from a database session."""

from __future__ import annotations

from datetime import datetime
from uuid import uuid4

from sqlalchemy.orm import Session

from app.config import Settings, get_settings
from app.domain.entities import Notification
from app.infrastructure.repositories import StorageEntryRepository
from app.utils import ensure_app_timezone, now_in_app_timezone

from .navigation import Navigator
from .seed import build_seed_notifications
from .store import NotificationStore


class NotificationNotFoundError(ValueError):
    """Raised when an operation needs a notification that does not exist."""


def open_notification_store(
    session: Session, *, settings: Settings | None = None
) -> NotificationStore:
    """Return an initialized store persisted through ``session``."""

    settings = settings or get_settings()
    store = NotificationStore(
        StorageEntryRepository(session),
        storage_key=settings.notification_storage_key,
        seed_factory=build_seed_notifications
        if settings.notification_seed_enabled
        else None,
    )
    store.initialize()
    return store


def list_notifications(store: NotificationStore) -> tuple[Notification, ...]:
    """Return the notifications in display order."""

    return store.notifications


def create_notification(
    store: NotificationStore,
    *,
    type: str,
    title: str,
    message: str,
    link: str,
    entity_id: str | None = None,
    notification_id: str | None = None,
    created_at: datetime | None = None,
) -> Notification:
    """Build a new unread notification and add it to the top of ``store``."""

    notification = Notification(
        id=notification_id or uuid4().hex,
        type=type,
        title=title,
        message=message,
        link=link,
        entity_id=entity_id,
        created_at=ensure_app_timezone(created_at) or now_in_app_timezone(),
        read=False,
    )
    return store.insert(notification)


def mark_notification_read(store: NotificationStore, notification_id: str) -> bool:
    """Mark a single notification as read; unknown ids are ignored."""

    return store.mark_read(notification_id)


def mark_all_notifications_read(store: NotificationStore) -> None:
    """Mark every notification as read, as when the bell dropdown opens."""

    store.mark_all_read()


def delete_notification(
    store: NotificationStore, notification_id: str
) -> Notification | None:
    """Remove a notification; unknown ids are ignored."""

    return store.delete(notification_id)


def visit_notification(
    store: NotificationStore, notification_id: str, navigator: Navigator
) -> str:
    """Open a notification: mark it read and route to its target."""

    notification = store.get(notification_id)
    if notification is None:
        raise NotificationNotFoundError("Notification not found")
    return store.visit_and_mark_read(notification, navigator)


__all__ = [
    "NotificationNotFoundError",
    "create_notification",
    "delete_notification",
    "list_notifications",
    "mark_all_notifications_read",
    "mark_notification_read",
    "open_notification_store",
    "visit_notification",
]
