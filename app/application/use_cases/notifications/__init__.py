"""Use cases for the student notification store."""

from .navigation import Navigator, RecordingNavigator
from .operations import (
    NotificationNotFoundError,
    create_notification,
    delete_notification,
    list_notifications,
    mark_all_notifications_read,
    mark_notification_read,
    open_notification_store,
    visit_notification,
)
from .seed import build_seed_notifications
from .store import DEFAULT_STORAGE_KEY, DuplicateNotificationError, NotificationStore

__all__ = [
    "DEFAULT_STORAGE_KEY",
    "DuplicateNotificationError",
    "Navigator",
    "NotificationNotFoundError",
    "NotificationStore",
    "RecordingNavigator",
    "build_seed_notifications",
    "create_notification",
    "delete_notification",
    "list_notifications",
    "mark_all_notifications_read",
    "mark_notification_read",
    "open_notification_store",
    "visit_notification",
]
