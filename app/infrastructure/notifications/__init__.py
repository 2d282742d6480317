"""Notification persistence helpers for the infrastructure layer."""

from .serialization import (
    NotificationDecodeError,
    StoredNotification,
    dump_notifications,
    load_notifications,
    serialize_notification,
)

__all__ = [
    "NotificationDecodeError",
    "StoredNotification",
    "dump_notifications",
    "load_notifications",
    "serialize_notification",
]
