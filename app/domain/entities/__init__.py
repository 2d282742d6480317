"""Domain entities exposed by the application."""

from .notification import (
    NOTIFICATION_TYPE_ATTENDANCE,
    NOTIFICATION_TYPE_COMPLAINT,
    NOTIFICATION_TYPE_LEAVE,
    NOTIFICATION_TYPE_NOTICE,
    NOTIFICATION_TYPES,
    Notification,
)

__all__ = [
    "NOTIFICATION_TYPES",
    "NOTIFICATION_TYPE_ATTENDANCE",
    "NOTIFICATION_TYPE_COMPLAINT",
    "NOTIFICATION_TYPE_LEAVE",
    "NOTIFICATION_TYPE_NOTICE",
    "Notification",
]
