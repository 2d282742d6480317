"""Aggregate application use cases."""

from .notifications import (
    NotificationStore,
    open_notification_store,
    visit_notification,
)

__all__ = [
    "NotificationStore",
    "open_notification_store",
    "visit_notification",
]
