"""Fallback notifications shown until a real notification feed exists."""

from __future__ import annotations

from datetime import datetime, timedelta

from app.domain.entities import (
    NOTIFICATION_TYPE_ATTENDANCE,
    NOTIFICATION_TYPE_COMPLAINT,
    NOTIFICATION_TYPE_LEAVE,
    NOTIFICATION_TYPE_NOTICE,
    Notification,
)
from app.utils import ensure_app_timezone, now_in_app_timezone


def build_seed_notifications(now: datetime | None = None) -> list[Notification]:
    """Return the sample notifications, newest first, relative to ``now``."""

    reference = ensure_app_timezone(now) if now is not None else now_in_app_timezone()
    return [
        Notification(
            id="1",
            type=NOTIFICATION_TYPE_LEAVE,
            title="Leave Request Approved",
            message="Your leave request for home visit has been approved",
            read=False,
            link="/dashboard/student/leave",
            entity_id="682792223b1ede91426bc71b",
            created_at=reference - timedelta(minutes=30),
        ),
        Notification(
            id="2",
            type=NOTIFICATION_TYPE_COMPLAINT,
            title="Complaint Resolved",
            message="Your maintenance complaint about room lighting has been resolved",
            read=False,
            link="/dashboard/student/complaints",
            entity_id="582792223b1ede91426bc72c",
            created_at=reference - timedelta(hours=2),
        ),
        Notification(
            id="3",
            type=NOTIFICATION_TYPE_NOTICE,
            title="New Notice Posted",
            message="Important notice regarding upcoming hostel maintenance",
            read=False,
            link="/dashboard/student/notices",
            entity_id="782792223b1ede91426bc73d",
            created_at=reference - timedelta(hours=5),
        ),
        Notification(
            id="4",
            type=NOTIFICATION_TYPE_ATTENDANCE,
            title="Attendance Marked",
            message="Your attendance has been marked for today",
            read=True,
            link="/dashboard/student/attendance",
            entity_id="882792223b1ede91426bc74e",
            created_at=reference - timedelta(hours=24),
        ),
    ]


__all__ = ["build_seed_notifications"]
