"""Domain entity representing a student dashboard notification."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Final

NOTIFICATION_TYPE_LEAVE: Final[str] = "leave"
NOTIFICATION_TYPE_COMPLAINT: Final[str] = "complaint"
NOTIFICATION_TYPE_NOTICE: Final[str] = "notice"
NOTIFICATION_TYPE_ATTENDANCE: Final[str] = "attendance"

NOTIFICATION_TYPES: Final[tuple[str, ...]] = (
    NOTIFICATION_TYPE_LEAVE,
    NOTIFICATION_TYPE_COMPLAINT,
    NOTIFICATION_TYPE_NOTICE,
    NOTIFICATION_TYPE_ATTENDANCE,
)


@dataclass(frozen=True)
class Notification:
    """Alert shown in the dashboard bell with a click-through target.

    Instances are immutable; the store swaps in a copy with ``read=True`` when a
    notification is read.
    """

    id: str
    type: str
    title: str
    message: str
    link: str
    created_at: datetime
    entity_id: str | None = None
    read: bool = False

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Notification id must not be empty")
        if self.type not in NOTIFICATION_TYPES:
            raise ValueError(f"Unknown notification type {self.type!r}")
        if not isinstance(self.created_at, datetime):
            raise ValueError("Notification created_at must be a datetime")

    def target(self) -> str:
        """Return the route the dashboard should open for this notification."""

        if self.entity_id is None:
            return self.link
        return f"{self.link}?id={self.entity_id}"


__all__ = [
    "NOTIFICATION_TYPES",
    "NOTIFICATION_TYPE_ATTENDANCE",
    "NOTIFICATION_TYPE_COMPLAINT",
    "NOTIFICATION_TYPE_LEAVE",
    "NOTIFICATION_TYPE_NOTICE",
    "Notification",
]
