"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

NotificationType = Literal["leave", "complaint", "notice", "attendance"]


class NotificationCreate(BaseModel):
    """Payload used to add a notification to the top of the list."""

    id: str | None = Field(
        default=None,
        min_length=1,
        max_length=64,
        description="Optional identifier; generated when omitted",
    )
    type: NotificationType
    title: str = Field(..., min_length=1, max_length=200)
    message: str = Field(..., min_length=1)
    link: str = Field(..., min_length=1, description="Dashboard route to open")
    entity_id: str | None = Field(default=None, description="Record shown by the route")
    created_at: datetime | None = None


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    id: str
    type: str
    title: str
    message: str
    read: bool
    link: str
    entity_id: str | None = None
    created_at: datetime
    target: str
    icon: str
    icon_color: str
    time_ago: str


class NotificationListResponse(BaseModel):
    """Notifications in display order plus the badge counter."""

    items: list[NotificationRead]
    unread_count: int


class NotificationStateResponse(BaseModel):
    """Outcome of a state change on the notification list."""

    changed: bool
    unread_count: int


class NotificationDeleteResponse(BaseModel):
    """Outcome of deleting a notification."""

    message: str | None = None
    deleted: bool
    unread_count: int


class NotificationVisitResponse(BaseModel):
    """Route the client should open after clicking a notification."""

    location: str
    unread_count: int


__all__ = [
    "NotificationCreate",
    "NotificationDeleteResponse",
    "NotificationListResponse",
    "NotificationRead",
    "NotificationStateResponse",
    "NotificationVisitResponse",
    "NotificationType",
]
