"""Endpoints backing the student dashboard notification bell."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from app.application.use_cases.notifications import (
    DuplicateNotificationError,
    NotificationNotFoundError,
    NotificationStore,
    RecordingNavigator,
    create_notification as create_notification_uc,
    delete_notification as delete_notification_uc,
    list_notifications as list_notifications_uc,
    mark_all_notifications_read as mark_all_notifications_read_uc,
    mark_notification_read as mark_notification_read_uc,
    visit_notification as visit_notification_uc,
)
from app.domain.entities import Notification
from app.interfaces.api.dependencies import get_notification_store
from app.interfaces.api.routes_helpers import format_notification_time, notification_icon
from app.interfaces.api.schemas import (
    NotificationCreate,
    NotificationDeleteResponse,
    NotificationListResponse,
    NotificationRead,
    NotificationStateResponse,
    NotificationVisitResponse,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])

logger = logging.getLogger(__name__)


def _notification_to_schema(notification: Notification) -> NotificationRead:
    icon = notification_icon(notification.type)
    return NotificationRead(
        id=notification.id,
        type=notification.type,
        title=notification.title,
        message=notification.message,
        read=notification.read,
        link=notification.link,
        entity_id=notification.entity_id,
        created_at=notification.created_at,
        target=notification.target(),
        icon=icon.name,
        icon_color=icon.color,
        time_ago=format_notification_time(notification.created_at),
    )


@router.get("/", response_model=NotificationListResponse)
def list_notifications(
    store: NotificationStore = Depends(get_notification_store),
) -> NotificationListResponse:
    """Return the notifications in display order with the unread badge count."""

    notifications = list_notifications_uc(store)
    return NotificationListResponse(
        items=[_notification_to_schema(notification) for notification in notifications],
        unread_count=store.unread_count,
    )


@router.post("/", response_model=NotificationRead, status_code=status.HTTP_201_CREATED)
def create_notification(
    notification_in: NotificationCreate,
    store: NotificationStore = Depends(get_notification_store),
) -> NotificationRead:
    try:
        notification = create_notification_uc(
            store,
            type=notification_in.type,
            title=notification_in.title,
            message=notification_in.message,
            link=notification_in.link,
            entity_id=notification_in.entity_id,
            notification_id=notification_in.id,
            created_at=notification_in.created_at,
        )
    except DuplicateNotificationError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    return _notification_to_schema(notification)


@router.post("/read-all", response_model=NotificationStateResponse)
def mark_all_notifications_read(
    store: NotificationStore = Depends(get_notification_store),
) -> NotificationStateResponse:
    """Mark everything as read, as happens when the dropdown is opened."""

    had_unread = store.unread_count > 0
    mark_all_notifications_read_uc(store)
    return NotificationStateResponse(changed=had_unread, unread_count=store.unread_count)


@router.post("/{notification_id}/read", response_model=NotificationStateResponse)
def mark_notification_read(
    notification_id: str,
    store: NotificationStore = Depends(get_notification_store),
) -> NotificationStateResponse:
    changed = mark_notification_read_uc(store, notification_id)
    return NotificationStateResponse(changed=changed, unread_count=store.unread_count)


@router.post("/{notification_id}/visit", response_model=NotificationVisitResponse)
def visit_notification(
    notification_id: str,
    store: NotificationStore = Depends(get_notification_store),
) -> NotificationVisitResponse:
    """Mark the notification read and return the route the client should open."""

    navigator = RecordingNavigator()
    try:
        location = visit_notification_uc(store, notification_id, navigator)
    except NotificationNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return NotificationVisitResponse(location=location, unread_count=store.unread_count)


@router.delete("/{notification_id}", response_model=NotificationDeleteResponse)
def delete_notification(
    notification_id: str,
    store: NotificationStore = Depends(get_notification_store),
) -> NotificationDeleteResponse:
    removed = delete_notification_uc(store, notification_id)
    if removed is None:
        logger.debug("Ignoring delete for unknown notification %s", notification_id)
        return NotificationDeleteResponse(deleted=False, unread_count=store.unread_count)
    return NotificationDeleteResponse(
        message="Notification deleted",
        deleted=True,
        unread_count=store.unread_count,
    )
