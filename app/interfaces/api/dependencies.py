"""FastAPI dependency utilities."""

from fastapi import Depends
from sqlalchemy.orm import Session

from app.application.use_cases.notifications import (
    NotificationStore,
    open_notification_store,
)
from app.config import Settings, get_settings
from app.infrastructure.database import get_db


def get_app_settings() -> Settings:
    """Expose the cached settings so tests can override them."""

    return get_settings()


def get_notification_store(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> NotificationStore:
    """Return the notification store bound to the request session."""

    return open_notification_store(db, settings=settings)
