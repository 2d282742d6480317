"""Helper utilities shared across API route handlers."""

from dataclasses import dataclass
from datetime import datetime

from app.utils import ensure_app_timezone, now_in_app_timezone


@dataclass(frozen=True)
class NotificationIcon:
    """Describe the icon the dashboard renders next to a notification."""

    name: str
    color: str


_NOTIFICATION_ICONS: dict[str, NotificationIcon] = {
    "leave": NotificationIcon(name="calendar", color="purple"),
    "complaint": NotificationIcon(name="message-square", color="indigo"),
    "notice": NotificationIcon(name="file-text", color="blue"),
    "attendance": NotificationIcon(name="check-circle", color="green"),
}
_FALLBACK_ICON = NotificationIcon(name="alert-circle", color="amber")


def notification_icon(notification_type: str) -> NotificationIcon:
    """Return the icon for ``notification_type``."""

    return _NOTIFICATION_ICONS.get(notification_type, _FALLBACK_ICON)


def _plural(amount: int, unit: str) -> str:
    return f"{amount} {unit}{'' if amount == 1 else 's'} ago"


def format_notification_time(
    created_at: datetime, now: datetime | None = None
) -> str:
    """Return a short relative label such as ``"2 hours ago"``.

    Anything a week old or more is shown as a calendar date in the application
    timezone. Timestamps slightly in the future count as ``0 minutes ago``.
    """

    reference = ensure_app_timezone(now) if now is not None else now_in_app_timezone()
    created = ensure_app_timezone(created_at)
    elapsed_seconds = max(0, int((reference - created).total_seconds()))

    minutes = elapsed_seconds // 60
    hours = elapsed_seconds // 3600
    days = elapsed_seconds // 86400

    if minutes < 60:
        return _plural(minutes, "minute")
    if hours < 24:
        return _plural(hours, "hour")
    if days < 7:
        return _plural(days, "day")
    return created.date().isoformat()


__all__ = ["NotificationIcon", "format_notification_time", "notification_icon"]
