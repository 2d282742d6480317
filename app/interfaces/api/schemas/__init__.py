from .health import HealthRead
from .notification import (
    NotificationCreate,
    NotificationDeleteResponse,
    NotificationListResponse,
    NotificationRead,
    NotificationStateResponse,
    NotificationVisitResponse,
)

__all__ = [
    "HealthRead",
    "NotificationCreate",
    "NotificationDeleteResponse",
    "NotificationListResponse",
    "NotificationRead",
    "NotificationStateResponse",
    "NotificationVisitResponse",
]
