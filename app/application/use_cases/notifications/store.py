"""Persisted notification collection owned by the student dashboard."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Sequence
from dataclasses import replace

from app.domain.entities import Notification
from app.infrastructure.notifications import (
    NotificationDecodeError,
    dump_notifications,
    load_notifications,
)
from app.infrastructure.storage import KeyValueStorage, StorageError

from .navigation import Navigator
from .seed import build_seed_notifications

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "student_notifications"

SeedFactory = Callable[[], Sequence[Notification]]


class DuplicateNotificationError(ValueError):
    """Raised when inserting a notification whose id is already stored."""


class NotificationStore:
    """Ordered notification list with read tracking and best-effort persistence.

    The collection is loaded lazily from ``storage`` on first use. Every change
    rewrites the whole collection under ``storage_key``; an empty collection
    removes the key so that "no notifications" and "nothing stored" are the
    same state. Storage failures are logged and never propagate.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        *,
        storage_key: str = DEFAULT_STORAGE_KEY,
        seed_factory: SeedFactory | None = build_seed_notifications,
    ) -> None:
        self._storage = storage
        self._storage_key = storage_key
        self._seed_factory = seed_factory
        self._items: list[Notification] = []
        self._initialized = False
        self._lock = threading.RLock()

    @property
    def storage_key(self) -> str:
        return self._storage_key

    @property
    def notifications(self) -> tuple[Notification, ...]:
        with self._lock:
            self._ensure_initialized()
            return tuple(self._items)

    @property
    def unread_count(self) -> int:
        with self._lock:
            self._ensure_initialized()
            return sum(1 for item in self._items if not item.read)

    def __len__(self) -> int:
        return len(self.notifications)

    def initialize(self) -> None:
        """Load the stored collection, seeding it when nothing is stored."""

        with self._lock:
            if self._initialized:
                return
            self._initialized = True
            self._items = self._load()

    def get(self, notification_id: str) -> Notification | None:
        with self._lock:
            self._ensure_initialized()
            index = self._index_of(notification_id)
            return None if index is None else self._items[index]

    def insert(self, notification: Notification) -> Notification:
        """Prepend ``notification`` as unread and persist the collection."""

        with self._lock:
            self._ensure_initialized()
            if self._index_of(notification.id) is not None:
                raise DuplicateNotificationError(
                    f"Notification {notification.id!r} already exists"
                )
            stored = replace(notification, read=False)
            self._items.insert(0, stored)
            self.persist()
            return stored

    def mark_read(self, notification_id: str) -> bool:
        """Mark one notification as read.

        Returns ``False`` without touching storage when the id is unknown or
        the notification was already read.
        """

        with self._lock:
            self._ensure_initialized()
            index = self._index_of(notification_id)
            if index is None or self._items[index].read:
                return False
            self._items[index] = replace(self._items[index], read=True)
            self.persist()
            return True

    def mark_all_read(self) -> None:
        with self._lock:
            self._ensure_initialized()
            self._items = [
                item if item.read else replace(item, read=True) for item in self._items
            ]
            self.persist()

    def delete(self, notification_id: str) -> Notification | None:
        """Remove the matching notification and return it, if there was one."""

        with self._lock:
            self._ensure_initialized()
            index = self._index_of(notification_id)
            if index is None:
                return None
            removed = self._items.pop(index)
            self.persist()
            return removed

    def visit_and_mark_read(
        self, notification: Notification, navigator: Navigator
    ) -> str:
        """Mark ``notification`` as read and send the navigator to its target."""

        with self._lock:
            if not notification.read:
                self.mark_read(notification.id)
            target = notification.target()
            navigator.push(target)
            return target

    def persist(self) -> None:
        """Write the current collection to storage, clearing it when empty."""

        with self._lock:
            try:
                if self._items:
                    self._storage.set_item(
                        self._storage_key, dump_notifications(self._items)
                    )
                else:
                    self._storage.remove_item(self._storage_key)
            except (StorageError, OSError) as exc:
                logger.warning(
                    "Could not persist notifications under %r: %s",
                    self._storage_key,
                    exc,
                )

    def _ensure_initialized(self) -> None:
        if not self._initialized:
            self.initialize()

    def _index_of(self, notification_id: str) -> int | None:
        for index, item in enumerate(self._items):
            if item.id == notification_id:
                return index
        return None

    def _load(self) -> list[Notification]:
        try:
            raw = self._storage.get_item(self._storage_key)
        except (StorageError, OSError) as exc:
            logger.warning(
                "Could not read notifications under %r: %s", self._storage_key, exc
            )
            return []

        if raw is None:
            return self._seed()

        try:
            loaded = load_notifications(raw)
        except NotificationDecodeError as exc:
            logger.warning("Discarding stored notifications: %s", exc)
            loaded = []

        if not loaded:
            # An empty collection is never stored.
            self._items = []
            self.persist()
        return loaded

    def _seed(self) -> list[Notification]:
        if self._seed_factory is None:
            return []
        seeded = list(self._seed_factory())
        if seeded:
            logger.info(
                "Seeding %d fallback notifications under %r",
                len(seeded),
                self._storage_key,
            )
            self._items = seeded
            self.persist()
        return seeded


__all__ = [
    "DEFAULT_STORAGE_KEY",
    "DuplicateNotificationError",
    "NotificationStore",
    "SeedFactory",
]
