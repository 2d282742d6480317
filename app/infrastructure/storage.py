"""Key-value storage used to persist client state between sessions."""

from __future__ import annotations

from typing import Protocol


class StorageError(RuntimeError):
    """Raised when the storage backend cannot be read or written."""


class KeyValueStorage(Protocol):
    """Minimal string storage keyed by name.

    A missing key is a valid state and reads as ``None``.
    """

    def get_item(self, key: str) -> str | None:
        ...

    def set_item(self, key: str, value: str) -> None:
        ...

    def remove_item(self, key: str) -> None:
        ...


class InMemoryKeyValueStorage:
    """Dictionary backed :class:`KeyValueStorage`."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def __contains__(self, key: object) -> bool:
        return key in self._items


__all__ = [
    "InMemoryKeyValueStorage",
    "KeyValueStorage",
    "StorageError",
]
