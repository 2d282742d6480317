"""Repository implementations for infrastructure layer."""

from .storage_entry_repository import StorageEntryRepository

__all__ = ["StorageEntryRepository"]
