"""Persistence helpers for key-value storage entries."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.infrastructure.models import StorageEntryModel
from app.infrastructure.storage import StorageError


class StorageEntryRepository:
    """SQL backed implementation of :class:`~app.infrastructure.storage.KeyValueStorage`."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_item(self, key: str) -> str | None:
        try:
            model = self.session.get(StorageEntryModel, key)
        except SQLAlchemyError as exc:
            raise StorageError(f"Unable to read storage key {key!r}") from exc
        if model is None:
            return None
        return model.value

    def set_item(self, key: str, value: str) -> None:
        try:
            model = self.session.get(StorageEntryModel, key)
            if model is None:
                model = StorageEntryModel(key=key)
            model.value = value
            self.session.add(model)
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise StorageError(f"Unable to write storage key {key!r}") from exc

    def remove_item(self, key: str) -> None:
        try:
            model = self.session.get(StorageEntryModel, key)
            if model is None:
                return
            self.session.delete(model)
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise StorageError(f"Unable to remove storage key {key!r}") from exc

    def list_keys(self) -> Sequence[str]:
        query = self.session.query(StorageEntryModel.key).order_by(StorageEntryModel.key)
        return [row.key for row in query.all()]


__all__ = ["StorageEntryRepository"]
