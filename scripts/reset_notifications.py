"""Utility script to inspect, reseed or clear the stored student notifications."""

from __future__ import annotations

import argparse

from sqlalchemy.exc import SQLAlchemyError

from app.application.use_cases.notifications import (
    NotificationStore,
    build_seed_notifications,
)
from app.config import get_settings
from app.infrastructure.database import SessionLocal, initialize_database
from app.infrastructure.repositories import StorageEntryRepository
from app.infrastructure.storage import StorageError


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""

    settings = get_settings()
    parser = argparse.ArgumentParser(
        description="Manage the persisted notifications of the student dashboard.",
    )
    parser.add_argument(
        "action",
        choices=("show", "seed", "clear"),
        help="show: list stored notifications; seed: replace them with the "
        "fallback set; clear: remove the storage entry",
    )
    parser.add_argument(
        "--key",
        default=settings.notification_storage_key,
        help=f"Storage key to operate on (default: {settings.notification_storage_key})",
    )
    return parser.parse_args()


def main() -> None:
    """Run the requested action against the configured database."""

    args = parse_args()
    initialize_database()

    session = SessionLocal()
    try:
        repository = StorageEntryRepository(session)
        if args.action == "clear":
            repository.remove_item(args.key)
            print(f"Removed storage entry {args.key!r}")
            return

        if args.action == "seed":
            repository.remove_item(args.key)
        store = NotificationStore(
            repository,
            storage_key=args.key,
            seed_factory=build_seed_notifications if args.action == "seed" else None,
        )
        store.initialize()

        print(f"{len(store)} notification(s), {store.unread_count} unread:")
        for notification in store.notifications:
            marker = " " if notification.read else "*"
            print(f"  {marker} [{notification.type}] {notification.title} -> {notification.target()}")
    except (StorageError, SQLAlchemyError) as exc:
        session.rollback()
        raise SystemExit(f"Storage error: {exc}") from exc
    finally:
        session.close()


if __name__ == "__main__":
    main()
