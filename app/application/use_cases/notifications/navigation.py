"""Router collaborator used when a notification is opened."""

from __future__ import annotations

from typing import Protocol


class Navigator(Protocol):
    """Anything able to move the user to another route."""

    def push(self, url: str) -> None:
        ...


class RecordingNavigator:
    """Navigator that keeps the requested targets instead of routing.

    The HTTP layer uses it to hand the target back to the browser, which
    performs the actual navigation.
    """

    def __init__(self) -> None:
        self.history: list[str] = []

    def push(self, url: str) -> None:
        self.history.append(url)

    @property
    def last(self) -> str | None:
        return self.history[-1] if self.history else None


__all__ = ["Navigator", "RecordingNavigator"]
