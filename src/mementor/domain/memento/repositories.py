"""Repository protocols for Mementos."""

from __future__ import annotations

from typing import Protocol

from mementor.domain.memento.entities import MementoCollection


class MementoRepository(Protocol):
    """Persistence port for the memento store."""

    def ensure(self) -> bool:
        """Create an empty store if none exists. Returns True if created."""
        ...

    def load(self) -> MementoCollection:
        """Load every memento in the store."""
        ...

    def save(self, mementos: MementoCollection) -> None:
        """Overwrite the store with *mementos*."""
        ...
