"""Manage Mementos use case."""

from __future__ import annotations

import logging
import time

from collections.abc import Callable
from dataclasses import dataclass, field

from mementor.application.dto import (
    AddMementoCommand,
    ListMementosResult,
    MementoListing,
    ModifyMementoCommand,
    RemoveMementoCommand,
)
from mementor.domain.memento.repositories import MementoRepository
from mementor.domain.memento.services import MementoPicker, relative_age
from mementor.domain.memento.value_objects import Memento
from mementor.shared.types import Timestamp

logger = logging.getLogger(__name__)


def _now() -> Timestamp:
    return Timestamp(int(time.time()))


# =============================================================================
# USE CASE
# =============================================================================


@dataclass
class ManageMementos:
    """Read and mutate the memento store.

    Every mutation is a full cycle: load the store, change one memento in
    memory, save the whole store. A failed mutation never reaches ``save``.
    """

    repository: MementoRepository
    picker: MementoPicker = field(default_factory=MementoPicker)
    clock: Callable[[], Timestamp] = _now

    def list_all(self) -> ListMementosResult:
        """Every memento in stored order, with its age."""
        now = self.clock()
        listings = [
            MementoListing(memento=m, age=relative_age(m.created_at, now))
            for m in self.repository.load()
        ]
        return ListMementosResult(listings=listings)

    def fetch(self) -> Memento | None:
        """A random memento, or None if the store is empty."""
        return self.picker.pick(self.repository.load())

    def add(self, cmd: AddMementoCommand) -> Memento:
        """Append a new memento with the default priority.

        Raises:
            InvalidArgumentError: If the message is empty.
        """
        mementos = self.repository.load()
        memento = mementos.add(cmd.message, created_at=self.clock())
        logger.debug("Writing %r", memento)
        self.repository.save(mementos)
        return memento

    def remove(self, cmd: RemoveMementoCommand) -> Memento:
        """Delete a memento.

        Raises:
            MementoNotFoundError: If no memento has the id.
        """
        mementos = self.repository.load()
        removed = mementos.remove(cmd.memento_id)
        logger.debug("Removed %r", removed)
        self.repository.save(mementos)
        return removed

    def modify(self, cmd: ModifyMementoCommand) -> Memento:
        """Change one field of a memento.

        Raises:
            MementoNotFoundError: If no memento has the id.
            InvalidArgumentError: If the change is malformed.
        """
        mementos = self.repository.load()
        updated = mementos.modify(cmd.memento_id, cmd.change)
        logger.debug("Updated %r", updated)
        self.repository.save(mementos)
        return updated
