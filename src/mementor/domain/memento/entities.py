"""Entities for the Memento bounded context."""

from __future__ import annotations

import bisect

from collections.abc import Iterator
from dataclasses import dataclass, field

from mementor.domain.memento.value_objects import Memento, Modification
from mementor.shared.constants import DEFAULT_PRIORITY, FIRST_MEMENTO_ID
from mementor.shared.exceptions import InvalidArgumentError, MementoNotFoundError
from mementor.shared.types import MementoId, Priority, Timestamp

# =============================================================================
# ENTITIES
# =============================================================================


@dataclass
class MementoCollection:
    """Aggregate root: every memento of a store, ascending by id.

    Not frozen: mutations replace slots in the internal list. The ascending
    order is established on construction and preserved by every mutation,
    which is what makes ``index_of`` a binary search.
    """

    _mementos: list[Memento] = field(default_factory=list[Memento])

    def __post_init__(self) -> None:
        self._mementos = sorted(self._mementos, key=lambda m: m.id)
        for prev, cur in zip(self._mementos, self._mementos[1:]):
            if prev.id == cur.id:
                msg = f"duplicate memento id {cur.id}"
                raise ValueError(msg)

    @property
    def next_id(self) -> MementoId:
        """Id the next added memento receives."""
        if not self._mementos:
            return MementoId(FIRST_MEMENTO_ID)
        return MementoId(self._mementos[-1].id + 1)

    def add(
        self,
        message: str,
        created_at: Timestamp,
        priority: Priority = Priority(DEFAULT_PRIORITY),
    ) -> Memento:
        """Append a new memento and return it.

        Raises:
            InvalidArgumentError: If *message* is empty.
        """
        if not message.strip():
            msg = "Please specify the message."
            raise InvalidArgumentError(msg)
        memento = Memento(
            id=self.next_id,
            message=message,
            created_at=created_at,
            priority=priority,
        )
        self._mementos.append(memento)
        return memento

    def index_of(self, memento_id: int) -> int:
        """Position of the memento with *memento_id*.

        Raises:
            MementoNotFoundError: If no memento has that id.
        """
        n = bisect.bisect_left(self._mementos, memento_id, key=lambda m: m.id)
        if n < len(self._mementos) and self._mementos[n].id == memento_id:
            return n
        raise MementoNotFoundError(memento_id)

    def remove(self, memento_id: int) -> Memento:
        """Remove a memento, keeping the order of the rest.

        Raises:
            MementoNotFoundError: If no memento has that id.
        """
        return self._mementos.pop(self.index_of(memento_id))

    def modify(self, memento_id: int, change: str) -> Memento:
        """Apply a ``field:value`` *change* to a memento in its slot.

        The id is looked up before *change* is parsed, so a missing memento
        is reported even when the change itself is malformed.

        Raises:
            MementoNotFoundError: If no memento has that id.
            InvalidArgumentError: If *change* is not a valid modification.
        """
        n = self.index_of(memento_id)
        updated = Modification.parse(change).apply(self._mementos[n])
        self._mementos[n] = updated
        return updated

    def ids(self) -> list[MementoId]:
        """All ids, ascending."""
        return [m.id for m in self._mementos]

    def __iter__(self) -> Iterator[Memento]:
        return iter(list(self._mementos))

    def __getitem__(self, index: int) -> Memento:
        return self._mementos[index]

    def __len__(self) -> int:
        return len(self._mementos)
