"""Fixtures for memento domain tests."""

from __future__ import annotations

import pytest

from mementor.domain.memento.entities import MementoCollection
from mementor.domain.memento.value_objects import Memento
from mementor.shared.types import MementoId, Priority, Timestamp


@pytest.fixture
def sample_memento() -> Memento:
    return Memento(
        id=MementoId(1),
        message="buy milk",
        created_at=Timestamp(1_700_000_000),
    )


@pytest.fixture
def sample_collection() -> MementoCollection:
    return MementoCollection(
        [
            Memento(MementoId(1), "buy milk", Timestamp(1_700_000_000)),
            Memento(MementoId(3), "call mom", Timestamp(1_700_000_100), Priority(2)),
            Memento(MementoId(4), "water plants", Timestamp(1_700_000_200)),
        ]
    )
