"""Application-layer command and result DTOs."""

from __future__ import annotations

from dataclasses import dataclass, field

from mementor.domain.memento.value_objects import Memento

# =============================================================================
# COMMANDS
# =============================================================================


@dataclass(frozen=True)
class AddMementoCommand:
    """Command to append a new memento."""

    message: str


@dataclass(frozen=True)
class RemoveMementoCommand:
    """Command to delete a memento by id."""

    memento_id: int


@dataclass(frozen=True)
class ModifyMementoCommand:
    """Command to change one field of a memento."""

    memento_id: int
    change: str


# =============================================================================
# RESULTS
# =============================================================================


@dataclass(frozen=True)
class MementoListing:
    """A memento paired with its human-readable age."""

    memento: Memento
    age: str


@dataclass(frozen=True)
class ListMementosResult:
    """Every memento in stored order."""

    listings: list[MementoListing] = field(default_factory=list[MementoListing])

    @property
    def total(self) -> int:
        return len(self.listings)
