"""Value objects for the Memento bounded context."""

from __future__ import annotations

import re

from dataclasses import dataclass, replace
from enum import StrEnum

from mementor.shared.constants import DEFAULT_PRIORITY
from mementor.shared.exceptions import (
    InvalidArgumentError,
    InvalidFieldError,
    InvalidValueError,
)
from mementor.shared.types import MementoId, Priority, Timestamp

_INTEGER = re.compile(r"[+-]?[0-9]+")

# =============================================================================
# MEMENTO
# =============================================================================


@dataclass(frozen=True)
class Memento:
    """A single stored reminder."""

    id: MementoId
    message: str
    created_at: Timestamp
    priority: Priority = Priority(DEFAULT_PRIORITY)

    def __post_init__(self) -> None:
        if not self.message.strip():
            msg = f"memento {self.id} has an empty message"
            raise ValueError(msg)


# =============================================================================
# MODIFICATION
# =============================================================================


class MementoField(StrEnum):
    """Fields of a memento that may be changed after creation."""

    PRIORITY = "priority"
    MESSAGE = "message"

    @classmethod
    def parse(cls, raw: str) -> MementoField:
        """Resolve a user-supplied field name.

        Raises:
            InvalidFieldError: If *raw* is not one of the enumerated fields.
        """
        try:
            return cls(raw.strip().lower())
        except ValueError:
            raise InvalidFieldError(raw) from None


@dataclass(frozen=True)
class Modification:
    """A validated change of one field of one memento."""

    field: MementoField
    value: str | int

    @classmethod
    def parse(cls, raw: str) -> Modification:
        """Parse a ``field:value`` argument.

        Only the first colon separates field from value, so a message may
        itself contain colons.

        Raises:
            InvalidArgumentError: If *raw* has no colon.
            InvalidFieldError: If the field is not modifiable.
            InvalidValueError: If the value does not fit the field.
        """
        name, sep, value = raw.partition(":")
        if not sep:
            msg = "Your modification must be in the form of field:value"
            raise InvalidArgumentError(msg)

        field = MementoField.parse(name)
        if field is MementoField.PRIORITY:
            return cls(field=field, value=_parse_priority(value))

        if not value.strip():
            raise InvalidValueError(field, value, "message must not be empty")
        return cls(field=field, value=value)

    def apply(self, memento: Memento) -> Memento:
        """Return a copy of *memento* with this modification applied."""
        if self.field is MementoField.PRIORITY:
            return replace(memento, priority=Priority(int(self.value)))
        return replace(memento, message=str(self.value))


def _parse_priority(raw: str) -> int:
    if not _INTEGER.fullmatch(raw):
        raise InvalidValueError(MementoField.PRIORITY, raw, "not a number")
    return int(raw)
