"""Typed exception hierarchy for Mementor."""

from __future__ import annotations

from pathlib import Path

# =============================================================================
# BASE
# =============================================================================


class MementorError(Exception):
    """Base exception for all Mementor errors."""


# =============================================================================
# STORAGE
# =============================================================================


class StoreIOError(MementorError):
    """The store file or its directory could not be created, read or written."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Cannot access {path}: {reason}")


class StoreParseError(MementorError):
    """The store file does not hold a valid list of mementos."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Failed to parse {path}: {reason}")


# =============================================================================
# MEMENTOS
# =============================================================================


class MementoNotFoundError(MementorError):
    """No memento with the requested id exists."""

    def __init__(self, memento_id: int) -> None:
        self.memento_id = memento_id
        super().__init__(f"Memento {memento_id} does not exist")


class InvalidArgumentError(MementorError):
    """A command received missing or malformed arguments."""


class InvalidFieldError(InvalidArgumentError):
    """A modification names a field that cannot be modified."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(
            f"You are trying to modify invalid property: {field!r} "
            "(valid: message, priority)"
        )


class InvalidValueError(InvalidArgumentError):
    """A modification value does not fit its field."""

    def __init__(self, field: str, value: str, reason: str) -> None:
        self.field = field
        self.value = value
        super().__init__(f"Invalid value {value!r} for {field}: {reason}")


# =============================================================================
# CONFIGURATION
# =============================================================================


class ConfigurationError(MementorError):
    """Invalid or missing configuration."""
