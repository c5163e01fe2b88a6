"""Domain-specific types that prevent primitive obsession."""

from __future__ import annotations

# =============================================================================
# NEWTYPES
# =============================================================================


class MementoId(int):
    """Sequential identifier of a memento within a store."""


class Timestamp(int):
    """Whole seconds since the Unix epoch."""


class Priority(int):
    """Relative importance of a memento. Higher means more important."""
