"""Infrastructure-layer constants and enums.

Eliminates magic strings across all infrastructure modules.
"""

from __future__ import annotations

from enum import StrEnum

# =============================================================================
# SERIALIZER FIELD NAMES
# =============================================================================


class SerializerField(StrEnum):
    """JSON keys of a memento record in the store file."""

    ID = "id"
    MESSAGE = "message"
    CREATED_AT = "createdAt"
    PRIORITY = "priority"


class LegacySerializerField(StrEnum):
    """JSON keys written by the original mementor tool. Read-only."""

    ID = "Id"
    MESSAGE = "Msg"
    CREATED_AT = "Time"
    PRIORITY = "Priority"


# =============================================================================
# FILE I/O
# =============================================================================

STORE_ENCODING = "utf-8"
JSON_INDENT = 2
