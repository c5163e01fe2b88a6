"""Memento store JSON serialization."""

from __future__ import annotations

import logging

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
)

from mementor.domain.memento.entities import MementoCollection
from mementor.domain.memento.value_objects import Memento
from mementor.infrastructure.constants import JSON_INDENT
from mementor.infrastructure.constants import LegacySerializerField as L
from mementor.infrastructure.constants import SerializerField as F
from mementor.shared.constants import DEFAULT_PRIORITY
from mementor.shared.types import MementoId, Priority, Timestamp

logger = logging.getLogger(__name__)


class MementoRecord(BaseModel):
    """On-disk shape of one memento. Accepts legacy keys when reading."""

    model_config = ConfigDict(extra="ignore")

    id: int = Field(validation_alias=AliasChoices(F.ID, L.ID))
    message: str = Field(validation_alias=AliasChoices(F.MESSAGE, L.MESSAGE))
    created_at: int = Field(
        alias=F.CREATED_AT,
        validation_alias=AliasChoices(F.CREATED_AT, L.CREATED_AT),
    )
    priority: int = Field(
        default=DEFAULT_PRIORITY,
        validation_alias=AliasChoices(F.PRIORITY, L.PRIORITY),
    )


_STORE_ADAPTER: TypeAdapter[list[MementoRecord] | None] = TypeAdapter(
    list[MementoRecord] | None
)

# =============================================================================
# SERIALIZE
# =============================================================================


def serialize(mementos: MementoCollection) -> str:
    """Serialize every memento to a JSON array string."""
    records = [_to_record(m) for m in mementos]
    raw = _STORE_ADAPTER.dump_json(records, by_alias=True, indent=JSON_INDENT)
    return raw.decode()


def _to_record(memento: Memento) -> MementoRecord:
    return MementoRecord.model_validate(
        {
            F.ID: int(memento.id),
            F.MESSAGE: memento.message,
            F.CREATED_AT: int(memento.created_at),
            F.PRIORITY: int(memento.priority),
        }
    )


# =============================================================================
# DESERIALIZE
# =============================================================================


def deserialize(data: str) -> MementoCollection:
    """Deserialize a JSON array string into a MementoCollection.

    Empty content and a JSON ``null`` both yield an empty collection.

    Raises:
        ValueError: If the JSON is malformed, is not an array of mementos,
            or holds duplicate ids or empty messages.
    """
    if not data.strip():
        return MementoCollection()

    try:
        records = _STORE_ADAPTER.validate_json(data)
    except ValidationError as e:
        msg = f"invalid memento data: {_first_error(e)}"
        raise ValueError(msg) from e

    if records is None:
        return MementoCollection()

    ids = [r.id for r in records]
    if ids != sorted(ids):
        logger.warning("Mementos are not in ascending id order, re-sorting")

    return MementoCollection([_from_record(r) for r in records])


def _from_record(record: MementoRecord) -> Memento:
    return Memento(
        id=MementoId(record.id),
        message=record.message,
        created_at=Timestamp(record.created_at),
        priority=Priority(record.priority),
    )


def _first_error(error: ValidationError) -> str:
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"])
    if location:
        return f"{location}: {first['msg']}"
    return str(first["msg"])
