"""Domain services for Mementos."""

from __future__ import annotations

import random
import time

from dataclasses import dataclass, field

from mementor.domain.memento.entities import MementoCollection
from mementor.domain.memento.value_objects import Memento
from mementor.shared.constants import (
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    SECONDS_PER_MONTH,
    SECONDS_PER_YEAR,
)
from mementor.shared.types import Timestamp

# Largest unit first.
_UNITS: tuple[tuple[int, str], ...] = (
    (SECONDS_PER_YEAR, "year"),
    (SECONDS_PER_MONTH, "month"),
    (SECONDS_PER_DAY, "day"),
    (SECONDS_PER_HOUR, "hour"),
    (SECONDS_PER_MINUTE, "minute"),
)


def relative_age(created_at: Timestamp, now: Timestamp) -> str:
    """Describe how long ago *created_at* was, e.g. ``"3 days ago"``.

    Units are floored. Anything under a minute, including timestamps in
    the future, is ``"just now"``.
    """
    elapsed = now - created_at
    for size, unit in _UNITS:
        count = elapsed // size
        if count >= 1:
            suffix = "" if count == 1 else "s"
            return f"{count} {unit}{suffix} ago"
    return "just now"


@dataclass
class MementoPicker:
    """Chooses the memento to show on a fetch.

    Every memento is equally likely. The default source is seeded from
    the current time, so picks are not reproducible across runs.
    """

    rng: random.Random = field(
        default_factory=lambda: random.Random(time.time_ns())
    )

    def pick(self, mementos: MementoCollection) -> Memento | None:
        """Return a random memento, or None if there are none."""
        if not mementos:
            return None
        return mementos[self.rng.randrange(len(mementos))]
