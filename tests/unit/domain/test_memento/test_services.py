"""Tests for memento domain services."""

from __future__ import annotations

import random

import pytest

from mementor.domain.memento.entities import MementoCollection
from mementor.domain.memento.services import MementoPicker, relative_age
from mementor.shared.types import Timestamp

NOW = Timestamp(1_700_000_000)

MINUTE = 60
HOUR = 60 * MINUTE
DAY = 24 * HOUR


# =============================================================================
# relative_age
# =============================================================================


class TestRelativeAge:
    @pytest.mark.parametrize(
        ("elapsed", "expected"),
        [
            (0, "just now"),
            (59, "just now"),
            (MINUTE, "1 minute ago"),
            (2 * MINUTE + 30, "2 minutes ago"),
            (HOUR, "1 hour ago"),
            (5 * HOUR, "5 hours ago"),
            (DAY, "1 day ago"),
            (3 * DAY, "3 days ago"),
            (30 * DAY, "1 month ago"),
            (200 * DAY, "6 months ago"),
            (365 * DAY, "1 year ago"),
            (3 * 365 * DAY, "3 years ago"),
        ],
    )
    def test_formats_elapsed_time(self, elapsed: int, expected: str) -> None:
        assert relative_age(Timestamp(NOW - elapsed), NOW) == expected

    def test_future_timestamp_is_just_now(self) -> None:
        assert relative_age(Timestamp(NOW + HOUR), NOW) == "just now"


# =============================================================================
# MementoPicker
# =============================================================================


class TestMementoPicker:
    def test_pick_from_empty_returns_none(self) -> None:
        assert MementoPicker().pick(MementoCollection()) is None

    def test_pick_returns_member(self, sample_collection: MementoCollection) -> None:
        picker = MementoPicker(rng=random.Random(42))

        for _ in range(20):
            picked = picker.pick(sample_collection)
            assert picked is not None
            assert picked.id in sample_collection.ids()

    def test_pick_reaches_every_memento(
        self, sample_collection: MementoCollection
    ) -> None:
        picker = MementoPicker(rng=random.Random(7))

        seen = set()
        for _ in range(200):
            picked = picker.pick(sample_collection)
            assert picked is not None
            seen.add(picked.id)

        assert seen == set(sample_collection.ids())
