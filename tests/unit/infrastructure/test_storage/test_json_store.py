"""Tests for JsonFileMementoStore."""

from __future__ import annotations

import json
import stat

from pathlib import Path

import pytest

from mementor.domain.memento.entities import MementoCollection
from mementor.infrastructure.storage.json_store import JsonFileMementoStore
from mementor.shared.exceptions import StoreIOError, StoreParseError
from mementor.shared.types import Timestamp

NOW = Timestamp(1_700_000_000)


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    return tmp_path / "home" / ".mementor" / "mementos.json"


@pytest.fixture
def store(data_file: Path) -> JsonFileMementoStore:
    return JsonFileMementoStore(path=data_file)


class TestEnsure:
    def test_creates_directory_and_empty_file(
        self, store: JsonFileMementoStore, data_file: Path
    ) -> None:
        assert store.ensure() is True

        assert data_file.is_file()
        assert data_file.read_text() == ""

    def test_directory_is_owner_only(
        self, store: JsonFileMementoStore, data_file: Path
    ) -> None:
        store.ensure()

        mode = stat.S_IMODE(data_file.parent.stat().st_mode)
        assert mode & 0o077 == 0

    def test_existing_file_is_left_alone(
        self, store: JsonFileMementoStore, data_file: Path
    ) -> None:
        data_file.parent.mkdir(parents=True)
        data_file.write_text("[]")

        assert store.ensure() is False
        assert data_file.read_text() == "[]"


class TestLoad:
    def test_empty_file_loads_empty(self, store: JsonFileMementoStore) -> None:
        store.ensure()

        assert len(store.load()) == 0

    def test_missing_file_raises_io_error(self, store: JsonFileMementoStore) -> None:
        with pytest.raises(StoreIOError):
            store.load()

    def test_corrupt_file_raises_parse_error(
        self, store: JsonFileMementoStore, data_file: Path
    ) -> None:
        store.ensure()
        data_file.write_text("not json {{{")

        with pytest.raises(StoreParseError) as exc_info:
            store.load()
        assert exc_info.value.path == data_file

    def test_non_utf8_file_raises_parse_error(
        self, store: JsonFileMementoStore, data_file: Path
    ) -> None:
        store.ensure()
        data_file.write_bytes(b"\xff\xfe[]")

        with pytest.raises(StoreParseError) as exc_info:
            store.load()
        assert exc_info.value.path == data_file


class TestSave:
    def test_save_and_load_round_trip(self, store: JsonFileMementoStore) -> None:
        mementos = MementoCollection()
        mementos.add("buy milk", created_at=NOW)
        mementos.add("call mom", created_at=NOW)

        store.save(mementos)
        loaded = store.load()

        assert list(loaded) == list(mementos)

    def test_save_creates_directory(
        self, store: JsonFileMementoStore, data_file: Path
    ) -> None:
        assert not data_file.parent.exists()

        store.save(MementoCollection())

        assert json.loads(data_file.read_text()) == []

    def test_save_truncates_previous_content(
        self, store: JsonFileMementoStore, data_file: Path
    ) -> None:
        mementos = MementoCollection()
        for i in range(10):
            mementos.add(f"a rather long message number {i}", created_at=NOW)
        store.save(mementos)

        store.save(MementoCollection())

        assert json.loads(data_file.read_text()) == []

    def test_persist_of_load_is_noop(
        self, store: JsonFileMementoStore, data_file: Path
    ) -> None:
        data_file.parent.mkdir(parents=True)
        records = [
            {"id": 1, "message": "buy milk", "createdAt": 1, "priority": 1},
            {"id": 3, "message": "call mom", "createdAt": 2, "priority": 4},
        ]
        data_file.write_text(json.dumps(records))

        store.save(store.load())

        assert json.loads(data_file.read_text()) == records

    def test_save_into_unwritable_location_raises(self, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        store = JsonFileMementoStore(path=blocker / "sub" / "mementos.json")

        with pytest.raises(StoreIOError):
            store.save(MementoCollection())
