"""File-based persistence for the memento store."""

from __future__ import annotations

import fcntl
import logging

from dataclasses import dataclass
from pathlib import Path

from mementor.domain.memento.entities import MementoCollection
from mementor.infrastructure.constants import STORE_ENCODING
from mementor.infrastructure.storage.serializer import deserialize, serialize
from mementor.shared.constants import DATA_DIR_MODE
from mementor.shared.exceptions import StoreIOError, StoreParseError

logger = logging.getLogger(__name__)


@dataclass
class JsonFileMementoStore:
    """Implements MementoRepository via a single JSON file.

    Each load or save opens, locks, reads or rewrites, and closes the file.
    Nothing is held open between calls, and the load-mutate-save cycle of a
    command is not locked as a whole: the last writer wins.
    """

    path: Path

    def ensure(self) -> bool:
        """Create the parent directory and an empty store file if missing."""
        if self.path.exists():
            return False
        self._make_parent()
        try:
            self.path.touch()
        except OSError as e:
            raise StoreIOError(self.path, _reason(e)) from e
        logger.debug("Created empty store %s", self.path)
        return True

    def load(self) -> MementoCollection:
        """Load every memento from the store file."""
        logger.debug("Opening %s", self.path)
        try:
            with self.path.open("rb") as f:
                fcntl.flock(f, fcntl.LOCK_SH)
                try:
                    raw = f.read()
                finally:
                    fcntl.flock(f, fcntl.LOCK_UN)
        except OSError as e:
            raise StoreIOError(self.path, _reason(e)) from e

        try:
            mementos = deserialize(raw.decode(STORE_ENCODING))
        except ValueError as e:
            raise StoreParseError(self.path, str(e)) from e
        logger.debug("Loaded %d mementos from %s", len(mementos), self.path)
        return mementos

    def save(self, mementos: MementoCollection) -> None:
        """Truncate the store file and write every memento to it."""
        self._make_parent()
        data = serialize(mementos)
        try:
            with self.path.open("w", encoding=STORE_ENCODING) as f:
                fcntl.flock(f, fcntl.LOCK_EX)
                try:
                    written = f.write(data)
                finally:
                    fcntl.flock(f, fcntl.LOCK_UN)
        except OSError as e:
            raise StoreIOError(self.path, _reason(e)) from e
        logger.debug("%d characters written to %s", written, self.path)

    def _make_parent(self) -> None:
        directory = self.path.parent
        if directory.is_dir():
            return
        logger.debug("Creating directory %s", directory)
        try:
            directory.mkdir(mode=DATA_DIR_MODE, parents=True, exist_ok=True)
        except OSError as e:
            msg = f"failed to create directory {directory}: {_reason(e)}"
            raise StoreIOError(self.path, msg) from e


def _reason(error: OSError) -> str:
    return error.strerror or str(error)
