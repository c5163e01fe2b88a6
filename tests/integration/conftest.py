"""Shared fixtures for integration tests."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

import pytest

from mementor.interfaces.main import run


@dataclass(frozen=True)
class Outcome:
    """Exit status and captured output of one CLI run."""

    code: int
    out: str
    err: str


@pytest.fixture
def home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point HOME at an empty directory and clear mementor variables."""
    monkeypatch.setenv("HOME", str(tmp_path))
    for name in ("MEMENTOR_CONFIG", "MEMENTOR_FILE", "MEMENTOR_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return tmp_path


@pytest.fixture
def data_file(home: Path) -> Path:
    return home / ".mementor" / "mementos.json"


@pytest.fixture
def mementor(
    home: Path, capsys: pytest.CaptureFixture[str]
) -> Callable[..., Outcome]:
    """Run the CLI with the given arguments and capture its output."""

    def invoke(*argv: str) -> Outcome:
        capsys.readouterr()
        code = run(list(argv))
        captured = capsys.readouterr()
        return Outcome(code=code, out=captured.out, err=captured.err)

    return invoke
