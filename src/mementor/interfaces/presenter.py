"""Terminal rendering of mementos and messages."""

from __future__ import annotations

import sys

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TextIO

from mementor.application.dto import ListMementosResult


class Style(StrEnum):
    """ANSI escape sequences used by the renderer."""

    INFO = "\x1b[36;1m"
    ERROR = "\x1b[31;1m"
    UNDERSCORE = "\x1b[4;1m"
    RESET = "\x1b[0m"


_HEADER = f"{'ID':>3}   {'Age':<14}  {'Pri':>3}  Description"


@dataclass
class TerminalRenderer:
    """Writes command output to stdout and errors to stderr.

    Styling is applied only when the target stream is a terminal.
    """

    out: TextIO = field(default_factory=lambda: sys.stdout)
    err: TextIO = field(default_factory=lambda: sys.stderr)

    def plain(self, text: str) -> None:
        print(text, file=self.out)

    def info(self, text: str) -> None:
        print(self._style(text, Style.INFO, self.out), file=self.out)

    def error(self, text: str) -> None:
        print(self._style(text, Style.ERROR, self.err), file=self.err)

    def listing(self, result: ListMementosResult) -> None:
        """Print a table of mementos followed by the total count."""
        print(self._style(_HEADER, Style.UNDERSCORE, self.out), file=self.out)
        for row in result.listings:
            m = row.memento
            line = f"{m.id:>3}   {row.age:<14}  {m.priority:>3}  {m.message}"
            print(line, file=self.out)
        self.info(f"\n{result.total} mementos total.")

    @staticmethod
    def _style(text: str, style: Style, stream: TextIO) -> str:
        isatty = getattr(stream, "isatty", None)
        if isatty is None or not isatty():
            return text
        return f"{style}{text}{Style.RESET}"
