"""Command-line argument parsing for mementor."""

from __future__ import annotations

import argparse
import re

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import StrEnum

from mementor.shared.exceptions import InvalidArgumentError

_MEMENTO_ID = re.compile(r"[0-9]+")

_USAGE = "mementor [OPTIONS...] ACTION [arguments...]"

_DESCRIPTION = """\
Display, add, modify and remove mementos: short messages describing things
you need to be reminded of regularly.

actions:
  add MESSAGE...        Add new memento.
  fetch                 Display a random memento (default).
  modify ID FIELD:VALUE Modify the message or priority of a memento.
  rm ID                 Remove a memento.
  help                  Display this help.
  list                  List all mementos.
  version               Display the current version.
"""


class Action(StrEnum):
    """Top-level commands."""

    ADD = "add"
    FETCH = "fetch"
    REMOVE = "rm"
    MODIFY = "modify"
    LIST = "list"
    VERSION = "version"
    HELP = "help"


_ALIASES: dict[str, Action] = {
    "del": Action.REMOVE,
    "mod": Action.MODIFY,
    "ls": Action.LIST,
}


@dataclass(frozen=True)
class Invocation:
    """A parsed command line."""

    action: str
    args: list[str] = field(default_factory=list[str])
    data_file: str | None = None
    debug: bool = False


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser. Options must precede the action."""
    parser = argparse.ArgumentParser(
        prog="mementor",
        usage=_USAGE,
        description=_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-f",
        "--file",
        dest="data_file",
        metavar="PATH",
        help="Path to the mementos storage file.",
    )
    parser.add_argument(
        "-debug",
        "--debug",
        action="store_true",
        help="Turn debugging on.",
    )
    parser.add_argument("action", nargs="?", default=Action.FETCH.value)
    parser.add_argument("args", nargs=argparse.REMAINDER)
    return parser


def parse_invocation(argv: Sequence[str] | None = None) -> Invocation:
    """Parse *argv* (defaults to ``sys.argv[1:]``)."""
    ns = build_parser().parse_args(argv)
    return Invocation(
        action=ns.action,
        args=list(ns.args),
        data_file=ns.data_file,
        debug=ns.debug,
    )


def resolve_action(name: str) -> Action | None:
    """Map an action name or alias to an Action, or None if unknown."""
    if name in _ALIASES:
        return _ALIASES[name]
    try:
        return Action(name)
    except ValueError:
        return None


# =============================================================================
# ARGUMENT HELPERS
# =============================================================================


def parse_message(args: Sequence[str]) -> str:
    """Join the remaining arguments into one message.

    Raises:
        InvalidArgumentError: If there is no message text.
    """
    message = " ".join(args)
    if not message.strip():
        msg = "Please specify the message."
        raise InvalidArgumentError(msg)
    return message


def parse_memento_id(args: Sequence[str]) -> int:
    """Read the memento id from the first argument.

    Raises:
        InvalidArgumentError: If the id is missing or not plain digits.
    """
    if not args:
        msg = "Missing memento id in arguments"
        raise InvalidArgumentError(msg)
    raw = args[0]
    if not _MEMENTO_ID.fullmatch(raw):
        msg = f"Invalid memento id: {raw}"
        raise InvalidArgumentError(msg)
    return int(raw)


def parse_change(args: Sequence[str]) -> str:
    """Read the raw ``field:value`` change from the arguments after the id.

    Arguments split by the shell are joined back with single spaces. The
    change is validated only once the memento is known to exist.

    Raises:
        InvalidArgumentError: If the change is missing.
    """
    if len(args) < 2:
        msg = "Not enough arguments, expected: modify ID FIELD:VALUE"
        raise InvalidArgumentError(msg)
    return " ".join(args[1:])
