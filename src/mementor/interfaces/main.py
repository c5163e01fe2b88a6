"""Unified entry point: composition root and action dispatch.

Parses the command line, assembles configuration, wires the JSON file
store into the ``ManageMementos`` use case and runs one action:

- ``fetch`` (default): print a random memento
- ``list`` / ``ls``: print every memento with its age and priority
- ``add``: append a memento
- ``rm`` / ``del``: remove a memento by id
- ``modify`` / ``mod``: change the message or priority of a memento
- ``version`` / ``help``
"""

from __future__ import annotations

import logging
import sys

from collections.abc import Sequence

from mementor.application.dto import (
    AddMementoCommand,
    ModifyMementoCommand,
    RemoveMementoCommand,
)
from mementor.application.manage_mementos import ManageMementos
from mementor.infrastructure.storage.json_store import JsonFileMementoStore
from mementor.interfaces.cli import (
    Action,
    Invocation,
    build_parser,
    parse_invocation,
    parse_memento_id,
    parse_message,
    parse_change,
    resolve_action,
)
from mementor.interfaces.config import MementorConfig
from mementor.interfaces.presenter import TerminalRenderer
from mementor.shared.constants import LOG_FORMAT, VERSION
from mementor.shared.exceptions import MementorError

logger = logging.getLogger(__name__)


def run(
    argv: Sequence[str] | None = None,
    renderer: TerminalRenderer | None = None,
    use_case: ManageMementos | None = None,
) -> int:
    """Run one mementor command and return the process exit status."""
    renderer = renderer or TerminalRenderer()
    invocation = parse_invocation(argv)

    action = resolve_action(invocation.action)
    if action is None:
        renderer.error(f"Action `{invocation.action}` is invalid")
        renderer.plain(build_parser().format_help())
        return 1
    if action is Action.VERSION:
        renderer.plain(VERSION)
        return 0
    if action is Action.HELP:
        renderer.plain(build_parser().format_help())
        return 0

    try:
        config = MementorConfig.from_sources(
            data_file=invocation.data_file,
            debug=invocation.debug,
        )
        _setup_logging(config.log_level)
        if use_case is None:
            use_case = _build_use_case(config, renderer)
        _dispatch(action, invocation, use_case, renderer)
    except MementorError as e:
        renderer.error(str(e))
        return 1
    except Exception:
        logger.exception("Unexpected error")
        return 1
    return 0


def main() -> None:
    """Console script entry point."""
    sys.exit(run())


# =============================================================================
# WIRING
# =============================================================================


def _setup_logging(level: str) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)
    logging.getLogger().setLevel(level)


def _build_use_case(
    config: MementorConfig, renderer: TerminalRenderer
) -> ManageMementos:
    store = JsonFileMementoStore(path=config.data_file)
    if store.ensure():
        renderer.info(f"{config.data_file} was created")
    return ManageMementos(repository=store)


def _dispatch(
    action: Action,
    invocation: Invocation,
    use_case: ManageMementos,
    renderer: TerminalRenderer,
) -> None:
    """Run a store action. Errors propagate to ``run``."""
    args = invocation.args

    if action is Action.FETCH:
        memento = use_case.fetch()
        if memento is not None:
            renderer.plain(memento.message)
    elif action is Action.LIST:
        renderer.listing(use_case.list_all())
    elif action is Action.ADD:
        added = use_case.add(AddMementoCommand(message=parse_message(args)))
        renderer.info(f"Added memento {added.id}.")
    elif action is Action.REMOVE:
        removed = use_case.remove(
            RemoveMementoCommand(memento_id=parse_memento_id(args))
        )
        renderer.info(f"Removed memento {removed.id}.")
    elif action is Action.MODIFY:
        cmd = ModifyMementoCommand(
            memento_id=parse_memento_id(args),
            change=parse_change(args),
        )
        updated = use_case.modify(cmd)
        renderer.info(f"Updated memento {updated.id}.")


if __name__ == "__main__":
    main()
