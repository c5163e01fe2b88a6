"""TOML-based configuration loader.

Reads the ``[mementor]`` table from the user's config file. Missing file or
missing table means every key falls back to the next source.
"""

from __future__ import annotations

import logging
import tomllib

from dataclasses import dataclass
from pathlib import Path
from typing import Any, cast

from mementor.shared.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

_TABLE = "mementor"
_ALL_KNOWN_KEYS = {"data_file", "log_level"}


@dataclass(frozen=True)
class FileConfig:
    """Settings found in the config file. None means not set there."""

    data_file: Path | None = None
    log_level: str | None = None


def load_file_config(toml_path: Path) -> FileConfig:
    """Load the ``[mementor]`` table from *toml_path*.

    Raises:
        ConfigurationError: On TOML parse errors or wrongly typed values.
    """
    section = _read_section(toml_path)
    if section is None:
        return FileConfig()

    _warn_unknown_keys(section)

    raw_file: Any = section.get("data_file")
    raw_level: Any = section.get("log_level")
    for key, raw in (("data_file", raw_file), ("log_level", raw_level)):
        if raw is not None and not isinstance(raw, str):
            msg = f"{key} in {toml_path} must be a string, got {raw!r}"
            raise ConfigurationError(msg)

    return FileConfig(
        data_file=Path(raw_file).expanduser() if raw_file else None,
        log_level=raw_level or None,
    )


# ── internal helpers ────────────────────────────────────────────────────


def _read_section(toml_path: Path) -> dict[str, Any] | None:
    """Read ``[mementor]`` from *toml_path*, or ``None`` if absent."""
    if not toml_path.is_file():
        return None
    try:
        with toml_path.open("rb") as f:
            data = tomllib.load(f)
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
        msg = f"Failed to parse {toml_path}: {exc}"
        raise ConfigurationError(msg) from exc
    except OSError as exc:
        msg = f"Cannot read {toml_path}: {exc.strerror or exc}"
        raise ConfigurationError(msg) from exc
    section: Any = data.get(_TABLE)
    if not isinstance(section, dict):
        return None
    return cast(dict[str, Any], section)


def _warn_unknown_keys(section: dict[str, Any]) -> None:
    """Log a warning for any keys not in the known set."""
    for key in section:
        if key not in _ALL_KNOWN_KEYS:
            logger.warning("Unknown key in [%s]: %r", _TABLE, key)
