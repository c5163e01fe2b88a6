"""Configuration assembly from defaults, config file, environment and flags."""

from __future__ import annotations

import os

from dataclasses import dataclass
from pathlib import Path

from mementor.interfaces.toml_config import load_file_config
from mementor.shared.constants import (
    CONFIG_FILE_NAME,
    DATA_DIR_NAME,
    DATA_FILE_NAME,
    DEFAULT_LOG_LEVEL,
)
from mementor.shared.exceptions import ConfigurationError

_VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _require_env(name: str) -> str:
    """Read a required environment variable or raise."""
    value = os.environ.get(name)
    if not value:
        msg = f"Missing required environment variable: {name}"
        raise ConfigurationError(msg)
    return value


def _parse_log_level(raw: str) -> str:
    """Normalize a log level name or raise with a clear message."""
    level = raw.strip().upper()
    if level not in _VALID_LOG_LEVELS:
        valid = ", ".join(_VALID_LOG_LEVELS)
        msg = f"Invalid log level {raw!r} (valid: {valid})"
        raise ConfigurationError(msg)
    return level


@dataclass(frozen=True)
class MementorConfig:
    """Typed configuration for one mementor invocation."""

    data_file: Path
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_sources(
        cls,
        data_file: str | None = None,
        debug: bool = False,
    ) -> MementorConfig:
        """Build config, later sources winning over earlier ones.

        Order: defaults, config file, environment, command-line flags.

        Required:
            HOME

        Optional:
            MEMENTOR_CONFIG, MEMENTOR_FILE, MEMENTOR_LOG_LEVEL
        """
        home = Path(_require_env("HOME"))
        data_dir = home / DATA_DIR_NAME

        config_path = Path(
            os.environ.get("MEMENTOR_CONFIG", str(data_dir / CONFIG_FILE_NAME))
        ).expanduser()
        file_config = load_file_config(config_path)

        path = file_config.data_file or data_dir / DATA_FILE_NAME
        level = file_config.log_level or DEFAULT_LOG_LEVEL

        env_file = os.environ.get("MEMENTOR_FILE")
        if env_file:
            path = Path(env_file).expanduser()
        env_level = os.environ.get("MEMENTOR_LOG_LEVEL")
        if env_level:
            level = env_level

        if data_file:
            path = Path(data_file).expanduser()
        if debug:
            level = "DEBUG"

        return cls(data_file=path, log_level=_parse_log_level(level))
