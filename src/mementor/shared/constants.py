"""Centralized defaults for Mementor. Overridable via configuration."""

from __future__ import annotations

VERSION = "0.2.0"

# =============================================================================
# STORAGE
# =============================================================================

DATA_DIR_NAME = ".mementor"
DATA_FILE_NAME = "mementos.json"
CONFIG_FILE_NAME = "config.toml"
DATA_DIR_MODE = 0o700

# =============================================================================
# MEMENTOS
# =============================================================================

DEFAULT_PRIORITY = 1
FIRST_MEMENTO_ID = 1

# =============================================================================
# RELATIVE AGE (seconds per unit)
# =============================================================================

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY = 24 * SECONDS_PER_HOUR
SECONDS_PER_MONTH = 30 * SECONDS_PER_DAY
SECONDS_PER_YEAR = 365 * SECONDS_PER_DAY

# =============================================================================
# LOGGING
# =============================================================================

DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
