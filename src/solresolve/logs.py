# src/solresolve/logs.py

import logging
from typing import cast

from apathetic_logging import (
    Logger,
    registerDefaultLogLevel,
    registerLogger,
    registerLogLevelEnvVars,
)

from .constants import DEFAULT_ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL
from .meta import PROGRAM_ENV, PROGRAM_PACKAGE


class AppLogger(Logger):
    """Logger for the resolver and its CLI.

    stdout belongs to the JSON the CLI prints, so anything meant for
    people is logged at DEBUG or above (stderr).
    """


# --- Logger initialization ---------------------------------------------------

# Must happen before any loggers are created so they pick up the env/default
registerLogLevelEnvVars(
    [f"{PROGRAM_ENV}_{DEFAULT_ENV_LOG_LEVEL}", DEFAULT_ENV_LOG_LEVEL]
)
registerDefaultLogLevel(DEFAULT_LOG_LEVEL)

# Installs AppLogger as the logger class and adds the TRACE/SILENT levels
registerLogger(PROGRAM_PACKAGE, AppLogger, propagate=False)

_APP_LOGGER = cast("AppLogger", logging.getLogger(PROGRAM_PACKAGE))
# owns a single handler; records never reach the root logger's handlers
_APP_LOGGER.setPropagate(False)


# --- Convenience utils ---------------------------------------------------------


def getAppLogger() -> AppLogger:  # noqa: N802
    """Return the configured app logger."""
    return _APP_LOGGER
