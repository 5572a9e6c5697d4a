"""Logging setup for the command line entry point."""

from __future__ import annotations

import logging
import os

from .errors import InvalidConfigurationValueError

LOG_LEVEL_ENV = "SIDECARPY_LOG_LEVEL"


def resolve_log_level(default: int = logging.INFO) -> int:
    """Return the level named by ``SIDECARPY_LOG_LEVEL`` (e.g. ``DEBUG``)."""

    value = os.getenv(LOG_LEVEL_ENV)
    if value is None or not value.strip():
        return default
    level = logging.getLevelNamesMapping().get(value.strip().upper())
    if level is None:
        raise InvalidConfigurationValueError(LOG_LEVEL_ENV, value, expected="a log level name")
    return level


def configure_logging(*, level: int | None = None, force: bool = False) -> None:
    """Initialise the root logger once.

    Without an explicit ``level`` the environment decides, defaulting to INFO.
    Adapters log dropped sources and unparseable dates at DEBUG.
    """

    logging.basicConfig(
        level=level if level is not None else resolve_log_level(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
