"""Shared logging helpers for hooklink."""

from __future__ import annotations

import logging
import os

from .errors import ConfigurationError


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Initialise the root logger once with sensible defaults.

    Parameters mirror ``logging.basicConfig`` with a simplified contract: we default
    to INFO level and a terse format suitable for CLI output. Pass ``force=True`` to
    reconfigure during tests or specialised entry points.
    """

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )


def get_log_level(default: int = logging.INFO) -> int:
    """Return the level named by ``HOOKLINK_LOG_LEVEL`` (e.g. ``DEBUG``), or ``default``."""

    name = os.getenv("HOOKLINK_LOG_LEVEL")
    if name is None or not name.strip():
        return default
    level = logging.getLevelNamesMapping().get(name.strip().upper())
    if level is None:
        raise ConfigurationError(f"Unknown log level: {name}")
    return level
