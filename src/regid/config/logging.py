"""Shared logging helpers for regid."""

from __future__ import annotations

import logging

from .env import LOG_LEVEL_ENV_VAR, optional_env_var


def configure_logging(*, level: int | None = None, force: bool = False) -> None:
    """Initialise the root logger once.

    ``level`` falls back to ``REGID_LOG_LEVEL`` (a level name such as ``DEBUG``)
    and then to INFO. Pass ``force=True`` to reconfigure during tests.
    """

    logging.basicConfig(
        level=level if level is not None else _level_from_env(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )


def _level_from_env() -> int:
    name = optional_env_var(LOG_LEVEL_ENV_VAR)
    if name is None:
        return logging.INFO
    level = logging.getLevelNamesMapping().get(name.upper())
    if level is None:
        logging.getLogger(__name__).warning("Unknown log level %r, using INFO", name)
        return logging.INFO
    return level
