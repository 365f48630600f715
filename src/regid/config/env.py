"""Environment variable loaders for configuration."""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

from .errors import MissingConfigurationError

if TYPE_CHECKING:
    from collections.abc import Sequence

CONFIG_PATH_ENV_VAR = "REGID_CONFIG_PATH"
LOG_LEVEL_ENV_VAR = "REGID_LOG_LEVEL"


def require_env_vars(names: Sequence[str]) -> dict[str, str]:
    """Return the given environment variables or raise if any are missing/blank."""

    missing = [name for name in names if not (os.getenv(name) or "").strip()]
    if missing:
        raise MissingConfigurationError(f"Missing configuration for: {', '.join(sorted(missing))}")
    return {name: os.environ[name] for name in names}


def config_path_from_env() -> Path:
    return Path(require_env_vars([CONFIG_PATH_ENV_VAR])[CONFIG_PATH_ENV_VAR]).expanduser()


def optional_env_var(name: str) -> str | None:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()
