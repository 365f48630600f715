"""Application configuration helpers."""

from __future__ import annotations

from .env import CONFIG_PATH_ENV_VAR, require_env_vars
from .errors import ConfigurationError, InvalidConfigurationFileError, MissingConfigurationError
from .logging import configure_logging
from .registration import RegistrationConfig, get_registration_config, parse_registration_config

__all__ = [
    "CONFIG_PATH_ENV_VAR",
    "ConfigurationError",
    "InvalidConfigurationFileError",
    "MissingConfigurationError",
    "RegistrationConfig",
    "configure_logging",
    "get_registration_config",
    "parse_registration_config",
    "require_env_vars",
]
