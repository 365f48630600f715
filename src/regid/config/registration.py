"""Registration-form configuration for identifier fields."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from regid.domain.model import OverrideRule, RegistrationConfig

from .env import config_path_from_env
from .errors import InvalidConfigurationFileError

log = logging.getLogger(__name__)


class _OverrideRulePayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    identifier_type_uuid: str = Field(alias="identifierTypeUuid")
    required: bool | None = None


class _RegistrationConfigPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    default_patient_identifier_types: list[str] = Field(
        default_factory=list[str], alias="defaultPatientIdentifierTypes"
    )
    identifier_type_overrides: list[_OverrideRulePayload] = Field(
        default_factory=list[_OverrideRulePayload], alias="identifierTypeOverrides"
    )


def parse_registration_config(payload: str | bytes) -> RegistrationConfig:
    """Parse the frontend-style JSON config (camelCase keys)."""

    parsed = _RegistrationConfigPayload.model_validate_json(payload)
    return RegistrationConfig(
        default_patient_identifier_types=tuple(parsed.default_patient_identifier_types),
        identifier_type_overrides=tuple(
            OverrideRule(identifier_type_uuid=rule.identifier_type_uuid, required=rule.required)
            for rule in parsed.identifier_type_overrides
        ),
    )


def get_registration_config(path: Path | str | None = None) -> RegistrationConfig:
    """Load the registration config from ``path`` or ``REGID_CONFIG_PATH``."""

    config_path = Path(path) if path is not None else config_path_from_env()
    try:
        payload = config_path.read_bytes()
    except OSError as exc:
        raise InvalidConfigurationFileError(config_path, str(exc)) from exc
    try:
        config = parse_registration_config(payload)
    except ValidationError as exc:
        raise InvalidConfigurationFileError(config_path, str(exc)) from exc

    log.debug(
        "Loaded registration config from %s: defaults=%s, overrides=%s",
        config_path,
        len(config.default_patient_identifier_types),
        len(config.identifier_type_overrides),
    )
    return config
