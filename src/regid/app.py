"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from regid.adapters.openmrs import load_form_values, load_identifier_types
from regid.config import CONFIG_PATH_ENV_VAR, RegistrationConfig, get_registration_config
from regid.config.env import optional_env_var
from regid.domain.form_session import FormSession
from regid.domain.identifiers import delete_identifier_type
from regid.domain.model import FormValues, InitialFormValues
from regid.domain.synchronization import IdentifierSynchronizer

if TYPE_CHECKING:
    from pathlib import Path

    from regid.domain.model import FieldName, FormIdentifiers

log = getLogger(__name__)


def sync_identifier_fields(
    *,
    catalog_path: Path | str,
    config_path: Path | str | None = None,
    form_path: Path | str | None = None,
) -> FormIdentifiers:
    """Load catalog, config and form state, then return the synchronized identifiers."""

    identifier_types = load_identifier_types(catalog_path)
    config = _load_config(config_path)
    if form_path is not None:
        values, initial_identifiers = load_form_values(form_path)
    else:
        values, initial_identifiers = FormValues(), {}

    session = FormSession(
        values=values,
        initial_form_values=InitialFormValues(identifiers=initial_identifiers),
    )
    log.info(
        "Synchronizing identifiers: types=%s, present=%s",
        len(identifier_types),
        len(values.identifiers),
    )
    synchronizer = IdentifierSynchronizer(session, config=config)
    synchronizer.update_catalog(identifier_types)
    synchronizer.close()
    return session.values.identifiers


def remove_identifier_field(*, form_path: Path | str, field_name: FieldName) -> FormIdentifiers:
    values, _ = load_form_values(form_path)
    if field_name not in values.identifiers:
        log.info("Identifier field %s not present; nothing to remove", field_name)
    return delete_identifier_type(values.identifiers, field_name)


def _load_config(config_path: Path | str | None) -> RegistrationConfig:
    if config_path is None and optional_env_var(CONFIG_PATH_ENV_VAR) is None:
        log.debug("No registration config given; using defaults")
        return RegistrationConfig()
    return get_registration_config(config_path)
