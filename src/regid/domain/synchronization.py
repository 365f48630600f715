"""Keep form identifier fields in step with the identifier-type catalog."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from regid.domain.form_session import IDENTIFIERS_PATH
from regid.domain.identifiers import initialize_identifier
from regid.domain.model import RegistrationConfig

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from regid.domain.form_session import FormSession
    from regid.domain.model import (
        FormIdentifiers,
        IdentifierFieldRecord,
        IdentifierType,
        PriorIdentifier,
    )

log = logging.getLogger(__name__)


def synchronize_identifiers(
    identifier_types: Sequence[IdentifierType] | None,
    config: RegistrationConfig | None,
    identifiers: FormIdentifiers,
    initial_identifiers: Mapping[str, PriorIdentifier] | None = None,
) -> FormIdentifiers | None:
    """Return ``identifiers`` extended with missing primary/required/default types.

    Fields already present are never reinitialized. Returns ``None`` when the
    catalog is not loaded yet or nothing is missing, so callers can skip the
    commit entirely.
    """

    if identifier_types is None:
        return None
    config = config or RegistrationConfig()
    defaults = set(config.default_patient_identifier_types)
    initial_identifiers = initial_identifiers or {}

    added: dict[str, IdentifierFieldRecord] = {}
    for identifier_type in identifier_types:
        if not (
            identifier_type.is_primary
            or identifier_type.required
            or identifier_type.uuid in defaults
        ):
            continue
        if identifier_type.field_name in identifiers:
            continue
        # Prior state is looked up by type uuid: live values first, then the form's initial values.
        prior = identifiers.get(identifier_type.uuid)
        if prior is None:
            prior = initial_identifiers.get(identifier_type.uuid)
        added[identifier_type.field_name] = initialize_identifier(
            identifier_type,
            prior if prior is not None else {},
            config.identifier_type_overrides,
        )

    if not added:
        return None
    return {**identifiers, **added}


class IdentifierSynchronizer:
    """Re-run :func:`synchronize_identifiers` whenever one of its inputs changes.

    The inputs are the catalog, the config and the session's identifier mapping,
    compared by identity. Committing a patch notifies the session listeners,
    which re-enters :meth:`on_change`; that run sees its own output and stops.
    """

    def __init__(
        self,
        session: FormSession,
        *,
        identifier_types: Sequence[IdentifierType] | None = None,
        config: RegistrationConfig | None = None,
    ) -> None:
        self._session = session
        self._identifier_types = identifier_types
        self._config = config or RegistrationConfig()
        self._last_inputs: tuple[object, object, object] | None = None
        self._unsubscribe = session.subscribe(self.on_change)
        self.on_change()

    @property
    def identifier_types(self) -> Sequence[IdentifierType] | None:
        return self._identifier_types

    @property
    def config(self) -> RegistrationConfig:
        return self._config

    def update_catalog(self, identifier_types: Sequence[IdentifierType] | None) -> None:
        self._identifier_types = identifier_types
        self.on_change()

    def update_config(self, config: RegistrationConfig) -> None:
        self._config = config
        self.on_change()

    def close(self) -> None:
        self._unsubscribe()

    def on_change(self) -> FormIdentifiers | None:
        """Synchronize if any input changed identity; return the committed mapping."""

        identifiers = self._session.values.identifiers
        inputs = (self._identifier_types, self._config, identifiers)
        if self._last_inputs is not None and all(
            current is previous for current, previous in zip(inputs, self._last_inputs, strict=True)
        ):
            return None
        self._last_inputs = inputs

        patch = synchronize_identifiers(
            self._identifier_types,
            self._config,
            identifiers,
            self._session.initial_form_values.identifiers,
        )
        if patch is None:
            log.debug("Identifier fields up to date (%s present)", len(identifiers))
            return None

        added = sorted(patch.keys() - identifiers.keys())
        log.info("Adding identifier fields: %s", ", ".join(added))
        self._session.set_field_value(IDENTIFIERS_PATH, patch)
        return patch


__all__ = ["IdentifierSynchronizer", "synchronize_identifiers"]
