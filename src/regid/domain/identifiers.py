"""Derive identifier field records from catalog types and prior form state."""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any

from regid.domain.model import AUTO_GENERATED, IdentifierFieldRecord

if TYPE_CHECKING:
    from collections.abc import Iterable

    from regid.domain.model import (
        FieldName,
        FormIdentifiers,
        IdentifierSource,
        IdentifierType,
        OverrideRule,
        PriorIdentifier,
    )

log = logging.getLogger(__name__)

_RECORD_FIELDS = frozenset(f.name for f in fields(IdentifierFieldRecord))


@dataclass(frozen=True, slots=True)
class SourceResolution:
    identifier_value: str | None
    auto_generation: bool
    selected_source: IdentifierSource | None


def resolve_identifier_source(
    source: IdentifierSource | None,
    current_value: str | None,
    initial_value: str = "",
) -> SourceResolution:
    """Decide the effective value and auto-generation flag for ``source``.

    A source that generates without manual entry always yields the sentinel.
    Otherwise the current value is kept, unless it is the sentinel left behind by
    a previously selected generating source, in which case ``initial_value`` is
    restored.
    """

    option = source.auto_generation_option if source is not None else None
    auto_generation = bool(option and option.automatic_generation_enabled)
    manual_entry_enabled = bool(option and option.manual_entry_enabled)

    if auto_generation and not manual_entry_enabled:
        value: str | None = AUTO_GENERATED
    elif current_value != AUTO_GENERATED:
        value = current_value
    else:
        value = initial_value
    return SourceResolution(
        identifier_value=value,
        auto_generation=auto_generation,
        selected_source=source,
    )


def initialize_identifier(
    identifier_type: IdentifierType,
    prior: PriorIdentifier | None = None,
    overrides: Iterable[OverrideRule] | None = None,
) -> IdentifierFieldRecord:
    """Build the field record for ``identifier_type``.

    ``prior`` values are laid over the defaults derived from the type; source
    resolution then decides ``identifier_value``, ``auto_generation`` and
    ``selected_source``.
    """

    override = next(
        (rule for rule in overrides or () if rule.identifier_type_uuid == identifier_type.uuid),
        None,
    )
    if override is not None and override.required is not None:
        required = override.required
    else:
        required = identifier_type.is_primary or identifier_type.required

    values: dict[str, Any] = {
        "identifier_type_uuid": identifier_type.uuid,
        "identifier_name": identifier_type.name,
        "preferred": identifier_type.is_primary,
        "initial_value": "",
        "required": required,
    }
    prior_values = _prior_values(prior)
    values.update(prior_values)

    source = prior_values.get("selected_source")
    if source is None and identifier_type.identifier_sources:
        source = identifier_type.identifier_sources[0]
    resolution = resolve_identifier_source(
        source,
        prior_values.get("identifier_value"),
        prior_values.get("initial_value") or "",
    )
    values["identifier_value"] = resolution.identifier_value or ""
    values["auto_generation"] = resolution.auto_generation
    values["selected_source"] = resolution.selected_source
    return IdentifierFieldRecord(**values)


def change_identifier_source(
    record: IdentifierFieldRecord,
    source: IdentifierSource | None,
) -> IdentifierFieldRecord:
    """Switch ``record`` to ``source`` in place, re-resolving its value."""

    resolution = resolve_identifier_source(source, record.identifier_value, record.initial_value)
    record.identifier_value = resolution.identifier_value or ""
    record.auto_generation = resolution.auto_generation
    record.selected_source = resolution.selected_source
    return record


def delete_identifier_type(identifiers: FormIdentifiers, field_name: FieldName) -> FormIdentifiers:
    """Return a copy of ``identifiers`` without the ``field_name`` entry."""

    return {name: record for name, record in identifiers.items() if name != field_name}


def _prior_values(prior: PriorIdentifier | None) -> dict[str, Any]:
    if prior is None:
        return {}
    if isinstance(prior, IdentifierFieldRecord):
        return {name: getattr(prior, name) for name in _RECORD_FIELDS}

    unknown = set(prior).difference(_RECORD_FIELDS)
    if unknown:
        log.warning("Ignoring unknown identifier keys: %s", ", ".join(sorted(unknown)))
    return {key: value for key, value in prior.items() if key in _RECORD_FIELDS}


__all__ = [
    "SourceResolution",
    "change_identifier_source",
    "delete_identifier_type",
    "initialize_identifier",
    "resolve_identifier_source",
]
