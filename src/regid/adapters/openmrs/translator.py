"""Translate OpenMRS payloads to and from domain identifier objects."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

from regid.domain.model import (
    AutoGenerationOption,
    FormValues,
    IdentifierFieldRecord,
    IdentifierSource,
    IdentifierType,
)

from .schema import (
    AutoGenerationOptionPayload,
    IdentifierFieldPayload,
    IdentifierSourcePayload,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from regid.domain.model import FieldName, FormIdentifiers

    from .schema import FormValuesPayload, IdentifierTypePayload

_WORD_PATTERN = re.compile(r"[A-Za-z0-9]+")


def field_name_for(type_name: str) -> FieldName:
    """Camel-case an identifier type name into its form key ("OpenMRS ID" -> "openmrsId")."""

    words = _WORD_PATTERN.findall(type_name)
    if not words:
        return ""
    head, *tail = words
    return head.lower() + "".join(word[:1].upper() + word[1:].lower() for word in tail)


def translate_identifier_source(payload: IdentifierSourcePayload) -> IdentifierSource:
    option = payload.auto_generation_option
    return IdentifierSource(
        uuid=payload.uuid,
        name=payload.name,
        auto_generation_option=(
            AutoGenerationOption(
                automatic_generation_enabled=option.automatic_generation_enabled,
                manual_entry_enabled=option.manual_entry_enabled,
            )
            if option is not None
            else None
        ),
    )


def translate_identifier_type(payload: IdentifierTypePayload) -> IdentifierType:
    return IdentifierType(
        uuid=payload.uuid,
        name=payload.name,
        field_name=payload.field_name or field_name_for(payload.name),
        is_primary=payload.is_primary,
        required=payload.required,
        identifier_sources=tuple(
            translate_identifier_source(source) for source in payload.identifier_sources or ()
        ),
    )


def translate_prior_identifier(payload: IdentifierFieldPayload) -> dict[str, Any]:
    """Return only the fields present in the payload, as initializer prior values."""

    prior: dict[str, Any] = {}
    for name in payload.model_fields_set:
        if name not in IdentifierFieldPayload.model_fields:
            continue
        value = getattr(payload, name)
        if name == "selected_source" and value is not None:
            value = translate_identifier_source(value)
        prior[name] = value
    return prior


def translate_identifier_record(payload: IdentifierFieldPayload) -> IdentifierFieldRecord:
    source = payload.selected_source
    return IdentifierFieldRecord(
        identifier_type_uuid=payload.identifier_type_uuid,
        identifier_name=payload.identifier_name,
        preferred=payload.preferred,
        initial_value=payload.initial_value,
        required=payload.required,
        identifier_value=payload.identifier_value or "",
        auto_generation=payload.auto_generation,
        selected_source=translate_identifier_source(source) if source is not None else None,
    )


def translate_form_values(payload: FormValuesPayload) -> tuple[FormValues, dict[str, Any]]:
    """Split a form file into live values and uuid-keyed prior values.

    Live entries keyed by their own identifier-type uuid are prior state, not
    fields: they keep only the keys present in the file and take precedence
    over ``initialIdentifiers`` for the same type.
    """

    live: dict[str, IdentifierFieldRecord] = {}
    live_priors: dict[str, dict[str, Any]] = {}
    for key, record in payload.identifiers.items():
        if key == record.identifier_type_uuid:
            live_priors[key] = translate_prior_identifier(record)
        else:
            live[key] = translate_identifier_record(record)

    initial = {
        uuid: translate_prior_identifier(record)
        for uuid, record in payload.initial_identifiers.items()
    }
    return FormValues(identifiers=live), {**initial, **live_priors}


def _source_payload(source: IdentifierSource) -> IdentifierSourcePayload:
    option = source.auto_generation_option
    return IdentifierSourcePayload(
        uuid=source.uuid,
        name=source.name,
        auto_generation_option=(
            AutoGenerationOptionPayload(
                automatic_generation_enabled=option.automatic_generation_enabled,
                manual_entry_enabled=option.manual_entry_enabled,
            )
            if option is not None
            else None
        ),
    )


def identifiers_to_payload(identifiers: FormIdentifiers) -> dict[str, Mapping[str, Any]]:
    """Render identifier records as camelCase JSON-ready mappings."""

    rendered: dict[str, Mapping[str, Any]] = {}
    for field_name, record in identifiers.items():
        source = record.selected_source
        payload = IdentifierFieldPayload(
            identifier_type_uuid=record.identifier_type_uuid,
            identifier_name=record.identifier_name,
            preferred=record.preferred,
            initial_value=record.initial_value,
            required=record.required,
            identifier_value=record.identifier_value,
            auto_generation=record.auto_generation,
            selected_source=_source_payload(source) if source is not None else None,
        )
        rendered[field_name] = payload.model_dump(mode="json", by_alias=True)
    return rendered
