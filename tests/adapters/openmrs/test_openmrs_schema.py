"""Schema checks for identifier catalog and form payloads."""

from __future__ import annotations

import logging

import pytest

from regid.adapters.openmrs.schema import (
    FormValuesPayload,
    IdentifierSourcePayload,
    IdentifierTypePayload,
)


def test_catalog_payload_parses(catalog_payload: list[dict[str, object]]) -> None:
    for type_payload in catalog_payload:
        identifier_type = IdentifierTypePayload.model_validate(type_payload)
        assert identifier_type.uuid
        assert identifier_type.name

    openmrs_id = IdentifierTypePayload.model_validate(catalog_payload[0])
    assert openmrs_id.is_primary is True
    assert openmrs_id.field_name == "openmrsId"
    assert openmrs_id.identifier_sources is not None
    option = openmrs_id.identifier_sources[0].auto_generation_option
    assert option is not None
    assert option.automatic_generation_enabled is True
    assert option.manual_entry_enabled is False


def test_missing_identifier_sources_stays_none(catalog_payload: list[dict[str, object]]) -> None:
    legacy = IdentifierTypePayload.model_validate(catalog_payload[2])

    assert legacy.identifier_sources is None


def test_unmodeled_keys_are_logged_once(caplog: pytest.LogCaptureFixture) -> None:
    payload = {"uuid": "src", "name": "Generator", "identifierType": {"uuid": "t"}}

    with caplog.at_level(logging.WARNING, logger="regid.adapters.openmrs.schema"):
        IdentifierSourcePayload.model_validate(payload)
        IdentifierSourcePayload.model_validate(payload)

    assert caplog.text.count("identifierType") == 1


def test_form_values_payload_parses_camel_case_records() -> None:
    payload = FormValuesPayload.model_validate(
        {
            "identifiers": {
                "openmrsId": {
                    "identifierTypeUuid": "type-1",
                    "identifierName": "OpenMRS ID",
                    "preferred": True,
                    "initialValue": "",
                    "required": True,
                    "identifierValue": "auto-generated",
                    "autoGeneration": True,
                    "selectedSource": {"uuid": "src", "name": "Generator"},
                }
            },
            "initialIdentifiers": {"type-2": {"identifierTypeUuid": "type-2"}},
        }
    )

    record = payload.identifiers["openmrsId"]
    assert record.identifier_value == "auto-generated"
    assert record.selected_source is not None
    assert record.selected_source.uuid == "src"
    assert payload.initial_identifiers["type-2"].identifier_value is None
