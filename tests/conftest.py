from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from regid.domain.model import IdentifierSource, IdentifierType
from tests.helpers.identifiers import (
    ID_CARD_UUID,
    LEGACY_ID_UUID,
    OPENMRS_ID_UUID,
    id_card_type,
    legacy_id_type,
    make_source,
    openmrs_id_type,
)

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def auto_source() -> IdentifierSource:
    return make_source("auto", automatic=True)


@pytest.fixture
def auto_manual_source() -> IdentifierSource:
    return make_source("auto-manual", automatic=True, manual=True)


@pytest.fixture
def manual_source() -> IdentifierSource:
    return make_source("manual", manual=True)


@pytest.fixture
def catalog() -> tuple[IdentifierType, ...]:
    return (openmrs_id_type(), id_card_type(), legacy_id_type())


@pytest.fixture
def catalog_payload() -> list[dict[str, object]]:
    return [
        {
            "uuid": OPENMRS_ID_UUID,
            "name": "OpenMRS ID",
            "fieldName": "openmrsId",
            "required": True,
            "isPrimary": True,
            "format": None,
            "identifierSources": [
                {
                    "uuid": "691eed12-c0f1-11e2-94be-8c13b969e334",
                    "name": "Generator for OpenMRS ID",
                    "autoGenerationOption": {
                        "manualEntryEnabled": False,
                        "automaticGenerationEnabled": True,
                    },
                }
            ],
        },
        {
            "uuid": ID_CARD_UUID,
            "name": "ID Card",
            "required": False,
            "isPrimary": False,
            "identifierSources": [],
        },
        {
            "uuid": LEGACY_ID_UUID,
            "name": "Legacy ID",
            "fieldName": "legacyId",
            "required": False,
            "isPrimary": False,
        },
    ]


@pytest.fixture
def catalog_file(tmp_path: Path, catalog_payload: list[dict[str, object]]) -> Path:
    path = tmp_path / "identifier_types.json"
    path.write_text(json.dumps(catalog_payload))
    return path


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "registration_config.json"
    path.write_text(
        json.dumps(
            {
                "defaultPatientIdentifierTypes": [ID_CARD_UUID],
                "identifierTypeOverrides": [{"identifierTypeUuid": ID_CARD_UUID, "required": True}],
                "fieldConfigurations": {},
            }
        )
    )
    return path
