"""Builders for identifier catalog objects used across tests."""

from __future__ import annotations

from regid.domain.model import AutoGenerationOption, IdentifierSource, IdentifierType

OPENMRS_ID_UUID = "05a29f94-c0ed-11e2-94be-8c13b969e334"
ID_CARD_UUID = "b4143563-16cd-4439-b288-f83d61670fc8"
LEGACY_ID_UUID = "8d79403a-c2cc-11de-8d13-0010c6dffd0f"
NATIONAL_ID_UUID = "f0c5a2a2-8d6a-4c4a-9c3c-2a8f5e0d3b11"


def make_source(
    uuid: str = "src-1",
    *,
    automatic: bool = False,
    manual: bool = False,
    with_option: bool = True,
) -> IdentifierSource:
    return IdentifierSource(
        uuid=uuid,
        name=f"Generator {uuid}",
        auto_generation_option=(
            AutoGenerationOption(
                automatic_generation_enabled=automatic, manual_entry_enabled=manual
            )
            if with_option
            else None
        ),
    )


def make_type(
    uuid: str,
    name: str,
    field_name: str,
    *,
    is_primary: bool = False,
    required: bool = False,
    sources: tuple[IdentifierSource, ...] = (),
) -> IdentifierType:
    return IdentifierType(
        uuid=uuid,
        name=name,
        field_name=field_name,
        is_primary=is_primary,
        required=required,
        identifier_sources=sources,
    )


def openmrs_id_type(*sources: IdentifierSource) -> IdentifierType:
    return make_type(OPENMRS_ID_UUID, "OpenMRS ID", "openmrsId", is_primary=True, sources=sources)


def id_card_type(*, required: bool = False) -> IdentifierType:
    return make_type(ID_CARD_UUID, "ID Card", "idCard", required=required)


def legacy_id_type() -> IdentifierType:
    return make_type(LEGACY_ID_UUID, "Legacy ID", "legacyId")


def national_id_type() -> IdentifierType:
    return make_type(NATIONAL_ID_UUID, "National ID", "nationalId", required=True)
