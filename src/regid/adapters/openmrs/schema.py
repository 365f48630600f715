"""Payload schemas for identifier-type catalogs and form identifier values.

Shapes follow the registration frontend (camelCase keys).
"""

from __future__ import annotations

import logging
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

log = logging.getLogger(__name__)


class OpenMrsBaseModel(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)
    _logged_extra_keys: ClassVar[set[str]] = set()

    def model_post_init(self, _context: object, /) -> None:
        extras = self.__pydantic_extra__
        if not extras:
            return
        new_keys = set(extras).difference(self._logged_extra_keys)
        if not new_keys:
            return
        self._logged_extra_keys.update(new_keys)
        log.warning(
            "OpenMRS %s: unmodeled keys: %s",
            type(self).__name__,
            ", ".join(sorted(new_keys)),
        )


class AutoGenerationOptionPayload(OpenMrsBaseModel):
    uuid: str | None = None
    manual_entry_enabled: bool = Field(default=False, alias="manualEntryEnabled")
    automatic_generation_enabled: bool = Field(default=False, alias="automaticGenerationEnabled")


class IdentifierSourcePayload(OpenMrsBaseModel):
    uuid: str
    name: str = ""
    auto_generation_option: AutoGenerationOptionPayload | None = Field(
        default=None, alias="autoGenerationOption"
    )


class IdentifierTypePayload(OpenMrsBaseModel):
    uuid: str
    name: str
    field_name: str | None = Field(default=None, alias="fieldName")
    required: bool = False
    is_primary: bool = Field(default=False, alias="isPrimary")
    format: str | None = None
    # A missing list is kept as None so the type degrades to "no source".
    identifier_sources: list[IdentifierSourcePayload] | None = Field(
        default=None, alias="identifierSources"
    )


class IdentifierFieldPayload(OpenMrsBaseModel):
    identifier_type_uuid: str = Field(alias="identifierTypeUuid")
    identifier_name: str = Field(default="", alias="identifierName")
    preferred: bool = False
    initial_value: str = Field(default="", alias="initialValue")
    required: bool = False
    identifier_value: str | None = Field(default=None, alias="identifierValue")
    auto_generation: bool = Field(default=False, alias="autoGeneration")
    selected_source: IdentifierSourcePayload | None = Field(default=None, alias="selectedSource")


class FormValuesPayload(OpenMrsBaseModel):
    """Form state file: live identifiers plus the initial values of an existing patient."""

    identifiers: dict[str, IdentifierFieldPayload] = Field(
        default_factory=dict[str, IdentifierFieldPayload]
    )
    initial_identifiers: dict[str, IdentifierFieldPayload] = Field(
        default_factory=dict[str, IdentifierFieldPayload], alias="initialIdentifiers"
    )
