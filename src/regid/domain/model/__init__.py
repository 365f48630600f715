"""Public domain model surface."""

from __future__ import annotations

from regid.domain.model.catalog import (
    AutoGenerationOption,
    IdentifierSource,
    IdentifierType,
    OverrideRule,
)
from regid.domain.model.fields import (
    AutoGenerated,
    FormIdentifiers,
    FormValues,
    IdentifierFieldRecord,
    IdentifierValue,
    InitialFormValues,
    ManualValue,
    PriorIdentifier,
)
from regid.domain.model.primitives import AUTO_GENERATED, FieldName, Uuid
from regid.domain.model.registration import RegistrationConfig

__all__ = [  # noqa: RUF022
    # catalog
    "AutoGenerationOption",
    "IdentifierSource",
    "IdentifierType",
    "OverrideRule",
    # form state
    "IdentifierFieldRecord",
    "FormIdentifiers",
    "FormValues",
    "InitialFormValues",
    "PriorIdentifier",
    "IdentifierValue",
    "AutoGenerated",
    "ManualValue",
    # configuration
    "RegistrationConfig",
    # primitives
    "AUTO_GENERATED",
    "FieldName",
    "Uuid",
]
