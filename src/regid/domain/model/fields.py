"""Per-type identifier field state held by a registration form."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, TypeAlias

if TYPE_CHECKING:
    from collections.abc import Mapping

    from regid.domain.model.catalog import IdentifierSource
    from regid.domain.model.primitives import FieldName, Uuid


@dataclass(frozen=True, slots=True)
class AutoGenerated:
    """The value will be generated when the patient is saved."""


@dataclass(frozen=True, slots=True)
class ManualValue:
    text: str


IdentifierValue: TypeAlias = AutoGenerated | ManualValue


@dataclass(kw_only=True)
class IdentifierFieldRecord:
    """Form value for one identifier type.

    Created the first time its type becomes relevant, then edited in place by
    the form until pruned.
    """

    identifier_type_uuid: Uuid
    identifier_name: str
    preferred: bool = False
    initial_value: str = ""
    required: bool = False
    identifier_value: str = ""
    auto_generation: bool = False
    selected_source: IdentifierSource | None = None

    @property
    def value(self) -> IdentifierValue:
        """Typed view of ``identifier_value``.

        Only a source that forces generation yields :class:`AutoGenerated`; text
        equal to the sentinel under a manual source stays a manual value.
        """
        source = self.selected_source
        if source is not None and source.forces_auto_generation:
            return AutoGenerated()
        return ManualValue(self.identifier_value)


FormIdentifiers: TypeAlias = "dict[FieldName, IdentifierFieldRecord]"


@dataclass(slots=True)
class FormValues:
    """The identifier slice of a registration form's values.

    ``identifiers`` is keyed by field name. Entries keyed by an identifier-type
    uuid are read as prior state for that type when its field is created.
    """

    identifiers: FormIdentifiers = field(default_factory=dict[str, IdentifierFieldRecord])


# Prior state for one identifier type: a full record or any subset of its fields.
PriorIdentifier: TypeAlias = "IdentifierFieldRecord | Mapping[str, Any]"


@dataclass(slots=True)
class InitialFormValues:
    """Identifier values the form was opened with, keyed by identifier-type uuid."""

    identifiers: dict[Uuid, PriorIdentifier] = field(default_factory=dict[str, PriorIdentifier])
