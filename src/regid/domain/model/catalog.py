"""Identifier-type catalog descriptors.

These are owned by the external catalog and configuration loaders; the domain
only reads them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from regid.domain.model.primitives import FieldName, Uuid


@dataclass(frozen=True, slots=True)
class AutoGenerationOption:
    automatic_generation_enabled: bool = False
    manual_entry_enabled: bool = False


@dataclass(frozen=True, slots=True)
class IdentifierSource:
    """A configured mechanism for obtaining an identifier value."""

    uuid: Uuid
    name: str = ""
    auto_generation_option: AutoGenerationOption | None = None

    @property
    def forces_auto_generation(self) -> bool:
        option = self.auto_generation_option
        if option is None:
            return False
        return option.automatic_generation_enabled and not option.manual_entry_enabled


@dataclass(frozen=True, slots=True)
class IdentifierType:
    """A category of patient identifier with its policy flags and candidate sources."""

    uuid: Uuid
    name: str
    field_name: FieldName
    is_primary: bool = False
    required: bool = False
    identifier_sources: tuple[IdentifierSource, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class OverrideRule:
    """Deployment-level adjustment of an identifier type's required-ness.

    ``required=None`` leaves the catalog decision in place; an explicit ``False``
    relaxes even a primary type.
    """

    identifier_type_uuid: Uuid
    required: bool | None = None
