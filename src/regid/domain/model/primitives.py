"""Domain primitives: scalar aliases + the auto-generation sentinel."""

from __future__ import annotations

from typing import Final, TypeAlias

Uuid: TypeAlias = str
FieldName: TypeAlias = str  # form key of an identifier type, e.g. "openmrsId"

# Stored in place of a real value when the identifier is generated on save.
AUTO_GENERATED: Final = "auto-generated"
