"""Read identifier catalogs and form state from JSON files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from pydantic import TypeAdapter

from .schema import FormValuesPayload, IdentifierTypePayload
from .translator import translate_form_values, translate_identifier_type

if TYPE_CHECKING:
    from regid.domain.model import FormValues, IdentifierType

log = logging.getLogger(__name__)

_CATALOG_ADAPTER = TypeAdapter(list[IdentifierTypePayload])
_DOCUMENT_ADAPTER = TypeAdapter(dict[str, Any] | list[Any])


def parse_identifier_types(payload: str | bytes) -> tuple[IdentifierType, ...]:
    """Parse a JSON array of identifier types, or a REST envelope with ``results``."""

    document = _DOCUMENT_ADAPTER.validate_json(payload)
    items = document.get("results", []) if isinstance(document, dict) else document
    return tuple(
        translate_identifier_type(item) for item in _CATALOG_ADAPTER.validate_python(items)
    )


def load_identifier_types(path: Path | str) -> tuple[IdentifierType, ...]:
    identifier_types = parse_identifier_types(Path(path).read_bytes())
    log.debug("Loaded %s identifier types from %s", len(identifier_types), path)
    return identifier_types


def load_form_values(path: Path | str) -> tuple[FormValues, dict[str, Any]]:
    """Return live form values and uuid-keyed initial identifier values."""

    payload = FormValuesPayload.model_validate_json(Path(path).read_bytes())
    return translate_form_values(payload)
