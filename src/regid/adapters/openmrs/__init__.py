"""OpenMRS-shaped payload adapter for identifier catalogs and form state."""

from __future__ import annotations

from .loader import load_form_values, load_identifier_types, parse_identifier_types
from .translator import field_name_for, identifiers_to_payload, translate_identifier_type

__all__ = [
    "field_name_for",
    "identifiers_to_payload",
    "load_form_values",
    "load_identifier_types",
    "parse_identifier_types",
    "translate_identifier_type",
]
