"""Deployment settings that decide which identifier fields a form starts with."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from regid.domain.model.catalog import OverrideRule
    from regid.domain.model.primitives import Uuid


@dataclass(frozen=True, slots=True)
class RegistrationConfig:
    """Which identifier types a new registration starts with, and how they are required."""

    default_patient_identifier_types: tuple[Uuid, ...] = ()
    identifier_type_overrides: tuple[OverrideRule, ...] = field(default_factory=tuple)
