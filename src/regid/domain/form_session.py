"""Explicit form-session state shared by the identifier routines and edit handlers."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TypeAlias

from regid.domain.identifiers import delete_identifier_type
from regid.domain.model import FormValues, IdentifierFieldRecord, InitialFormValues

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

log = logging.getLogger(__name__)

FormListener: TypeAlias = "Callable[[], None]"

IDENTIFIERS_PATH = "identifiers"


class UnsupportedFieldPathError(ValueError):
    """Raised when a form path does not address the identifiers slice."""


@dataclass(eq=False)
class FormSession:
    """Owner of the live identifier form values.

    Every commit replaces ``values.identifiers`` with a new mapping and then
    notifies listeners, so identity comparison is enough to detect change.
    """

    values: FormValues = field(default_factory=FormValues)
    initial_form_values: InitialFormValues = field(default_factory=InitialFormValues)
    _listeners: list[FormListener] = field(
        default_factory=list[FormListener], init=False, repr=False
    )

    def subscribe(self, listener: FormListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def set_field_value(self, path: str, value: object) -> None:
        """Commit ``value`` at ``path``.

        Supported paths are ``"identifiers"`` (the whole mapping) and
        ``"identifiers.<field name>"`` (one record; ``None`` removes it).
        """

        head, dot, field_name = path.partition(".")
        if head != IDENTIFIERS_PATH or (dot and not field_name):
            raise UnsupportedFieldPathError(f"Unsupported form path: {path}")

        if not field_name:
            self.values.identifiers = dict(_as_identifiers(path, value))
        elif value is None:
            self.values.identifiers = delete_identifier_type(self.values.identifiers, field_name)
        elif isinstance(value, IdentifierFieldRecord):
            self.values.identifiers = {**self.values.identifiers, field_name: value}
        else:
            raise UnsupportedFieldPathError(
                f"Expected an identifier record at {path}, got {type(value).__name__}"
            )

        log.debug("Committed %s", path)
        for listener in tuple(self._listeners):
            listener()


def _as_identifiers(path: str, value: object) -> Mapping[str, IdentifierFieldRecord]:
    if not isinstance(value, dict):
        raise UnsupportedFieldPathError(
            f"Expected a mapping of identifier records at {path}, got {type(value).__name__}"
        )
    for field_name, record in value.items():  # pyright: ignore[reportUnknownVariableType]
        if not isinstance(record, IdentifierFieldRecord):
            raise UnsupportedFieldPathError(
                f"Expected an identifier record at {path}.{field_name}, "
                f"got {type(record).__name__}"  # pyright: ignore[reportUnknownArgumentType]
            )
    return value  # pyright: ignore[reportUnknownVariableType]


__all__ = ["IDENTIFIERS_PATH", "FormListener", "FormSession", "UnsupportedFieldPathError"]
