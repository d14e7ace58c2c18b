"""Immutable form snapshot model."""

from __future__ import annotations

from typing import Generic, TypeVar

from formstate.domain import DomainModel, FormMode, FormPhase

FieldsT = TypeVar("FieldsT", bound=DomainModel)


class FieldError(DomainModel):
    """Validation message attached to a single field."""

    name: str
    message: str


class FormSnapshot(DomainModel, Generic[FieldsT]):
    """Point-in-time state of a form in progress.

    Field values live in a frozen record, errors are stored as a tuple and only
    exposed as fresh dictionaries, so a snapshot never changes once built.
    Validity is derived from the errors. Build snapshots through a
    :class:`~formstate.forms.definition.FormDefinition`, which always runs
    validation before handing one out.
    """

    data: FieldsT
    field_errors: tuple[FieldError, ...] = ()
    mode: FormMode = FormMode.CREATE
    is_submitting: bool = False
    is_dirty: bool = False

    @property
    def errors(self) -> dict[str, str]:
        return {error.name: error.message for error in self.field_errors}

    @property
    def is_valid(self) -> bool:
        return not self.field_errors

    @property
    def phase(self) -> FormPhase:
        if self.is_submitting:
            return FormPhase.SUBMITTING
        if self.is_valid:
            return FormPhase.VALID
        if not self.is_dirty and self.mode is FormMode.CREATE:
            return FormPhase.EMPTY
        return FormPhase.INVALID

    def values(self) -> dict[str, str]:
        """Return the field values in declaration order."""

        return self.data.model_dump()

    def error_for(self, name: str) -> str | None:
        for error in self.field_errors:
            if error.name == name:
                return error.message
        return None


__all__ = ["FieldError", "FieldsT", "FormSnapshot"]
