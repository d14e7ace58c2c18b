"""Form definitions: transitions, validation and entity conversion."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import ValidationError

from formstate.domain import DomainModel, FormMode
from formstate.validation import RuleSet

from .exceptions import InvalidSnapshotError
from .snapshot import FieldError, FieldsT, FormSnapshot

PatchT = TypeVar("PatchT", bound=DomainModel)
EntityT = TypeVar("EntityT", bound=DomainModel)
IdT = TypeVar("IdT")

Delta = Mapping[str, Any]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FormDefinition(Generic[FieldsT, PatchT, EntityT, IdT]):
    """Binds a field record, its patch record, its rules and its entity together."""

    name: str
    fields_model: type[FieldsT]
    patch_model: type[PatchT]
    rules: RuleSet
    build_entity: Callable[[FieldsT, IdT], EntityT]
    load_fields: Callable[[EntityT], FieldsT]

    @property
    def snapshot_model(self) -> type[FormSnapshot[FieldsT]]:
        return FormSnapshot[self.fields_model]

    def create_empty(self) -> FormSnapshot[FieldsT]:
        """Return a validated snapshot with every field at its default."""

        return self._validated(self.fields_model())

    def transition(
        self,
        snapshot: FormSnapshot[FieldsT],
        delta: PatchT | Delta,
    ) -> FormSnapshot[FieldsT]:
        """Return a new snapshot with ``delta`` applied and validation re-run."""

        self._ensure_owned(snapshot)
        if isinstance(delta, self.patch_model):
            patch = delta
        else:
            patch = self.patch_model.model_validate(dict(delta))
        changes = patch.model_dump(exclude_unset=True, exclude_none=True)
        data = self.fields_model.model_validate({**snapshot.data.model_dump(), **changes})
        return self._validated(
            data,
            mode=snapshot.mode,
            is_submitting=snapshot.is_submitting,
            is_dirty=True,
        )

    def to_entity(self, snapshot: FormSnapshot[FieldsT], entity_id: IdT) -> EntityT:
        """Convert a valid snapshot into a finalized entity."""

        self._require_valid(snapshot)
        try:
            entity = self.build_entity(snapshot.data, entity_id)
        except ValidationError as exc:
            raise InvalidSnapshotError(_entity_errors(exc)) from exc
        logger.debug("Converted %s form into entity %s", self.name, entity_id)
        return entity

    def from_entity(self, entity: EntityT) -> FormSnapshot[FieldsT]:
        """Load an entity into a fresh, validated edit snapshot."""

        snapshot = self._validated(self.load_fields(entity), mode=FormMode.EDIT)
        if not snapshot.is_valid:
            logger.warning(
                "Loaded %s entity does not pass form validation: %s",
                self.name,
                snapshot.errors,
            )
        return snapshot

    def mark_submitting(self, snapshot: FormSnapshot[FieldsT]) -> FormSnapshot[FieldsT]:
        self._require_valid(snapshot)
        return snapshot.model_copy(update={"is_submitting": True})

    def clear_submitting(self, snapshot: FormSnapshot[FieldsT]) -> FormSnapshot[FieldsT]:
        self._ensure_owned(snapshot)
        return snapshot.model_copy(update={"is_submitting": False})

    def validate(self, data: FieldsT) -> dict[str, str]:
        return self.rules.validate(data.model_dump())

    def _validated(
        self,
        data: FieldsT,
        *,
        mode: FormMode = FormMode.CREATE,
        is_submitting: bool = False,
        is_dirty: bool = False,
    ) -> FormSnapshot[FieldsT]:
        errors = tuple(
            FieldError(name=name, message=message)
            for name, message in self.validate(data).items()
        )
        return self.snapshot_model(
            data=data,
            field_errors=errors,
            mode=mode,
            is_submitting=is_submitting,
            is_dirty=is_dirty,
        )

    def _require_valid(self, snapshot: FormSnapshot[FieldsT]) -> None:
        # Rules run against the data; a directly built snapshot stores no errors.
        self._ensure_owned(snapshot)
        errors = {**self.validate(snapshot.data), **snapshot.errors}
        if errors:
            raise InvalidSnapshotError(errors)

    def _ensure_owned(self, snapshot: FormSnapshot[Any]) -> None:
        if not isinstance(snapshot.data, self.fields_model):
            msg = (
                f"Snapshot holds {type(snapshot.data).__name__}, "
                f"expected {self.fields_model.__name__} for form {self.name!r}"
            )
            raise TypeError(msg)


def _entity_errors(exc: ValidationError) -> dict[str, str]:
    errors: dict[str, str] = {}
    for error in exc.errors():
        name = str(error["loc"][0]) if error["loc"] else "__all__"
        errors.setdefault(name, error["msg"])
    return errors


__all__ = ["Delta", "EntityT", "FormDefinition", "IdT", "PatchT"]
