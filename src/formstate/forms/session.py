"""Form session tracking the current snapshot of one form in progress."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import Any, Generic

from formstate.domain import FormPhase

from .definition import Delta, EntityT, FormDefinition, IdT, PatchT
from .exceptions import SessionClosedError, SubmissionInProgressError
from .snapshot import FieldsT, FormSnapshot

SubmissionHandler = Callable[[EntityT], Any]


class FormSession(Generic[FieldsT, PatchT, EntityT, IdT]):
    """Serializes updates to a form and gates its submission.

    The session is the only mutable piece around the immutable snapshots: it
    swaps the current snapshot under a lock, so concurrent updates resolve as
    last write wins.
    """

    def __init__(
        self,
        definition: FormDefinition[FieldsT, PatchT, EntityT, IdT],
        *,
        snapshot: FormSnapshot[FieldsT] | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._definition = definition
        self._snapshot = snapshot if snapshot is not None else definition.create_empty()
        self._submitted: EntityT | None = None
        self._lock = threading.Lock()
        self._logger = logger or logging.getLogger(__name__)

    @classmethod
    def for_entity(
        cls,
        definition: FormDefinition[FieldsT, PatchT, EntityT, IdT],
        entity: EntityT,
        *,
        logger: logging.Logger | None = None,
    ) -> FormSession[FieldsT, PatchT, EntityT, IdT]:
        return cls(definition, snapshot=definition.from_entity(entity), logger=logger)

    @property
    def definition(self) -> FormDefinition[FieldsT, PatchT, EntityT, IdT]:
        return self._definition

    @property
    def snapshot(self) -> FormSnapshot[FieldsT]:
        return self._snapshot

    @property
    def submitted_entity(self) -> EntityT | None:
        return self._submitted

    @property
    def phase(self) -> FormPhase:
        if self._submitted is not None:
            return FormPhase.SUBMITTED
        return self._snapshot.phase

    def update(
        self,
        delta: PatchT | Delta | None = None,
        /,
        **changes: str,
    ) -> FormSnapshot[FieldsT]:
        """Apply a field delta and make the resulting snapshot current."""

        payload: PatchT | Delta
        if delta is not None and not changes:
            payload = delta
        else:
            payload = {**dict(delta or {}), **changes}

        with self._lock:
            self._ensure_open()
            previous = self._snapshot
            self._snapshot = self._definition.transition(previous, payload)
            current = self._snapshot

        self._logger.debug(
            "Form %s moved %s -> %s (errors=%s)",
            self._definition.name,
            previous.phase,
            current.phase,
            sorted(current.errors),
        )
        return current

    def submit(self, entity_id: IdT, handler: SubmissionHandler[EntityT]) -> EntityT:
        """Convert the current snapshot and hand the entity to ``handler``.

        Raises :class:`~formstate.forms.exceptions.InvalidSnapshotError` when the
        current snapshot is invalid. If ``handler`` raises, the submitting flag
        is cleared and the exception propagates.
        """

        with self._lock:
            self._ensure_open()
            entity = self._definition.to_entity(self._snapshot, entity_id)
            self._snapshot = self._definition.mark_submitting(self._snapshot)

        try:
            handler(entity)
        except Exception:
            with self._lock:
                self._snapshot = self._definition.clear_submitting(self._snapshot)
            self._logger.warning(
                "Submission of %s form as %s failed", self._definition.name, entity_id
            )
            raise

        with self._lock:
            self._snapshot = self._definition.clear_submitting(self._snapshot)
            self._submitted = entity
        self._logger.info("Submitted %s form as entity %s", self._definition.name, entity_id)
        return entity

    def reset(self) -> FormSnapshot[FieldsT]:
        """Discard the current state and start again from an empty form."""

        with self._lock:
            if self._snapshot.is_submitting:
                msg = f"Cannot reset {self._definition.name} form while it is submitting"
                raise SubmissionInProgressError(msg)
            self._snapshot = self._definition.create_empty()
            self._submitted = None
            return self._snapshot

    def _ensure_open(self) -> None:
        if self._submitted is not None:
            msg = f"The {self._definition.name} form has already been submitted"
            raise SessionClosedError(msg)
        if self._snapshot.is_submitting:
            msg = f"The {self._definition.name} form is being submitted"
            raise SubmissionInProgressError(msg)


__all__ = ["FormSession", "SubmissionHandler"]
