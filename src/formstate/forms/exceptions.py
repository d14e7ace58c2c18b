"""Exceptions raised when the form API is misused."""

from __future__ import annotations

from collections.abc import Mapping


class PreconditionViolation(RuntimeError):
    """Raised when a caller invokes an operation its inputs do not allow."""


class InvalidSnapshotError(PreconditionViolation):
    """Raised when an invalid snapshot is converted or submitted."""

    def __init__(self, errors: Mapping[str, str], message: str | None = None) -> None:
        self.errors = dict(errors)
        if message is None:
            summary = "; ".join(f"{name}: {text}" for name, text in self.errors.items())
            message = f"Form snapshot is not valid ({summary})"
        super().__init__(message)


class SessionClosedError(PreconditionViolation):
    """Raised when a session that already submitted is used again."""


class SubmissionInProgressError(PreconditionViolation):
    """Raised when a session is updated or submitted while a submission runs."""
