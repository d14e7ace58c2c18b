"""Form state container exports."""

from .definition import Delta, FormDefinition
from .exceptions import (
    InvalidSnapshotError,
    PreconditionViolation,
    SessionClosedError,
    SubmissionInProgressError,
)
from .profile import PROFILE_FORM, ProfileSnapshot
from .session import FormSession, SubmissionHandler
from .snapshot import FieldError, FormSnapshot

__all__ = [
    "PROFILE_FORM",
    "Delta",
    "FieldError",
    "FormDefinition",
    "FormSession",
    "FormSnapshot",
    "InvalidSnapshotError",
    "PreconditionViolation",
    "ProfileSnapshot",
    "SessionClosedError",
    "SubmissionHandler",
    "SubmissionInProgressError",
]
