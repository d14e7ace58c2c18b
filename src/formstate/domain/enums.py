"""Enumerations used across the formstate domain layer."""

from __future__ import annotations

from enum import StrEnum


class FormPhase(StrEnum):
    """Where a form currently sits in its lifecycle."""

    EMPTY = "empty"
    INVALID = "invalid"
    VALID = "valid"
    SUBMITTING = "submitting"
    SUBMITTED = "submitted"


class FormMode(StrEnum):
    """Whether a form creates a new entity or edits an existing one."""

    CREATE = "create"
    EDIT = "edit"
