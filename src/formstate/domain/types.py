"""Shared type aliases for the domain layer."""

from __future__ import annotations

from collections.abc import Mapping
from typing import NewType

ProfileId = NewType("ProfileId", int)
FieldName = str
FieldErrors = Mapping[FieldName, str]

__all__ = [
    "FieldErrors",
    "FieldName",
    "ProfileId",
]
