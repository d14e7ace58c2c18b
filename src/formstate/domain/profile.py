"""Profile domain models: form field records and the finalized entity."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field, field_validator

from .base import DomainModel
from .types import ProfileId

NAME_MAX_LENGTH = 80
BIO_MAX_LENGTH = 280
MIN_AGE = 13
MAX_AGE = 130
EMAIL_PATTERN = r"[^@\s]+@[^@\s]+\.[^@\s]+"
PHONE_PATTERN = r"\+?[0-9][0-9 \-]{5,18}[0-9]"
AGE_PATTERN = r"[1-9][0-9]*"


class ProfileFields(DomainModel):
    """Raw, as-typed values of the profile form in declaration order."""

    name: str = ""
    email: str = ""
    phone: str = ""
    age: str = ""
    bio: str = ""


class ProfilePatch(DomainModel):
    """Partial update for :class:`ProfileFields`; ``None`` leaves a field untouched."""

    name: str | None = None
    email: str | None = None
    phone: str | None = None
    age: str | None = None
    bio: str | None = None


class Profile(DomainModel):
    """Finalized profile record produced from a valid form."""

    id: ProfileId
    name: Annotated[str, Field(min_length=1, max_length=NAME_MAX_LENGTH)]
    email: Annotated[str, Field(pattern=f"^{EMAIL_PATTERN}$")]
    phone: Annotated[str, Field(pattern=f"^{PHONE_PATTERN}$")] | None = None
    age: Annotated[int | None, Field(ge=MIN_AGE, le=MAX_AGE)] = None
    bio: Annotated[str, Field(max_length=BIO_MAX_LENGTH)] | None = None

    @field_validator("name")
    @classmethod
    def ensure_name(cls, value: str) -> str:
        if not value.strip():
            msg = "Profile name must not be blank"
            raise ValueError(msg)
        return value


__all__ = [
    "AGE_PATTERN",
    "BIO_MAX_LENGTH",
    "EMAIL_PATTERN",
    "MAX_AGE",
    "MIN_AGE",
    "NAME_MAX_LENGTH",
    "PHONE_PATTERN",
    "Profile",
    "ProfileFields",
    "ProfilePatch",
]
