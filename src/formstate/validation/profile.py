"""Rule set for the profile form."""

from __future__ import annotations

from formstate.domain.profile import (
    AGE_PATTERN,
    BIO_MAX_LENGTH,
    EMAIL_PATTERN,
    MAX_AGE,
    MIN_AGE,
    NAME_MAX_LENGTH,
    PHONE_PATTERN,
)

from .rules import RuleSet, email, encodable, integer_between, max_length, phone, required

PROFILE_RULES = RuleSet(
    field_rules={
        "name": (required("Name is required"), encodable(), max_length(NAME_MAX_LENGTH)),
        "email": (required("Email is required"), encodable(), email(EMAIL_PATTERN)),
        "phone": (encodable(), phone(PHONE_PATTERN)),
        "age": (encodable(), integer_between(MIN_AGE, MAX_AGE, pattern=AGE_PATTERN)),
        "bio": (encodable(), max_length(BIO_MAX_LENGTH)),
    }
)

__all__ = ["PROFILE_RULES"]
