"""Validation rule exports."""

from .profile import PROFILE_RULES
from .rules import (
    RULE_FAILURE_MESSAGE,
    CrossFieldCheck,
    Rule,
    RuleSet,
    email,
    encodable,
    integer_between,
    matches,
    max_length,
    min_length,
    phone,
    required,
)

__all__ = [
    "PROFILE_RULES",
    "RULE_FAILURE_MESSAGE",
    "CrossFieldCheck",
    "Rule",
    "RuleSet",
    "email",
    "encodable",
    "integer_between",
    "matches",
    "max_length",
    "min_length",
    "phone",
    "required",
]
