"""Field validation rules and the rule set that applies them."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field

Rule = Callable[[str], str | None]
CrossFieldCheck = Callable[[Mapping[str, str]], Mapping[str, str]]

RULE_FAILURE_MESSAGE = "could not be validated"

logger = logging.getLogger(__name__)


def required(message: str = "is required") -> Rule:
    """Reject empty or whitespace-only values."""

    def _rule(value: str) -> str | None:
        if not value.strip():
            return message
        return None

    return _rule


def encodable(message: str = "contains characters that cannot be stored") -> Rule:
    """Reject text that has no UTF-8 encoding, such as lone surrogates."""

    def _rule(value: str) -> str | None:
        try:
            value.encode("utf-8")
        except UnicodeEncodeError:
            return message
        return None

    return _rule


def max_length(limit: int, message: str | None = None) -> Rule:
    text = message or f"must be at most {limit} characters"

    def _rule(value: str) -> str | None:
        return text if len(value) > limit else None

    return _rule


def min_length(limit: int, message: str | None = None) -> Rule:
    """Require at least ``limit`` characters; an empty value is left to :func:`required`."""

    text = message or f"must be at least {limit} characters"

    def _rule(value: str) -> str | None:
        if value and len(value) < limit:
            return text
        return None

    return _rule


def matches(pattern: str, message: str) -> Rule:
    """Require a full regex match for non-empty values."""

    compiled = re.compile(pattern)

    def _rule(value: str) -> str | None:
        if value and compiled.fullmatch(value) is None:
            return message
        return None

    return _rule


def email(pattern: str, message: str = "must be a valid email address") -> Rule:
    return matches(pattern, message)


def phone(pattern: str, message: str = "must be a valid phone number") -> Rule:
    return matches(pattern, message)


def integer_between(
    minimum: int,
    maximum: int,
    *,
    pattern: str = r"[1-9][0-9]*",
    message: str | None = None,
) -> Rule:
    """Accept empty values or canonical integers within ``[minimum, maximum]``."""

    compiled = re.compile(pattern)
    text = message or f"must be a whole number between {minimum} and {maximum}"
    max_digits = max(len(str(abs(minimum))), len(str(abs(maximum))))

    def _rule(value: str) -> str | None:
        if not value:
            return None
        if compiled.fullmatch(value) is None:
            return text
        if len(value.lstrip("+-")) > max_digits:
            return text
        if not minimum <= int(value) <= maximum:
            return text
        return None

    return _rule


@dataclass(frozen=True, slots=True)
class RuleSet:
    """Ordered per-field rules plus optional cross-field checks.

    ``validate`` is total: a rule that raises is reported as a field error
    instead of propagating, so callers always receive an error mapping.
    """

    field_rules: Mapping[str, Sequence[Rule]] = field(default_factory=dict)
    cross_field_checks: Sequence[CrossFieldCheck] = ()

    def validate(self, values: Mapping[str, str]) -> dict[str, str]:
        errors: dict[str, str] = {}
        for name, rules in self.field_rules.items():
            value = values.get(name, "")
            for rule in rules:
                message = self._run_rule(name, rule, value)
                if message is not None:
                    errors[name] = message
                    break

        for check in self.cross_field_checks:
            for name, message in self._run_check(check, values):
                errors.setdefault(name, message)
        return errors

    @staticmethod
    def _run_rule(name: str, rule: Rule, value: str) -> str | None:
        try:
            return rule(value)
        except Exception:
            logger.exception("Validation rule for field %r raised", name)
            return RULE_FAILURE_MESSAGE

    @staticmethod
    def _run_check(
        check: CrossFieldCheck, values: Mapping[str, str]
    ) -> list[tuple[str, str]]:
        try:
            return [(str(name), str(message)) for name, message in check(values).items()]
        except Exception:
            logger.exception("Cross-field check %r raised", check)
            return [("__all__", RULE_FAILURE_MESSAGE)]


__all__ = [
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
