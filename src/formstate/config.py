"""Lightweight application configuration loader."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass


class ConfigurationError(RuntimeError):
    """Raised when configuration values are invalid."""


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() not in {"0", "false", "no"}


def _env_log_level(name: str, default: str) -> str:
    raw = (os.getenv(name) or default).strip().upper()
    if raw not in logging.getLevelNamesMapping():
        msg = f"{name} must be a logging level name, got {raw!r}"
        raise ConfigurationError(msg)
    return raw


@dataclass(frozen=True)
class AppSettings:
    """Immutable configuration sourced from environment variables."""

    environment: str = "development"
    log_level: str = "WARNING"
    debug_transitions: bool = False

    @classmethod
    def from_env(cls) -> AppSettings:
        return cls(
            environment=os.getenv("FORMSTATE_ENV", cls.environment),
            log_level=_env_log_level("FORMSTATE_LOG_LEVEL", cls.log_level),
            debug_transitions=_env_bool("FORMSTATE_DEBUG_TRANSITIONS", cls.debug_transitions),
        )


__all__ = ["AppSettings", "ConfigurationError"]
