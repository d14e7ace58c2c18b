"""Persistence layer exports."""

from .errors import NotFoundError, RepositoryError
from .interfaces import ProfileRepository
from .memory import InMemoryProfileRepository

__all__ = [
    "InMemoryProfileRepository",
    "NotFoundError",
    "ProfileRepository",
    "RepositoryError",
]
