"""In-memory repository implementations."""

from __future__ import annotations

from collections.abc import Sequence
from copy import deepcopy
from dataclasses import dataclass, field
from typing import TypeVar

from formstate.domain import Profile, ProfileId

from .errors import NotFoundError
from .interfaces import ProfileRepository

T = TypeVar("T")


def _copy(value: T) -> T:
    return deepcopy(value)


@dataclass
class InMemoryProfileRepository(ProfileRepository):
    _profiles: dict[ProfileId, Profile] = field(default_factory=dict)

    def get(self, profile_id: ProfileId) -> Profile | None:
        return _copy(self._profiles.get(profile_id))

    def require(self, profile_id: ProfileId) -> Profile:
        profile = self.get(profile_id)
        if profile is None:
            msg = f"Profile {profile_id} not found"
            raise NotFoundError(msg)
        return profile

    def list_all(self) -> Sequence[Profile]:
        return [_copy(profile) for _, profile in sorted(self._profiles.items())]

    def upsert(self, profile: Profile) -> None:
        self._profiles[profile.id] = profile

    def delete(self, profile_id: ProfileId) -> None:
        self._profiles.pop(profile_id, None)


__all__ = ["InMemoryProfileRepository"]
