"""Persistence abstractions for finalized form entities."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from formstate.domain import Profile, ProfileId


class ProfileRepository(Protocol):
    """CRUD operations for profiles."""

    def get(self, profile_id: ProfileId) -> Profile | None: ...

    def require(self, profile_id: ProfileId) -> Profile: ...

    def list_all(self) -> Sequence[Profile]: ...

    def upsert(self, profile: Profile) -> None: ...

    def delete(self, profile_id: ProfileId) -> None: ...
