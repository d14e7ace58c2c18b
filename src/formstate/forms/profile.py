"""Profile form definition and module-level shortcuts bound to it."""

from __future__ import annotations

from formstate.domain import Profile, ProfileFields, ProfileId, ProfilePatch
from formstate.validation import PROFILE_RULES

from .definition import Delta, FormDefinition
from .snapshot import FormSnapshot

ProfileSnapshot = FormSnapshot[ProfileFields]


def _build_profile(data: ProfileFields, profile_id: ProfileId) -> Profile:
    return Profile(
        id=profile_id,
        name=data.name,
        email=data.email,
        phone=data.phone or None,
        age=int(data.age) if data.age else None,
        bio=data.bio or None,
    )


def _load_profile_fields(profile: Profile) -> ProfileFields:
    return ProfileFields(
        name=profile.name,
        email=profile.email,
        phone=profile.phone or "",
        age="" if profile.age is None else str(profile.age),
        bio=profile.bio or "",
    )


PROFILE_FORM: FormDefinition[ProfileFields, ProfilePatch, Profile, ProfileId] = FormDefinition(
    name="profile",
    fields_model=ProfileFields,
    patch_model=ProfilePatch,
    rules=PROFILE_RULES,
    build_entity=_build_profile,
    load_fields=_load_profile_fields,
)


def create_empty() -> ProfileSnapshot:
    return PROFILE_FORM.create_empty()


def transition(snapshot: ProfileSnapshot, delta: ProfilePatch | Delta) -> ProfileSnapshot:
    return PROFILE_FORM.transition(snapshot, delta)


def to_entity(snapshot: ProfileSnapshot, profile_id: ProfileId | int) -> Profile:
    return PROFILE_FORM.to_entity(snapshot, ProfileId(profile_id))


def from_entity(profile: Profile) -> ProfileSnapshot:
    return PROFILE_FORM.from_entity(profile)


__all__ = [
    "PROFILE_FORM",
    "ProfileSnapshot",
    "create_empty",
    "from_entity",
    "to_entity",
    "transition",
]
