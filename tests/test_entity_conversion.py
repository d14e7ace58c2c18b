from __future__ import annotations

import pytest
from pydantic import ValidationError

from formstate.domain import FormMode, FormPhase, Profile, ProfileFields, ProfileId, ProfilePatch
from formstate.forms import (
    PROFILE_FORM,
    FormDefinition,
    FormSnapshot,
    InvalidSnapshotError,
    PreconditionViolation,
    ProfileSnapshot,
)
from formstate.forms.profile import create_empty, from_entity, to_entity, transition
from formstate.validation import RuleSet


def _valid_snapshot() -> ProfileSnapshot:
    snapshot = create_empty()
    snapshot = transition(snapshot, {"name": "Jane Doe"})
    snapshot = transition(snapshot, {"email": "jane@example.com"})
    return transition(snapshot, {"age": "34", "bio": "Keeps bees."})


def test_to_entity_copies_fields_and_identity() -> None:
    profile = to_entity(_valid_snapshot(), 42)

    assert profile.id == 42
    assert profile.name == "Jane Doe"
    assert profile.email == "jane@example.com"
    assert profile.phone is None
    assert profile.age == 34
    assert profile.bio == "Keeps bees."


def test_to_entity_does_not_mutate_snapshot() -> None:
    snapshot = _valid_snapshot()
    before = snapshot.model_copy(deep=True)

    to_entity(snapshot, 7)

    assert snapshot == before


def test_to_entity_rejects_invalid_snapshot() -> None:
    snapshot = transition(create_empty(), {"name": "Jane"})

    with pytest.raises(InvalidSnapshotError) as excinfo:
        to_entity(snapshot, 42)

    assert isinstance(excinfo.value, PreconditionViolation)
    assert excinfo.value.errors == {"email": "Email is required"}
    assert "email: Email is required" in str(excinfo.value)


def test_to_entity_rejects_empty_snapshot() -> None:
    with pytest.raises(PreconditionViolation):
        to_entity(create_empty(), 1)


def test_from_entity_loads_edit_snapshot() -> None:
    profile = Profile(
        id=ProfileId(5),
        name="Sam",
        email="sam@example.com",
        phone="+1 555 0100 22",
        age=61,
    )

    snapshot = from_entity(profile)

    assert snapshot.values() == {
        "name": "Sam",
        "email": "sam@example.com",
        "phone": "+1 555 0100 22",
        "age": "61",
        "bio": "",
    }
    assert snapshot.is_valid is True
    assert snapshot.is_dirty is False
    assert snapshot.is_submitting is False
    assert snapshot.mode is FormMode.EDIT
    assert snapshot.phase is FormPhase.VALID


def test_round_trip_preserves_domain_fields() -> None:
    snapshot = transition(_valid_snapshot(), {"phone": "+44 20 7946 0958"})

    reloaded = from_entity(to_entity(snapshot, 42))

    assert reloaded.values() == snapshot.values()
    assert reloaded.errors == snapshot.errors
    assert reloaded.is_submitting is False


def test_round_trip_keeps_whitespace_in_free_text() -> None:
    snapshot = transition(_valid_snapshot(), {"name": "  Jane  ", "bio": "  "})

    reloaded = from_entity(to_entity(snapshot, 3))

    assert reloaded.values() == snapshot.values()


def test_profile_entity_enforces_rules_on_construction() -> None:
    with pytest.raises(ValidationError):
        Profile(id=ProfileId(1), name="   ", email="jane@example.com")
    with pytest.raises(ValidationError):
        Profile(id=ProfileId(1), name="Jane", email="not-an-email")
    with pytest.raises(ValidationError):
        Profile(id=ProfileId(1), name="Jane", email="jane@example.com", age=9)
    with pytest.raises(ValidationError):
        Profile(id=ProfileId(1), name="Jane", email="jane@example.com", phone="abc")


def test_to_entity_revalidates_unvalidated_snapshot() -> None:
    unchecked = FormSnapshot[ProfileFields](data=ProfileFields())
    assert unchecked.is_valid is True

    with pytest.raises(PreconditionViolation) as excinfo:
        to_entity(unchecked, 1)

    assert excinfo.value.errors == {"name": "Name is required", "email": "Email is required"}
    with pytest.raises(InvalidSnapshotError):
        PROFILE_FORM.mark_submitting(unchecked)


def test_to_entity_ignores_errors_dropped_by_model_copy() -> None:
    invalid = transition(create_empty(), {"name": "Jane", "email": "nope"})
    stripped = invalid.model_copy(update={"field_errors": ()})

    with pytest.raises(InvalidSnapshotError) as excinfo:
        to_entity(stripped, 1)

    assert excinfo.value.errors == {"email": "must be a valid email address"}


def test_unencodable_text_is_a_field_error() -> None:
    snapshot = transition(create_empty(), {"name": "J\ud800", "email": "j@x.io"})

    assert snapshot.is_valid is False
    assert snapshot.errors == {"name": "contains characters that cannot be stored"}
    with pytest.raises(InvalidSnapshotError):
        to_entity(snapshot, 1)


def test_entity_rejection_surfaces_as_precondition_error() -> None:
    unchecked_form = FormDefinition(
        name="unchecked-profile",
        fields_model=ProfileFields,
        patch_model=ProfilePatch,
        rules=RuleSet(),
        build_entity=PROFILE_FORM.build_entity,
        load_fields=PROFILE_FORM.load_fields,
    )
    snapshot = unchecked_form.create_empty()
    assert snapshot.is_valid is True

    with pytest.raises(InvalidSnapshotError) as excinfo:
        unchecked_form.to_entity(snapshot, ProfileId(1))

    assert set(excinfo.value.errors) == {"name", "email"}
    assert isinstance(excinfo.value.__cause__, ValidationError)
