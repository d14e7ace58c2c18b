"""Service container wiring application components."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from formstate.config import AppSettings
from formstate.domain import Profile, ProfileFields, ProfileId, ProfilePatch
from formstate.forms import PROFILE_FORM, FormDefinition, FormSession
from formstate.persistence import InMemoryProfileRepository, ProfileRepository
from formstate.utils import configure_logging

ProfileForm = FormDefinition[ProfileFields, ProfilePatch, Profile, ProfileId]
ProfileSession = FormSession[ProfileFields, ProfilePatch, Profile, ProfileId]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ServiceContainer:
    """Aggregates the form definition and its collaborators."""

    settings: AppSettings
    profile_form: ProfileForm
    profile_repository: ProfileRepository

    def new_profile_session(self) -> ProfileSession:
        return FormSession(self.profile_form)

    def edit_profile_session(self, profile: Profile) -> ProfileSession:
        return FormSession.for_entity(self.profile_form, profile)


def build_container(settings: AppSettings | None = None) -> ServiceContainer:
    """Construct the primary service container."""

    resolved_settings = settings or AppSettings.from_env()
    configure_logging(
        resolved_settings.log_level,
        debug_transitions=resolved_settings.debug_transitions,
    )
    logger.debug("Building container for environment %s", resolved_settings.environment)

    return ServiceContainer(
        settings=resolved_settings,
        profile_form=PROFILE_FORM,
        profile_repository=InMemoryProfileRepository(),
    )


__all__ = ["ServiceContainer", "build_container"]
