"""Domain layer exports."""

from .base import DomainModel
from .enums import FormMode, FormPhase
from .profile import Profile, ProfileFields, ProfilePatch
from .types import FieldErrors, FieldName, ProfileId

__all__ = [
    "DomainModel",
    "FieldErrors",
    "FieldName",
    "FormMode",
    "FormPhase",
    "Profile",
    "ProfileFields",
    "ProfileId",
    "ProfilePatch",
]
