"""Standard attribute set shared by most identity sources."""

from __future__ import annotations

from typing import Any

from profilekit.converters import Converters
from profilekit.definition import ProfileDefinition
from profilekit.factory import ProfileFactoryFn
from profilekit.profile import CommonProfile

EMAIL = "email"
FIRST_NAME = "first_name"
FAMILY_NAME = "family_name"
DISPLAY_NAME = "display_name"
GENDER = "gender"
LOCALE = "locale"
PICTURE_URL = "picture_url"
PROFILE_URL = "profile_url"
LOCATION = "location"


def register_common_attributes(definition: ProfileDefinition[Any]) -> None:
    """Register the common attributes as primary on a definition under construction.

    Args:
        definition: Definition whose ``define`` is running.
    """
    definition.primary(EMAIL, Converters.STRING)
    definition.primary(FIRST_NAME, Converters.STRING)
    definition.primary(FAMILY_NAME, Converters.STRING)
    definition.primary(DISPLAY_NAME, Converters.STRING)
    definition.primary(GENDER, Converters.GENDER)
    definition.primary(LOCALE, Converters.LOCALE)
    definition.primary(PICTURE_URL, Converters.URL)
    definition.primary(PROFILE_URL, Converters.URL)
    definition.primary(LOCATION, Converters.STRING)


class CommonProfileDefinition(ProfileDefinition[CommonProfile]):
    """Definition building ``CommonProfile`` with the common attributes."""

    def __init__(
        self, profile_factory: ProfileFactoryFn[CommonProfile] | None = None
    ) -> None:
        super().__init__(profile_type=CommonProfile, profile_factory=profile_factory)

    def define(self) -> None:
        register_common_attributes(self)
