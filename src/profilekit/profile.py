"""Profile contract and concrete profile types."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Protocol, TypeVar, runtime_checkable

from pydantic import AnyUrl, BaseModel, ConfigDict, Field

from profilekit.models import Gender, Locale

_LOGGER = logging.getLogger(__name__)
_TYPED_ID_SEPARATOR = "#"

T = TypeVar("T")


@runtime_checkable
class Profile(Protocol):
    """Write surface a definition needs from a profile."""

    def add_attribute(self, name: str, value: object) -> None:
        """Store one profile attribute."""

    def add_authentication_attribute(self, name: str, value: object) -> None:
        """Store one authentication attribute."""


class BasicProfile(BaseModel):
    """Authenticated subject with profile and authentication attribute buckets.

    Writing a ``None`` value is ignored; writing a name twice overwrites the
    previous value. Raw ``bytes`` values serialize to base64 in JSON mode.
    """

    model_config = ConfigDict(extra="forbid", ser_json_bytes="base64")

    id: str | None = None
    client_name: str | None = None
    linked_id: str | None = None
    remembered: bool = False
    attributes: dict[str, Any] = Field(default_factory=dict)
    authentication_attributes: dict[str, Any] = Field(default_factory=dict)

    def set_id(self, profile_id: object) -> None:
        """Set identifier, stripping a ``<TypeName>#`` prefix when present.

        Args:
            profile_id: Raw identifier; ``None`` leaves the id unchanged.
        """
        if profile_id is None:
            return
        text = str(profile_id)
        prefix = f"{type(self).__name__}{_TYPED_ID_SEPARATOR}"
        self.id = text.removeprefix(prefix)

    @property
    def typed_id(self) -> str:
        """Return identifier qualified with the profile type name."""
        return f"{type(self).__name__}{_TYPED_ID_SEPARATOR}{self.id}"

    def add_attribute(self, name: str, value: object) -> None:
        """Store one profile attribute.

        Args:
            name: Attribute name.
            value: Converted value; ``None`` is ignored.
        """
        if value is None:
            return
        _LOGGER.debug("adding attribute => key: %s / value: %r", name, value)
        self.attributes[name] = value

    def add_authentication_attribute(self, name: str, value: object) -> None:
        """Store one authentication attribute.

        Args:
            name: Attribute name.
            value: Converted value; ``None`` is ignored.
        """
        if value is None:
            return
        _LOGGER.debug(
            "adding authentication attribute => key: %s / value: %r", name, value
        )
        self.authentication_attributes[name] = value

    def add_attributes(self, attributes: Mapping[str, object] | None) -> None:
        """Store several profile attributes without conversion."""
        for name, value in (attributes or {}).items():
            self.add_attribute(name, value)

    def add_authentication_attributes(
        self, attributes: Mapping[str, object] | None
    ) -> None:
        """Store several authentication attributes without conversion."""
        for name, value in (attributes or {}).items():
            self.add_authentication_attribute(name, value)

    def get_attribute(
        self, name: str, expected_type: type[T] | None = None
    ) -> Any:
        """Return one profile attribute.

        Args:
            name: Attribute name.
            expected_type: When given, values of another type read as ``None``.

        Returns:
            Stored value, or ``None`` when missing or of the wrong type.
        """
        value = self.attributes.get(name)
        if expected_type is not None and not isinstance(value, expected_type):
            return None
        return value

    def get_authentication_attribute(self, name: str) -> Any | None:
        """Return one authentication attribute, or ``None`` when missing."""
        return self.authentication_attributes.get(name)

    def contains_attribute(self, name: str) -> bool:
        """Return whether a profile attribute is stored under ``name``."""
        return name in self.attributes

    def remove_attribute(self, name: str) -> None:
        """Drop a profile attribute if present."""
        self.attributes.pop(name, None)


class CommonProfile(BasicProfile):
    """Profile exposing typed accessors for the common attribute set."""

    @property
    def email(self) -> str | None:
        return self.get_attribute("email", str)

    @property
    def first_name(self) -> str | None:
        return self.get_attribute("first_name", str)

    @property
    def family_name(self) -> str | None:
        return self.get_attribute("family_name", str)

    @property
    def display_name(self) -> str | None:
        return self.get_attribute("display_name", str)

    @property
    def username(self) -> str | None:
        return self.get_attribute("username", str)

    @property
    def gender(self) -> Gender:
        """Return stored gender, ``UNSPECIFIED`` when absent."""
        return self.get_attribute("gender", Gender) or Gender.UNSPECIFIED

    @property
    def locale(self) -> Locale | None:
        return self.get_attribute("locale", Locale)

    @property
    def picture_url(self) -> AnyUrl | None:
        return self.get_attribute("picture_url", AnyUrl)

    @property
    def profile_url(self) -> AnyUrl | None:
        return self.get_attribute("profile_url", AnyUrl)

    @property
    def location(self) -> str | None:
        return self.get_attribute("location", str)
