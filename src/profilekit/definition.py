"""Profile definition: attribute registry, profile factory and dispatch."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Generic

from profilekit.converters import AttributeConverter
from profilekit.factory import P, ProfileFactory, ProfileFactoryFn
from profilekit.models import AttributeLocation
from profilekit.profile import CommonProfile, Profile
from profilekit.registry import AttributeRegistry

_LOGGER = logging.getLogger(__name__)


class ProfileDefinition(Generic[P]):
    """Define a profile: its type, its attributes and their converters.

    Subclasses declare attributes in ``define``, which runs once during
    construction. Registrations and the factory are sealed afterwards, so a
    constructed definition can be shared across threads as long as every
    dispatch call writes to its own profile.
    """

    def __init__(
        self,
        *,
        profile_type: type[P] = CommonProfile,  # type: ignore[assignment]
        profile_factory: ProfileFactoryFn[P] | None = None,
    ) -> None:
        """Create definition and run subclass declarations.

        Args:
            profile_type: Profile type built by the default factory.
            profile_factory: Optional constructor overriding the default one.
        """
        self._registry = AttributeRegistry()
        self._factory: ProfileFactory[P] = ProfileFactory(profile_type)
        if profile_factory is not None:
            self._factory.set_factory(profile_factory)
        self.define()
        self._registry.seal()
        self._factory.seal()

    def define(self) -> None:
        """Declare attributes and factory; overridden by subclasses."""

    @property
    def profile_type(self) -> type[P]:
        """Return the default profile type."""
        return self._factory.profile_type

    @property
    def primary_attributes(self) -> tuple[str, ...]:
        """Return primary attribute names in registration order."""
        return self._registry.primary_names()

    @property
    def secondary_attributes(self) -> tuple[str, ...]:
        """Return secondary attribute names in registration order."""
        return self._registry.secondary_names()

    @property
    def converters(self) -> Mapping[str, AttributeConverter | None]:
        """Return read-only name to converter mapping."""
        return self._registry.converters()

    def converter_for(self, name: str) -> AttributeConverter | None:
        """Return converter registered for ``name``, if any."""
        return self._registry.converter_for(name)

    def new_profile(self, *parameters: object) -> P:
        """Build a new empty profile.

        Args:
            parameters: Optional inputs forwarded to the profile factory.

        Returns:
            New profile instance.
        """
        return self._factory.build(*parameters)

    def convert_and_add(
        self,
        profile: Profile,
        location: AttributeLocation,
        name: str,
        value: object,
    ) -> None:
        """Convert one attribute, if necessary, and add it to the profile.

        A ``None`` raw value is skipped. A converter yielding ``None`` still
        results in a write. Converter and profile errors propagate.

        Args:
            profile: Target profile.
            location: Bucket receiving the value.
            name: Attribute name.
            value: Raw attribute value.
        """
        if value is None:
            _LOGGER.debug("skipped null => key: %s", name)
            return
        converter = self._registry.converter_for(name)
        if converter is not None:
            converted = converter.convert(value)
            if converted is not None:
                _LOGGER.debug(
                    "converted to => key: %s / value: %r / %s",
                    name,
                    converted,
                    type(converted).__name__,
                )
        else:
            converted = value
            _LOGGER.debug(
                "no conversion => key: %s / value: %r / %s",
                name,
                converted,
                type(converted).__name__,
            )

        if location == AttributeLocation.AUTHENTICATION_ATTRIBUTE:
            profile.add_authentication_attribute(name, converted)
        else:
            profile.add_attribute(name, converted)

    def convert_and_add_all(
        self,
        profile: Profile,
        profile_attributes: Mapping[str, object] | None = None,
        authentication_attributes: Mapping[str, object] | None = None,
    ) -> None:
        """Convert profile and authentication attributes and add them.

        Writes are not rolled back when a later conversion fails.

        Args:
            profile: Target profile.
            profile_attributes: Raw profile attributes. May be ``None``.
            authentication_attributes: Raw authentication attributes. May be
                ``None``.
        """
        for name, value in (profile_attributes or {}).items():
            self.convert_and_add(
                profile, AttributeLocation.PROFILE_ATTRIBUTE, name, value
            )
        for name, value in (authentication_attributes or {}).items():
            self.convert_and_add(
                profile, AttributeLocation.AUTHENTICATION_ATTRIBUTE, name, value
            )

    def primary(self, name: str, converter: AttributeConverter | None) -> None:
        """Register an identity-defining attribute and its converter."""
        self._registry.register_primary(name, converter)

    def secondary(self, name: str, converter: AttributeConverter | None) -> None:
        """Register a supplementary attribute and its converter."""
        self._registry.register_secondary(name, converter)

    def set_profile_factory(self, profile_factory: ProfileFactoryFn[P] | None) -> None:
        """Define the way to build the profile.

        Args:
            profile_factory: Constructor receiving the parameter tuple.

        Raises:
            ProfileFactoryRequiredError: If ``profile_factory`` is ``None``.
            ProfileDefinitionError: If the definition is already constructed.
        """
        self._factory.set_factory(profile_factory)
