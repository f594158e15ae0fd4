"""Attribute registry with primary/secondary bookkeeping."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from profilekit.converters import AttributeConverter
from profilekit.errors import ProfileDefinitionError, ProfileErrorCode
from profilekit.models import AttributeClassification


class AttributeRegistry:
    """Declared attribute names, their classification and their converters.

    A name may be registered several times. Each registration appends to the
    list matching its classification and replaces the converter, so the most
    recent converter wins and a name registered under both classifications
    appears in both lists.
    """

    def __init__(self) -> None:
        """Initialize empty registry."""
        self._primaries: list[str] = []
        self._secondaries: list[str] = []
        self._converters: dict[str, AttributeConverter | None] = {}
        self._sealed = False

    @property
    def sealed(self) -> bool:
        """Return whether registrations are closed."""
        return self._sealed

    def seal(self) -> None:
        """Close the registry to further registrations."""
        self._sealed = True

    def register(
        self,
        name: str,
        converter: AttributeConverter | None,
        classification: AttributeClassification,
    ) -> None:
        """Register one attribute under the given classification.

        Args:
            name: Attribute name.
            converter: Converter for the attribute; ``None`` stores raw values.
            classification: Primary or secondary.

        Raises:
            ProfileDefinitionError: If the registry is sealed.
        """
        if self._sealed:
            raise ProfileDefinitionError(
                ProfileErrorCode.DEFINITION_SEALED,
                f"Error: cannot register attribute '{name}' after construction.",
                data={"attribute": name, "classification": str(classification)},
            )
        if classification == AttributeClassification.PRIMARY:
            self._primaries.append(name)
        else:
            self._secondaries.append(name)
        self._converters[name] = converter

    def register_primary(self, name: str, converter: AttributeConverter | None) -> None:
        """Register one identity-defining attribute."""
        self.register(name, converter, AttributeClassification.PRIMARY)

    def register_secondary(
        self, name: str, converter: AttributeConverter | None
    ) -> None:
        """Register one supplementary attribute."""
        self.register(name, converter, AttributeClassification.SECONDARY)

    def primary_names(self) -> tuple[str, ...]:
        """Return primary attribute names in registration order."""
        return tuple(self._primaries)

    def secondary_names(self) -> tuple[str, ...]:
        """Return secondary attribute names in registration order."""
        return tuple(self._secondaries)

    def converter_for(self, name: str) -> AttributeConverter | None:
        """Return the most recently registered converter for ``name``."""
        return self._converters.get(name)

    def converters(self) -> Mapping[str, AttributeConverter | None]:
        """Return read-only view of the name to converter mapping."""
        return MappingProxyType(self._converters)
