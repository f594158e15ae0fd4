"""Profile definition built from a declarative config."""

from __future__ import annotations

from profilekit.common import register_common_attributes
from profilekit.config import DefinitionConfig, ProfileTypeName
from profilekit.definition import ProfileDefinition
from profilekit.models import AttributeClassification
from profilekit.profile import BasicProfile, CommonProfile

_PROFILE_TYPES: dict[ProfileTypeName, type[BasicProfile]] = {
    ProfileTypeName.BASIC: BasicProfile,
    ProfileTypeName.COMMON: CommonProfile,
}


class ConfiguredProfileDefinition(ProfileDefinition[BasicProfile]):
    """Definition whose attributes come from a ``DefinitionConfig``."""

    def __init__(self, config: DefinitionConfig) -> None:
        """Register every declared attribute in file order.

        Args:
            config: Validated declarative definition.
        """
        self._config = config
        super().__init__(profile_type=_PROFILE_TYPES[config.profile_type])

    @property
    def config(self) -> DefinitionConfig:
        """Return source config."""
        return self._config

    def define(self) -> None:
        if self._config.include_common:
            register_common_attributes(self)
        for attribute in self._config.attributes:
            if attribute.classification == AttributeClassification.PRIMARY:
                self.primary(attribute.name, attribute.build_converter())
            else:
                self.secondary(attribute.name, attribute.build_converter())
