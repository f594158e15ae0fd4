"""Declarative profile definition loading."""

from profilekit.config.definition_config import (
    AttributeSpec,
    ConverterKind,
    DefinitionConfig,
    DefinitionConfigError,
    ProfileTypeName,
    load_attribute_payload,
    load_definition_config,
)

__all__ = [
    "AttributeSpec",
    "ConverterKind",
    "DefinitionConfig",
    "DefinitionConfigError",
    "ProfileTypeName",
    "load_attribute_payload",
    "load_definition_config",
]
