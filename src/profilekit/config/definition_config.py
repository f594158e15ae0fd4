"""Declarative profile definition models and file loading helpers."""

from __future__ import annotations

import json
from enum import StrEnum
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from profilekit.converters import AttributeConverter, Converters, DateConverter
from profilekit.models import AttributeClassification


class ConverterKind(StrEnum):
    """Converter identifiers accepted in definition files."""

    STRING = "string"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    BASE64_STRING = "base64_string"
    DATE = "date"
    URL = "url"
    COLOR = "color"
    GENDER = "gender"
    LOCALE = "locale"
    INTEGER_LIST = "integer_list"
    STRING_LIST = "string_list"


class ProfileTypeName(StrEnum):
    """Profile types a definition file can select."""

    BASIC = "basic"
    COMMON = "common"


_SHARED_CONVERTERS: dict[ConverterKind, AttributeConverter] = {
    ConverterKind.STRING: Converters.STRING,
    ConverterKind.INTEGER: Converters.INTEGER,
    ConverterKind.BOOLEAN: Converters.BOOLEAN,
    ConverterKind.BASE64_STRING: Converters.BASE64_STRING,
    ConverterKind.DATE: Converters.DATE,
    ConverterKind.URL: Converters.URL,
    ConverterKind.COLOR: Converters.COLOR,
    ConverterKind.GENDER: Converters.GENDER,
    ConverterKind.LOCALE: Converters.LOCALE,
    ConverterKind.INTEGER_LIST: Converters.INTEGER_LIST,
    ConverterKind.STRING_LIST: Converters.STRING_LIST,
}


class AttributeSpec(BaseModel):
    """One declared attribute."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(min_length=1)
    classification: AttributeClassification = AttributeClassification.SECONDARY
    converter: ConverterKind | None = None
    date_format: str | None = None

    def build_converter(self) -> AttributeConverter | None:
        """Return converter instance for this attribute.

        Returns:
            Shared converter, a dedicated ``DateConverter`` when a date format
            is set, or ``None`` for raw pass-through.
        """
        if self.converter is None:
            return None
        if self.converter == ConverterKind.DATE and self.date_format is not None:
            return DateConverter(self.date_format)
        return _SHARED_CONVERTERS[self.converter]


class DefinitionConfig(BaseModel):
    """Root declarative profile definition model."""

    model_config = ConfigDict(extra="forbid")

    profile_type: ProfileTypeName = ProfileTypeName.COMMON
    include_common: bool = False
    attributes: tuple[AttributeSpec, ...] = ()


class DefinitionConfigError(RuntimeError):
    """Raised when a definition or payload file cannot be decoded or validated."""


def _decode_payload(path: Path, label: str) -> dict[str, object]:
    """Decode one JSON or YAML object from disk.

    Args:
        path: Source file path.
        label: Human-readable payload kind for error messages.

    Returns:
        Parsed mapping payload.

    Raises:
        DefinitionConfigError: If reading or decoding fails or the payload is
            not an object.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DefinitionConfigError(f"Cannot read {label} {path}: {exc}") from exc
    if path.suffix.lower() == ".json":
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise DefinitionConfigError(f"Invalid {label} JSON: {exc}") from exc
    else:
        try:
            payload = yaml.safe_load(raw)
        except yaml.YAMLError as exc:
            raise DefinitionConfigError(f"Invalid {label} YAML: {exc}") from exc
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise DefinitionConfigError(f"Invalid {label}: root must be an object")
    return payload


def load_definition_config(path: Path) -> DefinitionConfig:
    """Load declarative profile definition from disk.

    Args:
        path: Definition file path (``.json``, ``.yaml`` or ``.yml``).

    Returns:
        Validated definition config.

    Raises:
        DefinitionConfigError: If payload decode or validation fails.
    """
    payload = _decode_payload(path, "definition")
    try:
        return DefinitionConfig.model_validate(payload)
    except ValidationError as exc:
        raise DefinitionConfigError(f"Invalid definition payload: {exc}") from exc


def load_attribute_payload(path: Path) -> dict[str, object]:
    """Load raw attribute mapping from disk.

    Args:
        path: Payload file path (``.json``, ``.yaml`` or ``.yml``).

    Returns:
        Attribute name to raw value mapping with string keys.

    Raises:
        DefinitionConfigError: If payload decode fails.
    """
    payload = _decode_payload(path, "attribute payload")
    return {str(name): value for name, value in payload.items()}
