"""Attribute enums and value types produced by converters."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class AttributeLocation(StrEnum):
    """Profile bucket receiving a converted attribute value."""

    PROFILE_ATTRIBUTE = "profile_attribute"
    AUTHENTICATION_ATTRIBUTE = "authentication_attribute"


class AttributeClassification(StrEnum):
    """Identity weight of a declared attribute name."""

    PRIMARY = "primary"
    SECONDARY = "secondary"


class Gender(StrEnum):
    """Normalized gender values exposed on common profiles."""

    MALE = "male"
    FEMALE = "female"
    UNSPECIFIED = "unspecified"


class Color(BaseModel):
    """RGB color decoded from a hexadecimal attribute."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    red: int = Field(ge=0, le=255)
    green: int = Field(ge=0, le=255)
    blue: int = Field(ge=0, le=255)

    def to_hex(self) -> str:
        """Return the ``#rrggbb`` form of this color."""
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"


class Locale(BaseModel):
    """Language and optional region parsed from a locale tag."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    language: str = Field(min_length=1)
    country: str = ""

    @property
    def tag(self) -> str:
        """Return the BCP 47 style tag, e.g. ``fr-FR``."""
        if not self.country:
            return self.language
        return f"{self.language}-{self.country}"
