"""Gender and locale attribute conversion."""

from __future__ import annotations

from collections.abc import Iterable

from profilekit.converters.base import AbstractAttributeConverter
from profilekit.models import Gender, Locale


def _normalized(values: Iterable[str]) -> frozenset[str]:
    return frozenset(value.strip().lower() for value in values)


class GenderConverter(AbstractAttributeConverter[Gender]):
    """Map provider-specific gender markers onto ``Gender``.

    Unknown markers map to ``Gender.UNSPECIFIED`` rather than ``None``.
    """

    def __init__(
        self,
        male_values: Iterable[str] = ("m", "male"),
        female_values: Iterable[str] = ("f", "female"),
    ) -> None:
        """Store accepted markers, compared case-insensitively.

        Args:
            male_values: Raw markers meaning male.
            female_values: Raw markers meaning female.
        """
        super().__init__(Gender)
        self._male_values = _normalized(male_values)
        self._female_values = _normalized(female_values)

    def _convert(self, raw: object) -> Gender | None:
        marker = str(raw).strip().lower()
        if marker in self._male_values:
            return Gender.MALE
        if marker in self._female_values:
            return Gender.FEMALE
        return Gender.UNSPECIFIED


class LocaleConverter(AbstractAttributeConverter[Locale]):
    """Parse ``fr``, ``fr_FR`` or ``fr-FR`` into ``Locale``."""

    def __init__(self) -> None:
        super().__init__(Locale)

    def _convert(self, raw: object) -> Locale | None:
        if not isinstance(raw, str):
            return None
        parts = raw.strip().replace("_", "-").split("-")
        language = parts[0].lower()
        if not language.isalpha():
            return None
        country = parts[1].upper() if len(parts) > 1 else ""
        return Locale(language=language, country=country)
