"""URL and color attribute conversion."""

from __future__ import annotations

from pydantic import AnyUrl, TypeAdapter, ValidationError

from profilekit.converters.base import AbstractAttributeConverter
from profilekit.models import Color

_URL_ADAPTER = TypeAdapter(AnyUrl)
_HEX_COLOR_LENGTH = 6


class UrlConverter(AbstractAttributeConverter[AnyUrl]):
    """Validate absolute URLs with pydantic."""

    def __init__(self) -> None:
        super().__init__(AnyUrl)

    def _convert(self, raw: object) -> AnyUrl | None:
        if not isinstance(raw, str):
            return None
        try:
            return _URL_ADAPTER.validate_python(raw.strip())
        except ValidationError:
            return None


class ColorConverter(AbstractAttributeConverter[Color]):
    """Decode ``#rrggbb`` (leading ``#`` optional) into ``Color``."""

    def __init__(self) -> None:
        super().__init__(Color)

    def _convert(self, raw: object) -> Color | None:
        if not isinstance(raw, str):
            return None
        text = raw.strip().removeprefix("#")
        if len(text) != _HEX_COLOR_LENGTH:
            return None
        try:
            return Color(
                red=int(text[0:2], 16),
                green=int(text[2:4], 16),
                blue=int(text[4:6], 16),
            )
        except ValueError:
            return None
