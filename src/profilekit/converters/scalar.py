"""Converters for plain scalar attribute values."""

from __future__ import annotations

import base64
import binascii
import re

from profilekit.converters.base import AbstractAttributeConverter

_TRUE_STRINGS = frozenset({"true", "1"})
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


class StringConverter(AbstractAttributeConverter[str]):
    """Render any scalar as text."""

    def __init__(self) -> None:
        super().__init__(str)

    def _convert(self, raw: object) -> str | None:
        if isinstance(raw, bytes):
            try:
                return raw.decode("utf-8")
            except UnicodeDecodeError:
                return None
        return str(raw)


class IntegerConverter(AbstractAttributeConverter[int]):
    """Parse integers from plain decimal strings and integral floats.

    Only an optional sign followed by ASCII digits is accepted, so Python
    literal forms such as ``1_000`` or non-ASCII digits read as ``None``.
    """

    def __init__(self) -> None:
        super().__init__(int)

    def _accepts(self, raw: object) -> bool:
        # bool is an int subclass but never a valid integer attribute
        return isinstance(raw, int) and not isinstance(raw, bool)

    def _convert(self, raw: object) -> int | None:
        if isinstance(raw, str):
            text = raw.strip()
            if not _INTEGER_PATTERN.fullmatch(text):
                return None
            try:
                return int(text)
            except ValueError:
                # beyond the interpreter digit limit
                return None
        if isinstance(raw, float) and raw.is_integer():
            return int(raw)
        return None


class BooleanConverter(AbstractAttributeConverter[bool]):
    """Read ``"true"``/``"1"`` strings and the number 1 as ``True``."""

    def __init__(self) -> None:
        super().__init__(bool)

    def _convert(self, raw: object) -> bool | None:
        if isinstance(raw, str):
            return raw.strip().lower() in _TRUE_STRINGS
        if isinstance(raw, (int, float)):
            return raw == 1
        return None


class Base64StringConverter(AbstractAttributeConverter[str]):
    """Decode base64 encoded UTF-8 text."""

    def __init__(self) -> None:
        super().__init__(str)

    def _accepts(self, raw: object) -> bool:
        # encoded input is a str too, so nothing is accepted as-is
        del raw
        return False

    def _convert(self, raw: object) -> str | None:
        if not isinstance(raw, (str, bytes)):
            return None
        try:
            return base64.b64decode(raw, validate=True).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError, ValueError):
            return None
