"""Attribute converters and shared converter instances."""

from profilekit.converters.base import AbstractAttributeConverter, AttributeConverter
from profilekit.converters.identity import GenderConverter, LocaleConverter
from profilekit.converters.lists import ListConverter
from profilekit.converters.scalar import (
    Base64StringConverter,
    BooleanConverter,
    IntegerConverter,
    StringConverter,
)
from profilekit.converters.temporal import DateConverter
from profilekit.converters.web import ColorConverter, UrlConverter


class Converters:
    """Stateless converter instances shared across definitions."""

    STRING = StringConverter()
    INTEGER = IntegerConverter()
    BOOLEAN = BooleanConverter()
    BASE64_STRING = Base64StringConverter()
    DATE = DateConverter()
    URL = UrlConverter()
    COLOR = ColorConverter()
    GENDER = GenderConverter()
    LOCALE = LocaleConverter()
    INTEGER_LIST = ListConverter(INTEGER)
    STRING_LIST = ListConverter(STRING)


__all__ = [
    "AbstractAttributeConverter",
    "AttributeConverter",
    "Base64StringConverter",
    "BooleanConverter",
    "ColorConverter",
    "Converters",
    "DateConverter",
    "GenderConverter",
    "IntegerConverter",
    "ListConverter",
    "LocaleConverter",
    "StringConverter",
    "UrlConverter",
]
