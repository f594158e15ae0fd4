"""Multi-valued attribute conversion."""

from __future__ import annotations

from profilekit.converters.base import AttributeConverter


class ListConverter:
    """Convert every element of a multi-valued attribute.

    Lists and tuples are converted element by element in their own order.
    Sets have no order, so their elements are sorted by ``repr`` first. A
    string is split on ``separator`` and any other scalar is treated as a
    single element. Elements converting to ``None`` are dropped.
    """

    def __init__(
        self, element_converter: AttributeConverter, *, separator: str = ","
    ) -> None:
        """Store per-element converter.

        Args:
            element_converter: Converter applied to every element.
            separator: Delimiter used to split string values.
        """
        self._element_converter = element_converter
        self._separator = separator

    @property
    def element_converter(self) -> AttributeConverter:
        """Return the per-element converter."""
        return self._element_converter

    def convert(self, raw: object) -> list[object] | None:
        """Convert raw value into a list of typed elements.

        Args:
            raw: Raw attribute value.

        Returns:
            Converted elements, or ``None`` for a ``None`` input.
        """
        if raw is None:
            return None
        if isinstance(raw, str):
            elements: list[object] = [
                part.strip() for part in raw.split(self._separator) if part.strip()
            ]
        elif isinstance(raw, (set, frozenset)):
            elements = sorted(raw, key=repr)
        elif isinstance(raw, (list, tuple)):
            elements = list(raw)
        else:
            elements = [raw]
        converted = (self._element_converter.convert(item) for item in elements)
        return [value for value in converted if value is not None]

    def __repr__(self) -> str:
        return f"ListConverter({self._element_converter!r})"
