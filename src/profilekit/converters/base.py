"""Attribute converter contract and shared conversion rules."""

from __future__ import annotations

from typing import Generic, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class AttributeConverter(Protocol):
    """Capability turning one raw attribute value into a typed value."""

    def convert(self, raw: object) -> object | None:
        """Convert raw value, returning ``None`` when it cannot be converted.

        Args:
            raw: Raw value produced by an identity source.
        """


class AbstractAttributeConverter(Generic[T]):
    """Converter base applying the common value-shape rules.

    ``None`` converts to ``None``. A value already of the target type is
    returned unchanged. For a list or tuple only the first element is
    considered, and an empty sequence converts to ``None``. Anything else is
    handed to ``_convert``.
    """

    def __init__(self, target_type: type[T]) -> None:
        """Store target type.

        Args:
            target_type: Type produced by this converter.
        """
        self._target_type = target_type

    @property
    def target_type(self) -> type[T]:
        """Return the type produced by this converter."""
        return self._target_type

    def convert(self, raw: object) -> T | None:
        """Convert raw value to the target type.

        Args:
            raw: Raw attribute value.

        Returns:
            Converted value, or ``None`` when conversion is not possible.
        """
        if isinstance(raw, (list, tuple)):
            if not raw:
                return None
            raw = raw[0]
        if raw is None:
            return None
        if self._accepts(raw):
            return raw  # type: ignore[return-value]
        return self._convert(raw)

    def _accepts(self, raw: object) -> bool:
        """Return whether raw value already has the target type."""
        return isinstance(raw, self._target_type)

    def _convert(self, raw: object) -> T | None:
        """Convert a value not already of the target type.

        Args:
            raw: Non-null scalar attribute value.

        Returns:
            Converted value, or ``None`` when unsupported.
        """
        del raw
        return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
