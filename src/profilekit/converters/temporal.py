"""Date attribute conversion."""

from __future__ import annotations

from datetime import UTC, date, datetime, time

from profilekit.converters.base import AbstractAttributeConverter


class DateConverter(AbstractAttributeConverter[datetime]):
    """Parse timestamps from text or epoch seconds.

    Text is parsed as ISO 8601 unless an explicit ``strptime`` format is
    given. Integers and floats are read as seconds since the epoch, in UTC.
    """

    def __init__(self, date_format: str | None = None) -> None:
        """Store optional parsing format.

        Args:
            date_format: ``strptime`` format; ISO 8601 when omitted.
        """
        super().__init__(datetime)
        self._date_format = date_format

    @property
    def date_format(self) -> str | None:
        """Return configured ``strptime`` format, if any."""
        return self._date_format

    def _convert(self, raw: object) -> datetime | None:
        if isinstance(raw, date):
            return datetime.combine(raw, time.min)
        if isinstance(raw, str):
            return self._parse_text(raw.strip())
        if isinstance(raw, (int, float)) and not isinstance(raw, bool):
            try:
                return datetime.fromtimestamp(raw, tz=UTC)
            except (OverflowError, OSError, ValueError):
                return None
        return None

    def _parse_text(self, text: str) -> datetime | None:
        try:
            if self._date_format is None:
                return datetime.fromisoformat(text)
            return datetime.strptime(text, self._date_format)
        except ValueError:
            return None

    def __repr__(self) -> str:
        return f"DateConverter(date_format={self._date_format!r})"
