"""
Wall-clock time source, local or UTC.
"""

from datetime import datetime, timezone
from enum import Enum

from ..errors import DateFormatInvalid, DateFormatTooWide
from .counter import TimeTriple


class TimeZone(Enum):
    LOCAL = "local"
    UTC = "utc"

    @classmethod
    def from_utc(cls, utc: bool) -> "TimeZone":
        return cls.UTC if utc else cls.LOCAL

    def now(self) -> datetime:
        if self is TimeZone.UTC:
            return datetime.now(timezone.utc)
        return datetime.now()

    def sample(self) -> TimeTriple:
        now = self.now()
        return TimeTriple(now.hour, now.minute, now.second)

    def text(self, date_format: str, max_len: int) -> str:
        """
        Today's date formatted with *date_format*.

        Raises:
            DateFormatInvalid: The format string is rejected by ``strftime``.
            DateFormatTooWide: The result is longer than *max_len* characters.
        """
        try:
            text = self.now().strftime(date_format)
        except (ValueError, UnicodeError) as e:
            raise DateFormatInvalid(date_format, str(e)) from e

        if len(text) > max_len:
            raise DateFormatTooWide(len(text), max_len)

        return text
