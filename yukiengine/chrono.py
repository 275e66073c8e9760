"""Wall-clock helpers and date-time formatting."""

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import datetime, timezone

YEAR_SHORT_FORMAT = "%y"
YEAR_LONG_FORMAT = "%Y"
YEAR_LLOCALE_FORMAT = "%EY"
YEAR_SLOCALE_FORMAT = "0y"
MONTH_NUMBER_FORMAT = "%m"
MONTH_ABBREVIATED_FORMAT = "%b"
MONTH_FULLNAME_FORMAT = "%B"
MONTH_LOCALE_FORMAT = "%0m"
DATE_NUMBER_FORMAT = "%d"
DATE_LLOCALE_FORMAT = "0d"
DATE_SHORT_FORMAT = "e"
DATE_SLOCALE_FORMAT = "0e"
HOUR_NUMBER_FORMAT = "%H"
MINUTE_NUMBER_FORMAT = "%M"
SECOND_NUMBER_FORMAT = "%S"
SLASH_SEPARATOR = "-"
COLON_SEPARATOR = ":"
DOT_SEPARATOR = "."
SPACE_SEPARATOR = " "


@dataclass(frozen=True)
class DateTimeFormat:
    """The pieces of a strftime pattern for a date and a time."""

    year: str = YEAR_LONG_FORMAT
    month: str = MONTH_NUMBER_FORMAT
    day: str = DATE_NUMBER_FORMAT
    hour: str = HOUR_NUMBER_FORMAT
    minute: str = MINUTE_NUMBER_FORMAT
    second: str = SECOND_NUMBER_FORMAT
    date_separator: str = SLASH_SEPARATOR
    time_separator: str = DOT_SEPARATOR
    time_date_separator: str = SPACE_SEPARATOR

    def pattern(self) -> str:
        """Join the pieces into one strftime pattern."""
        date = self.date_separator.join((self.year, self.month, self.day))
        clock = self.time_separator.join((self.hour, self.minute, self.second))
        return f"{date}{self.time_date_separator}{clock}"


class Clock:
    """Reads the system clock."""

    @staticmethod
    def current_time_nanos() -> int:
        """Nanoseconds since the epoch."""
        return time.time_ns()

    @staticmethod
    def current_time_millis() -> int:
        """Milliseconds since the epoch."""
        return Clock.current_time_nanos() // 1_000_000

    @staticmethod
    def current_time_point() -> datetime:
        """The current moment as an aware UTC datetime."""
        return datetime.now(timezone.utc)

    @staticmethod
    def current_time_struct() -> time.struct_time:
        """The current moment broken down in UTC."""
        return time.gmtime()

    @staticmethod
    def date_time_string(format: DateTimeFormat | None = None) -> str:
        """The current UTC time rendered with ``format``."""
        fmt = format if format is not None else DateTimeFormat()
        return time.strftime(fmt.pattern(), Clock.current_time_struct())