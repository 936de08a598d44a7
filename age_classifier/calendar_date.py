"""Proleptic Gregorian calendar dates and the arithmetic behind age calculation.

``CalendarDate`` is a plain (day, month, year) triple.  Constructing one never
validates: call ``is_valid()`` to find out whether the triple names a real
calendar day.  Nothing in this module raises for bad input.
"""

import datetime
import functools
import logging
from collections.abc import Callable
from dataclasses import dataclass

logger: logging.Logger = logging.getLogger(__name__)

# A clock is any zero-argument callable returning the current local date.
Clock = Callable[[], datetime.date]

_MONTH_LENGTHS: tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# Month offsets for Sakamoto's day-of-week method.
_SAKAMOTO_OFFSETS: tuple[int, ...] = (0, 3, 2, 5, 0, 3, 5, 1, 4, 6, 2, 4)

DAY_NAMES: tuple[str, ...] = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)


def is_leap_year(year: int) -> bool:
    """Return True if *year* has a February 29 under the Gregorian rule."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(month: int, year: int) -> int:
    """Return the number of days in *month* (1-12) of *year*.

    The month is not range-checked; callers must pass 1-12.
    """
    if month == 2 and is_leap_year(year):
        return 29
    return _MONTH_LENGTHS[month - 1]


def is_valid(day: int, month: int, year: int) -> bool:
    """Return True if (day, month, year) names a real calendar day in year 1 or later."""
    if year < 1 or month < 1 or month > 12 or day < 1:
        return False
    return day <= days_in_month(month, year)


@functools.total_ordering
@dataclass(frozen=True)
class CalendarDate:
    """An immutable Gregorian date, ordered by (year, month, day)."""

    day: int
    month: int
    year: int

    @classmethod
    def from_date(cls, value: datetime.date) -> "CalendarDate":
        return cls(value.day, value.month, value.year)

    @classmethod
    def today(cls, clock: Clock | None = None) -> "CalendarDate":
        """Return the current local date.

        Args:
            clock: Optional zero-argument callable returning a
                ``datetime.date``.  Defaults to ``datetime.date.today`` so
                tests can pass a fixed clock instead of reading the system
                time.
        """
        current = (clock or datetime.date.today)()
        logger.debug("today resolved to %s", current.isoformat())
        return cls.from_date(current)

    def _key(self) -> tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._key() < other._key()

    def is_valid(self) -> bool:
        return is_valid(self.day, self.month, self.year)

    def to_string(self) -> str:
        """Render as zero-padded ``DD-MM-YYYY``."""
        return f"{self.day:02d}-{self.month:02d}-{self.year:04d}"

    def __str__(self) -> str:
        return self.to_string()

    def day_of_week(self) -> int:
        """Return the weekday as 0 (Sunday) through 6 (Saturday).

        Uses Sakamoto's closed-form method: January and February are counted
        as months of the previous year so the leap day falls at the end.
        """
        year = self.year - 1 if self.month < 3 else self.year
        return (
            year
            + year // 4
            - year // 100
            + year // 400
            + _SAKAMOTO_OFFSETS[self.month - 1]
            + self.day
        ) % 7

    def day_name(self) -> str:
        return DAY_NAMES[self.day_of_week()]

    def to_julian_day_number(self) -> int:
        """Return the Julian Day Number of this date.

        The difference between two JDNs is the exact number of days between
        the dates.  All divisions are floor divisions.
        """
        a = (14 - self.month) // 12
        y = self.year + 4800 - a
        m = self.month + 12 * a - 3
        return self.day + (153 * m + 2) // 5 + 365 * y + y // 4 - y // 100 + y // 400 - 32045
