"""Age breakdown and life-stage classification.

``compute`` produces the calendar-borrowing breakdown people use when they
say "20 years, 3 months, 12 days", plus the exact number of elapsed days.
``classify`` buckets completed years into a ``LifeStage``.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from age_classifier.calendar_date import CalendarDate, days_in_month

logger: logging.Logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AgeResult:
    years: int
    months: int
    days: int
    total_days: int


class LifeStage(str, Enum):
    BABY = "Baby"
    CHILD = "Child"
    TEEN = "Teen"
    ADULT = "Adult"
    SENIOR = "Senior"

    @property
    def label(self) -> str:
        """Display label including the year range, e.g. ``"Teen (13-19)"``."""
        return f"{self.value} ({_STAGE_RANGES[self]})"


_STAGE_RANGES: dict[LifeStage, str] = {
    LifeStage.BABY: "0-2",
    LifeStage.CHILD: "3-12",
    LifeStage.TEEN: "13-19",
    LifeStage.ADULT: "20-59",
    LifeStage.SENIOR: "60+",
}

# Inclusive upper bounds, checked in order; anything above the last is SENIOR.
_STAGE_UPPER_BOUNDS: tuple[tuple[int, LifeStage], ...] = (
    (2, LifeStage.BABY),
    (12, LifeStage.CHILD),
    (19, LifeStage.TEEN),
    (59, LifeStage.ADULT),
)


def compute(dob: CalendarDate, today: CalendarDate) -> AgeResult:
    """Compute the age of someone born on *dob* as of *today*.

    Both dates must be valid and ``dob <= today``; the caller is responsible
    for checking this.  A violated precondition is clamped to zero rather
    than raised.

    Args:
        dob: Date of birth.
        today: The date to measure the age at.

    Returns:
        An ``AgeResult`` with the years/months/days breakdown and the total
        number of elapsed days.
    """
    total_days = max(0, today.to_julian_day_number() - dob.to_julian_day_number())

    years = today.year - dob.year
    months = today.month - dob.month
    days = today.day - dob.day

    # Borrow once from the month before today's month, then fix the months.
    if days < 0:
        prev_month, prev_year = today.month - 1, today.year
        if prev_month == 0:
            prev_month, prev_year = 12, prev_year - 1
        days += days_in_month(prev_month, prev_year)
        months -= 1
    if months < 0:
        months += 12
        years -= 1
    if years < 0:
        logger.debug("dob is after today; clamping age to zero")
        years = months = days = 0

    return AgeResult(years=years, months=months, days=days, total_days=total_days)


def classify(years: int) -> LifeStage:
    """Return the life stage for a number of completed years."""
    for upper, stage in _STAGE_UPPER_BOUNDS:
        if years <= upper:
            return stage
    return LifeStage.SENIOR


class AgeCalculator:
    """Namespace bundling ``compute`` and ``classify``."""

    compute = staticmethod(compute)
    classify = staticmethod(classify)
