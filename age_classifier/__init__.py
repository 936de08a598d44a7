"""age_classifier — age in years/months/days and life-stage classification.

Public API
----------
CalendarDate
    Immutable Gregorian (day, month, year) date with validation, weekday and
    Julian Day Number helpers.
compute
    Calendar-borrowing age breakdown plus total elapsed days.
classify
    Map completed years to a ``LifeStage``.

Example
-------
>>> from age_classifier import CalendarDate, classify, compute
>>> age = compute(CalendarDate(7, 2, 2005), CalendarDate(7, 2, 2025))
>>> (age.years, age.months, age.days, age.total_days)
(20, 0, 0, 7305)
>>> classify(age.years).label
'Adult (20-59)'
"""

from age_classifier.calculator import AgeCalculator, AgeResult, LifeStage, classify, compute
from age_classifier.calendar_date import CalendarDate, days_in_month, is_leap_year, is_valid

__all__: list[str] = [
    "AgeCalculator",
    "AgeResult",
    "CalendarDate",
    "LifeStage",
    "classify",
    "compute",
    "days_in_month",
    "is_leap_year",
    "is_valid",
]
