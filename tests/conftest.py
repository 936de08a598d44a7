"""Shared pytest fixtures for the age_classifier test suite.

Fixtures defined here are available to all test modules (unit, integration)
without any import.

Nothing here reads the system clock: every "today" is a fixed date so that
results do not change from one day to the next.
"""

import datetime

import pytest

from age_classifier import CalendarDate


# ---------------------------------------------------------------------------
# Clock fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def fixed_today() -> datetime.date:
    """The date every fixed clock in the suite reports."""
    return datetime.date(2025, 2, 7)


@pytest.fixture
def fixed_clock(fixed_today: datetime.date):
    """A zero-argument clock that always returns ``fixed_today``."""
    return lambda: fixed_today


@pytest.fixture
def today(fixed_today: datetime.date) -> CalendarDate:
    """``fixed_today`` as a ``CalendarDate`` (07-02-2025, a Friday)."""
    return CalendarDate.from_date(fixed_today)


# ---------------------------------------------------------------------------
# Date fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def known_dob() -> CalendarDate:
    """Exactly twenty years before ``today`` (07-02-2005, a Monday)."""
    return CalendarDate(7, 2, 2005)


@pytest.fixture
def leap_day() -> CalendarDate:
    """A valid leap day (2000 is divisible by 400)."""
    return CalendarDate(29, 2, 2000)


# ---------------------------------------------------------------------------
# Environment fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def clean_env(monkeypatch):
    """Remove every environment variable the package reads."""
    for name in ("MAX_AGE_YEARS", "REFERENCE_DATE", "LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)
        monkeypatch.delenv(name.lower(), raising=False)
    return monkeypatch
