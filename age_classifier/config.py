"""Runtime configuration for the age_classifier package.

Settings are loaded in priority order:
  1. Environment variables (highest priority)
  2. .env file in the project root
  3. Field defaults

Usage::

    from age_classifier.config import settings

    print(settings.max_age_years)
"""

import datetime

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from age_classifier.calendar_date import Clock
from age_classifier.prompt import DEFAULT_MAX_AGE_YEARS


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    max_age_years: int = Field(
        DEFAULT_MAX_AGE_YEARS,
        alias="MAX_AGE_YEARS",
        ge=0,
        description="Oldest accepted age, in calendar years, before a date of birth is rejected.",
    )
    reference_date: datetime.date | None = Field(
        None,
        alias="REFERENCE_DATE",
        description="Fixed 'today' (YYYY-MM-DD) used instead of the system clock.",
    )

    def clock(self) -> Clock:
        """Return the clock that ``CalendarDate.today`` should read."""
        if self.reference_date is None:
            return datetime.date.today
        fixed = self.reference_date
        return lambda: fixed


settings = Settings()
