"""Interactive date-of-birth entry.

``parse_date_text`` and ``check_dob`` raise ``ValueError`` with a message
meant for the person at the keyboard; ``read_dob`` prints that message and
asks again until it gets a usable date of birth.
"""

import logging
import re

from age_classifier.calendar_date import CalendarDate

logger: logging.Logger = logging.getLogger(__name__)

# Also the default of Settings.max_age_years in age_classifier.config.
DEFAULT_MAX_AGE_YEARS = 130

PROMPT: str = "Enter your Date of Birth (DD-MM-YYYY or DD/MM/YYYY or DD MM YYYY): "

_SEPARATORS = re.compile(r"[-/.\s]+")

# ASCII digits only; int() would also take "1_5" and full-width digits.
_INTEGER_TOKEN = re.compile(r"\+?[0-9]+")


def parse_date_text(raw: str) -> CalendarDate:
    """Parse ``DD-MM-YYYY`` style text into a ``CalendarDate``.

    ``-``, ``/``, ``.`` and whitespace are all accepted as separators and may
    be mixed.  The result is not checked against the calendar.

    Raises:
        ValueError: If the text is empty or is not exactly three integers.
    """
    text = raw.strip()
    if not text:
        raise ValueError("Please type something.")

    # Log the length only; a birthdate is personal data.
    logger.debug("parsing %d-char date input", len(text))

    tokens = _SEPARATORS.split(text)
    if len(tokens) != 3 or not all(_INTEGER_TOKEN.fullmatch(token) for token in tokens):
        raise ValueError("Invalid format. Example: 07 02 2005 or 07-02-2005")
    day, month, year = (int(token) for token in tokens)
    return CalendarDate(day, month, year)


def check_dob(
    dob: CalendarDate,
    today: CalendarDate,
    max_age_years: int = DEFAULT_MAX_AGE_YEARS,
) -> None:
    """Reject a date of birth that cannot belong to a living person.

    Raises:
        ValueError: If *dob* is not a calendar date, lies after *today*, or
            is more than *max_age_years* calendar years before it.
    """
    if not dob.is_valid():
        raise ValueError("That date is not valid on the calendar.")
    if not dob <= today:
        raise ValueError("Date of birth cannot be in the future.")
    if today.year - dob.year > max_age_years:
        raise ValueError(f"Unrealistic age (>{max_age_years} years). Please re-enter.")


def read_dob(today: CalendarDate, max_age_years: int = DEFAULT_MAX_AGE_YEARS) -> CalendarDate:
    """Prompt until a valid date of birth is entered and return it.

    ``EOFError`` from ``input()`` is not caught; the caller decides what
    closed input means.
    """
    attempts = 0
    while True:
        attempts += 1
        raw = input(PROMPT)
        try:
            dob = parse_date_text(raw)
            check_dob(dob, today, max_age_years)
        except ValueError as exc:
            logger.debug("date of birth rejected on attempt %d", attempts)
            print(exc)
            continue
        logger.debug("date of birth accepted after %d attempt(s)", attempts)
        return dob
