"""Plain-text rendering of an age calculation."""

from age_classifier.calculator import AgeResult, LifeStage
from age_classifier.calendar_date import CalendarDate

RULE: str = "-" * 45


def format_age(age: AgeResult) -> str:
    return f"{age.years} years, {age.months} months, {age.days} days"


def format_report(
    dob: CalendarDate,
    today: CalendarDate,
    age: AgeResult,
    stage: LifeStage,
) -> str:
    """Return the multi-line result block printed at the end of a run."""
    lines = [
        RULE,
        f"DOB: {dob}   Day of Birth: {dob.day_name()}",
        f"Current Date: {today}   Current Day: {today.day_name()}",
        f"Stage of life: {stage.label}",
        f"Age of the User: {format_age(age)}",
        f"Age of the user in days: {age.total_days} (total days)",
        RULE,
    ]
    return "\n".join(lines)
