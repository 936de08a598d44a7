"""Entry point for the age classifier CLI.

Run with:
    python main.py

The script configures structured logging, reads today's date once, prompts
the user for their date of birth until it validates, and prints the age
breakdown and life stage.
"""

import datetime
import json
import logging
import os
import time
import uuid

from age_classifier import CalendarDate, classify, compute
from age_classifier.config import settings
from age_classifier.prompt import read_dob
from age_classifier.report import format_report

logger: logging.Logger = logging.getLogger(__name__)

BANNER: str = "=== Intelligent Age Calculator & Life Stage Classifier ==="

# Attributes every LogRecord carries; anything else on a record came from extra=.
_RESERVED_RECORD_KEYS: frozenset[str] = frozenset(
    logging.LogRecord("", logging.NOTSET, "", 0, "", (), None).__dict__
) | {"message", "asctime"}


def _configure_logging() -> None:
    """Configure logging format based on the LOG_FORMAT environment variable.

    Set LOG_FORMAT=json for structured JSON output.
    Any other value (or absent) falls back to human-readable plaintext.
    """
    log_format = os.environ.get("LOG_FORMAT", "text").lower()

    if log_format == "json":
        class _JsonFormatter(logging.Formatter):
            def format(self, record: logging.LogRecord) -> str:
                payload: dict = {
                    "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
                    "level": record.levelname,
                    "logger": record.name,
                    "message": record.getMessage(),
                }
                # Merge only the fields passed via logger.info(..., extra={...})
                for key, value in record.__dict__.items():
                    if key not in _RESERVED_RECORD_KEYS and not key.startswith("_"):
                        payload[key] = value
                return json.dumps(payload, default=str)

        handler = logging.StreamHandler()
        handler.setFormatter(_JsonFormatter())
        logging.basicConfig(level=logging.INFO, handlers=[handler], force=True)
    else:
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )


def run() -> None:
    """Configure logging, read the date of birth, and print the age report.

    "Today" is read once, from ``REFERENCE_DATE`` when configured or the
    system clock otherwise, and used both for validation and for the
    calculation.  Invalid entries are re-prompted inside ``read_dob``; if
    input ends first, a short notice is printed and the function returns
    normally.

    After the report is printed a structured record is emitted via
    ``logger.info`` containing session_id, timestamp (ISO UTC), elapsed_ms,
    and the life stage.  The date of birth is intentionally excluded to
    avoid retaining PII.
    """
    _configure_logging()

    today = CalendarDate.today(settings.clock())

    print(BANNER)
    print()

    start = time.monotonic()
    try:
        dob = read_dob(today, settings.max_age_years)
    except EOFError:
        print()
        print("No date of birth entered.")
        logger.warning("input closed before a valid date of birth was entered")
        return

    age = compute(dob, today)
    stage = classify(age.years)

    print()
    print(format_report(dob, today, age, stage))
    print("Thank you!")

    elapsed_ms = (time.monotonic() - start) * 1000
    logger.info(
        "age_computed",
        extra={
            "session_id": str(uuid.uuid4()),
            "timestamp": datetime.datetime.now(datetime.timezone.utc).isoformat(),
            "elapsed_ms": round(elapsed_ms, 1),
            "life_stage": stage.value,
        },
    )


if __name__ == "__main__":
    run()
