"""Strands tools exposing the age helpers to the assistant agent.

Each function is decorated with ``@tool`` so the Strands framework can
expose it to the language model.  Input validation is performed before any
computation so that the model receives a clear error message rather than a
cryptic Python traceback.
"""

import datetime
import logging

from strands import tool

from person.age import age_on, is_adult_on
from person.config import settings

logger: logging.Logger = logging.getLogger(__name__)

_MAX_DATE_LEN = 10
_MAX_FORMAT_LEN = 64
_MIN_DATE = datetime.date(1900, 1, 1)
_MAX_DATE = datetime.date(2100, 12, 31)


def _parse_date_arg(value: object, name: str) -> datetime.date:
    """Validate a YYYY-MM-DD tool argument and return it as a date."""
    if not isinstance(value, str):
        raise ValueError(f"{name} must be a string.")
    if len(value) > _MAX_DATE_LEN:
        raise ValueError(f"{name} exceeds maximum length of {_MAX_DATE_LEN}.")

    try:
        parsed = datetime.date.fromisoformat(value)
    except ValueError as exc:
        raise ValueError(f"{name} is not a valid ISO date (YYYY-MM-DD).") from exc

    if not (_MIN_DATE <= parsed <= _MAX_DATE):
        raise ValueError(f"{name} is outside the allowed range (1900-01-01 to 2100-12-31).")
    return parsed


@tool
def get_current_date() -> str:
    """Get today's date in YYYY-MM-DD format.

    Use this tool to retrieve the current date when you need to calculate
    someone's age from their birthdate.

    Returns:
        Today's date as a string in YYYY-MM-DD format.
    """
    today = datetime.date.today().isoformat()
    logger.debug("get_current_date called, returning %s", today)
    return today


@tool
def calculate_age(birthdate: str, on_date: str, age_format: str | None = None) -> str:
    """Calculate a person's age on a given date as readable text.

    Use this tool to compute how old someone born on birthdate is on
    on_date (e.g., today's date).  The birthdate must be earlier than or
    equal to on_date.

    The age_format string chooses the units of the answer.  It may contain
    any text plus these verbs: %Y years, %M months, %W weeks, %D days.
    Uppercase verbs print the number with its unit ("3 years"), lowercase
    verbs (%y, %m, %w, %d) print the bare number ("3").  For example
    "%Y %M %D" gives "3 years 2 months 15 days" and "%D" gives the age in
    days only.

    Args:
        birthdate: The date of birth in YYYY-MM-DD format.
        on_date: The date to measure the age on in YYYY-MM-DD format.
        age_format: Optional format string; defaults to the configured format
            (AGE_FORMAT, "%Y %M %D" unless overridden).

    Returns:
        The age rendered with age_format.

    Raises:
        ValueError: If either date is not in YYYY-MM-DD format, if
            birthdate is after on_date, or if age_format contains an
            unknown verb or no verb at all.
    """
    if age_format is None:
        age_format = settings.age_format
    if not isinstance(age_format, str):
        raise ValueError("age_format must be a string.")
    if len(age_format) > _MAX_FORMAT_LEN:
        raise ValueError(f"age_format exceeds maximum length of {_MAX_FORMAT_LEN}.")

    # log input lengths, not raw values
    logger.debug(
        "calculate_age called with %d-char birthdate, %d-char on_date, %d-char age_format",
        len(birthdate) if isinstance(birthdate, str) else -1,
        len(on_date) if isinstance(on_date, str) else -1,
        len(age_format),
    )

    dob = _parse_date_arg(birthdate, "birthdate")
    date = _parse_date_arg(on_date, "on_date")

    result = age_on(dob, date, age_format)
    logger.debug("calculate_age produced %d chars", len(result))
    return result


@tool
def check_is_adult(birthdate: str, on_date: str, adult_age: int | None = None) -> bool:
    """Check whether a person is an adult on a given date.

    Use this tool when the user asks whether someone born on birthdate is
    old enough (an adult) on on_date.  The birthdate must be earlier than
    or equal to on_date.

    Args:
        birthdate: The date of birth in YYYY-MM-DD format.
        on_date: The date to check in YYYY-MM-DD format.
        adult_age: Optional age in full years at which a person becomes an
            adult; defaults to the configured value (18).

    Returns:
        True if the person has completed at least adult_age years on
        on_date, otherwise False.

    Raises:
        ValueError: If either date is not in YYYY-MM-DD format, if
            birthdate is after on_date, or if adult_age is negative.
    """
    if adult_age is None:
        adult_age = settings.adult_age
    if isinstance(adult_age, bool) or not isinstance(adult_age, int):
        raise ValueError("adult_age must be an integer.")

    dob = _parse_date_arg(birthdate, "birthdate")
    date = _parse_date_arg(on_date, "on_date")

    result = is_adult_on(dob, date, adult_age)
    logger.debug("check_is_adult result: %s", result)
    return result
