"""Age helpers built on top of :mod:`person.datediff`.

Dates of birth may be ``datetime.date`` or ``datetime.datetime`` values.
When no reference date is given, "now" is taken in the same flavour as the
date of birth: ``date.today()`` for a date, ``datetime.now(dob.tzinfo)`` for
a datetime.
"""

import datetime
import logging

from person.datediff import DiffMode, FormatSpec, compute_diff, parse_format

logger: logging.Logger = logging.getLogger(__name__)

_YEARS_ONLY = FormatSpec(mode=DiffMode.YEARS)


class DobInFutureError(ValueError):
    """The date of birth is after the date the age is measured on."""

    def __init__(self) -> None:
        super().__init__("date of birth is in the future")


def age(dob: datetime.date, raw_format: str) -> str:
    """Return the age of a person born on ``dob`` as of now.

    For example ``age(dob, "%Y, %M and %D")`` may return
    ``"31 years, 2 months and 2 days"``.

    Raises:
        DobInFutureError: If ``dob`` is in the future.
        InvalidFormatError: If ``raw_format`` has an unknown verb.
        UndefinedModeError: If ``raw_format`` has no verb.
    """
    return age_on(dob, _now_like(dob), raw_format)


def age_on(dob: datetime.date, on_date: datetime.date, raw_format: str) -> str:
    """Return the age of a person born on ``dob`` as of ``on_date``.

    The format string is validated before the dates are compared, so a bad
    format is reported even when ``dob`` is after ``on_date``.

    Raises:
        DobInFutureError: If ``dob`` is after ``on_date``.
        InvalidFormatError: If ``raw_format`` has an unknown verb.
        UndefinedModeError: If ``raw_format`` has no verb.
    """
    spec = parse_format(raw_format)
    if dob > on_date:
        raise DobInFutureError()
    return str(compute_diff(dob, on_date, spec, raw_format))


def is_adult(dob: datetime.date, adult_age: int) -> bool:
    """Return whether a person born on ``dob`` is at least ``adult_age`` years old now."""
    return is_adult_on(dob, _now_like(dob), adult_age)


def is_adult_on(dob: datetime.date, on_date: datetime.date, adult_age: int) -> bool:
    """Return whether a person born on ``dob`` is ``adult_age`` years old on ``on_date``.

    Raises:
        ValueError: If ``adult_age`` is negative.
        DobInFutureError: If ``dob`` is after ``on_date``.
    """
    if adult_age < 0:
        raise ValueError(f"adult_age must not be negative, got {adult_age}.")
    if dob > on_date:
        raise DobInFutureError()
    years = compute_diff(dob, on_date, _YEARS_ONLY).years
    logger.debug("is_adult_on: %d full years against threshold %d", years, adult_age)
    return years >= adult_age


def _now_like(dob: datetime.date) -> datetime.date:
    if isinstance(dob, datetime.datetime):
        return datetime.datetime.now(dob.tzinfo)
    return datetime.date.today()
