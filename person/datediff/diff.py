"""Calendar-aware difference between two instants.

Call ``new_diff(start, end, "%Y %M %D")`` to obtain a :class:`Diff` and
``str(diff)`` or ``diff.format(...)`` to render it.  Units are consumed
greedily from the largest to the smallest, so each unit only measures
what the coarser units left over.
"""

import datetime
import logging

from dateutil.relativedelta import relativedelta
from pydantic import BaseModel, ConfigDict, Field

from person.datediff.errors import StartAfterEndError, UndefinedModeError
from person.datediff.format import (
    UNIT_NOUNS,
    VERB_MODES,
    VERB_SIGIL,
    DiffMode,
    FormatSpec,
    parse_format,
)

logger: logging.Logger = logging.getLogger(__name__)

MONTHS_IN_YEAR: int = 12
_ONE_DAY = datetime.timedelta(days=1)
_ONE_WEEK = datetime.timedelta(weeks=1)


class Diff(BaseModel):
    """Difference between two instants broken into calendar units.

    A unit that was not requested is zero, so zero alone does not tell
    "not requested" apart from "nothing elapsed".  ``raw_format`` keeps the
    format string the diff was computed for and is used by ``str()``.
    """

    model_config = ConfigDict(frozen=True)

    years: int = Field(0, ge=0)
    months: int = Field(0, ge=0)
    weeks: int = Field(0, ge=0)
    days: int = Field(0, ge=0)
    raw_format: str = ""

    def value(self, unit: DiffMode) -> int:
        """Return the count stored for a single ``unit``."""
        if unit is DiffMode.YEARS:
            return self.years
        if unit is DiffMode.MONTHS:
            return self.months
        if unit is DiffMode.WEEKS:
            return self.weeks
        if unit is DiffMode.DAYS:
            return self.days
        raise ValueError(f"{unit!r} is not a single time unit")

    def format(self, raw_format: str) -> str:
        """Render the diff using ``raw_format`` as a template.

        Raises:
            InvalidFormatError: If ``raw_format`` has an unknown verb.
            UndefinedModeError: If ``raw_format`` has no verb.
        """
        parse_format(raw_format)
        return _render(self, raw_format, keep_zeros=True)

    def format_nonzero(self, raw_format: str) -> str:
        """Like :meth:`format`, but drops zero units and the space before them."""
        parse_format(raw_format)
        return _render(self, raw_format, keep_zeros=False)

    def nonzero_string(self) -> str:
        """Render with the stored format, dropping zero units."""
        return _render(self, self.raw_format, keep_zeros=False)

    def __str__(self) -> str:
        return _render(self, self.raw_format, keep_zeros=True)


def new_diff(
    start: datetime.date, end: datetime.date, raw_format: str
) -> Diff:
    """Parse ``raw_format`` and compute the difference from ``start`` to ``end``.

    Args:
        start: The earlier instant, a ``date`` or a ``datetime``.
        end: The later instant, of the same type as ``start``.
        raw_format: Format string selecting the units to compute.

    Returns:
        A :class:`Diff` remembering ``raw_format``.

    Raises:
        StartAfterEndError: If ``start`` is after ``end``.
        InvalidFormatError: If ``raw_format`` has an unknown verb.
        UndefinedModeError: If ``raw_format`` has no verb.
    """
    if start > end:
        raise StartAfterEndError()
    spec = parse_format(raw_format)
    return compute_diff(start, end, spec, raw_format)


def compute_diff(
    start: datetime.date,
    end: datetime.date,
    spec: FormatSpec,
    raw_format: str = "",
) -> Diff:
    """Compute the units requested by ``spec`` between ``start`` and ``end``.

    Raises:
        StartAfterEndError: If ``start`` is after ``end``.
        UndefinedModeError: If ``spec`` requests no unit.
    """
    if start > end:
        raise StartAfterEndError()
    if not spec.mode:
        raise UndefinedModeError()

    years = months = weeks = days = 0

    if spec.has(DiffMode.YEARS):
        years = _full_years(start, end)
        start += relativedelta(years=years)

    if spec.has(DiffMode.MONTHS):
        # jump over whole years first to keep the month loop short
        skipped = 0 if spec.has(DiffMode.YEARS) else _full_years(start, end)
        months = _full_months(start, end, skipped * MONTHS_IN_YEAR)
        start += relativedelta(months=months)

    if spec.has(DiffMode.WEEKS):
        weeks = (end - start) // _ONE_WEEK
        start += weeks * _ONE_WEEK

    if spec.has(DiffMode.DAYS):
        days = (end - start) // _ONE_DAY

    logger.debug(
        "computed diff mode=%s years=%d months=%d weeks=%d days=%d",
        spec.mode,
        years,
        months,
        weeks,
        days,
    )
    return Diff(years=years, months=months, weeks=weeks, days=days, raw_format=raw_format)


def format_noun(n: int, noun: str) -> str:
    """Return ``n`` followed by ``noun`` in singular or plural form.

    Counts ending in 1 are singular except those ending in 11:
    ``1 year``, ``11 years``, ``21 year``.
    """
    if n % 10 == 1 and n % 100 != 11:
        return f"{n} {noun}"
    return f"{n} {noun}s"


def _full_years(start: datetime.date, end: datetime.date) -> int:
    years = end.year - start.year
    if start + relativedelta(years=years) > end:
        years -= 1
    return years


def _full_months(start: datetime.date, end: datetime.date, months: int) -> int:
    # each candidate is measured from the same start so month-end clamping
    # never accumulates
    while start + relativedelta(months=months + 1) <= end:
        months += 1
    return months


def _render(diff: Diff, raw_format: str, keep_zeros: bool) -> str:
    result = raw_format
    for letter, unit in VERB_MODES.items():
        verb = VERB_SIGIL + letter
        if verb not in raw_format:
            continue

        n = diff.value(unit)
        if n == 0 and not keep_zeros:
            result = result.replace(" " + verb, "").replace(verb, "")
            continue

        if letter.isupper():
            replacement = format_noun(n, UNIT_NOUNS[unit])
        else:
            replacement = str(n)
        result = result.replace(verb, replacement)
    return result
