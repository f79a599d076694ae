"""Parser for the dates difference format mini-language.

A format string is free text with two-character verbs embedded in it::

    %Y, %y  years
    %M, %m  months
    %W, %w  weeks
    %D, %d  days

An uppercase verb renders the value together with its unit noun
(``"5 years"``), a lowercase verb renders the bare value (``"5"``).
Everything outside the verbs is copied to the output verbatim.
"""

import enum
import logging
import types
from dataclasses import dataclass

from person.datediff.errors import InvalidFormatError, UndefinedModeError

logger: logging.Logger = logging.getLogger(__name__)

VERB_SIGIL: str = "%"


class DiffMode(enum.Flag):
    """Time units requested from the diff engine."""

    YEARS = enum.auto()
    MONTHS = enum.auto()
    WEEKS = enum.auto()
    DAYS = enum.auto()


# verb letter -> unit it selects; uppercase and lowercase share a unit
VERB_MODES: types.MappingProxyType = types.MappingProxyType(
    {
        "Y": DiffMode.YEARS,
        "y": DiffMode.YEARS,
        "M": DiffMode.MONTHS,
        "m": DiffMode.MONTHS,
        "W": DiffMode.WEEKS,
        "w": DiffMode.WEEKS,
        "D": DiffMode.DAYS,
        "d": DiffMode.DAYS,
    }
)

UNIT_NOUNS: types.MappingProxyType = types.MappingProxyType(
    {
        DiffMode.YEARS: "year",
        DiffMode.MONTHS: "month",
        DiffMode.WEEKS: "week",
        DiffMode.DAYS: "day",
    }
)


@dataclass(frozen=True)
class FormatSpec:
    """Parsed representation of a format string.

    Attributes:
        mode: Units that must be computed.
        value_only: Units rendered without their noun.  Always a subset
            of ``mode``.
    """

    mode: DiffMode = DiffMode(0)
    value_only: DiffMode = DiffMode(0)

    def has(self, unit: DiffMode) -> bool:
        return bool(self.mode & unit)

    def is_value_only(self, unit: DiffMode) -> bool:
        return bool(self.value_only & unit)


def parse_format(raw_format: str) -> FormatSpec:
    """Parse ``raw_format`` into a :class:`FormatSpec`.

    The string is scanned once from left to right.  When a unit appears
    more than once, its last occurrence decides how it is rendered.

    Args:
        raw_format: Format string such as ``"%Y, %M and %d days"``.

    Returns:
        The parsed specification.

    Raises:
        InvalidFormatError: If a verb letter is not recognised or the
            string ends with a bare ``%``.
        UndefinedModeError: If the string contains no verb at all.
    """
    mode = DiffMode(0)
    value_only = DiffMode(0)

    end = len(raw_format)
    i = raw_format.find(VERB_SIGIL)
    while i != -1:
        if i + 1 >= end:
            raise InvalidFormatError(f'format "{raw_format}" has incomplete verb')
        letter = raw_format[i + 1]
        unit = VERB_MODES.get(letter)
        if unit is None:
            raise InvalidFormatError(f'format "{raw_format}" has unknown verb {letter}')

        mode |= unit
        if letter.islower():
            value_only |= unit
        else:
            value_only &= ~unit

        i = raw_format.find(VERB_SIGIL, i + 2)

    if not mode:
        raise UndefinedModeError()

    logger.debug("parsed format with mode=%s value_only=%s", mode, value_only)
    return FormatSpec(mode=mode, value_only=value_only)
