"""person.datediff: calendar-aware difference between two dates.

Example
-------
>>> import datetime
>>> from person.datediff import new_diff
>>> diff = new_diff(datetime.date(2000, 1, 1), datetime.date(2003, 3, 16), "%Y %M %D")
>>> str(diff)
'3 years 2 months 15 days'
"""

from person.datediff.diff import Diff, compute_diff, format_noun, new_diff
from person.datediff.errors import (
    DateDiffError,
    InvalidFormatError,
    StartAfterEndError,
    UndefinedModeError,
)
from person.datediff.format import DiffMode, FormatSpec, parse_format

__all__: list[str] = [
    "DateDiffError",
    "Diff",
    "DiffMode",
    "FormatSpec",
    "InvalidFormatError",
    "StartAfterEndError",
    "UndefinedModeError",
    "compute_diff",
    "format_noun",
    "new_diff",
    "parse_format",
]
