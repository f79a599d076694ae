"""person: ages and names of people.

Public API
----------
age, age_on
    Format the age of a person using the ``person.datediff`` format verbs.
is_adult, is_adult_on
    Check a date of birth against an age threshold in years.
full_name, full_name_default, full_name_format_func, full_name_default_format_func
    Join the parts of a name.

The Strands agent lives in ``person.agent`` and is not imported here, so
that using the library never requires agent configuration.

Example
-------
>>> import datetime
>>> from person import age_on
>>> age_on(datetime.date(2000, 1, 1), datetime.date(2003, 3, 16), "%Y %M %D")
'3 years 2 months 15 days'
"""

from person.age import DobInFutureError, age, age_on, is_adult, is_adult_on
from person.name import (
    full_name,
    full_name_default,
    full_name_default_format_func,
    full_name_format_func,
)

__all__: list[str] = [
    "DobInFutureError",
    "age",
    "age_on",
    "full_name",
    "full_name_default",
    "full_name_default_format_func",
    "full_name_format_func",
    "is_adult",
    "is_adult_on",
]
