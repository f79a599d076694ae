"""Exceptions raised by the date-difference engine.

Every error derives from ``ValueError`` so that callers validating user
input (CLI prompts, agent tools) can handle them alongside ordinary
parsing failures.
"""


class DateDiffError(ValueError):
    """Base class for all date-difference errors."""


class InvalidFormatError(DateDiffError):
    """The format string contains a verb the parser does not recognise."""


class UndefinedModeError(DateDiffError):
    """The format string requests no time unit at all."""

    def __init__(self) -> None:
        super().__init__("undefined dates difference mode")


class StartAfterEndError(DateDiffError):
    """The start instant is strictly after the end instant."""

    def __init__(self) -> None:
        super().__init__("start date is after end date")
