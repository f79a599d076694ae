"""Helpers that join the parts of a person's name into a full name."""

from collections.abc import Callable, Iterable


def full_name(parts: Iterable[str] | None) -> str:
    """Join name parts with single spaces.

    Every part is stripped of surrounding whitespace and parts that end up
    empty are left out.

    >>> full_name([" Johann", "   ", " Sebastian  ", "Bach"])
    'Johann Sebastian Bach'
    """
    return full_name_format_func(parts, str.strip)


def full_name_default(parts: Iterable[str] | None, default: str) -> str:
    """Like :func:`full_name`, but return ``default`` when the result is empty."""
    return full_name(parts) or default


def full_name_format_func(
    parts: Iterable[str] | None, func: Callable[[str], str]
) -> str:
    """Format every name part with ``func`` and join the non-blank results."""
    formatted = (func(part) for part in parts or ())
    return " ".join(part for part in formatted if part.strip())


def full_name_default_format_func(
    parts: Iterable[str] | None, default: str, func: Callable[[str], str]
) -> str:
    """Like :func:`full_name_format_func`, but return ``default`` when the result is empty."""
    return full_name_format_func(parts, func) or default
