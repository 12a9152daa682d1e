"""Domain exceptions raised by the resolver, renderer, and date helpers.

Services translate these into :class:`~rkv.services.result.ServiceError`
codes; the domain itself never performs I/O and cannot originate
filesystem or process errors.
"""

from __future__ import annotations


class RkvError(Exception):
    """Base class for all rkv domain errors."""


class InvalidDateError(RkvError, ValueError):
    """A date failed validation before reaching resolution or rendering."""

    def __init__(self, reason: str, *, value: object = None) -> None:
        self.reason = reason
        self.value = value
        if value is None:
            super().__init__(f"Invalid date provided: {reason}")
        else:
            super().__init__(f"Invalid date provided: {value!r} ({reason})")


class UnknownEntryTypeError(RkvError, ValueError):
    """An entry type tag outside the closed enumeration."""

    def __init__(self, tag: str) -> None:
        self.tag = tag
        super().__init__(f"Unknown entry type: {tag!r}")


class InvalidFormatError(RkvError, ValueError):
    """A date-format pattern that cannot be interpreted."""

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid date format {pattern!r}: {reason}")
