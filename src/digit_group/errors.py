"""Exceptions raised for invalid grouping input.

All errors derive from ``ValueError`` so callers that already guard numeric
parsing with ``except ValueError`` keep working.
"""

from __future__ import annotations


class DigitGroupError(ValueError):
    """Base class for every caller-input error raised by this package."""


class InvalidGroupSizeError(DigitGroupError):
    """A group size was zero, negative, or not an integer."""

    def __init__(self, name: str, value: object):
        self.name = name
        self.value = value
        super().__init__(f"{name} must be a positive integer, got {value!r}")


class MalformedNumberError(DigitGroupError):
    """The number string is not a plain decimal rendering."""

    def __init__(self, number_string: str, reason: str):
        self.number_string = number_string
        self.reason = reason
        super().__init__(f"Malformed number string {number_string!r}: {reason}")


class InvalidSeparatorError(DigitGroupError):
    """A decimal mark or grouping delimiter has the wrong length."""


class UnknownPresetError(DigitGroupError, KeyError):
    """No grouping preset is registered under the requested name."""

    def __init__(self, name: str, available: list[str]):
        self.name = name
        self.available = available
        super().__init__(f"Unknown grouping preset {name!r}; available: {', '.join(available)}")

    def __str__(self) -> str:
        return self.args[0]
