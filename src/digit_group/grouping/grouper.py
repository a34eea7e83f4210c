"""Insert grouping delimiters into a run of digits."""

from __future__ import annotations

from enum import StrEnum

from digit_group.errors import InvalidGroupSizeError


class GroupDirection(StrEnum):
    """Which way groups are counted, always starting at the decimal point.

    ``RIGHT_TO_LEFT`` is used for the integer part, where the least
    significant digit sits next to the decimal point.  ``LEFT_TO_RIGHT`` is
    used for the fractional part, where the most significant digit does.
    """

    RIGHT_TO_LEFT = "right_to_left"
    LEFT_TO_RIGHT = "left_to_right"


def validate_group_size(name: str, value: object) -> int:
    """Return *value* if it is a usable group size, else raise.

    ``bool`` is rejected even though it is an ``int`` subclass.
    """
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise InvalidGroupSizeError(name, value)
    return value


def group_digits(
    digits: str,
    delimiter: str,
    first_group_size: int,
    group_size: int,
    direction: GroupDirection = GroupDirection.RIGHT_TO_LEFT,
) -> str:
    """Return *digits* with *delimiter* inserted between groups.

    Parameters
    ----------
    digits:
        ASCII decimal digits, optionally prefixed with a single ``-``.
    delimiter:
        Text placed between groups.  An empty delimiter returns the digits
        unchanged.
    first_group_size:
        Number of digits in the group adjacent to the decimal point.
    group_size:
        Number of digits in every group after the first.
    direction:
        ``RIGHT_TO_LEFT`` for an integer part, ``LEFT_TO_RIGHT`` for a
        fractional part.

    Raises
    ------
    InvalidGroupSizeError
        If either size is not a positive integer.
    """
    validate_group_size("first_group_size", first_group_size)
    validate_group_size("group_size", group_size)

    negative = digits.startswith("-")
    if negative:
        digits = digits[1:]

    # Walk outward from the decimal point.
    if direction == GroupDirection.RIGHT_TO_LEFT:
        ordered = digits[::-1]
    else:
        ordered = digits

    delimited: list[str] = list(ordered[:first_group_size])
    for i, digit in enumerate(ordered[first_group_size:]):
        if i % group_size == 0:
            delimited.append(delimiter)
        delimited.append(digit)

    if direction == GroupDirection.RIGHT_TO_LEFT:
        delimited.reverse()

    grouped = "".join(delimited)
    return f"-{grouped}" if negative else grouped
