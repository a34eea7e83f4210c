"""Group both sides of a pre-formatted decimal number string."""

from __future__ import annotations

import logging
import re

import structlog

from digit_group.errors import InvalidSeparatorError, MalformedNumberError
from digit_group.grouping.grouper import GroupDirection, group_digits, validate_group_size

# Silent until the application installs stdlib handlers (see setup_logging).
_stdlib_logger = logging.getLogger(__name__)
_stdlib_logger.addHandler(logging.NullHandler())
logger = structlog.wrap_logger(_stdlib_logger)

# Optional sign, ASCII digits, at most one decimal point.
_NUMBER_RE = re.compile(r"-?[0-9]*(?:\.[0-9]*)?")


def validate_number_string(number_string: str) -> None:
    """Raise ``MalformedNumberError`` unless *number_string* is a plain decimal."""
    if not isinstance(number_string, str):
        raise TypeError(f"number_string must be str, got {type(number_string).__name__}")

    if _NUMBER_RE.fullmatch(number_string) is not None:
        return

    if number_string.count(".") > 1:
        reason = "more than one decimal point"
    elif "-" in number_string[1:]:
        reason = "minus sign is only allowed as the first character"
    else:
        reason = "only ASCII digits, a leading '-' and one '.' are allowed"
    logger.warning("malformed_number_string", number_string=number_string, reason=reason)
    raise MalformedNumberError(number_string, reason)


def validate_separators(decimal_mark: str, grouping_delimiter: str) -> None:
    """Check that the decimal mark is one character and the delimiter at most one."""
    if not isinstance(decimal_mark, str) or len(decimal_mark) != 1:
        raise InvalidSeparatorError(f"decimal_mark must be a single character, got {decimal_mark!r}")
    if not isinstance(grouping_delimiter, str) or len(grouping_delimiter) > 1:
        raise InvalidSeparatorError(
            f"grouping_delimiter must be empty or a single character, got {grouping_delimiter!r}"
        )


def custom_group(
    number_string: str,
    decimal_mark: str,
    grouping_delimiter: str,
    first_group_size: int,
    group_size: int,
    group_fractional_part: bool,
) -> str:
    """Group a pre-formatted number such as the output of ``f"{x:.3f}"``.

    The integer part is grouped counting leftward from the decimal point.
    The fractional part is copied verbatim unless *group_fractional_part* is
    set, in which case it is grouped counting rightward with the same sizes.
    The ``.`` of the input is replaced by *decimal_mark* in the output.

    >>> custom_group("111222.300", ".", ",", 3, 3, False)
    '111,222.300'
    >>> custom_group("1234567.89", ".", ",", 3, 2, False)
    '12,34,567.89'

    Raises
    ------
    InvalidGroupSizeError
        If a group size is not a positive integer.
    InvalidSeparatorError
        If *decimal_mark* is not one character or *grouping_delimiter* is
        longer than one.
    MalformedNumberError
        If *number_string* contains anything but an optional leading ``-``,
        ASCII digits and at most one ``.``.
    """
    validate_group_size("first_group_size", first_group_size)
    validate_group_size("group_size", group_size)
    validate_separators(decimal_mark, grouping_delimiter)
    validate_number_string(number_string)

    integer_part, has_point, fractional_part = number_string.partition(".")

    grouped = group_digits(
        integer_part,
        grouping_delimiter,
        first_group_size,
        group_size,
        GroupDirection.RIGHT_TO_LEFT,
    )

    if has_point:
        if group_fractional_part:
            fractional_part = group_digits(
                fractional_part,
                grouping_delimiter,
                first_group_size,
                group_size,
                GroupDirection.LEFT_TO_RIGHT,
            )
        grouped = f"{grouped}{decimal_mark}{fractional_part}"

    return grouped
