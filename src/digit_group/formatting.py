"""Group numeric values directly.

Every formatter converts the value to a plain decimal string with
:func:`to_decimal_string` and hands it to ``custom_group``.  Use
``custom_group`` directly for strings that were already formatted, e.g. to
fix the precision first::

    custom_group(f"{value:.3f}", ".", ",", 3, 3, False)
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Union

from digit_group.errors import MalformedNumberError
from digit_group.grouping.composer import custom_group
from digit_group.models.grouping import get_preset

Number = Union[int, float, Decimal]


def to_decimal_string(value: Number) -> str:
    """Render *value* as digits, an optional leading ``-`` and an optional ``.``.

    Floats use their shortest round-trip form without exponent notation.
    Whole floats drop the fractional part, so ``1234.0`` renders as
    ``"1234"`` and ``-0.0`` as ``"-0"``.

    >>> to_decimal_string(1.5e-07)
    '0.00000015'
    >>> to_decimal_string(1e16)
    '10000000000000000'
    """
    if isinstance(value, bool):
        raise MalformedNumberError(repr(value), "booleans are not numbers")

    if isinstance(value, int):
        return str(value)

    if isinstance(value, float):
        if not math.isfinite(value):
            raise MalformedNumberError(repr(value), "not a finite number")
        if value == 0 and math.copysign(1.0, value) < 0:
            return "-0"
        if value.is_integer():
            return str(int(value))
        text = repr(value)
        if "e" in text:
            text = format(Decimal(text), "f")
        return text

    if isinstance(value, Decimal):
        if not value.is_finite():
            raise MalformedNumberError(str(value), "not a finite number")
        return format(value, "f")

    raise TypeError(f"Cannot group value of type {type(value).__name__}")


def format_custom(
    value: Number,
    decimal_mark: str,
    grouping_delimiter: str,
    first_group_size: int,
    group_size: int,
    group_fractional_part: bool,
) -> str:
    """Format *value* with explicit grouping parameters.

    >>> format_custom(123456789.01, "#", ":", 4, 2, False)
    '1:23:45:6789#01'
    """
    return custom_group(
        to_decimal_string(value),
        decimal_mark,
        grouping_delimiter,
        first_group_size,
        group_size,
        group_fractional_part,
    )


def format_commas(value: Number) -> str:
    """Format *value* in groups of three separated by commas.

    >>> format_commas(123456789)
    '123,456,789'
    """
    return format_custom(value, ".", ",", 3, 3, False)


def format_si(value: Number, decimal_mark: str = ".") -> str:
    """Format *value* per ISO 80000-1, grouping both sides with spaces.

    >>> format_si(123456789.01234)
    '123 456 789.012 34'
    """
    return format_custom(value, decimal_mark, " ", 3, 3, True)


def format_preset(value: Number, preset: str) -> str:
    """Format *value* with a named preset such as ``"indian"``."""
    return get_preset(preset).apply(to_decimal_string(value))
