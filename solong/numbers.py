"""Conversions between decimal text and 32-bit signed integers."""

from __future__ import annotations

import operator
import re

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_NUMBER = re.compile(r"[\t\n\v\f\r ]*([+-]?)([0-9]*)")


def _wrap_int32(value: int) -> int:
    return (value - INT_MIN) % 2**32 + INT_MIN


def atoi(text: str) -> int:
    """Parse the leading decimal integer of text.

    Leading whitespace (tab through carriage return, and space) is skipped,
    one optional sign is accepted, and digits are read until the first
    non-digit. Text without digits gives 0. The result wraps around to a
    32-bit signed integer.
    """
    match = _NUMBER.match(text)
    sign, digits = match.groups()
    if not digits:
        return 0
    value = int(digits)
    return _wrap_int32(-value if sign == "-" else value)


def itoa(n: int) -> str:
    """Decimal text of a 32-bit signed integer.

    Raises OverflowError for values outside the 32-bit signed range.
    """
    n = operator.index(n)
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)