"""Conversions between decimal text and integers with C int semantics."""

from __future__ import annotations

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")

LONG_MAX = 2**63 - 1
LONG_MIN = -(2**63)
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def _to_int32(value: int) -> int:
    """Wrap ``value`` to a signed 32-bit integer."""
    return (value + 2**31) % 2**32 - 2**31


def atoi(text: str) -> int:
    """Parse a leading decimal integer from ``text``.

    Leading whitespace is skipped and a single sign is accepted. Parsing stops
    at the first non-digit. Values beyond a 64-bit long clamp to its limits,
    and the result is then narrowed to a 32-bit int. Text without digits
    gives 0.
    """
    position = 0
    while position < len(text) and text[position] in _WHITESPACE:
        position += 1
    sign = 1
    if position < len(text) and text[position] in "+-":
        if text[position] == "-":
            sign = -1
        position += 1

    magnitude = 0
    for char in text[position:]:
        if char not in _DIGITS:
            break
        magnitude = magnitude * 10 + int(char)
        value = sign * magnitude
        if value > LONG_MAX:
            return _to_int32(LONG_MAX)
        if value < LONG_MIN:
            return _to_int32(LONG_MIN)
    return _to_int32(sign * magnitude)


def itoa(number: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    if not INT_MIN <= number <= INT_MAX:
        raise OverflowError(f"{number} does not fit in a 32-bit int")
    return str(number)