"""A small printf supporting the c, s, p, d, i, u, x, X and % conversions."""

from __future__ import annotations

import sys
from typing import Any, Callable

DECIMAL = "0123456789"
LOWER_HEX = "0123456789abcdef"
UPPER_HEX = "0123456789ABCDEF"

_UINT_MASK = 2**32 - 1
_UINTPTR_MASK = 2**64 - 1


def itoa_base(number: int, base: str) -> str:
    """Write a non-negative integer using the digits of ``base``."""
    if len(base) < 2:
        raise ValueError("base needs at least two digits")
    if number < 0:
        raise ValueError("number must not be negative")
    radix = len(base)
    digits = []
    while True:
        number, remainder = divmod(number, radix)
        digits.append(base[remainder])
        if number == 0:
            break
    return "".join(reversed(digits))


def _as_int32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def _char(arg: Any) -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise ValueError(f"%c expects a single character, got {arg!r}")
        return arg
    return chr(int(arg) & 0xFF)


def _string(arg: Any) -> str:
    if arg is None:
        return "(null)"
    return str(arg).partition("\0")[0]


def _address(arg: Any) -> str:
    if arg is None:
        value = 0
    elif isinstance(arg, int):
        value = arg & _UINTPTR_MASK
    else:
        value = id(arg)
    return "0x" + itoa_base(value, LOWER_HEX)


def _signed(arg: Any) -> str:
    return str(_as_int32(int(arg)))


def _unsigned(arg: Any) -> str:
    return itoa_base(int(arg) & _UINT_MASK, DECIMAL)


def _lower_hex(arg: Any) -> str:
    return itoa_base(int(arg) & _UINT_MASK, LOWER_HEX)


def _upper_hex(arg: Any) -> str:
    return itoa_base(int(arg) & _UINT_MASK, UPPER_HEX)


_HANDLERS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "p": _address,
    "d": _signed,
    "i": _signed,
    "u": _unsigned,
    "x": _lower_hex,
    "X": _upper_hex,
}


def _format(fmt: str, args: tuple[Any, ...]) -> tuple[str, int]:
    """Return the formatted text and the count printf reports for it.

    An unknown conversion prints nothing and lowers the count by one.
    """
    pieces: list[str] = []
    count = 0
    remaining = iter(args)
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            pieces.append(char)
            count += 1
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            pieces.append("%")
            count += 1
            continue
        handler = _HANDLERS.get(spec)
        if handler is None:
            count -= 1
            continue
        try:
            arg = next(remaining)
        except StopIteration:
            raise TypeError(f"not enough arguments for %{spec}") from None
        text = handler(arg)
        pieces.append(text)
        count += len(text)
    return "".join(pieces), count


def render(fmt: str, *args: Any) -> str:
    """Return the text that ``printf`` would print."""
    return _format(fmt, args)[0]


def printf(fmt: str, *args: Any) -> int:
    """Print the formatted text to standard output and return its count."""
    text, count = _format(fmt, args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return count