"""String building: slicing, joining, trimming, splitting, mapping and bounded copies."""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional


def _cstrlen(data: bytes | bytearray) -> int:
    """Length of ``data`` up to its first NUL byte, or its full length."""
    end = data.find(0)
    return len(data) if end < 0 else end


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` from index ``start``.

    A start past the end or a zero length gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(s) or length == 0:
        return ""
    return s[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Strip characters found in ``charset`` from both ends of ``s``."""
    if not charset:
        return s
    return s.strip(charset)


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on ``sep``, dropping empty words."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in s.split(sep) if word]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a string from ``func(index, char)`` for each character of ``s``.

    The result ends at the first NUL character ``func`` produces.
    """
    mapped = "".join(func(index, char) for index, char in enumerate(s))
    return mapped.partition("\0")[0]


def striteri(
    buffer: MutableSequence[str], func: Callable[[int, str], Optional[str]]
) -> None:
    """Call ``func(index, char)`` on each character of ``buffer`` in place.

    A non-None result replaces that character.
    """
    for index, char in enumerate(buffer):
        replacement = func(index, char)
        if replacement is not None:
            buffer[index] = replacement


def strlcpy(dest: bytearray, src: bytes | bytearray, size: int) -> int:
    """Copy ``src`` into ``dest`` as a NUL-terminated string of at most ``size`` bytes.

    Returns the length of ``src``; a result of ``size`` or more means truncation.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size > len(dest):
        raise ValueError(f"size {size} exceeds buffer of {len(dest)} bytes")
    src_len = _cstrlen(src)
    if size == 0:
        return src_len
    count = min(src_len, size - 1)
    dest[:count] = src[:count]
    dest[count] = 0
    return src_len


def strlcat(dest: bytearray, src: bytes | bytearray, size: int) -> int:
    """Append ``src`` to the NUL-terminated string in ``dest`` within ``size`` bytes.

    Returns the length of the string it tried to build; when ``size`` does not
    exceed the existing length, that is ``size`` plus the length of ``src``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size > len(dest):
        raise ValueError(f"size {size} exceeds buffer of {len(dest)} bytes")
    src_len = _cstrlen(src)
    dest_len = _cstrlen(dest)
    if size <= dest_len:
        return size + src_len
    count = min(src_len, size - dest_len - 1)
    dest[dest_len : dest_len + count] = src[:count]
    dest[dest_len + count] = 0
    return dest_len + src_len