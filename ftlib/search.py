"""Searching and comparing text: character lookup, bounded compare and substring search."""

from __future__ import annotations


def _target(c: int | str) -> str:
    """Return the character to look for; ints are reduced to their low byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c & 0xFF)
    raise TypeError(f"expected int or str, got {type(c).__name__}")


def strchr(s: str, c: int | str) -> int | None:
    """Return the index of the first ``c`` in ``s``, or None.

    Looking for the NUL character gives the index just past the end.
    """
    target = _target(c)
    if target == "\0":
        return len(s)
    found = s.find(target)
    return None if found < 0 else found


def strrchr(s: str, c: int | str) -> int | None:
    """Return the index of the last ``c`` in ``s``, or None.

    Looking for the NUL character gives the index just past the end.
    """
    target = _target(c)
    if target == "\0":
        return len(s)
    found = s.rfind(target)
    return None if found < 0 else found


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the character codes at the first mismatch, the
    end of a string counting as code 0, or 0 when they agree.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    head1, head2 = s1[:n], s2[:n]
    for a, b in zip(head1, head2):
        if a != b:
            return ord(a) - ord(b)
    if len(head1) > len(head2):
        return ord(head1[len(head2)])
    if len(head2) > len(head1):
        return -ord(head2[len(head1)])
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Return the index of ``needle`` lying wholly within the first ``length``
    characters of ``haystack``, or None.

    An empty needle matches at index 0.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    if length == 0:
        return None
    found = haystack.find(needle, 0, min(len(haystack), length))
    return None if found < 0 else found