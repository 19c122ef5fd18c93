"""Writing characters, strings and integers to raw file descriptors."""

from __future__ import annotations

import os

from ftlib.numbers import itoa


def _write_all(fd: int, data: bytes) -> None:
    """Write all of ``data`` to ``fd``, retrying on short writes."""
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def putchar_fd(c: int | str, fd: int) -> None:
    """Write one character to ``fd``.

    An int is reduced to its low byte; a str must be a single character.
    """
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        data = c.encode("utf-8")
    elif isinstance(c, int):
        data = bytes([c & 0xFF])
    else:
        raise TypeError(f"expected int or str, got {type(c).__name__}")
    _write_all(fd, data)


def putstr_fd(s: str | None, fd: int) -> None:
    """Write ``s`` to ``fd``; None writes nothing."""
    if s is None:
        return
    _write_all(fd, s.encode("utf-8"))


def putendl_fd(s: str | None, fd: int) -> None:
    """Write ``s`` followed by a newline to ``fd``."""
    putstr_fd(s, fd)
    putchar_fd("\n", fd)


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal text of a 32-bit signed integer to ``fd``."""
    putstr_fd(itoa(n), fd)