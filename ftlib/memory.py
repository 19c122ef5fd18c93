"""Byte-buffer operations: fill, allocate, search, compare and copy."""

from __future__ import annotations

SIZE_MAX = 2**64 - 1


def _require_span(length: int, n: int, offset: int = 0) -> None:
    if n < 0 or offset < 0:
        raise ValueError("offsets and sizes must not be negative")
    if offset + n > length:
        raise ValueError(
            f"span of {n} bytes at offset {offset} exceeds buffer of {length} bytes"
        )


def memset(buffer: bytearray, value: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buffer`` to the low byte of ``value``."""
    _require_span(len(buffer), n)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: bytearray, n: int) -> bytearray:
    """Zero the first ``n`` bytes of ``buffer``."""
    return memset(buffer, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Allocate ``count * size`` zeroed bytes.

    A zero count or size gives a single zero byte. A total that does not fit
    in ``size_t`` raises OverflowError.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count == 0 or size == 0:
        count = size = 1
    elif count > SIZE_MAX // size:
        raise OverflowError(f"{count} * {size} bytes exceeds the addressable size")
    return bytearray(count * size)


def memchr(data: bytes | bytearray, value: int, n: int) -> int | None:
    """Return the offset of the first byte equal to the low byte of ``value``.

    Only the first ``n`` bytes are searched; None means no match.
    """
    _require_span(len(data), n)
    found = bytes(data[:n]).find(value & 0xFF)
    return None if found < 0 else found


def memcmp(first: bytes | bytearray, second: bytes | bytearray, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference at the first mismatch."""
    _require_span(len(first), n)
    _require_span(len(second), n)
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0


def memcpy(dest: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dest``."""
    _require_span(len(src), n)
    _require_span(len(dest), n)
    dest[:n] = src[:n]
    return dest


def memmove(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes inside ``buffer`` from offset ``src`` to offset ``dest``.

    The regions may overlap.
    """
    _require_span(len(buffer), n, src)
    _require_span(len(buffer), n, dest)
    buffer[dest : dest + n] = bytes(buffer[src : src + n])
    return buffer