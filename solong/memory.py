"""Byte-buffer helpers: search, compare, copy, fill and allocate."""

from __future__ import annotations

SIZE_MAX = (1 << 64) - 1


def _check_span(buffer_len: int, start: int, n: int, name: str) -> None:
    if n < 0:
        raise ValueError("n must not be negative")
    if start < 0 or start + n > buffer_len:
        raise IndexError(f"{name}: {n} bytes from offset {start} exceed length {buffer_len}")


def memchr(data: bytes | bytearray, value: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``value`` among the first ``n``.

    ``value`` is reduced to a byte. Return None when it is not found.
    """
    _check_span(len(data), 0, n, "memchr")
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: bytes | bytearray, b: bytes | bytearray, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference of the first mismatch, or 0."""
    _check_span(len(a), 0, n, "memcmp")
    _check_span(len(b), 0, n, "memcmp")
    return next((x - y for x, y in zip(a[:n], b[:n]) if x != y), 0)


def memcpy(dest: bytearray | None, src: bytes | bytearray | None, n: int) -> bytearray | None:
    """Copy ``n`` bytes from ``src`` into the start of ``dest`` and return ``dest``."""
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise TypeError("memcpy needs both a destination and a source")
    _check_span(len(src), 0, n, "memcpy source")
    _check_span(len(dest), 0, n, "memcpy destination")
    dest[:n] = src[:n]
    return dest


def memmove(buffer: bytearray, dest_index: int, src_index: int, n: int) -> bytearray:
    """Copy ``n`` bytes within ``buffer`` from ``src_index`` to ``dest_index``.

    The regions may overlap; the result is as if the source were copied first.
    """
    _check_span(len(buffer), src_index, n, "memmove source")
    _check_span(len(buffer), dest_index, n, "memmove destination")
    buffer[dest_index:dest_index + n] = bytes(buffer[src_index:src_index + n])
    return buffer


def memset(buffer: bytearray, value: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buffer`` to ``value`` (reduced to a byte)."""
    _check_span(len(buffer), 0, n, "memset")
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: bytearray, n: int) -> None:
    """Zero the first ``n`` bytes of ``buffer``."""
    memset(buffer, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count * size`` bytes.

    Raises OverflowError when the total would not fit in a 64-bit size.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count == 0 or size == 0:
        return bytearray()
    if count > SIZE_MAX // size:
        raise OverflowError("requested allocation size overflows")
    return bytearray(count * size)