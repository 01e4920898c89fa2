"""String helpers: splitting, trimming, searching, comparing and bounded copies."""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, MutableSequence, TypeVar

T = TypeVar("T")


def _char(c: int | str) -> str:
    """Return ``c`` as a one-character string; ints are reduced to a byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(int(c) & 0xFF)


def _cstr(data: bytes | bytearray) -> bytes:
    """Return the bytes of ``data`` up to, not including, the first NUL."""
    return bytes(data).split(b"\0", 1)[0]


def split(text: str, sep: int | str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    return [piece for piece in text.split(_char(sep)) if piece]


def strtrim(text: str, chars: str) -> str:
    """Remove every character found in ``chars`` from both ends of ``text``."""
    return text.strip(chars) if chars else text


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A start at or beyond the end of the text yields an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, limit: int) -> int | None:
    """Find ``needle`` wholly within the first ``limit`` characters of ``haystack``.

    Return the index of the first match, 0 for an empty needle, or None.
    """
    if limit < 0:
        raise ValueError("limit must not be negative")
    if not needle:
        return 0
    index = haystack[:limit].find(needle)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Return the difference of the first differing character codes, the end of
    a string counting as 0, or 0 when the compared parts are equal.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue=""):
        if a != b:
            return (ord(a) if a else 0) - (ord(b) if b else 0)
    return 0


def strchr(text: str, c: int | str) -> int | None:
    """Return the index of the first ``c`` in ``text``.

    Searching for NUL yields the length of the text; a missing character None.
    """
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(text: str, c: int | str) -> int | None:
    """Return the index of the last ``c`` in ``text``.

    Searching for NUL yields the length of the text; a missing character None.
    """
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strjoin(s1: str | None, s2: str | None) -> str | None:
    """Concatenate two strings; a missing one counts as absent, both missing gives None."""
    if s1 is None and s2 is None:
        return None
    return (s1 or "") + (s2 or "")


def strlcpy(dst: bytearray, src: bytes | bytearray, size: int) -> int:
    """Copy ``src`` into ``dst`` as a NUL-terminated string of at most ``size`` bytes.

    Return the length of ``src``; a result of ``size`` or more means truncation.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    source = _cstr(src)
    if size == 0:
        return len(source)
    copied = source[:size - 1]
    if len(copied) + 1 > len(dst):
        raise IndexError("strlcpy: destination buffer too small")
    dst[:len(copied) + 1] = copied + b"\0"
    return len(source)


def strlcat(dst: bytearray, src: bytes | bytearray, size: int) -> int:
    """Append ``src`` to the NUL-terminated string in ``dst``, within ``size`` bytes.

    Return the length the full result would have had; a result of ``size`` or
    more means truncation. When no NUL lies within ``size`` bytes of ``dst``
    nothing is written and ``size`` plus the length of ``src`` is returned.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    source = _cstr(src)
    window = bytes(dst[:size])
    terminator = window.find(b"\0")
    dlen = size if terminator < 0 else terminator
    if dlen == size:
        return size + len(source)
    appended = source[:size - dlen - 1]
    end = dlen + len(appended)
    if end + 1 > len(dst):
        raise IndexError("strlcat: destination buffer too small")
    dst[dlen:end + 1] = appended + b"\0"
    return dlen + len(source)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Return a new string of ``func(index, char)`` for every character of ``text``."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(buffer: MutableSequence[T], func: Callable[[int, T], T]) -> None:
    """Replace each element of ``buffer`` in place by ``func(index, element)``.

    A bytearray is treated as a C string: processing stops at the first NUL.
    """
    for index, item in enumerate(buffer):
        if isinstance(buffer, bytearray) and item == 0:
            break
        buffer[index] = func(index, item)