"""Formatted output with a small printf dialect, plus plain writers."""

from __future__ import annotations

import sys
from typing import Any, Iterator, TextIO

_NULL_STR = "(null)"
_NULL_PTR = "(nil)"


def _wrap_signed(value: int, bits: int = 32) -> int:
    mask = (1 << bits) - 1
    value &= mask
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _render(spec: str, args: Iterator[Any]) -> str:
    def take() -> Any:
        try:
            return next(args)
        except StopIteration:
            raise TypeError(f"not enough arguments for conversion %{spec}") from None

    if spec == "c":
        value = take()
        if isinstance(value, str):
            if len(value) != 1:
                raise ValueError(f"%c expects a single character, got {value!r}")
            return value
        return chr(int(value) & 0xFF)
    if spec == "s":
        value = take()
        return _NULL_STR if value is None else str(value)
    if spec == "p":
        value = take()
        address = 0 if value is None else int(value) & ((1 << 64) - 1)
        return _NULL_PTR if address == 0 else f"0x{address:x}"
    if spec in ("d", "i"):
        return str(_wrap_signed(int(take())))
    if spec == "u":
        return str(int(take()) & 0xFFFFFFFF)
    if spec == "x":
        return f"{int(take()) & 0xFFFFFFFF:x}"
    if spec == "X":
        return f"{int(take()) & 0xFFFFFFFF:X}"
    if spec == "%":
        return "%"
    return ""


def format_printf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by ``args``.

    Supported conversions are %c, %s, %p, %d, %i, %u, %x, %X and %%.
    An unknown conversion, or a lone trailing '%', produces nothing.
    """
    if fmt is None:
        raise TypeError("format string must not be None")
    values = iter(args)
    pieces: list[str] = []
    chars = iter(fmt)
    for ch in chars:
        if ch == "%":
            spec = next(chars, "")
            if spec:
                pieces.append(_render(spec, values))
        else:
            pieces.append(ch)
    return "".join(pieces)


def printf(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the formatted text to ``file`` (standard output by default).

    Return the number of characters written.
    """
    text = format_printf(fmt, *args)
    (file or sys.stdout).write(text)
    return len(text)


def put_char(c: str, file: TextIO | None = None) -> None:
    """Write the single character ``c``."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    (file or sys.stdout).write(c)


def put_str(text: str | None, file: TextIO | None = None) -> None:
    """Write ``text``; None writes nothing."""
    if text is None:
        return
    (file or sys.stdout).write(text)


def put_endl(text: str, file: TextIO | None = None) -> None:
    """Write ``text`` followed by a newline."""
    (file or sys.stdout).write(f"{text}\n")


def put_nbr(n: int, file: TextIO | None = None) -> None:
    """Write the decimal form of ``n``."""
    (file or sys.stdout).write(str(int(n)))