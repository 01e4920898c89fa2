"""Character classification and integer/text conversion helpers."""

from __future__ import annotations

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = "0123456789"


def _code(c: int | str) -> int:
    """Return the integer code of ``c``, which is an int or a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def _wrap(value: int, bits: int) -> int:
    """Wrap ``value`` into a signed two's-complement integer of ``bits`` width."""
    mask = (1 << bits) - 1
    value &= mask
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _parse(text: str) -> tuple[int, str]:
    """Parse leading whitespace, an optional sign and digits.

    Return the signed value and whatever text follows the digits.
    """
    rest = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = len(rest) - len(rest.lstrip(_DIGITS))
    value = int(rest[:digits]) if digits else 0
    return sign * value, rest[digits:]


def atoi(text: str) -> int:
    """Convert the leading integer in ``text`` to a 32-bit signed int.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit. Text without digits yields 0. Out-of-range values wrap.
    """
    value, _ = _parse(text)
    return _wrap(value, 32)


def atol(text: str) -> int:
    """Convert ``text`` to a 64-bit signed int, strictly.

    Like :func:`atoi`, but the digits must be followed by the end of the
    text or a space; otherwise the result is 0.
    """
    value, rest = _parse(text)
    if rest and rest[0] != " ":
        return 0
    return _wrap(value, 64)


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(int(n))


def is_alpha(c: int | str) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return 65 <= code <= 90 or 97 <= code <= 122


def is_digit(c: int | str) -> bool:
    """True for ASCII decimal digits."""
    return 48 <= _code(c) <= 57


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for printable ASCII characters, space included."""
    return 32 <= _code(c) <= 126


def to_lower(c: int | str) -> int | str:
    """Lower-case an ASCII upper-case letter; anything else is returned as is."""
    code = _code(c)
    if 65 <= code <= 90:
        code += 32
    return chr(code) if isinstance(c, str) else code


def to_upper(c: int | str) -> int | str:
    """Upper-case an ASCII lower-case letter; anything else is returned as is."""
    code = _code(c)
    if 97 <= code <= 122:
        code -= 32
    return chr(code) if isinstance(c, str) else code