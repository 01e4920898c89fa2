import io

import pytest

from solong.printf import format_printf, printf, put_char, put_endl, put_nbr, put_str


def test_plain_text_passes_through():
    assert format_printf("MOVES: none") == "MOVES: none"


def test_integer_conversion():
    assert format_printf("MOVES: %i\n", 7) == "MOVES: 7\n"
    assert format_printf("%d", -42) == "-42"


def test_int_min_and_wrap():
    assert format_printf("%d", -2147483648) == "-2147483648"
    assert format_printf("%d", 2147483648) == "-2147483648"


def test_string_and_null_string():
    assert format_printf("[%s]", "abc") == "[abc]"
    assert format_printf("%s", None) == "(null)"


def test_char_conversion():
    assert format_printf("%c%c", "a", 98) == "ab"


def test_pointer_null():
    assert format_printf("%p", 0) == "(nil)"
    assert format_printf("%p", None) == "(nil)"


@pytest.mark.parametrize("value", [1, 9, 10, 15, 16, 255, 4096, 123456789])
def test_pointer_round_trip(value):
    out = format_printf("%p", value)
    assert out.startswith("0x")
    assert int(out[2:], 16) == value


@pytest.mark.parametrize("value", [0, 9, 10, 255, 65535, 3735928559])
def test_hex_round_trip(value):
    lower = format_printf("%x", value)
    upper = format_printf("%X", value)
    assert int(lower, 16) == value
    assert upper == lower.upper()
    assert lower == lower.lower()


def test_unsigned_wraps_negative():
    assert int(format_printf("%u", -1)) == 0xFFFFFFFF
    assert format_printf("%u", 12) == "12"


def test_percent_literal_and_unknown_spec():
    assert format_printf("100%%") == "100%"
    assert format_printf("a%qb") == "ab"
    assert format_printf("end%") == "end"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_printf("%d")


def test_none_format_raises():
    with pytest.raises(TypeError):
        format_printf(None)


def test_printf_writes_and_counts():
    out = io.StringIO()
    count = printf("%s=%d%c", "x", 10, "!", file=out)
    assert out.getvalue() == "x=10!"
    assert count == len(out.getvalue())


def test_printf_defaults_to_stdout(capsys):
    count = printf("Succes\n")
    assert capsys.readouterr().out == "Succes\n"
    assert count == 7


def test_put_functions():
    out = io.StringIO()
    put_char("a", out)
    put_str("bc", out)
    put_str(None, out)
    put_endl("d", out)
    put_nbr(-2147483648, out)
    assert out.getvalue() == "abcd\n-2147483648"


def test_put_char_rejects_long_text():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())