import io

import pytest

from pushswap.printf import format_string, printf


def test_plain_text_passes_through():
    assert format_string("hello world") == "hello world"


def test_percent_literal():
    assert format_string("100%%") == "100%"


def test_signed_numbers():
    assert format_string("%d|%i", -42, 17) == "-42|17"


def test_signed_wraps_like_int():
    assert format_string("%d", 2**31) == str(-(2**31))


def test_unsigned_negative_wraps():
    assert int(format_string("%u", -1)) == 2**32 - 1


@pytest.mark.parametrize("n", [0, 1, 15, 16, 255, 4096, 2**32 - 1])
def test_hex_round_trip(n):
    lower = format_string("%x", n)
    upper = format_string("%X", n)
    assert int(lower, 16) == n
    assert upper == lower.upper()
    assert lower == lower.lower()


def test_hex_pinned():
    assert format_string("%x %X", 255, 255) == "ff FF"


def test_pointer():
    assert format_string("%p", None) == "0x0"
    out = format_string("%p", 4096)
    assert out.startswith("0x")
    assert int(out[2:], 16) == 4096


def test_string_and_null():
    assert format_string("[%s]", "abc") == "[abc]"
    assert format_string("%s", None) == "(null)"


def test_char_from_int_and_str():
    assert format_string("%c%c", ord("A"), "z") == "Az"


def test_unknown_conversion_prints_nothing():
    assert format_string("a%qb") == "ab"


def test_trailing_percent_is_dropped():
    assert format_string("abc%") == "abc"


def test_missing_argument():
    with pytest.raises(TypeError):
        format_string("%d")


def test_node_line_format():
    assert format_string("node[%i]%d\n", 0, -7) == "node[0]-7\n"


def test_printf_writes_and_counts():
    out = io.StringIO()
    count = printf("%s=%d\n", "x", 12, file=out)
    assert out.getvalue() == "x=12\n"
    assert count == len(out.getvalue())