import io

import pytest

from loxparse.fmt import format_c, write_format


def test_plain_text_unchanged():
    assert format_c("no specifiers here") == "no specifiers here"


def test_percent_escape():
    assert format_c("100%%") == "100%"


def test_string_specifier():
    assert format_c("[line %d] Error%s: %s", 3, "", "boom") == "[line 3] Error: boom"


def test_char_from_int_and_str():
    assert format_c("%c%c", 65, "b") == "Ab"


def test_int_wraps_to_32_bits():
    assert format_c("%d", 2**31) == str(-(2**31))
    assert format_c("%i", -5) == "-5"


def test_unsigned_wraps_negative():
    assert format_c("%u", -1) == str(2**32 - 1)


@pytest.mark.parametrize("n", [0, 1, 255, 4096, 2**32 - 1])
def test_hex_round_trip(n):
    assert int(format_c("%x", n), 16) == n
    assert format_c("%X", n) == format_c("%x", n).upper()


def test_pointer():
    assert format_c("%p", None) == "(nil)"
    text = format_c("%p", 4096)
    assert text.startswith("0x") and int(text[2:], 16) == 4096


def test_unknown_specifier_kept_literal():
    assert format_c("%q") == "%q"


def test_trailing_percent():
    assert format_c("end%") == "end%"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_c("%d %d", 1)


def test_format_c_rejects_none_string():
    with pytest.raises(ValueError):
        format_c("%s", None)


def test_write_format_none_string_writes_nothing():
    out = io.StringIO()
    count = write_format(out, "a%sb", None)
    assert out.getvalue() == "ab"
    assert count == 2


def test_write_format_count_matches_output():
    out = io.StringIO()
    count = write_format(out, "%s=%d (%x)%%", "value", 42, 42)
    assert out.getvalue() == format_c("%s=%d (%x)%%", "value", 42, 42)
    assert count == len(out.getvalue())