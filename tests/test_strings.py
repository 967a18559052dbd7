import pytest

from loxparse.strings import (
    bounded_copy,
    compare_n,
    is_alpha,
    is_digit,
    is_space,
    join_with,
    parse_int,
    search_prefix,
    split,
    substring,
)


@pytest.mark.parametrize("c", ["\t", "\f", "\n", "\v", "\r", " "])
def test_is_space_accepts_whitespace(c):
    assert is_space(c) is True


@pytest.mark.parametrize("c", ["a", "0", "_", "\0"])
def test_is_space_rejects_others(c):
    assert is_space(c) is False


def test_is_alpha():
    assert [is_alpha(c) for c in "aZm"] == [True, True, True]
    assert [is_alpha(c) for c in "0_ é"] == [False, False, False, False]


def test_is_digit():
    assert all(is_digit(c) for c in "0123456789")
    assert not any(is_digit(c) for c in "a/: ")


def test_parse_int_skips_space_and_stops_at_non_digit():
    assert parse_int("  \t-42abc") == -42
    assert parse_int("+17") == 17


def test_parse_int_without_digits_is_zero():
    assert parse_int("abc") == 0


def test_parse_int_limits():
    assert parse_int("2147483647") == 2147483647
    assert parse_int("-2147483648") == -2147483648


@pytest.mark.parametrize("text", ["2147483648", "-2147483649", "99999999999"])
def test_parse_int_overflow(text):
    with pytest.raises(OverflowError):
        parse_int(text)


def test_split_drops_empty_pieces():
    assert split("  ab  cd e ", " ") == ["ab", "cd", "e"]
    assert split(",,,", ",") == []
    assert split("", ",") == []


def test_split_round_trip_with_single_separators():
    words = ["one", "two", "three"]
    assert split(":".join(words), ":") == words


def test_join_with_round_trips_through_split():
    joined = join_with("left", "right", "/")
    assert joined == "left/right"
    assert split(joined, "/") == ["left", "right"]


def test_search_prefix():
    env = ["HOME=/home", "PATH=/bin", "PATHEXT=x"]
    assert search_prefix(env, "PATH") == "PATH=/bin"
    assert search_prefix(env, "SHELL") is None
    assert search_prefix(env, "") == "HOME=/home"


def test_substring():
    assert substring("hello world", 6, 5) == "world"
    assert substring("hello", 3, 100) == "lo"
    assert substring("hello", 5, 2) == ""
    assert substring("hello", 50, 2) == ""


def test_substring_rejects_negative():
    with pytest.raises(ValueError):
        substring("hello", -1, 2)


def test_compare_n():
    assert compare_n("abc", "abd", 2) == 0
    assert compare_n("abc", "abd", 3) < 0
    assert compare_n("abd", "abc", 3) > 0
    assert compare_n("abc", "abc", 10) == 0
    assert compare_n("a", "b", 0) == 0
    assert compare_n("ab", "abc", 5) < 0


def test_compare_n_is_antisymmetric():
    pairs = [("and", "anz"), ("class", "clash"), ("x", "")]
    for a, b in pairs:
        assert compare_n(a, b, 10) == -compare_n(b, a, 10)


def test_bounded_copy():
    assert bounded_copy("hello", 3) == ("he", 5)
    assert bounded_copy("hello", 0) == ("", 5)
    assert bounded_copy("hi", 10) == ("hi", 2)