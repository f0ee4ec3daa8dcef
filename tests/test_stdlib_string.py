import pytest

from softlang.native import NativeError
from softlang.stdlib_string import (
    string_contains,
    string_ends_with,
    string_join,
    string_len,
    string_split,
    string_starts_with,
    string_to_lower,
    string_to_upper,
    string_trim,
)
from softlang.value import Value, ValueKind

S = Value.string


@pytest.mark.parametrize("text", ["", "abc", "hello world"])
def test_len_of_ascii_matches_characters(text):
    assert string_len([S(text)]) == Value.integer(len(text))


def test_len_counts_utf8_bytes():
    assert string_len([S("héllo")]) == Value.integer(6)


def test_len_count_message():
    with pytest.raises(NativeError) as info:
        string_len([])
    assert str(info.value) == "len() takes exactly 1 argument (0 given)"


def test_len_rejects_int():
    with pytest.raises(NativeError, match="len\\(\\) argument must be a string"):
        string_len([Value.integer(3)])


def test_case_conversion_round_trip():
    upper = string_to_upper([S("Mixed Case")])
    assert upper.payload.isupper()
    lower = string_to_lower([upper])
    assert lower == string_to_lower([S("Mixed Case")])
    assert lower.payload.islower()


def test_trim_removes_surrounding_whitespace():
    result = string_trim([S("  \t padded \n")])
    assert result == S("padded")


@pytest.mark.parametrize("text, delim", [("a,b,,c", ","), ("one--two", "--"), ("", ",")])
def test_split_join_round_trip(text, delim):
    parts = string_split([S(text), S(delim)])
    assert parts.kind is ValueKind.ARRAY
    assert string_join([parts, S(delim)]) == S(text)


def test_split_empty_delimiter():
    parts = string_split([S("ab"), S("")])
    assert [p.payload for p in parts.payload] == ["", "a", "b", ""]


def test_split_rejects_non_strings():
    with pytest.raises(NativeError, match="split\\(\\) arguments must be strings"):
        string_split([S("a"), Value.integer(1)])


def test_join_rejects_non_string_elements():
    items = Value.array([S("a"), Value.integer(1)])
    with pytest.raises(NativeError, match="join\\(\\) array must contain only strings"):
        string_join([items, S(",")])


def test_join_rejects_wrong_argument_kinds():
    with pytest.raises(NativeError, match="first argument must be an array"):
        string_join([S("a"), S(",")])


def test_contains():
    assert string_contains([S("haystack"), S("st")]) == Value.boolean(True)
    assert string_contains([S("haystack"), S("needle")]) == Value.boolean(False)
    assert string_contains([S("x"), S("")]) == Value.boolean(True)


def test_starts_and_ends_with():
    assert string_starts_with([S("prefix_body"), S("prefix")]) == Value.boolean(True)
    assert string_starts_with([S("prefix_body"), S("body")]) == Value.boolean(False)
    assert string_ends_with([S("prefix_body"), S("body")]) == Value.boolean(True)
    assert string_ends_with([S("prefix_body"), S("prefix")]) == Value.boolean(False)


def test_two_argument_count_message():
    with pytest.raises(NativeError) as info:
        string_ends_with([S("a")])
    assert str(info.value) == "ends_with() takes exactly 2 arguments (1 given)"