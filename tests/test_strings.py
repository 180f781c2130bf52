import pytest

from pushswap.strings import (
    split,
    strchr,
    strjoin,
    strlcat,
    strlcpy,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    striteri,
    strtrim,
    substr,
)


# split

def test_split_drops_empty_words():
    assert split("  hello  world ", " ") == ["hello", "world"]


def test_split_without_separator_gives_whole_string():
    assert split("hello", " ") == ["hello"]


def test_split_only_separators_is_empty():
    assert split("    ", " ") == []
    assert split("", " ") == []


def test_split_rejects_multi_char_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


def test_split_words_rejoin_to_original_when_single_spaced():
    text = "1 2 3 42 -7"
    assert " ".join(split(text, " ")) == text


# strchr / strrchr

def test_strchr_finds_first_occurrence():
    s = "banana"
    index = strchr(s, "a")
    assert s[index] == "a"
    assert "a" not in s[:index]


def test_strrchr_finds_last_occurrence():
    s = "banana"
    index = strrchr(s, "a")
    assert s[index] == "a"
    assert "a" not in s[index + 1:]


def test_char_search_missing_gives_none():
    assert strchr("banana", "z") is None
    assert strrchr("banana", "z") is None


def test_char_search_nul_is_end_of_string():
    assert strchr("abc", "\0") == len("abc")
    assert strrchr("abc", "\0") == len("abc")


def test_strchr_rejects_long_needle():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


# striteri / strmapi

def test_striteri_visits_every_character_in_order():
    seen = []
    striteri("abc", lambda i, ch: seen.append((i, ch)))
    assert seen == list(enumerate("abc"))


def test_strmapi_applies_function_with_index():
    result = strmapi("abcd", lambda i, ch: ch.upper() if i % 2 == 0 else ch)
    assert result == "AbCd"


def test_strmapi_identity_round_trip():
    assert strmapi("push swap", lambda i, ch: ch) == "push swap"


# strjoin

def test_strjoin_concatenates():
    assert strjoin("push", "_swap") == "push_swap"
    assert strjoin("", "") == ""


# strlcpy / strlcat

def test_strlcpy_copies_and_terminates():
    dst = bytearray(10)
    assert strlcpy(dst, b"hello", 10) == len(b"hello")
    assert dst[:5] == b"hello"
    assert dst[5] == 0


def test_strlcpy_truncates():
    dst = bytearray(b"xxxxxxxx")
    assert strlcpy(dst, b"hello", 3) == len(b"hello")
    assert dst[:2] == b"he"
    assert dst[2] == 0
    assert dst[3:] == b"xxxxx"


def test_strlcpy_zero_size_writes_nothing():
    dst = bytearray(b"keep")
    assert strlcpy(dst, b"hello", 0) == len(b"hello")
    assert dst == bytearray(b"keep")


def test_strlcpy_rejects_size_past_buffer():
    with pytest.raises(ValueError):
        strlcpy(bytearray(2), b"hello", 5)


def test_strlcat_appends():
    dst = bytearray(b"ab\0" + bytes(7))
    assert strlcat(dst, b"cd", 10) == len(b"ab") + len(b"cd")
    assert dst[:4] == b"abcd"
    assert dst[4] == 0


def test_strlcat_truncates_appended_part():
    dst = bytearray(b"ab\0\0\0")
    assert strlcat(dst, b"cdef", 4) == len(b"ab") + len(b"cdef")
    assert dst[:3] == b"abc"
    assert dst[3] == 0


def test_strlcat_full_destination_reports_size_plus_source():
    dst = bytearray(b"abcdef\0")
    assert strlcat(dst, b"xy", 3) == 3 + len(b"xy")
    assert dst == bytearray(b"abcdef\0")


# strncmp

def test_strncmp_equal_strings():
    assert strncmp("abc", "abc", 3) == 0


def test_strncmp_limited_prefix():
    assert strncmp("abc", "abd", 2) == 0


def test_strncmp_difference_sign_and_value():
    assert strncmp("abc", "abd", 3) == ord("c") - ord("d")
    assert strncmp("abd", "abc", 3) > 0


def test_strncmp_shorter_string_is_smaller():
    assert strncmp("ab", "abc", 5) == -ord("c")


def test_strncmp_zero_length():
    assert strncmp("a", "b", 0) == 0


# strnstr

def test_strnstr_finds_needle():
    haystack = "lorem ipsum dolor"
    index = strnstr(haystack, "ipsum", len(haystack))
    assert haystack[index:index + len("ipsum")] == "ipsum"


def test_strnstr_needle_must_fit_within_length():
    haystack = "lorem ipsum dolor"
    start = haystack.index("ipsum")
    assert strnstr(haystack, "ipsum", start + len("ipsum") - 1) is None
    assert strnstr(haystack, "ipsum", start + len("ipsum")) == start


def test_strnstr_empty_needle():
    assert strnstr("abc", "", 0) == 0


def test_strnstr_missing():
    assert strnstr("abc", "zz", 3) is None


def test_strnstr_negative_length():
    with pytest.raises(ValueError):
        strnstr("abc", "a", -1)


# strtrim

def test_strtrim_both_ends():
    assert strtrim("xxhelloxyx", "xy") == "hello"


def test_strtrim_everything():
    assert strtrim("xyxy", "xy") == ""


def test_strtrim_none_charset_keeps_string():
    assert strtrim("  hi  ", None) == "  hi  "


def test_strtrim_keeps_inner_characters():
    assert strtrim("  a b  ", " ") == "a b"


# substr

def test_substr_middle():
    assert substr("push_swap", 5, 4) == "swap"


def test_substr_past_end_is_empty():
    assert substr("abc", 10, 2) == ""


def test_substr_length_clamped():
    assert substr("abc", 1, 100) == "bc"


def test_substr_rejects_negative():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)
    with pytest.raises(ValueError):
        substr("abc", 0, -2)