import pytest

from puzzlekit.strings import (
    find_the_difference,
    is_anagram,
    judge_circle,
    length_of_last_word,
    merge_alternately,
    roman_to_int,
    str_str,
    to_lower_case,
)

_ROMAN_PARTS = [
    (1000, "M"), (900, "CM"), (500, "D"), (400, "CD"),
    (100, "C"), (90, "XC"), (50, "L"), (40, "XL"),
    (10, "X"), (9, "IX"), (5, "V"), (4, "IV"), (1, "I"),
]


def _to_roman(number):
    parts = []
    for value, symbol in _ROMAN_PARTS:
        count, number = divmod(number, value)
        parts.append(symbol * count)
    return "".join(parts)


def test_roman_to_int_worked_example():
    assert roman_to_int("MCMXCIV") == 1994


@pytest.mark.parametrize("number", [1, 3, 4, 9, 14, 40, 58, 90, 400, 944, 2024, 3999])
def test_roman_round_trip(number):
    assert roman_to_int(_to_roman(number)) == number


def test_roman_to_int_ignores_unknown_symbols():
    assert roman_to_int("X?") == roman_to_int("X")


def test_merge_alternately_equal_lengths():
    merged = merge_alternately("abc", "pqr")
    assert merged[0::2] == "abc"
    assert merged[1::2] == "pqr"


@pytest.mark.parametrize("word1, word2", [("ab", "pqrs"), ("abcd", "pq"), ("", "xyz")])
def test_merge_alternately_appends_remainder(word1, word2):
    common = min(len(word1), len(word2))
    merged = merge_alternately(word1, word2)
    assert len(merged) == len(word1) + len(word2)
    assert merged == merge_alternately(word1[:common], word2[:common]) + (
        word1[common:] + word2[common:]
    )


def test_is_anagram_true():
    assert is_anagram("anagram", "nagaram")


def test_is_anagram_false():
    assert not is_anagram("rat", "car")


def test_is_anagram_different_lengths():
    assert not is_anagram("ab", "abb")


def test_is_anagram_is_symmetric():
    assert is_anagram("listen", "silent") == is_anagram("silent", "listen")


def test_str_str_finds_first_occurrence():
    haystack, needle = "hello, hello", "ll"
    index = str_str(haystack, needle)
    assert haystack[index:index + len(needle)] == needle
    assert needle not in haystack[:index + len(needle) - 1]


def test_str_str_missing():
    assert str_str("leetcode", "leeto") == -1


def test_str_str_needle_longer_than_haystack():
    assert str_str("ab", "abc") == -1


def test_str_str_empty_needle():
    assert str_str("abc", "") == str_str("", "")


@pytest.mark.parametrize("s, t, extra", [("abcd", "abcde", "e"), ("abcd", "dbeac", "e"), ("", "y", "y")])
def test_find_the_difference(s, t, extra):
    assert find_the_difference(s, t) == extra


@pytest.mark.parametrize(
    "text, last",
    [("Hello World", "World"), ("   fly me   to   the moon  ", "moon"), ("luffy is still joyboy", "joyboy")],
)
def test_length_of_last_word(text, last):
    assert length_of_last_word(text) == len(last)


def test_length_of_last_word_without_words():
    assert length_of_last_word("   ") == 0
    assert length_of_last_word("") == length_of_last_word("   ")


@pytest.mark.parametrize("text", ["Hello", "LOVELY", "already lower", "MiXeD 123 !?"])
def test_to_lower_case_matches_ascii_lowering(text):
    assert to_lower_case(text) == text.lower()


def test_to_lower_case_leaves_non_ascii_alone():
    assert to_lower_case("ÀB") == "Àb"


@pytest.mark.parametrize("moves", ["UD", "", "UDLR", "RRLL", "UX"])
def test_judge_circle_returns_home(moves):
    assert judge_circle(moves)


@pytest.mark.parametrize("moves", ["LL", "U", "RRU", "LDD"])
def test_judge_circle_away_from_home(moves):
    assert not judge_circle(moves)