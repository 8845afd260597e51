"""Small puzzles over strings."""

from __future__ import annotations

import string
from collections import Counter
from itertools import zip_longest

_ROMAN_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}
_LOWERING = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def roman_to_int(s: str) -> int:
    """Convert a Roman numeral to an integer; unknown symbols count as zero."""
    values = [_ROMAN_VALUES.get(symbol, 0) for symbol in s]
    total = 0
    for previous, current in zip([0, *values], values):
        if current > previous:
            total += current - 2 * previous
        else:
            total += current
    return total


def merge_alternately(word1: str, word2: str) -> str:
    """Interleave two words letter by letter, appending what is left over."""
    return "".join(a + b for a, b in zip_longest(word1, word2, fillvalue=""))


def is_anagram(s: str, t: str) -> bool:
    """Tell whether the two strings hold the same letters."""
    return Counter(s) == Counter(t)


def str_str(haystack: str, needle: str) -> int:
    """Return the index of the first occurrence of needle, or -1."""
    return haystack.find(needle)


def find_the_difference(s: str, t: str) -> str:
    """Return the one character that t holds beyond the characters of s."""
    return chr(sum(map(ord, t)) - sum(map(ord, s)))


def length_of_last_word(s: str) -> int:
    """Return the length of the last space-separated word, or 0."""
    return next((len(word) for word in reversed(s.split(" ")) if word), 0)


def to_lower_case(s: str) -> str:
    """Lower the ASCII capital letters, leaving every other character alone."""
    return s.translate(_LOWERING)


def judge_circle(moves: str) -> bool:
    """Tell whether a walk of R, L, U moves (anything else is down) returns home."""
    counts = Counter(moves)
    right, left, up = counts["R"], counts["L"], counts["U"]
    down = len(moves) - right - left - up
    return right == left and up == down