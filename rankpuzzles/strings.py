"""String puzzles: counting, matching, brackets and time formats."""

from __future__ import annotations

import re
import string
from collections import Counter

_BRACKET_PAIRS = {")": "(", "]": "[", "}": "{"}
_TIME_RE = re.compile(r"(\d{2})(:\d{2}:\d{2})(AM|PM)")


def camel_case_words(s: str) -> int:
    """Count the words in a camelCase identifier."""
    if not s:
        return 0
    return 1 + sum(1 for ch in s if "A" <= ch <= "Z")


def strings_summary(a: str, b: str) -> tuple[int, int, str, str]:
    """Return both lengths, the concatenation, and both words with first letters swapped."""
    if not a or not b:
        raise ValueError("both strings must be non-empty")
    swapped = f"{b[0]}{a[1:]} {a[0]}{b[1:]}"
    return len(a), len(b), a + b, swapped


def is_balanced(s: str) -> bool:
    """Tell whether every bracket in s is closed in the right order."""
    stack: list[str] = []
    for ch in s:
        if stack and _BRACKET_PAIRS.get(ch) == stack[-1]:
            stack.pop()
        else:
            stack.append(ch)
    return not stack


def can_form_palindrome(s: str) -> bool:
    """Tell whether some anagram of s is a palindrome."""
    odd = sum(1 for count in Counter(s).values() if count % 2)
    return odd <= 1


def contains_hackerrank(s: str) -> bool:
    """Tell whether 'hackerrank' is a subsequence of s."""
    chars = iter(s)
    return all(letter in chars for letter in "hackerrank")


def anagram_deletions(a: str, b: str) -> int:
    """Return how many characters to delete so that a and b become anagrams."""
    first, second = Counter(a), Counter(b)
    return sum(((first - second) + (second - first)).values())


def is_pangram(s: str) -> bool:
    """Tell whether s uses every letter of the English alphabet."""
    return set(string.ascii_lowercase) <= set(s.lower())


def count_a_in_repeated(s: str, n: int) -> int:
    """Count the letter 'a' in the first n characters of s repeated forever."""
    if not s:
        raise ValueError("s must not be empty")
    whole, rest = divmod(n, len(s))
    return whole * s.count("a") + s[:rest].count("a")


def to_24_hour(s: str) -> str:
    """Convert 'hh:mm:ssAM' or 'hh:mm:ssPM' to 24-hour 'HH:mm:ss'."""
    match = _TIME_RE.fullmatch(s)
    if match is None:
        raise ValueError(f"invalid 12-hour time: {s!r}")
    hour_text, rest, half = match.groups()
    hour = int(hour_text)
    if half == "AM":
        return ("00" if hour == 12 else hour_text) + rest
    return (hour_text if hour == 12 else str(hour + 12)) + rest


def share_substring(a: str, b: str) -> bool:
    """Tell whether a and b have a character in common."""
    return not set(a).isdisjoint(b)


def digit_frequencies(s: str) -> list[int]:
    """Return how often each digit 0-9 occurs in s."""
    counts = Counter(ch for ch in s if ch in string.digits)
    return [counts[digit] for digit in string.digits]