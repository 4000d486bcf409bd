"""String puzzles: substring decrement, distinct subsequences, digit averages and more."""

from __future__ import annotations

import string

MOD = 1_000_000_007


def smallest_string(s: str) -> str:
    """Decrement the first run of non-'a' letters; an all-'a' string ends in 'z'."""
    if not s:
        raise ValueError("string must not be empty")
    rest = s.lstrip("a")
    if not rest:
        return s[:-1] + "z"
    lead = s[: len(s) - len(rest)]
    run_end = rest.find("a")
    if run_end == -1:
        run_end = len(rest)
    shifted = "".join(chr(ord(ch) - 1) for ch in rest[:run_end])
    return lead + shifted + rest[run_end:]


def distinct_subsequences(s: str) -> int:
    """Count distinct subsequences of ``s``, the empty one included, modulo 10**9+7."""
    counts = [1]
    last_seen: dict[str, int] = {}
    for position, ch in enumerate(s, start=1):
        value = counts[-1] * 2
        if ch in last_seen:
            value -= counts[last_seen[ch]]
        counts.append(value % MOD)
        last_seen[ch] = position - 1
    return counts[-1]


def number_search(text: str) -> int:
    """Sum the digits in ``text``, divide by its letter count and round half up."""
    letters = sum(ch in string.ascii_letters for ch in text)
    total = sum(int(ch) for ch in text if ch in string.digits)
    if letters == 0:
        raise ValueError("text must contain at least one letter")
    return (2 * total + letters) // (2 * letters)


def longest_common_subsequence(text1: str, text2: str) -> int:
    """Length of the longest common subsequence of two strings."""
    following = [0] * (len(text2) + 1)
    for ch1 in reversed(text1):
        current = [0] * (len(text2) + 1)
        for j, ch2 in reversed(list(enumerate(text2))):
            if ch1 == ch2:
                current[j] = 1 + following[j + 1]
            else:
                current[j] = max(current[j + 1], following[j])
        following = current
    return following[0]


def reverse_words(s: str) -> str:
    """Reverse the letters of each space-separated word, keeping word order."""
    return " ".join(word[::-1] for word in s.split(" "))