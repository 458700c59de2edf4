"""String algorithms: character shifts, word reversal, digit averages, subsequences."""

from __future__ import annotations

MOD = 10**9 + 7


def smallest_string(s: str) -> str:
    """Return the smallest string reachable by shifting one non-empty substring back a letter."""
    if not s:
        raise ValueError("string must not be empty")
    stripped = s.lstrip("a")
    if not stripped:
        return s[:-1] + "z"
    prefix = s[: len(s) - len(stripped)]
    end = stripped.find("a")
    if end == -1:
        end = len(stripped)
    shifted = "".join(chr(ord(ch) - 1) for ch in stripped[:end])
    return prefix + shifted + stripped[end:]


def _is_ascii_letter(ch: str) -> bool:
    return "a" <= ch <= "z" or "A" <= ch <= "Z"


def number_search(text: str) -> int:
    """Sum the digits in ``text`` and divide by its letter count, rounding halves up."""
    letters = sum(1 for ch in text if _is_ascii_letter(ch))
    if letters == 0:
        raise ValueError("text must contain at least one letter")
    total = sum(int(ch) for ch in text if "0" <= ch <= "9")
    return (2 * total + letters) // (2 * letters)


def reverse_words(s: str) -> str:
    """Reverse the order of the space-separated words in ``s``."""
    return " ".join(reversed(s.split(" ")))


def reverse_each_word(s: str) -> str:
    """Reverse the letters of every space-separated word, keeping word order."""
    return " ".join(word[::-1] for word in s.split(" "))


def distinct_subsequences(s: str) -> int:
    """Count distinct subsequences of ``s`` (the empty one included) modulo 10**9 + 7."""
    counts = [1]
    last_seen: dict[str, int] = {}
    for index, ch in enumerate(s):
        current = counts[-1] * 2
        if ch in last_seen:
            current -= counts[last_seen[ch]]
        counts.append(current % MOD)
        last_seen[ch] = index
    return counts[-1]


def longest_common_subsequence(text1: str, text2: str) -> int:
    """Return the length of the longest common subsequence of two strings."""
    following = [0] * (len(text2) + 1)
    for a in reversed(text1):
        current = [0] * (len(text2) + 1)
        for j, b in reversed(list(enumerate(text2))):
            if a == b:
                current[j] = 1 + following[j + 1]
            else:
                current[j] = max(current[j + 1], following[j])
        following = current
    return following[0]