"""Algorithms over strings: windows, counting, brackets and interleaving."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator, Sequence

_CLOSERS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_CLOSERS.values())


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring with no repeated character."""
    last_seen: dict[str, int] = {}
    start = best = 0
    for i, ch in enumerate(s):
        previous = last_seen.get(ch)
        if previous is not None and previous >= start:
            start = previous + 1
        best = max(best, i - start + 1)
        last_seen[ch] = i
    return best


def is_valid_parentheses(s: str) -> bool:
    """Return whether every bracket in ``s`` is closed in the right order.

    Characters other than ``()[]{}`` are ignored.
    """
    stack: list[str] = []
    for ch in s:
        if ch in _OPENERS:
            stack.append(ch)
        elif ch in _CLOSERS:
            if not stack or stack.pop() != _CLOSERS[ch]:
                return False
    return not stack


def _balanced(prefix: str, opened: int, closed: int, n: int) -> Iterator[str]:
    if opened == closed == n:
        yield prefix
        return
    if opened > closed:
        yield from _balanced(prefix + ")", opened, closed + 1, n)
    if opened < n:
        yield from _balanced(prefix + "(", opened + 1, closed, n)


def generate_parentheses(n: int) -> list[str]:
    """Return every balanced string of ``n`` bracket pairs.

    Strings that close a bracket earlier come first.
    """
    return list(_balanced("", 0, 0, n))


def group_anagrams(strs: Sequence[str]) -> list[list[str]]:
    """Group words that are anagrams of each other, in order of first appearance."""
    groups: dict[str, list[str]] = {}
    for word in strs:
        groups.setdefault("".join(sorted(word)), []).append(word)
    return list(groups.values())


def is_palindrome(s: str) -> bool:
    """Return whether the ASCII letters and digits of ``s`` read the same both ways.

    Case is ignored.
    """
    cleaned = [ch.lower() for ch in s if ch.isascii() and ch.isalnum()]
    return cleaned == cleaned[::-1]


def _letter_counts(text: str) -> Counter[str]:
    return Counter(ch for ch in text if "a" <= ch <= "z")


def is_anagram(s: str, t: str) -> bool:
    """Return whether ``s`` and ``t`` have equal length and the same lowercase letters."""
    if len(s) != len(t):
        return False
    return _letter_counts(s) == _letter_counts(t)


def first_unique_char(s: str) -> int:
    """Return the index of the first character occurring once, or -1."""
    counts = Counter(s)
    return next((i for i, ch in enumerate(s) if counts[ch] == 1), -1)


def fizz_buzz(n: int) -> list[str]:
    """Return the FizzBuzz words for 1 through ``n``."""

    def word(i: int) -> str:
        if i % 15 == 0:
            return "FizzBuzz"
        if i % 3 == 0:
            return "Fizz"
        if i % 5 == 0:
            return "Buzz"
        return str(i)

    return [word(i) for i in range(1, n + 1)]


def character_replacement(s: str, k: int) -> int:
    """Return the longest run of one letter reachable with at most ``k`` replacements."""
    counts: Counter[str] = Counter()
    start = best = 0
    for end, ch in enumerate(s):
        counts[ch] += 1
        window = end - start + 1
        if window - max(counts.values()) <= k:
            best = max(best, window)
        else:
            counts[s[start]] -= 1
            start += 1
    return best


def check_inclusion(s1: str, s2: str) -> bool:
    """Return whether some permutation of ``s1`` is a substring of ``s2``.

    An empty ``s1`` never matches.
    """
    if len(s1) > len(s2):
        return False
    wanted = Counter(s1)
    size = len(s1)
    window: Counter[str] = Counter()
    start = 0
    for end, ch in enumerate(s2):
        window[ch] += 1
        if end - start + 1 == size:
            if window == wanted:
                return True
            window[s2[start]] -= 1
            start += 1
    return False


def merge_alternately(word1: str, word2: str) -> str:
    """Interleave the two words letter by letter, then append the longer one's rest."""
    shared = min(len(word1), len(word2))
    interleaved = "".join(a + b for a, b in zip(word1, word2))
    return interleaved + word1[shared:] + word2[shared:]