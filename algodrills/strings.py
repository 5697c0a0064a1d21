"""Classic problems on strings."""

from __future__ import annotations

from collections import Counter, defaultdict
from collections.abc import Iterable

_ROMAN_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}
_CLOSERS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_CLOSERS.values())


def is_anagram(s: str, t: str) -> bool:
    """Tell whether ``t`` is a rearrangement of the characters of ``s``."""
    return len(s) == len(t) and Counter(s) == Counter(t)


def group_anagrams(strs: Iterable[str]) -> list[list[str]]:
    """Group words that are anagrams of one another, in order of first appearance."""
    groups: defaultdict[str, list[str]] = defaultdict(list)
    for word in strs:
        groups["".join(sorted(word))].append(word)
    return list(groups.values())


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring with no repeated character."""
    window: set[str] = set()
    left = 0
    best = 0
    for right, char in enumerate(s):
        while char in window:
            window.discard(s[left])
            left += 1
        window.add(char)
        best = max(best, right - left + 1)
    return best


def roman_to_int(s: str) -> int:
    """Convert a Roman numeral to an integer.

    A symbol followed by a larger one is paired with it and counts as their
    difference. Raises ValueError on a character that is not a Roman symbol.
    """
    try:
        values = [_ROMAN_VALUES[char] for char in s]
    except KeyError as exc:
        raise ValueError(f"not a Roman numeral symbol: {exc.args[0]!r}") from None
    total = 0
    i = 0
    while i < len(values):
        current = values[i]
        if i + 1 < len(values) and current < values[i + 1]:
            total += values[i + 1] - current
            i += 2
        else:
            total += current
            i += 1
    return total


def is_valid_parentheses(s: str) -> bool:
    """Tell whether the string is a properly nested run of (), [] and {}.

    Any character other than these brackets makes the string invalid.
    """
    stack: list[str] = []
    for char in s:
        if char in _OPENERS:
            stack.append(char)
        elif stack and _CLOSERS.get(char) == stack[-1]:
            stack.pop()
        else:
            return False
    return not stack


def is_palindrome(s: str) -> bool:
    """Tell whether the ASCII letters and digits read the same both ways, ignoring case."""
    cleaned = [char.lower() for char in s if char.isascii() and char.isalnum()]
    return cleaned == cleaned[::-1]


def reverse_words(s: str) -> str:
    """Return the space-separated words in reverse order, joined by single spaces."""
    words = [word for word in s.split(" ") if word]
    return " ".join(reversed(words))


def is_isomorphic(s: str, t: str) -> bool:
    """Tell whether a one-to-one character mapping turns ``s`` into ``t``."""
    if len(s) != len(t):
        return False
    forward: dict[str, str] = {}
    backward: dict[str, str] = {}
    for a, b in zip(s, t):
        if forward.setdefault(a, b) != b or backward.setdefault(b, a) != a:
            return False
    return True


def character_replacement(s: str, k: int) -> int:
    """Return the longest run of one letter reachable by replacing at most ``k`` characters."""
    counts: Counter[str] = Counter()
    left = 0
    top_count = 0
    best = 0
    for right, char in enumerate(s):
        counts[char] += 1
        top_count = max(top_count, counts[char])
        if right - left + 1 - top_count > k:
            counts[s[left]] -= 1
            left += 1
        best = max(best, right - left + 1)
    return best


def frequency_sort(s: str) -> str:
    """Arrange the characters by descending frequency; ties go to the larger character."""
    ranked = sorted(Counter(s).items(), key=lambda item: (item[1], item[0]), reverse=True)
    return "".join(char * count for char, count in ranked)


def rotate_string(s: str, goal: str) -> bool:
    """Tell whether some rotation of a non-empty ``s`` equals ``goal``."""
    return bool(s) and len(s) == len(goal) and goal in s + s


def number_of_substrings(s: str) -> int:
    """Count the substrings holding at least one each of 'a', 'b' and 'c'."""
    counts: Counter[str] = Counter()
    left = 0
    total = 0
    for right, char in enumerate(s):
        counts[char] += 1
        while counts["a"] and counts["b"] and counts["c"]:
            total += len(s) - right
            counts[s[left]] -= 1
            left += 1
    return total


def max_depth(s: str) -> int:
    """Return the deepest nesting of round brackets in the string."""
    depth = 0
    deepest = 0
    for char in s:
        if char == "(":
            depth += 1
            deepest = max(deepest, depth)
        elif char == ")":
            depth -= 1
    return deepest


def largest_odd_number(num: str) -> str:
    """Return the longest prefix of ``num`` ending in an odd digit, or an empty string."""
    for end in range(len(num), 0, -1):
        if (ord(num[end - 1]) - ord("0")) % 2:
            return num[:end]
    return ""