"""String drills: anagrams, rotations, prefixes, word order and more."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable


def is_anagram(first: str, second: str) -> bool:
    """Return True when both strings hold the same characters."""
    return sorted(first) == sorted(second)


def is_rotation(text: str, goal: str) -> bool:
    """Return True when some left rotation of ``text`` equals ``goal``.

    Rotations by one through ``len(text)`` places are tried, so an empty
    ``text`` never matches.
    """
    return any(
        text[shift:] + text[:shift] == goal for shift in range(1, len(text) + 1)
    )


def parity_matches(text: str) -> bool:
    """Return True when the counts of 'a'/'b' and of other characters share parity."""
    ab_count = sum(1 for char in text if char in "ab")
    other_count = len(text) - ab_count
    return ab_count % 2 == other_count % 2


def is_isomorphic(source: str, target: str) -> bool:
    """Return True when a one-to-one character mapping turns ``source`` into ``target``."""
    if len(source) != len(target):
        return False
    forward: dict[str, str] = {}
    backward: dict[str, str] = {}
    for original, mapped in zip(source, target):
        if forward.setdefault(original, mapped) != mapped:
            return False
        if backward.setdefault(mapped, original) != original:
            return False
    return True


def largest_odd_substring(digits: str) -> str:
    """Return the substring with the largest odd value, or '' if none is odd.

    Every substring is examined; on equal values the first one found wins.
    """
    best_value = 0
    best = ""
    for start in range(len(digits)):
        for end in range(start + 1, len(digits) + 1):
            piece = digits[start:end]
            value = int(piece)
            if value % 2 == 1 and value > best_value:
                best_value = value
                best = piece
    return best


def largest_odd_prefix(digits: str) -> str:
    """Return the longest prefix of ``digits`` that ends in an odd digit."""
    trimmed = digits.rstrip("02468")
    return trimmed


def reverse_words(text: str) -> str:
    """Return the words of ``text`` in reverse order, joined by single spaces."""
    words = [word for word in text.split(" ") if word]
    if not words:
        raise ValueError("text contains no words")
    return " ".join(reversed(words))


def remove_outer_parentheses(text: str) -> str:
    """Strip the outermost parentheses of every primitive group in ``text``."""
    depth = 0
    kept: list[str] = []
    for char in text:
        if char == "(":
            if depth > 0:
                kept.append(char)
            depth += 1
        elif char == ")":
            depth -= 1
            if depth > 0:
                kept.append(char)
    return "".join(kept)


def longest_common_prefix(words: Iterable[str]) -> str:
    """Return the longest prefix shared by all ``words``."""
    ordered = sorted(words)
    if not ordered:
        raise ValueError("no words given")
    first, last = ordered[0], ordered[-1]
    prefix: list[str] = []
    for left, right in zip(first, last):
        if left != right:
            break
        prefix.append(left)
    return "".join(prefix)


def sort_by_frequency(text: str) -> str:
    """Group equal characters, most frequent first; ties in character order."""
    counts = sorted(Counter(text).items())
    counts.sort(key=lambda item: item[1], reverse=True)
    return "".join(char * count for char, count in counts)