"""String exercises: searching, matching, counting and validation."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, MutableSequence
from typing import TypeVar

T = TypeVar("T")

_CLOSERS = {")": "(", "]": "[", "}": "{"}


def str_str(haystack: str, needle: str) -> int:
    """Return the index of the first occurrence of ``needle``, or -1.

    An empty needle is found at index 0.
    """
    return haystack.find(needle)


def is_isomorphic(s: str, t: str) -> bool:
    """Tell whether the characters of ``s`` map one-to-one onto those of ``t``."""
    if len(s) != len(t):
        return False
    forward: dict[str, str] = {}
    backward: dict[str, str] = {}
    for a, b in zip(s, t):
        if forward.setdefault(a, b) != b or backward.setdefault(b, a) != a:
            return False
    return True


def length_of_last_word(s: str) -> int:
    """Return the length of the last space-separated word, ignoring trailing spaces."""
    return len(s.rstrip(" ").rpartition(" ")[2])


def max_number_of_balloons(text: str) -> int:
    """Return how many times ``balloon`` can be spelled from the letters of ``text``."""
    counts = Counter(text)
    return min(
        counts["b"],
        counts["a"],
        counts["l"] // 2,
        counts["o"] // 2,
        counts["n"],
    )


def reverse_chars(chars: MutableSequence[T]) -> MutableSequence[T]:
    """Reverse ``chars`` in place and return it."""
    chars.reverse()
    return chars


def canonical_email(email: str) -> str:
    """Normalise an address: drop dots and anything after ``+`` in the local part.

    Raises ValueError if the address has no ``@``.
    """
    parts = email.split("@")
    if len(parts) < 2:
        raise ValueError(f"not an e-mail address: {email!r}")
    local, domain = parts[0], parts[1]
    local = local.replace(".", "").partition("+")[0]
    return f"{local}@{domain}"


def num_unique_emails(emails: Iterable[str]) -> int:
    """Count the distinct addresses after normalisation."""
    return len({canonical_email(email) for email in emails})


def is_anagram(s: str, t: str) -> bool:
    """Tell whether two lower-case words use the same letters.

    Raises ValueError if equal-length inputs hold anything but ``a``-``z``.
    """
    if len(s) != len(t):
        return False
    for ch in s + t:
        if not "a" <= ch <= "z":
            raise ValueError(f"only lower-case letters are allowed, got {ch!r}")
    return Counter(s) == Counter(t)


def is_palindrome(s: str) -> bool:
    """Tell whether the letters of ``s`` read the same both ways, ignoring case.

    Only the letters ``a``-``z`` take part; everything else is skipped.
    """
    letters = [ch for ch in s.lower() if "a" <= ch <= "z"]
    return letters == letters[::-1]


def _is_plain_palindrome(s: str) -> bool:
    return s == s[::-1]


def valid_palindrome_ii(word: str) -> bool:
    """Tell whether ``word`` is a palindrome once its first mismatch is skipped.

    At the first mismatched pair, either the text strictly between the pair or
    the text from the left character up to two before the right one must read
    the same both ways.
    """
    left, right = 0, len(word) - 1
    while left < right:
        if word[left] != word[right]:
            return _is_plain_palindrome(word[left + 1 : right]) or _is_plain_palindrome(
                word[left : right - 1]
            )
        left += 1
        right -= 1
    return True


def is_valid_parentheses(s: str) -> bool:
    """Tell whether every bracket closes in the right order.

    Any character that is not a closing bracket is treated as an opener.
    """
    stack: list[str] = []
    for ch in s:
        opener = _CLOSERS.get(ch)
        if opener is None:
            stack.append(ch)
        elif not stack or stack.pop() != opener:
            return False
    return not stack


def word_pattern(pattern: str, s: str) -> bool:
    """Tell whether the single-space-separated words of ``s`` follow ``pattern``."""
    words = s.split(" ")
    if len(pattern) != len(words):
        return False
    seen_chr: dict[str, int] = {}
    seen_word: dict[str, int] = {}
    for position, (ch, word) in enumerate(zip(pattern, words)):
        if seen_chr.get(ch, -1) != seen_word.get(word, -1):
            return False
        seen_chr[ch] = position
        seen_word[word] = position
    return True