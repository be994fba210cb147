"""Label text heuristics shared by the rules."""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Iterable, List

# An alphanumeric neighbour means the match sits inside a longer word.
# Underscores count as separators so "photo_icon" still contains "icon".
_NOT_PRECEDED_BY_ALNUM = r"(?<![^\W_])"
_NOT_FOLLOWED_BY_ALNUM = r"(?![^\W_])"


@lru_cache(maxsize=256)
def _word_pattern(word: str) -> re.Pattern[str]:
    return re.compile(
        _NOT_PRECEDED_BY_ALNUM + re.escape(word) + _NOT_FOLLOWED_BY_ALNUM,
        re.IGNORECASE,
    )


def contains_word(text: str, word: str) -> bool:
    """Case-insensitive whole-word (or whole-phrase) containment.

    Tokens without any letters or digits, such as ``"-"``, are plain
    substring checks.
    """
    if not word:
        return False
    if not any(char.isalnum() for char in word):
        return word in text
    return _word_pattern(word).search(text) is not None


def contains_words(text: str, words: Iterable[str]) -> List[str]:
    """Return the entries of ``words`` found in ``text``, in list order."""
    return [word for word in words if contains_word(text, word)]


def is_uppercased(text: str) -> bool:
    """True when every cased letter in ``text`` is upper case."""
    letters = "".join(char for char in text if char.isalpha() and char.lower() != char.upper())
    if not letters:
        return False
    return letters == letters.upper()
