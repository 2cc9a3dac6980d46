"""Split identifier-style tokens into the sub-words that get looked up."""

from __future__ import annotations

import re

from src.models import WordCase

from .classifier import classify

# A letter followed by everything up to the next uppercase letter.
CAMEL_CASE_SUB_WORD_PATTERN = re.compile(r"[a-zA-Z][^A-Z]+")


def split_camel_case(text: str) -> list[str]:
    """Split a camelCase token into its sub-words.

    Each search resumes where the previous match ended. Uppercase letters that
    are not followed by a non-uppercase character (``XML`` in ``XMLHttp``) never
    start a match and are skipped.

    Example:
        >>> split_camel_case("teamWorkWrkTeam")
        ['team', 'Work', 'Wrk', 'Team']
    """
    sub_words: list[str] = []
    position = 0
    while position < len(text):
        match = CAMEL_CASE_SUB_WORD_PATTERN.search(text, position)
        if match is None:
            break
        sub_words.append(match.group(0))
        position = match.end()
    return sub_words


def split_snake_case(text: str) -> list[str]:
    """Split on underscores, keeping empty fragments (``a__b`` -> ``['a', '', 'b']``)."""
    return text.split("_")


def split_sub_words(text: str, word_case: WordCase | None = None) -> list[str]:
    """Return the sub-words of ``text`` according to its style.

    Plain words are returned as a single-item list.
    """
    if word_case is None:
        word_case = classify(text)
    if word_case is WordCase.CAMEL:
        return split_camel_case(text)
    if word_case is WordCase.SNAKE:
        return split_snake_case(text)
    return [text]
