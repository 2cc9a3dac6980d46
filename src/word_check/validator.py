"""Check words against the dictionary.

camelCase and snake_case tokens are split and every sub-word is looked up on
its own; any other token is looked up whole.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from src.models import Word, WordCase

from .classifier import classify
from .dictionary import Dictionary
from .splitter import split_sub_words


@dataclass
class ValidationResult:
    """Outcome of checking one word."""

    word: Word
    word_case: WordCase
    misspelled: list[str] = field(default_factory=list)

    @property
    def is_correct(self) -> bool:
        return not self.misspelled

    @property
    def is_multi_word(self) -> bool:
        return self.word_case.is_multi_word


def is_dictionary_word(dictionary: Dictionary, text: str) -> bool:
    return dictionary.contains(text)


def validate_word(word: Word, dictionary: Dictionary) -> ValidationResult:
    """Return the sub-words of ``word`` that are not in ``dictionary``.

    Failing sub-words are listed left to right, exactly as they appear in the
    token. A plain word that fails is reported as ``[word.text]``.
    """
    word_case = classify(word.text)
    misspelled = [
        sub_word
        for sub_word in split_sub_words(word.text, word_case)
        if not is_dictionary_word(dictionary, sub_word)
    ]
    return ValidationResult(word=word, word_case=word_case, misspelled=misspelled)


def check_spelling(word: Word, dictionary: Dictionary) -> list[str]:
    """Shorthand for :func:`validate_word` returning only the failing sub-words."""
    return validate_word(word, dictionary).misspelled
