"""Identifier style detection for tokens.

Both predicates search anywhere in the token. They can both hold for the same
token, so callers must test camelCase first; :func:`classify` does that.
"""

from __future__ import annotations

import re

from src.models import WordCase

# A letter, a lowercase run, then at least one uppercase run followed by lowercase.
CAMEL_CASE_PATTERN = re.compile(r"[a-zA-Z][a-z]+([A-Z]+[a-z]+)+")
SNAKE_CASE_PATTERN = re.compile(r"[a-zA-Z]+_([a-zA-Z_])+")


def is_camel_case(text: str) -> bool:
    return CAMEL_CASE_PATTERN.search(text) is not None


def is_snake_case(text: str) -> bool:
    return SNAKE_CASE_PATTERN.search(text) is not None


def classify(text: str) -> WordCase:
    """Return the style of ``text``; camelCase wins over snake_case."""
    if is_camel_case(text):
        return WordCase.CAMEL
    if is_snake_case(text):
        return WordCase.SNAKE
    return WordCase.PLAIN
