"""Utility modules shared across the word checker."""

from __future__ import annotations

from . import line_utils

__all__ = [
    "line_utils",
]
