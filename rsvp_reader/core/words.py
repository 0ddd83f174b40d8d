"""Whitespace tokenization of acquired text.

RULES:
- Words are maximal runs of non-whitespace characters
- Order is preserved; the result is an immutable tuple
- Punctuation stays attached to its word ("end." is one token)
"""

from __future__ import annotations

from typing import Tuple


def split_words(text: str) -> Tuple[str, ...]:
    """Split text into the word sequence shown by the reader."""
    return tuple(text.split())
