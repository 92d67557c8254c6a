"""String reversal helpers."""

from __future__ import annotations

import re

_WORD = re.compile(r"[^ ]+")


def reverse_string(text: str) -> str:
    """Return ``text`` with its characters in reverse order."""
    return text[::-1]


def reverse_words(text: str) -> str:
    """Return ``text`` with its space-separated words in reverse order.

    The whole string is reversed, then each word is reversed back, so the runs
    of spaces keep their lengths and trade places with the words.
    """
    return _WORD.sub(lambda match: match.group()[::-1], text[::-1])