"""Masking of denylisted phrases in user messages."""

from __future__ import annotations

from typing import Iterable

from ..config.chat_rules import SENSITIVE_WORDS


class SensitiveContentFilter:
    """Replaces every denylisted phrase with a mask of the same length.

    Phrases are applied one after another in the order given, and
    matching is case-sensitive.  The filter never rejects a message on
    its own; callers decide what to do with the masked result.
    """

    def __init__(self, words: Iterable[str] = SENSITIVE_WORDS, mask: str = "*") -> None:
        if len(mask) != 1:
            raise ValueError("mask must be a single character")
        self.words: tuple[str, ...] = tuple(word for word in words if word)
        self.mask = mask

    def filter(self, content: str) -> str:
        filtered = content
        for word in self.words:
            filtered = filtered.replace(word, self.mask * len(word))
        return filtered
