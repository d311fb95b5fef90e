from __future__ import annotations

import pytest

from persona_chat.config.chat_rules import SENSITIVE_WORDS
from persona_chat.services.content_filter import SensitiveContentFilter


def test_masks_each_phrase_with_equal_length_mask() -> None:
    content_filter = SensitiveContentFilter()

    assert content_filter.filter("你是垃圾") == "你是**"
    assert content_filter.filter("废物和白痴") == "**和**"


def test_masks_every_occurrence() -> None:
    content_filter = SensitiveContentFilter(words=("bad",))

    assert content_filter.filter("bad, bad, bad") == "***, ***, ***"


def test_matching_is_case_sensitive() -> None:
    content_filter = SensitiveContentFilter(words=("bad",))

    assert content_filter.filter("Bad BAD bad") == "Bad BAD ***"


def test_clean_text_is_unchanged_and_filter_is_idempotent() -> None:
    content_filter = SensitiveContentFilter()
    clean = "Tell me about relativity"

    assert content_filter.filter(clean) == clean
    once = content_filter.filter("垃圾 message")
    assert content_filter.filter(once) == once


def test_phrases_are_applied_in_declared_order() -> None:
    # "abc" masked first leaves nothing for "bcd" to match.
    assert SensitiveContentFilter(words=("abc", "bcd")).filter("abcd") == "***d"
    assert SensitiveContentFilter(words=("bcd", "abc")).filter("abcd") == "a***"


def test_custom_mask_character() -> None:
    assert SensitiveContentFilter(words=("bad",), mask="#").filter("so bad") == "so ###"


def test_mask_must_be_single_character() -> None:
    with pytest.raises(ValueError):
        SensitiveContentFilter(mask="")


def test_default_denylist() -> None:
    assert SensitiveContentFilter().words == SENSITIVE_WORDS
