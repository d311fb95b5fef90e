"""Fixed lookup tables used by the chat pipeline.

Both tables are tuples so their iteration order is part of their value:
denylisted phrases are masked in the order listed, and the first trigger
phrase found in a message decides the canned reply.
"""

from __future__ import annotations

SENSITIVE_WORDS: tuple[str, ...] = (
    "垃圾",
    "废物",
    "白痴",
)

_GREETING_REPLY = "你好！很高兴见到你。有什么我可以帮助你的吗？"

# Checked top to bottom; earlier entries win when several triggers match.
COMMON_RESPONSES: tuple[tuple[str, str], ...] = (
    ("hello", _GREETING_REPLY),
    ("你好", _GREETING_REPLY),
    ("你是谁", "我是一个AI助手，可以帮你解答问题、陪你聊天。"),
    ("help", "我可以回答你的问题，或者陪你聊天。你可以问我任何问题。"),
)

APOLOGY_REPLY = "Sorry, I can't answer your question right now. Please try again later."
