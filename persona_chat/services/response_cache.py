"""Canned replies for common messages that bypass the model."""

from __future__ import annotations

from typing import Iterable

from ..config.chat_rules import COMMON_RESPONSES


class CommonResponseCache:
    """Ordered table of trigger phrase to canned reply.

    A message matches a trigger when its lowercased text *contains* the
    trigger.  Entries are checked in order and the first match wins, so
    the order of the table is its priority.
    """

    def __init__(self, entries: Iterable[tuple[str, str]] = COMMON_RESPONSES) -> None:
        self.entries: tuple[tuple[str, str], ...] = tuple(
            (trigger.lower(), reply) for trigger, reply in entries if trigger
        )

    def lookup(self, message: str) -> str | None:
        lowered = message.lower()
        for trigger, reply in self.entries:
            if trigger in lowered:
                return reply
        return None

    def __len__(self) -> int:
        return len(self.entries)
