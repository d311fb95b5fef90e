"""General helper functions used across the application."""

from __future__ import annotations

from datetime import datetime
from typing import Sequence, TypeVar

T = TypeVar("T")

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_message_timestamp(timestamp: datetime) -> str:
    """Format a turn timestamp for display in the server's local time.

    Naive datetimes are assumed to already be local.
    """
    if timestamp.tzinfo is not None:
        timestamp = timestamp.astimezone()
    return timestamp.strftime(TIMESTAMP_FORMAT)


def take_last(items: Sequence[T] | None, count: int) -> list[T]:
    """Return a new list with the last ``count`` items, preserving order."""
    if not items or count <= 0:
        return []
    return list(items[-count:])
