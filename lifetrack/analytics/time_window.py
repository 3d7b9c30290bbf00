"""
Time window builder.

Enumerates the calendar days of a window ending at a reference date and
buckets dated entries into those days.  Every day of the window gets a
bucket, including days with no entries; entries dated outside the window
are dropped.
"""

from __future__ import annotations

import datetime
import logging
from typing import Callable, Iterable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def build_window(reference_date: datetime.date, days: int) -> list[datetime.date]:
    """Return the *days* calendar dates ending at *reference_date*, ascending.

    ``days <= 0`` yields an empty window.
    """
    if days <= 0:
        return []
    start = reference_date - datetime.timedelta(days=days - 1)
    return [start + datetime.timedelta(days=offset) for offset in range(days)]


def bucket_by_day(
    entries: Iterable[T],
    window: list[datetime.date],
    key: Callable[[T], datetime.date],
) -> dict[datetime.date, list[T]]:
    """Group *entries* by the day returned by *key*.

    The result has exactly one key per day in *window*, in window order.
    """
    buckets: dict[datetime.date, list[T]] = {day: [] for day in window}
    dropped = 0
    for entry in entries:
        day = key(entry)
        if day in buckets:
            buckets[day].append(entry)
        else:
            dropped += 1
    if dropped:
        logger.debug("Dropped %d entries outside the %d-day window", dropped, len(window))
    return buckets
