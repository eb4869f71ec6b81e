"""
Event Status Service
Derives upcoming/ongoing/past from an event's dates and the current time.
Status is never stored; callers compute `now` once per request and pass it in.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional, Union


class EventStatus(str, Enum):
    UPCOMING = "upcoming"
    ONGOING = "ongoing"
    PAST = "past"


Timestamp = Union[datetime, str, None]


def parse_timestamp(value: Timestamp) -> Optional[datetime]:
    """
    Normalize a timestamp to an aware UTC datetime.

    Accepts datetimes and ISO-8601 strings (a trailing Z is allowed).
    Naive values are treated as UTC. Returns None for blank or malformed input.
    """
    if value is None:
        return None

    if isinstance(value, datetime):
        parsed = value
    else:
        text = str(value).strip()
        if not text:
            return None
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def to_naive_utc(value: Timestamp) -> Optional[datetime]:
    """Timestamp as stored in the database: UTC without tzinfo"""
    parsed = parse_timestamp(value)
    if parsed is None:
        return None
    return parsed.replace(tzinfo=None)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def classify_event_status(now: Timestamp, start_date: Timestamp, end_date: Timestamp) -> EventStatus:
    """
    Classify an event relative to `now`.

    start <= now <= end is ongoing, end < now is past, anything else is
    upcoming. Missing or malformed dates fall back to upcoming.
    """
    current = parse_timestamp(now)
    start = parse_timestamp(start_date)
    end = parse_timestamp(end_date)

    if current is None or start is None or end is None:
        return EventStatus.UPCOMING

    if start <= current <= end:
        return EventStatus.ONGOING
    if end < current:
        return EventStatus.PAST
    return EventStatus.UPCOMING
