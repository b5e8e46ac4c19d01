"""Helpers for timezone-aware timestamps.

Timestamps are stored as naive UTC values (SQLite has no timezone support) and
handled as aware datetimes everywhere else.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone, tzinfo
from functools import lru_cache
from typing import Final
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from teamboard.config import get_settings

_OFFSET_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^(?:UTC|GMT)(?P<sign>[+-])(?P<hours>\d{1,2})(?::?(?P<minutes>\d{2}))?$",
    re.IGNORECASE,
)


@lru_cache(maxsize=1)
def get_app_timezone() -> tzinfo:
    """Return the timezone used when presenting timestamps to clients.

    Resolved from ``APP_TIMEZONE``; unknown names fall back to UTC.
    """

    tz_name = (get_settings().app_timezone or "").strip() or "UTC"
    try:
        return ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError):
        match = _OFFSET_PATTERN.match(tz_name)
        if match is None:
            return timezone.utc
        sign = -1 if match.group("sign") == "-" else 1
        offset = timedelta(
            hours=int(match.group("hours")), minutes=int(match.group("minutes") or 0)
        )
        return timezone(sign * offset)


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""

    return datetime.now(tz=timezone.utc)


def to_storage(value: datetime | None) -> datetime | None:
    """Convert ``value`` into the naive UTC representation kept in the DB."""

    if value is None:
        return None
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.replace(tzinfo=None)


def from_storage(value: datetime | None) -> datetime | None:
    """Attach UTC to a naive value read back from the DB."""

    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def localize(value: datetime | None) -> datetime | None:
    """Express ``value`` in the configured application timezone."""

    aware = from_storage(value)
    if aware is None:
        return None
    return aware.astimezone(get_app_timezone())


def storage_now() -> datetime:
    """Column default: the current time as naive UTC."""

    return utc_now().replace(tzinfo=None)
