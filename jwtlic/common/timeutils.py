"""
Time helpers: duration expressions and epoch conversions.
"""

from __future__ import annotations

import math
import re
from datetime import datetime, timedelta, timezone

SECOND = 1.0
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE
DAY = 24 * HOUR
WEEK = 7 * DAY
YEAR = 365.25 * DAY
MONTH = YEAR / 12

_UNIT_ALIASES: tuple[tuple[tuple[str, ...], float], ...] = (
    (("ms", "msec", "msecs", "millisecond", "milliseconds"), SECOND / 1000),
    (("s", "sec", "secs", "second", "seconds"), SECOND),
    (("m", "min", "mins", "minute", "minutes"), MINUTE),
    (("h", "hr", "hrs", "hour", "hours"), HOUR),
    (("d", "day", "days"), DAY),
    (("w", "week", "weeks"), WEEK),
    (("mo", "month", "months"), MONTH),
    (("y", "yr", "yrs", "year", "years"), YEAR),
)
_UNITS: dict[str, float] = {
    name: seconds for names, seconds in _UNIT_ALIASES for name in names
}

_DURATION_RE = re.compile(r"^(?P<value>-?(?:\d+)?\.?\d+) *(?P<unit>[a-z]+)?$")


def parse_duration(value: str | int | float | timedelta) -> int:
    """Convert a duration expression to whole seconds.

    Accepts seconds as a number, a ``timedelta``, or a string such as
    ``"1 month"``, ``"30 days"``, ``"2h"`` or ``"-1d"``. A string without a
    unit is read as seconds. Fractions are truncated toward zero.

    Raises:
        ValueError: If ``value`` is not a recognizable duration.
    """
    if isinstance(value, bool):
        msg = f"Invalid duration: {value!r}"
        raise ValueError(msg)
    if isinstance(value, timedelta):
        return int(value.total_seconds())
    if isinstance(value, (int, float)):
        if not math.isfinite(value):
            msg = f"Invalid duration: {value!r}"
            raise ValueError(msg)
        return int(value)
    if not isinstance(value, str):
        msg = f"Invalid duration type: {type(value).__name__}"
        raise ValueError(msg)

    match = _DURATION_RE.match(value.strip().lower())
    if match is None:
        msg = f"Invalid duration: {value!r}"
        raise ValueError(msg)
    unit = match.group("unit") or "s"
    if unit not in _UNITS:
        msg = f"Unknown duration unit {unit!r} in {value!r}"
        raise ValueError(msg)
    return int(float(match.group("value")) * _UNITS[unit])


def to_epoch_seconds(moment: datetime) -> int:
    """Truncate ``moment`` to whole seconds since the epoch."""
    return math.floor(moment.timestamp())


def from_epoch_seconds(seconds: float) -> datetime:
    return datetime.fromtimestamp(seconds, tz=timezone.utc)


def as_aware(moment: datetime) -> datetime:
    """Attach the local timezone to naive datetimes, as ``timestamp()`` does."""
    if moment.tzinfo is None or moment.tzinfo.utcoffset(moment) is None:
        return moment.astimezone()
    return moment
