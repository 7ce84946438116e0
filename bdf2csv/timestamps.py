"""Epoch-seconds to display-string formatting, always in UTC."""

import re
from datetime import datetime, timedelta, timezone

NOT_APPLICABLE = "N/A"
INVALID = "Invalid"
ABSENT = "0"

EPOCH_PATTERN = re.compile(r"^-?[0-9]+$")

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def parse_epoch(value: str) -> int | None:
    """Parse a signed 64-bit decimal integer. Returns None if it isn't one."""
    if not EPOCH_PATTERN.match(value):
        return None
    seconds = int(value)
    if seconds < INT64_MIN or seconds > INT64_MAX:
        return None
    return seconds


def format_timestamp(value: str) -> str:
    """Render a bodyfile timestamp field as ``YYYY-MM-DD HH:MM:SS UTC``.

    "" and "0" mean "not applicable" in bodyfiles and map to N/A.
    Anything that isn't a decimal int64 maps to Invalid. Never raises.
    """
    if value == "" or value == ABSENT:
        return NOT_APPLICABLE

    seconds = parse_epoch(value)
    if seconds is None:
        return INVALID

    try:
        dt = _EPOCH + timedelta(seconds=seconds)
    except OverflowError:
        # Outside datetime's year 1..9999 range
        return _format_extended(seconds)
    return _render(dt.year, dt.month, dt.day, dt.hour, dt.minute, dt.second)


def _render(year, month, day, hour, minute, second) -> str:
    sign = "-" if year < 0 else ""
    return (
        f"{sign}{abs(year):04d}-{month:02d}-{day:02d} "
        f"{hour:02d}:{minute:02d}:{second:02d} UTC"
    )


def _format_extended(seconds: int) -> str:
    days, rem = divmod(seconds, 86400)
    year, month, day = _civil_from_days(days)
    hour, rem = divmod(rem, 3600)
    minute, second = divmod(rem, 60)
    return _render(year, month, day, hour, minute, second)


def _civil_from_days(days: int) -> tuple[int, int, int]:
    """Proleptic Gregorian (year, month, day) for a day count since 1970-01-01."""
    z = days + 719468
    era = z // 146097
    doe = z - era * 146097
    yoe = (doe - doe // 1460 + doe // 36524 - doe // 146096) // 365
    doy = doe - (365 * yoe + yoe // 4 - yoe // 100)
    mp = (5 * doy + 2) // 153
    day = doy - (153 * mp + 2) // 5 + 1
    month = mp + 3 if mp < 10 else mp - 9
    year = yoe + era * 400 + (1 if month <= 2 else 0)
    return year, month, day
