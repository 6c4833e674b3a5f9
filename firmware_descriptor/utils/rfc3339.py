"""Strict RFC 3339 timestamp parsing.

``datetime.fromisoformat`` accepts far more than RFC 3339 (dates without a
time, times without an offset, week dates), so timestamps are matched against
the RFC 3339 ``date-time`` production first.
"""

import re
from datetime import UTC, datetime, timedelta, timezone

from firmware_descriptor.exceptions import ValidationException

# date-time = full-date "T" full-time, with "t" and " " accepted as separator
_RFC3339_PATTERN = re.compile(
    r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
    r"[Tt ]"
    r"(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})"
    r"(?:\.(?P<fraction>\d+))?"
    r"(?P<offset>[Zz]|[+-]\d{2}:\d{2})",
    re.ASCII,
)


def _parse_offset(offset: str) -> timezone:
    if offset in ("Z", "z"):
        return UTC
    sign = 1 if offset[0] == "+" else -1
    hours, minutes = int(offset[1:3]), int(offset[4:6])
    if hours > 23 or minutes > 59:
        raise ValueError(f"offset out of range: {offset}")
    return timezone(sign * timedelta(hours=hours, minutes=minutes))


def parse_rfc3339(text: str) -> datetime:
    """Parse an RFC 3339 timestamp and convert it to UTC.

    Fractional seconds beyond microsecond precision are truncated. Leap
    seconds (``:60``) cannot be represented and are rejected.

    Args:
        text: Timestamp text, e.g. ``2024-03-01T12:00:00+02:00``

    Returns:
        Timezone-aware datetime in UTC

    Raises:
        ValidationException: If the text is not a valid RFC 3339 timestamp
    """
    match = _RFC3339_PATTERN.fullmatch(text)
    if match is None:
        raise ValidationException(f"Invalid RFC 3339 timestamp '{text}'")

    fraction = match["fraction"] or ""
    microsecond = int(fraction[:6].ljust(6, "0")) if fraction else 0

    try:
        parsed = datetime(
            int(match["year"]),
            int(match["month"]),
            int(match["day"]),
            int(match["hour"]),
            int(match["minute"]),
            int(match["second"]),
            microsecond,
            tzinfo=_parse_offset(match["offset"]),
        )
        return parsed.astimezone(UTC)
    except (ValueError, OverflowError) as e:
        raise ValidationException(
            f"Invalid RFC 3339 timestamp '{text}': {e}"
        ) from e
