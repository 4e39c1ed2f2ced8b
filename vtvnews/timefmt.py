"""Conversion of upstream UTC timestamps to Vietnam local display time."""

import logging
from datetime import datetime, timedelta, timezone

logger = logging.getLogger(__name__)

VN_OFFSET = timedelta(hours=7)
VN_DISPLAY_FORMAT = "%Y-%m-%d %H:%M:%S"
VN_SUFFIX = " (Giờ VN)"


def parse_utc(value: str) -> datetime:
    """
    Parse an ISO-8601 timestamp into a naive UTC datetime.

    A trailing "Z" is accepted, naive timestamps are taken as UTC and aware
    ones are converted to UTC.

    Raises:
        ValueError: If the value is not ISO-8601
    """
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def to_vietnam_time(value: str | None) -> str:
    """
    Format a UTC timestamp as Vietnam time (UTC+7).

    "2024-01-01T00:00:00Z" -> "2024-01-01 07:00:00 (Giờ VN)". Blank input gives
    an empty string; anything unparseable is returned unchanged.
    """
    if not value or not value.strip():
        return ""
    try:
        local = parse_utc(value) + VN_OFFSET
    except (ValueError, OverflowError) as e:
        logger.debug(f"Could not convert timestamp {value!r}: {e}")
        return value
    return local.strftime(VN_DISPLAY_FORMAT) + VN_SUFFIX
