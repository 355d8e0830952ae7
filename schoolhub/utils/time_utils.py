import logging
import re
from datetime import datetime
from typing import List, Optional

logger = logging.getLogger("schoolhub.time")

# H, H:M, H:MM, HH:MM, optionally followed by :SS
_LOOSE_TIME = re.compile(r"^(\d{1,2})(?::(\d{1,2})(?::(\d{1,2}))?)?$", re.ASCII)
_STRICT_TIME = re.compile(r"^([0-1]?[0-9]|2[0-3]):([0-5][0-9])(?::([0-5][0-9]))?$", re.ASCII)

INVALID_TIME_LABEL = "Invalid Time"


def normalize_time_string(value: Optional[str]) -> Optional[str]:
    """
    "9:30" -> "09:30"
    "9:5" -> "09:05"
    "9:30:00" -> "09:30"
    "9" -> "09:00"
    "25:00" / "" / "ab:cd" -> None

    Never raises: anything that is not a valid 24-hour wall-clock time gives None.
    """
    if not value:
        return None
    if not isinstance(value, str):
        return None

    m = _LOOSE_TIME.match(value.strip())
    if not m:
        logger.debug("Invalid time format: %r", value)
        return None

    hour = int(m.group(1))
    minute = int(m.group(2) or 0)
    second = int(m.group(3) or 0)

    if not (0 <= hour <= 23 and 0 <= minute <= 59 and 0 <= second <= 59):
        logger.debug("Time out of range: %r", value)
        return None

    return format_time_from_parts(hour, minute)


def time_to_minutes(normalized: str) -> int:
    """ "HH:MM" -> minutes since midnight. Input must already be normalized. """
    hours, minutes = normalized.split(":")
    return int(hours) * 60 + int(minutes)


def is_valid_time_format(value: Optional[str]) -> bool:
    if not value:
        return False
    return bool(_STRICT_TIME.match(value))


def format_time_from_parts(hours: int, minutes: int) -> str:
    return f"{hours:02d}:{minutes:02d}"


def calculate_end_time(start_hour: str, start_minute: str, duration_minutes: int) -> str:
    """Start + duration, wrapping past midnight."""
    total = int(start_hour) * 60 + int(start_minute) + duration_minutes
    return format_time_from_parts((total // 60) % 24, total % 60)


def minutes_between(start: Optional[str], end: Optional[str]) -> Optional[int]:
    start_n = normalize_time_string(start)
    end_n = normalize_time_string(end)
    if start_n is None or end_n is None:
        return None
    return time_to_minutes(end_n) - time_to_minutes(start_n)


def format_time_display(value: Optional[str]) -> str:
    """ "13:30" -> "1:30 PM" """
    if not is_valid_time_format(value):
        return INVALID_TIME_LABEL

    normalized = normalize_time_string(value)
    dt = datetime.strptime(normalized, "%H:%M")
    return dt.strftime("%I:%M %p").lstrip("0")


def time_range(start_hour: int = 7, end_hour: int = 17, step_minutes: int = 30) -> List[str]:
    """
    Selectable start times, every step_minutes from start_hour:00
    up to the last step inside end_hour.
    (7, 17, 30) -> ["07:00", "07:30", ..., "17:00", "17:30"]
    """
    if step_minutes <= 0:
        raise ValueError("step_minutes must be positive")

    out = []
    for minute in range(start_hour * 60, (end_hour + 1) * 60, step_minutes):
        if minute >= 24 * 60:
            break
        out.append(format_time_from_parts(minute // 60, minute % 60))
    return out
