"""
Weekday and hour tokens.

Weekdays are indexed Sunday=0 .. Saturday=6. Hours are minutes elapsed since
local midnight, 0 .. 1440, where 1440 is the end-of-day boundary "24:00".
"""
import re
from typing import Dict

from businesshours.core.errors import InvalidHour, InvalidWeekday

MINUTES_PER_DAY = 1440
DAYS_PER_WEEK = 7

WEEKDAYS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
_WEEKDAY_INDEX: Dict[str, int] = {name: i for i, name in enumerate(WEEKDAYS)}

# "00:00" .. "23:59" or exactly "24:00"
_HOUR_RE = re.compile(r"(?:[01][0-9]|2[0-3]):[0-5][0-9]|24:00")


def parse_weekday(token: str) -> int:
    """convert a 3 letter weekday ("Sun" .. "Sat") into its index."""
    try:
        return _WEEKDAY_INDEX[token]
    except (KeyError, TypeError):
        raise InvalidWeekday(token, detail="is not a valid weekday") from None


def format_weekday(day: int) -> str:
    # wraparound arithmetic can produce 7+, e.g. 7 is next Sunday
    return WEEKDAYS[day % DAYS_PER_WEEK]


def parse_hour(token: str) -> int:
    """convert "HH:MM" into minutes elapsed in the day ("24:00" -> 1440)."""
    if not isinstance(token, str) or not _HOUR_RE.fullmatch(token):
        raise InvalidHour(token, detail="invalid format")

    hours, minutes = token.split(":")
    return int(hours) * 60 + int(minutes)


def format_hour(hour: int) -> str:
    if hour == MINUTES_PER_DAY:
        hours = 24
    else:
        hours = hour % MINUTES_PER_DAY // 60
    minutes = hour % 60
    return f"{hours:02d}:{minutes:02d}"
