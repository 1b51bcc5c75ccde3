from typing import Tuple

from businesshours.core.errors import InvalidRangeFormat
from businesshours.services.business.codecs import parse_hour, parse_weekday


def parse_weekday_range(token: str) -> Tuple[int, int]:
    """parse "Day" or "Day-Day"; a single day starts and ends on itself.

    No ordering is enforced, "Sat-Mon" wraps over the week boundary.
    """
    days = token.split("-")
    if len(days) not in (1, 2):
        raise InvalidRangeFormat(token, detail="expected Day or Day-Day")

    start = parse_weekday(days[0])
    if len(days) == 1:
        return start, start

    return start, parse_weekday(days[1])


def parse_hour_range(token: str) -> Tuple[int, int]:
    """parse "HH:MM-HH:MM" into start and end minutes of the day."""
    hours = token.split("-")
    if len(hours) != 2:
        raise InvalidRangeFormat(token, detail="expected HH:MM-HH:MM")

    return parse_hour(hours[0]), parse_hour(hours[1])
