"""
Business hours parsing and time containment.
Handles the weekly schedule value, its canonical text form and the
open/closed check for a point in time.
"""
import logging
from dataclasses import dataclass
from datetime import datetime, tzinfo
from typing import Optional, Tuple
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from businesshours.core.errors import (
    BusinessHoursError,
    InvalidBusinessHours,
    InvalidFormat,
    InvalidTimezone,
)
from businesshours.services.business.codecs import (
    DAYS_PER_WEEK,
    MINUTES_PER_DAY,
    format_hour,
    format_weekday,
)
from businesshours.services.business.ranges import parse_hour_range, parse_weekday_range

logger = logging.getLogger(__name__)

UTC = ZoneInfo("UTC")


@dataclass(frozen=True)
class BusinessHours:
    """weekly business hours: one weekday range, one hour range, one timezone.

    end_day may exceed 6 and end_hour may exceed 1440 to describe ranges
    that run past Saturday or past midnight.
    """
    start_day: int  # 0=Sunday, 6=Saturday
    end_day: int
    start_hour: int  # minutes since local midnight
    end_hour: int
    timezone: Optional[tzinfo] = None

    @classmethod
    def parse(cls, text: str) -> "BusinessHours":
        return parse_business_hours(text)

    def contains(self, instant: datetime) -> bool:
        return contains(self, instant)

    def contains_weekday(self, day: int) -> bool:
        """check if a weekday index (0=Sunday) is inside the weekday range."""
        end_day = self.end_day
        # the hour range spills into the next calendar day
        if self.end_hour > MINUTES_PER_DAY:
            end_day = end_day + 1

        # range runs into next week and day might be on the next week
        if not (self.start_day <= day or self.end_day <= 6):
            day = day + DAYS_PER_WEEK

        return self.start_day <= day <= end_day

    def contains_hour(self, hour: int) -> bool:
        """check if a minute of the day is inside the hour range."""
        # range runs past midnight and hour might be on the next day
        if not (self.start_hour <= hour or self.end_hour <= MINUTES_PER_DAY):
            hour = hour + MINUTES_PER_DAY

        return self.start_hour <= hour < self.end_hour

    def __str__(self) -> str:
        return format_business_hours(self)


def resolve_timezone(name: str) -> tzinfo:
    """look up an IANA timezone name ("Europe/Berlin", "UTC")."""
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        raise InvalidTimezone(name, cause=e) from e


def timezone_name(tz: tzinfo) -> str:
    """display name used in the canonical text form."""
    key = getattr(tz, "key", None)
    if key:
        return key
    return str(tz)


def parse_business_hours(text: str) -> BusinessHours:
    """
    Parse business hours of a format like "Mon-Fri 09:00-17:00 Europe/Berlin".

    A single weekday starts and ends on the same day. When the timezone is
    omitted UTC is assumed.

    Raises:
        InvalidBusinessHours: wrapping the failure of whichever component
            couldn't be parsed
    """
    components = text.split(" ") if isinstance(text, str) else []
    if len(components) not in (2, 3):
        cause = InvalidFormat(text, detail="expected '<days> <hours> [timezone]'")
        logger.debug(f"Rejected business hours {text!r}: wrong number of components")
        raise InvalidBusinessHours(text, cause=cause) from cause

    component = components[0]
    try:
        start_day, end_day = parse_weekday_range(component)
        component = components[1]
        start_hour, end_hour = parse_hour_range(component)
        if len(components) == 3:
            component = components[2]
            tz = resolve_timezone(component)
        else:
            tz = UTC
    except BusinessHoursError as e:
        logger.debug(f"Rejected business hours {text!r} at {component!r}: {e}")
        raise InvalidBusinessHours(component, cause=e) from e

    # "Sat-Mon" ends in the next week, "17:00-01:00" ends on the next day
    if end_day < start_day:
        end_day += DAYS_PER_WEEK
    if end_hour < start_hour:
        end_hour += MINUTES_PER_DAY

    return BusinessHours(start_day, end_day, start_hour, end_hour, tz)


def local_weekday_and_hour(value: BusinessHours, instant: datetime) -> Tuple[int, int]:
    """weekday (0=Sunday) and minute of day of instant in the value's timezone."""
    tz = value.timezone or UTC
    if instant.tzinfo is None:
        # naive times are wall clock times in the business timezone
        local = instant.replace(tzinfo=tz)
    else:
        local = instant.astimezone(tz)
    return local.isoweekday() % DAYS_PER_WEEK, local.hour * 60 + local.minute


def contains(value: BusinessHours, instant: datetime) -> bool:
    """check if a given time is inside the business hours.

    Weekday and hour are checked independently, so a range spanning
    several days is open during its hour range on each of those days.
    """
    day, hour = local_weekday_and_hour(value, instant)
    return value.contains_weekday(day) and value.contains_hour(hour)


def format_business_hours(value: BusinessHours) -> str:
    """render the canonical text form, e.g. "Mon-Fri 09:00-17:00 UTC".

    A value without a timezone renders no timezone segment, which is not
    the same text as an explicit UTC.
    """
    weekdays = f"{format_weekday(value.start_day)}-{format_weekday(value.end_day)}"
    if value.start_day == value.end_day:
        weekdays = format_weekday(value.start_day)

    location = ""
    if value.timezone is not None:
        location = f" {timezone_name(value.timezone)}"

    return f"{weekdays} {format_hour(value.start_hour)}-{format_hour(value.end_hour)}{location}"

