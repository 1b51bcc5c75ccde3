"""
Recurring weekly business hours, e.g. "Mon-Fri 09:00-17:00 Europe/Berlin".
"""
from businesshours.core.errors import (
    BusinessHoursError,
    ErrorKind,
    InvalidBusinessHours,
    InvalidFormat,
    InvalidHour,
    InvalidRangeFormat,
    InvalidTimezone,
    InvalidWeekday,
)
from businesshours.services.business import (
    BusinessHours,
    contains,
    format_business_hours,
    format_hour,
    format_weekday,
    parse_business_hours,
    parse_hour,
    parse_hour_range,
    parse_weekday,
    parse_weekday_range,
)

__all__ = [
    "BusinessHours",
    "BusinessHoursError",
    "ErrorKind",
    "InvalidBusinessHours",
    "InvalidFormat",
    "InvalidHour",
    "InvalidRangeFormat",
    "InvalidTimezone",
    "InvalidWeekday",
    "contains",
    "format_business_hours",
    "format_hour",
    "format_weekday",
    "parse_business_hours",
    "parse_hour",
    "parse_hour_range",
    "parse_weekday",
    "parse_weekday_range",
]
