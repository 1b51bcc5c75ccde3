"""
Business logic services package.

This package contains the business hours core:
- Weekday and hour token parsing
- Weekday and hour range parsing
- The business hours value, its canonical form and time containment

The settings-driven service lives in .service and is not imported here.
"""

from .codecs import (
    format_hour,
    format_weekday,
    parse_hour,
    parse_weekday,
)
from .ranges import parse_hour_range, parse_weekday_range
from .hours import (
    BusinessHours,
    contains,
    format_business_hours,
    parse_business_hours,
    resolve_timezone
)

__all__ = [
    'BusinessHours',
    'contains',
    'format_business_hours',
    'format_hour',
    'format_weekday',
    'parse_business_hours',
    'parse_hour',
    'parse_hour_range',
    'parse_weekday',
    'parse_weekday_range',
    'resolve_timezone'
]
