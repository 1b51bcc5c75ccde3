"""
Business hours validation service.
Checks the configured schedule against the clock. Importing this module
reads BUSINESS_HOURS from settings; the parsing core never does.
"""
import logging
from dataclasses import dataclass
from datetime import datetime, timezone, tzinfo
from typing import Optional

from businesshours.core.config import settings
from businesshours.services.business.hours import (
    UTC,
    BusinessHours,
    local_weekday_and_hour,
    parse_business_hours,
)

logger = logging.getLogger(__name__)


@dataclass
class BusinessHoursValidationResult:
    """result of business hours validation."""
    is_open: bool
    reason: Optional[str] = None


class BusinessHoursService:
    """service for checking a configured schedule against the clock."""

    def __init__(self, schedule: BusinessHours):
        self.schedule = schedule

    @classmethod
    def from_text(cls, text: str) -> "BusinessHoursService":
        schedule = parse_business_hours(text)
        logger.info(f"Business hours configured: {schedule}")
        return cls(schedule)

    @property
    def timezone(self) -> tzinfo:
        return self.schedule.timezone or UTC

    def get_current_time(self) -> datetime:
        """get current time in business timezone."""
        return datetime.now(timezone.utc).astimezone(self.timezone)

    def is_open_now(self) -> BusinessHoursValidationResult:
        """check if business is currently open."""
        return self.is_open_at_time(self.get_current_time())

    def is_open_at_time(self, check_time: datetime) -> BusinessHoursValidationResult:
        """check if business is open at specific time."""
        weekday, hour = local_weekday_and_hour(self.schedule, check_time)

        if not self.schedule.contains_weekday(weekday):
            return BusinessHoursValidationResult(is_open=False, reason="closed_today")

        if not self.schedule.contains_hour(hour):
            return BusinessHoursValidationResult(is_open=False, reason="outside_hours")

        return BusinessHoursValidationResult(is_open=True)


# global instance
business_hours_service = BusinessHoursService.from_text(settings.BUSINESS_HOURS)


def validate_business_hours() -> BusinessHoursValidationResult:
    """convenience function to check current business hours."""
    return business_hours_service.is_open_now()


def is_open_now() -> bool:
    """check if the configured schedule is open at current time."""
    return validate_business_hours().is_open
