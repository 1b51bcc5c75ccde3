"""
Error types raised while parsing business hours.

Every failure carries the offending substring and, when it wraps another
failure, the underlying cause. Errors are matched by kind rather than by
class identity, so callers can ask whether an InvalidBusinessHours was
caused by a bad hour without unpacking it themselves.
"""
from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    INVALID_WEEKDAY = "invalid_weekday"
    INVALID_HOUR = "invalid_hour"
    INVALID_RANGE_FORMAT = "invalid_range_format"
    INVALID_TIMEZONE = "invalid_timezone"
    INVALID_FORMAT = "invalid_format"
    INVALID_BUSINESS_HOURS = "invalid_business_hours"


class BusinessHoursError(ValueError):
    """base error for everything the parser rejects."""

    kind: ErrorKind = ErrorKind.INVALID_BUSINESS_HOURS
    message: str = "couldn't parse business hours"

    def __init__(self, value: str, cause: Optional[BaseException] = None, detail: Optional[str] = None):
        self.value = value
        self.cause = cause
        self.detail = detail
        super().__init__(str(self))

    def __str__(self) -> str:
        text = f"{self.message}: {self.value!r}"
        if self.detail:
            text = f"{text} {self.detail}"
        if self.cause is not None:
            text = f"{text}: {self.cause}"
        return text

    def matches(self, kind: ErrorKind) -> bool:
        """check this error and its wrapped causes for the given kind."""
        err: Optional[BaseException] = self
        while err is not None:
            if isinstance(err, BusinessHoursError):
                if err.kind == kind:
                    return True
                err = err.cause
            else:
                return False
        return False

    def to_dict(self) -> dict:
        return {"kind": self.kind.value, "value": self.value, "message": str(self)}


class InvalidWeekday(BusinessHoursError):
    kind = ErrorKind.INVALID_WEEKDAY
    message = "couldn't parse weekday"


class InvalidHour(BusinessHoursError):
    kind = ErrorKind.INVALID_HOUR
    message = "couldn't parse hour"


class InvalidRangeFormat(BusinessHoursError):
    kind = ErrorKind.INVALID_RANGE_FORMAT
    message = "invalid range format"


class InvalidTimezone(BusinessHoursError):
    kind = ErrorKind.INVALID_TIMEZONE
    message = "unknown timezone"


class InvalidFormat(BusinessHoursError):
    kind = ErrorKind.INVALID_FORMAT
    message = "invalid format"


class InvalidBusinessHours(BusinessHoursError):
    kind = ErrorKind.INVALID_BUSINESS_HOURS
    message = "couldn't parse business hours"
