from typing import Annotated, Any, Optional
from datetime import datetime
from pydantic import BaseModel, Field, PlainSerializer, PlainValidator, WithJsonSchema

from businesshours.services.business.hours import BusinessHours, parse_business_hours


def _validate_business_hours(v: Any) -> BusinessHours:
    if isinstance(v, BusinessHours):
        return v
    if isinstance(v, str):
        return parse_business_hours(v)
    raise ValueError("Business hours must be a string like 'Mon-Fri 09:00-17:00 Europe/Berlin'")


# serialized as the canonical string, parsed back through the same parser
BusinessHoursField = Annotated[
    BusinessHours,
    PlainValidator(_validate_business_hours),
    PlainSerializer(lambda v: str(v), return_type=str),
    WithJsonSchema({"type": "string", "examples": ["Mon-Fri 09:00-17:00 Europe/Berlin"]}),
]


class BusinessHoursCheckRequest(BaseModel):
    """schema for checking a schedule at a point in time."""
    schedule: BusinessHoursField = Field(..., description="Business hours, e.g. 'Mon-Fri 09:00-17:00 Europe/Berlin'")
    at: Optional[datetime] = Field(None, description="Time to check, defaults to now")


class BusinessHoursCheckResponse(BaseModel):
    schedule: str
    at: datetime
    is_open: bool
    reason: Optional[str] = None


class BusinessHoursStatus(BaseModel):
    """schema for business hours status response."""
    is_open: bool = Field(..., description="Whether the business is currently open")
    current_time: str = Field(..., description="Current time in business timezone")
    schedule: str = Field(..., description="Configured business hours in canonical form")
    reason: Optional[str] = Field(None, description="Reason if closed")


class BusinessHoursOut(BaseModel):
    """structured form of a parsed schedule."""
    canonical: str
    start_day: int = Field(..., ge=0, le=6)
    end_day: int
    start_hour: int = Field(..., ge=0, le=1440)
    end_hour: int
    timezone: Optional[str] = None
