from datetime import datetime, timezone

from fastapi import APIRouter, HTTPException, Query

from businesshours.core.errors import BusinessHoursError
from businesshours.schemas.business_hours import (
    BusinessHoursCheckRequest,
    BusinessHoursCheckResponse,
    BusinessHoursOut,
    BusinessHoursStatus,
)
from businesshours.services.business.hours import parse_business_hours, timezone_name
from businesshours.services.business.service import (
    BusinessHoursService,
    business_hours_service,
)

router = APIRouter(prefix="/business-hours", tags=["business-hours"])


@router.get("/status", response_model=BusinessHoursStatus)
def get_business_status():
    """get current status of the configured business hours."""
    current_time = business_hours_service.get_current_time()
    validation_result = business_hours_service.is_open_at_time(current_time)

    return BusinessHoursStatus(
        is_open=validation_result.is_open,
        current_time=current_time.strftime('%Y-%m-%d %H:%M:%S %Z'),
        schedule=str(business_hours_service.schedule),
        reason=validation_result.reason,
    )


@router.post("/check", response_model=BusinessHoursCheckResponse)
def check_business_hours(payload: BusinessHoursCheckRequest):
    """check a caller supplied schedule at a given time (now if omitted)."""
    at = payload.at or datetime.now(timezone.utc)
    result = BusinessHoursService(payload.schedule).is_open_at_time(at)

    return BusinessHoursCheckResponse(
        schedule=str(payload.schedule),
        at=at,
        is_open=result.is_open,
        reason=result.reason,
    )


@router.get("/parse", response_model=BusinessHoursOut)
def parse_schedule(text: str = Query(..., description="Business hours text, e.g. 'Mon-Fri 09:00-17:00'")):
    """parse schedule text into its structured and canonical form."""
    try:
        schedule = parse_business_hours(text)
    except BusinessHoursError as e:
        raise HTTPException(status_code=400, detail=e.to_dict())

    return BusinessHoursOut(
        canonical=str(schedule),
        start_day=schedule.start_day,
        end_day=schedule.end_day,
        start_hour=schedule.start_hour,
        end_hour=schedule.end_hour,
        timezone=timezone_name(schedule.timezone) if schedule.timezone else None,
    )
