import os
import subprocess
import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

from businesshours.core.config import settings
from businesshours.core.errors import InvalidBusinessHours
from businesshours.services.business import service as hours_service
from businesshours.services.business.hours import BusinessHours, parse_business_hours
from businesshours.services.business.service import BusinessHoursService, BusinessHoursValidationResult

PROJECT_ROOT = Path(__file__).parent.parent


def _t(s: str) -> datetime:
    return datetime.strptime(s, "%Y-%m-%d %H:%M").replace(tzinfo=timezone.utc)


@pytest.fixture
def berlin_service():
    return BusinessHoursService.from_text("Mon-Fri 09:00-17:00 Europe/Berlin")


@pytest.mark.parametrize("at, want", [
    ("2006-01-02 12:00", BusinessHoursValidationResult(is_open=True)),
    ("2006-01-01 12:00", BusinessHoursValidationResult(is_open=False, reason="closed_today")),
    ("2006-01-02 05:00", BusinessHoursValidationResult(is_open=False, reason="outside_hours")),
    ("2006-01-02 16:00", BusinessHoursValidationResult(is_open=False, reason="outside_hours")),
])
def test_is_open_at_time(berlin_service, at, want):
    assert berlin_service.is_open_at_time(_t(at)) == want


@pytest.mark.parametrize("at", [
    "2006-01-01 23:30", "2006-01-02 08:00", "2006-01-03 00:30", "2006-01-06 23:59", "2006-01-07 00:30",
])
def test_is_open_at_time_agrees_with_contains(at):
    schedule = parse_business_hours("Mon-Fri 17:00-01:00 Europe/Berlin")
    svc = BusinessHoursService(schedule)
    assert svc.is_open_at_time(_t(at)).is_open is schedule.contains(_t(at))


def test_from_text_rejects_invalid_schedule():
    with pytest.raises(InvalidBusinessHours):
        BusinessHoursService.from_text("Mon-Fri 9-5")


def test_get_current_time_is_in_business_timezone(berlin_service):
    now = berlin_service.get_current_time()
    assert now.tzinfo is berlin_service.schedule.timezone


def test_missing_timezone_falls_back_to_utc():
    svc = BusinessHoursService(BusinessHours(0, 6, 0, 1440))
    assert svc.get_current_time().utcoffset().total_seconds() == 0
    assert svc.is_open_now().is_open


def test_global_service_uses_configured_schedule():
    assert hours_service.business_hours_service.schedule == parse_business_hours(settings.BUSINESS_HOURS)


def test_convenience_functions_use_global_service(monkeypatch):
    monkeypatch.setattr(hours_service, "business_hours_service", BusinessHoursService.from_text("Sun-Sat 00:00-24:00"))
    assert hours_service.validate_business_hours() == BusinessHoursValidationResult(is_open=True)
    assert hours_service.is_open_now() is True

    monkeypatch.setattr(hours_service, "business_hours_service", BusinessHoursService.from_text("Sun-Sat 00:00-00:00"))
    assert hours_service.validate_business_hours() == BusinessHoursValidationResult(is_open=False, reason="outside_hours")
    assert hours_service.is_open_now() is False


def test_core_imports_with_malformed_business_hours_setting():
    env = dict(os.environ, BUSINESS_HOURS="Mon-Fri 9-5", PYTHONPATH=str(PROJECT_ROOT))
    code = (
        "import businesshours\n"
        "assert businesshours.parse_weekday('Mon') == 1\n"
        "assert str(businesshours.parse_business_hours('Mon 09:00-17:00')) == 'Mon 09:00-17:00 UTC'\n"
    )
    result = subprocess.run([sys.executable, "-c", code], cwd=PROJECT_ROOT, env=env, capture_output=True, text=True)
    assert result.returncode == 0, result.stderr
