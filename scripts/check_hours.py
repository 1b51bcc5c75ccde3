#!/usr/bin/env python3
"""
Business hours check script.

Parses a business hours string, prints its canonical form and whether the
given time (default: now) falls inside it.

Usage:
    python scripts/check_hours.py "Mon-Fri 09:00-17:00 Europe/Berlin" [--at 2006-01-02T13:00:00+00:00]

Exit codes: 0 open, 1 closed, 2 invalid input.
"""

import sys
import argparse
from datetime import datetime, timezone
from pathlib import Path

# add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from businesshours.core.config import settings
from businesshours.core.errors import BusinessHoursError
from businesshours.services.business.hours import parse_business_hours
from businesshours.services.business.service import BusinessHoursService
import logging

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Check a time against business hours")
    parser.add_argument("schedule", help="Business hours, e.g. 'Mon-Fri 09:00-17:00 Europe/Berlin'")
    parser.add_argument("--at", help="ISO-8601 time to check (default: now)")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        schedule = parse_business_hours(args.schedule)
    except BusinessHoursError as e:
        logger.error(f"Invalid business hours: {e}")
        return 2

    if args.at:
        try:
            at = datetime.fromisoformat(args.at)
        except ValueError:
            logger.error(f"Invalid --at time {args.at!r}, use ISO-8601")
            return 2
    else:
        at = datetime.now(timezone.utc)

    result = BusinessHoursService(schedule).is_open_at_time(at)
    status = "OPEN" if result.is_open else f"CLOSED ({result.reason})"
    print(f"{schedule}: {status} at {at.isoformat()}")
    return 0 if result.is_open else 1


if __name__ == "__main__":
    raise SystemExit(main())
