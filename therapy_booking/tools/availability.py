"""
Bookable calendar window and offered appointment times.

Sessions can be booked from today up to a configurable number of months
ahead, at one of a fixed list of display-label time slots. In production
this would be backed by the practice's scheduling system.
"""

import calendar
import logging
from datetime import date
from typing import Optional

from therapy_booking.config import settings

logger = logging.getLogger(__name__)


def get_time_slots() -> list[str]:
    """Return the time slot labels offered to the visitor, in display order."""
    return list(settings.scheduling.time_slots)


def is_offered_time(label: str) -> bool:
    return label in settings.scheduling.time_slots


def _add_months(value: date, months: int) -> date:
    """Shift a date by whole months, clamping the day to the target month's length."""
    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def get_bookable_range(today: Optional[date] = None) -> tuple[date, date]:
    """Return the first and last dates (inclusive) a session may be booked on."""
    start = today or date.today()
    end = _add_months(start, settings.scheduling.booking_window_months)
    return start, end


def is_bookable_date(value: date, today: Optional[date] = None) -> bool:
    """Check a date falls inside the bookable window."""
    start, end = get_bookable_range(today)
    bookable = start <= value <= end
    if not bookable:
        logger.debug("Date %s outside bookable range %s..%s", value, start, end)
    return bookable
