"""Calendar grid and date-key helpers for the schedule screen."""

import logging
from datetime import date, timedelta
from typing import Sequence

from danji_care.exceptions import InvalidMonthDayError
from danji_care.models import Customer
from danji_care.renewal import occurrence_in_year, parse_month_day

logger = logging.getLogger(__name__)


def date_key(day: date) -> str:
    """``YYYY-MM-DD`` key used by schedule events."""
    return day.strftime("%Y-%m-%d")


def start_of_week(day: date) -> date:
    """Sunday on or before ``day``."""
    return day - timedelta(days=(day.weekday() + 1) % 7)


def end_of_week(day: date) -> date:
    """Saturday on or after ``day``."""
    return start_of_week(day) + timedelta(days=6)


def month_grid(month: date) -> list[date]:
    """Days shown for ``month``: whole Sunday-first weeks covering it."""
    first = month.replace(day=1)
    next_first = (first + timedelta(days=32)).replace(day=1)
    last = next_first - timedelta(days=1)

    days = []
    day = start_of_week(first)
    end = end_of_week(last)
    while day <= end:
        days.append(day)
        day += timedelta(days=1)
    return days


def renewal_events_by_date(customers: Sequence[Customer], year: int) -> dict[str, list[str]]:
    """Apartment names keyed by the date their contract lapses in ``year``.

    Customers without a usable expiry date are left out.
    """
    events: dict[str, list[str]] = {}
    for customer in customers:
        if not customer.expiry_date:
            continue
        try:
            month, day = parse_month_day(customer.expiry_date)
        except InvalidMonthDayError:
            logger.debug("Ignoring expiry %r of %s", customer.expiry_date, customer.name)
            continue
        key = date_key(occurrence_in_year(month, day, year))
        events.setdefault(key, []).append(customer.name)
    return events
