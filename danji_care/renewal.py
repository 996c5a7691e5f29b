"""Renewal-window classification for recurring ``MM-DD`` expiry dates.

Insurance contracts lapse on the same month/day every year. Given a
reference day, the next occurrence is this year's date, or next year's
when this year's has already passed. A renewal is urgent when that
occurrence falls within the look-ahead horizon (inclusive).
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta

from danji_care.exceptions import InvalidMonthDayError

DEFAULT_HORIZON_DAYS = 60


@dataclass(frozen=True)
class RenewalWindow:
    """Next renewal of a contract relative to a reference day."""

    renewal_date: date
    within_horizon: bool
    days_left: int


def parse_month_day(value: str) -> tuple[int, int]:
    """Parse ``"MM-DD"`` into ``(month, day)``.

    Days are checked against 1-31 only; month length is not validated.

    Raises
    ------
    InvalidMonthDayError
        If the value is not two numeric parts in range.
    """
    parts = value.strip().split("-") if isinstance(value, str) else []
    if len(parts) != 2:
        raise InvalidMonthDayError(f"Expected MM-DD, got {value!r}")
    try:
        month, day = int(parts[0]), int(parts[1])
    except ValueError as exc:
        raise InvalidMonthDayError(f"Non-numeric month/day in {value!r}") from exc
    if not 1 <= month <= 12 or not 1 <= day <= 31:
        raise InvalidMonthDayError(f"Month/day out of range in {value!r}")
    return month, day


def occurrence_in_year(month: int, day: int, year: int) -> date:
    """Concrete date of ``month``/``day`` in ``year``.

    Days past the end of the month spill into the next month, so
    ``02-30`` is March 1st (leap year) or March 2nd.
    """
    return date(year, month, 1) + timedelta(days=day - 1)


def _as_date(today: date | datetime | None) -> date:
    if today is None:
        return date.today()
    if isinstance(today, datetime):
        return today.date()
    return today


def next_renewal_date(month_day: str, today: date | datetime | None = None) -> date:
    """Next occurrence of ``month_day`` on or after ``today``."""
    ref = _as_date(today)
    month, day = parse_month_day(month_day)
    renewal = occurrence_in_year(month, day, ref.year)
    if renewal < ref:
        renewal = occurrence_in_year(month, day, ref.year + 1)
    return renewal


def is_within_horizon(
    renewal: date,
    today: date | datetime | None = None,
    horizon_days: int = DEFAULT_HORIZON_DAYS,
) -> bool:
    """Whether ``renewal`` is no later than ``today + horizon_days``."""
    ref = _as_date(today)
    return renewal <= ref + timedelta(days=horizon_days)


def classify_renewal(
    month_day: str,
    today: date | datetime | None = None,
    horizon_days: int = DEFAULT_HORIZON_DAYS,
) -> RenewalWindow:
    """Compute the next renewal and whether it is inside the horizon."""
    ref = _as_date(today)
    renewal = next_renewal_date(month_day, ref)
    return RenewalWindow(
        renewal_date=renewal,
        within_horizon=is_within_horizon(renewal, ref, horizon_days),
        days_left=(renewal - ref).days,
    )


def falls_on(month_day: str, day: date) -> bool:
    """Whether the raw month/day equals ``day``'s month and day."""
    month, dom = parse_month_day(month_day)
    return month == day.month and dom == day.day
