"""Planner schedule: custom events merged with contract renewals."""

import logging
from dataclasses import dataclass, field
from datetime import date

from danji_care.calendar_grid import date_key, month_grid, renewal_events_by_date
from danji_care.exceptions import InvalidMonthDayError, ValidationError
from danji_care.models import ScheduleEvent, ScheduleEventColor
from danji_care.renewal import falls_on
from danji_care.store.repositories import CustomerRepository, ScheduleEventRepository, new_id

logger = logging.getLogger(__name__)

RENEWAL = "renewal"
CUSTOM = "custom"


@dataclass
class CalendarEntry:
    kind: str  # renewal | custom
    label: str
    event_id: str | None = None
    color: ScheduleEventColor | None = None


@dataclass
class CalendarDay:
    day: date
    in_month: bool
    is_weekend: bool
    is_today: bool
    has_renewal: bool
    custom_events: list[ScheduleEvent] = field(default_factory=list)


class ScheduleService:
    """Calendar screen operations."""

    def __init__(self, events: ScheduleEventRepository, customers: CustomerRepository) -> None:
        self.events = events
        self.customers = customers

    def list_events(self) -> list[ScheduleEvent]:
        return self.events.load()

    def add_event(
        self,
        day: date,
        title: str,
        color: ScheduleEventColor = ScheduleEventColor.GRAY,
    ) -> ScheduleEvent:
        title = title.strip()
        if not title:
            raise ValidationError("Event title is required")
        event = ScheduleEvent(
            event_id=new_id("ev"),
            date=date_key(day),
            title=title,
            color=ScheduleEventColor(color),
        )
        events = self.events.load()
        events.append(event)
        self.events.save(events)
        return event

    def remove_event(self, event_id: str) -> None:
        self.events.save([e for e in self.events.load() if e.event_id != event_id])

    def _custom_by_date(self) -> dict[str, list[ScheduleEvent]]:
        by_date: dict[str, list[ScheduleEvent]] = {}
        for event in self.events.load():
            by_date.setdefault(event.date, []).append(event)
        return by_date

    def entries_for(self, day: date) -> list[CalendarEntry]:
        """Renewals first, then the planner's own events."""
        key = date_key(day)
        renewals = renewal_events_by_date(self.customers.load(), day.year).get(key, [])
        entries = [CalendarEntry(RENEWAL, f"{name} 만기") for name in renewals]
        entries.extend(
            CalendarEntry(CUSTOM, e.title, event_id=e.event_id, color=e.color)
            for e in self._custom_by_date().get(key, [])
        )
        return entries

    def calendar(self, month: date, today: date | None = None) -> list[CalendarDay]:
        """Grid cells for ``month``; renewals placed in that month's year."""
        today = today or date.today()
        renewals = renewal_events_by_date(self.customers.load(), month.year)
        custom = self._custom_by_date()
        cells = []
        for day in month_grid(month):
            key = date_key(day)
            cells.append(
                CalendarDay(
                    day=day,
                    in_month=(day.year, day.month) == (month.year, month.month),
                    is_weekend=day.weekday() >= 5,
                    is_today=day == today,
                    has_renewal=bool(renewals.get(key)),
                    custom_events=custom.get(key, []),
                )
            )
        return cells

    def today_count(self, today: date | None = None) -> int:
        """Custom events today plus customers whose contract lapses today."""
        today = today or date.today()
        custom = len(self._custom_by_date().get(date_key(today), []))
        renewals = 0
        for customer in self.customers.load():
            if not customer.expiry_date:
                continue
            try:
                if falls_on(customer.expiry_date, today):
                    renewals += 1
            except InvalidMonthDayError:
                logger.debug("Ignoring expiry %r of %s", customer.expiry_date, customer.name)
        return custom + renewals
