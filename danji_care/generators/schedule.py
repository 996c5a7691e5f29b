"""Schedule event generator for demo calendars."""

from __future__ import annotations

import random
from datetime import date, timedelta
from typing import Iterator

from danji_care.calendar_grid import date_key
from danji_care.generators.base import BaseGenerator
from danji_care.models import ScheduleEvent, ScheduleEventColor
from danji_care.store.repositories import new_id


class ScheduleEventGenerator(BaseGenerator):
    """Generate planner calendar notes around a reference day."""

    TITLES = ["단지 방문", "견적서 전달", "소장님 미팅", "갱신 안내 전화", "현장 점검"]

    def generate(self, around: date, apartment_name: str, spread_days: int = 14) -> ScheduleEvent:
        offset = random.randint(-spread_days, spread_days)
        return ScheduleEvent(
            event_id=new_id("ev"),
            date=date_key(around + timedelta(days=offset)),
            title=f"{apartment_name} {random.choice(self.TITLES)}",
            color=random.choice(list(ScheduleEventColor)),
        )

    def generate_batch(self, around: date, apartment_names: list[str], count: int) -> Iterator[ScheduleEvent]:
        for _ in range(count):
            yield self.generate(around, random.choice(apartment_names))
