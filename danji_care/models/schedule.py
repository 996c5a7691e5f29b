"""Planner calendar note."""

from dataclasses import dataclass
from typing import ClassVar

from danji_care.models.enums import ScheduleEventColor


@dataclass
class ScheduleEvent:
    """Custom calendar entry created by the planner."""

    ID_FIELD: ClassVar[str] = "event_id"

    event_id: str
    date: str  # YYYY-MM-DD
    title: str
    color: ScheduleEventColor = ScheduleEventColor.GRAY
