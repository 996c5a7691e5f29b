"""Repositories for the local data stores."""

from danji_care.store.repositories import (
    ACCIDENTS_KEY,
    ACTIVITIES_KEY,
    CUSTOMERS_KEY,
    SCHEDULE_EVENTS_KEY,
    AccidentRepository,
    ActivityRepository,
    CustomerRepository,
    JsonListRepository,
    ScheduleEventRepository,
    new_id,
)

__all__ = [
    "ACCIDENTS_KEY",
    "ACTIVITIES_KEY",
    "CUSTOMERS_KEY",
    "SCHEDULE_EVENTS_KEY",
    "AccidentRepository",
    "ActivityRepository",
    "CustomerRepository",
    "JsonListRepository",
    "ScheduleEventRepository",
    "new_id",
]
