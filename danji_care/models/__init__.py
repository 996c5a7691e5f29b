"""Domain models for danji-care."""

from danji_care.models.accident import Accident
from danji_care.models.activity import CustomerActivity
from danji_care.models.apartment import ApartmentGeoRecord, GeoPoint
from danji_care.models.customer import Customer
from danji_care.models.enums import (
    ACCIDENT_STATUS_LABEL,
    STATUS_LABEL,
    STATUS_ORDER,
    AccidentStatus,
    ActivityType,
    CustomerStatus,
    PinColor,
    RequestKind,
    ScheduleEventColor,
    Weather,
)
from danji_care.models.schedule import ScheduleEvent

__all__ = [
    "ACCIDENT_STATUS_LABEL",
    "Accident",
    "AccidentStatus",
    "ActivityType",
    "ApartmentGeoRecord",
    "Customer",
    "CustomerActivity",
    "CustomerStatus",
    "GeoPoint",
    "PinColor",
    "RequestKind",
    "STATUS_LABEL",
    "STATUS_ORDER",
    "ScheduleEvent",
    "ScheduleEventColor",
    "Weather",
]
