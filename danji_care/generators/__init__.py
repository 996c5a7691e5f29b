"""Faker-backed demo data generators."""

from danji_care.generators.accident import AccidentGenerator
from danji_care.generators.customer import CustomerGenerator
from danji_care.generators.schedule import ScheduleEventGenerator

__all__ = [
    "AccidentGenerator",
    "CustomerGenerator",
    "ScheduleEventGenerator",
]
