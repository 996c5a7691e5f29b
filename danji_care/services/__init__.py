"""Services invoked by the client and planner screens."""

from danji_care.services.claims import ClaimsService, RequestPage
from danji_care.services.customers import CustomerService, PipelineMatches
from danji_care.services.dashboard import DashboardService, DashboardSummary
from danji_care.services.intake import INSURANCE_PRODUCTS, IntakeService
from danji_care.services.schedule import CalendarDay, CalendarEntry, ScheduleService

__all__ = [
    "INSURANCE_PRODUCTS",
    "CalendarDay",
    "CalendarEntry",
    "ClaimsService",
    "CustomerService",
    "DashboardService",
    "DashboardSummary",
    "IntakeService",
    "PipelineMatches",
    "RequestPage",
    "ScheduleService",
]
