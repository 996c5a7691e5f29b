"""Planner dashboard and map pages."""

import logging
from dataclasses import dataclass
from datetime import date

from danji_care.config import MapConfig
from danji_care.geo.directory import GeoDirectory
from danji_care.geo.location import GeolocationState
from danji_care.models import Accident, AccidentStatus
from danji_care.pins import (
    MapView,
    RenewalDue,
    build_map_view,
    coverage_pins,
    prospecting_pins,
    renewals_within_horizon,
)
from danji_care.services.claims import ClaimsService
from danji_care.services.schedule import ScheduleService
from danji_care.store.repositories import CustomerRepository
from danji_care.weather import LOCATION_LOADING, WeatherProvider, encouragement_message, location_label

logger = logging.getLogger(__name__)


@dataclass
class DashboardSummary:
    location_label: str
    encouragement: str
    status_counts: dict[AccidentStatus, int]
    pending_accident_count: int
    today_schedule_count: int
    renewals_due: list[RenewalDue]
    prospecting_map: MapView
    recent_requests: list[Accident]

    @property
    def today_workload(self) -> int:
        """Open requests plus today's schedule entries."""
        return (
            self.status_counts[AccidentStatus.PENDING]
            + self.status_counts[AccidentStatus.PROCESSING]
            + self.today_schedule_count
        )


class DashboardService:
    """Derived views for the planner's landing page and map page."""

    def __init__(
        self,
        claims: ClaimsService,
        schedule: ScheduleService,
        customers: CustomerRepository,
        directory: GeoDirectory,
        weather: WeatherProvider,
        map_config: MapConfig | None = None,
    ) -> None:
        self.claims = claims
        self.schedule = schedule
        self.customers = customers
        self.directory = directory
        self.weather = weather
        self.map_config = map_config or MapConfig()

    def coverage_map(self, location: GeolocationState, today: date | None = None) -> MapView:
        """Contracted complexes near the planner, amber when renewal is near."""
        pins = coverage_pins(
            self.directory,
            self.customers.load(),
            today=today,
            center=location.center,
            horizon_days=self.map_config.horizon_days,
            radius_m=self.map_config.radius_m,
        )
        return build_map_view(pins, location.center or self.map_config.center, self.map_config.zoom)

    def prospecting_map(self, location: GeolocationState) -> MapView:
        pins = prospecting_pins(
            self.directory,
            self.customers.load(),
            center=location.center,
            radius_m=self.map_config.radius_m,
        )
        return build_map_view(pins, location.center or self.map_config.center, self.map_config.zoom)

    def summary(self, location: GeolocationState, today: date | None = None) -> DashboardSummary:
        today = today or date.today()
        label = LOCATION_LOADING if location.loading else location_label(location.lat, location.lng)
        summary = DashboardSummary(
            location_label=label,
            encouragement=encouragement_message(self.weather),
            status_counts=self.claims.status_counts(),
            pending_accident_count=self.claims.pending_accident_count(),
            today_schedule_count=self.schedule.today_count(today),
            renewals_due=renewals_within_horizon(
                self.directory,
                self.customers.load(),
                today=today,
                horizon_days=self.map_config.horizon_days,
            ),
            prospecting_map=self.prospecting_map(location),
            recent_requests=self.claims.page(0).items,
        )
        logger.debug(
            "Dashboard for %s: %d pending, %d due",
            today.isoformat(),
            summary.status_counts[AccidentStatus.PENDING],
            len(summary.renewals_due),
        )
        return summary
