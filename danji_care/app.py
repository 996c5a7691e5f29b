"""Wire repositories and services from configuration."""

from dataclasses import dataclass

from danji_care.config import DanjiCareConfig
from danji_care.geo.directory import GeoDirectory
from danji_care.services import (
    ClaimsService,
    CustomerService,
    DashboardService,
    IntakeService,
    ScheduleService,
)
from danji_care.storage.backends import StorageBackend
from danji_care.store.repositories import (
    AccidentRepository,
    ActivityRepository,
    CustomerRepository,
    ScheduleEventRepository,
)
from danji_care.weather import RandomWeatherProvider, WeatherProvider


@dataclass
class Repositories:
    customers: CustomerRepository
    accidents: AccidentRepository
    events: ScheduleEventRepository
    activities: ActivityRepository

    @classmethod
    def on(cls, storage: StorageBackend) -> "Repositories":
        return cls(
            customers=CustomerRepository(storage),
            accidents=AccidentRepository(storage),
            events=ScheduleEventRepository(storage),
            activities=ActivityRepository(storage),
        )


@dataclass
class DanjiCareApp:
    """Every service of the client portal and planner dashboard."""

    config: DanjiCareConfig
    repositories: Repositories
    directory: GeoDirectory
    intake: IntakeService
    claims: ClaimsService
    customers: CustomerService
    schedule: ScheduleService
    dashboard: DashboardService

    @classmethod
    def create(
        cls,
        config: DanjiCareConfig | None = None,
        storage: StorageBackend | None = None,
        directory: GeoDirectory | None = None,
        weather: WeatherProvider | None = None,
    ) -> "DanjiCareApp":
        config = config or DanjiCareConfig()
        repos = Repositories.on(storage or config.storage.create_backend())
        directory = directory or GeoDirectory()

        claims = ClaimsService(
            repos.accidents,
            repos.customers,
            directory,
            page_size=config.intake.request_page_size,
        )
        schedule = ScheduleService(repos.events, repos.customers)
        dashboard = DashboardService(
            claims,
            schedule,
            repos.customers,
            directory,
            weather or RandomWeatherProvider(config.seed),
            config.map,
        )
        return cls(
            config=config,
            repositories=repos,
            directory=directory,
            intake=IntakeService(repos.accidents, config.intake.default_apartment_name),
            claims=claims,
            customers=CustomerService(repos.customers, repos.activities, repos.accidents),
            schedule=schedule,
            dashboard=dashboard,
        )
