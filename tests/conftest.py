"""Pytest configuration and fixtures."""

from datetime import date

import pytest

from danji_care.app import DanjiCareApp
from danji_care.geo.directory import GeoDirectory
from danji_care.models import ApartmentGeoRecord, Customer, CustomerStatus, PinColor, Weather
from danji_care.storage import MemoryStorage
from danji_care.store import (
    AccidentRepository,
    ActivityRepository,
    CustomerRepository,
    ScheduleEventRepository,
)


class FixedWeather:
    """Weather provider that always reports the same condition."""

    def __init__(self, weather: Weather = Weather.CLEAR) -> None:
        self.weather = weather

    def current(self) -> Weather:
        return self.weather


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def today() -> date:
    """Reference day used by renewal and calendar tests."""
    return date(2024, 1, 15)


@pytest.fixture
def storage() -> MemoryStorage:
    """Empty in-memory storage."""
    return MemoryStorage()


@pytest.fixture
def customer_repo(storage: MemoryStorage) -> CustomerRepository:
    return CustomerRepository(storage)


@pytest.fixture
def accident_repo(storage: MemoryStorage) -> AccidentRepository:
    return AccidentRepository(storage)


@pytest.fixture
def event_repo(storage: MemoryStorage) -> ScheduleEventRepository:
    return ScheduleEventRepository(storage)


@pytest.fixture
def activity_repo(storage: MemoryStorage) -> ActivityRepository:
    return ActivityRepository(storage)


@pytest.fixture
def directory() -> GeoDirectory:
    """The bundled demo apartment directory."""
    return GeoDirectory()


@pytest.fixture
def sample_tower() -> ApartmentGeoRecord:
    """A single directory entry with a relaxed static tier."""
    return ApartmentGeoRecord(
        apartment_id="apt-sample",
        name="Sample Tower",
        lat=37.4965,
        lng=127.0530,
        renewal_date="05-01",
        business_id="111-22-33333",
        pin=PinColor.GRAY,
        label="만기 여유",
    )


@pytest.fixture
def sample_customer() -> Customer:
    """Contracted customer for Sample Tower, joined by name."""
    return Customer(
        customer_id="cust-test-001",
        name="Sample Tower",
        manager="김소장",
        phone="02-000-0000",
        status=CustomerStatus.ACTIVE,
        expiry_date="02-10",
    )


@pytest.fixture
def app(storage: MemoryStorage, directory: GeoDirectory) -> DanjiCareApp:
    """Fully wired application over in-memory storage."""
    return DanjiCareApp.create(storage=storage, directory=directory, weather=FixedWeather())


@pytest.fixture
def fixed_weather() -> type[FixedWeather]:
    """Factory for constant weather providers."""
    return FixedWeather
