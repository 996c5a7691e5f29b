"""Tests for the planner dashboard, weather messages and app wiring."""

from datetime import date

import pytest

from danji_care.app import DanjiCareApp
from danji_care.config import DanjiCareConfig, MapConfig, StorageConfig
from danji_care.geo.directory import HUNTER_MAP_CENTER
from danji_care.geo.location import GeolocationState
from danji_care.models import AccidentStatus, CustomerStatus, GeoPoint, PinColor, Weather
from danji_care.weather import (
    LOCATION_LOADING,
    LOCATION_NEARBY,
    WEATHER_MESSAGES,
    RandomWeatherProvider,
    encouragement_message,
    location_label,
    split_bold,
)

EUNMA = GeolocationState(lat=37.4993, lng=127.0626, loading=False)
BUSAN = GeolocationState(lat=35.1796, lng=129.0756, loading=False)


class TestSummary:
    """Tests for DashboardService.summary."""

    def test_loading_location(self, app: DanjiCareApp) -> None:
        summary = app.dashboard.summary(GeolocationState(), today=date(2024, 3, 1))

        assert summary.location_label == LOCATION_LOADING
        assert summary.prospecting_map.center == HUNTER_MAP_CENTER
        assert len(summary.prospecting_map.markers) == 14

    def test_known_location(self, app: DanjiCareApp) -> None:
        summary = app.dashboard.summary(EUNMA, today=date(2024, 3, 1))

        assert summary.location_label == LOCATION_NEARBY
        assert summary.prospecting_map.center == EUNMA.center

    def test_denied_location_keeps_every_pin(self, app: DanjiCareApp) -> None:
        """Test a failed position falls back to the unfiltered map."""
        state = GeolocationState(loading=False, error="denied")
        summary = app.dashboard.summary(state, today=date(2024, 3, 1))

        assert summary.location_label == LOCATION_LOADING
        assert len(summary.prospecting_map.markers) == 14

    def test_configured_center_without_position(self, storage, fixed_weather: type) -> None:
        config = DanjiCareConfig(map=MapConfig(center_lat=35.0, center_lng=129.0))
        app = DanjiCareApp.create(config=config, storage=storage, weather=fixed_weather())
        state = GeolocationState(loading=False, error="denied")

        assert app.dashboard.prospecting_map(state).center == GeoPoint(35.0, 129.0)
        assert app.dashboard.coverage_map(state).center == GeoPoint(35.0, 129.0)
        assert app.dashboard.prospecting_map(EUNMA).center == EUNMA.center

    def test_counts(self, app: DanjiCareApp) -> None:
        app.intake.submit_accident_report(2024, 3, 1, 9, 0, "누수")
        app.intake.request_contact()
        app.schedule.add_event(date(2024, 3, 15), "단지 방문")

        summary = app.dashboard.summary(EUNMA, today=date(2024, 3, 15))

        assert summary.status_counts[AccidentStatus.PENDING] == 2
        assert summary.pending_accident_count == 1
        assert summary.today_schedule_count == 2
        assert len(summary.recent_requests) == 2

    def test_today_workload(self, app: DanjiCareApp) -> None:
        """Test open requests and today's entries add up, completed ones do not."""
        accident = app.intake.submit_accident_report(2024, 3, 1, 9, 0, "누수")
        contact = app.intake.request_contact()
        app.intake.request_contact()
        app.claims.update_status(accident.accident_id, AccidentStatus.PROCESSING)
        app.claims.update_status(contact.accident_id, AccidentStatus.COMPLETED)
        app.schedule.add_event(date(2024, 3, 15), "단지 방문")

        summary = app.dashboard.summary(EUNMA, today=date(2024, 3, 15))

        assert summary.today_schedule_count == 2
        assert summary.today_workload == 4

    def test_recent_requests_first_page(self, app: DanjiCareApp) -> None:
        for _ in range(7):
            app.intake.request_contact()

        assert len(app.dashboard.summary(EUNMA).recent_requests) == 5

    def test_renewals_due(self, app: DanjiCareApp) -> None:
        """Test renewals are listed regardless of the planner's position."""
        summary = app.dashboard.summary(BUSAN, today=date(2024, 3, 1))

        assert [d.name for d in summary.renewals_due] == ["대치자이"]
        assert summary.prospecting_map.markers == []

    def test_encouragement(self, app: DanjiCareApp) -> None:
        summary = app.dashboard.summary(EUNMA)

        assert summary.encouragement == WEATHER_MESSAGES[Weather.CLEAR]


class TestMaps:
    """Tests for the map page."""

    def test_coverage_map(self, app: DanjiCareApp) -> None:
        view = app.dashboard.coverage_map(GeolocationState(), today=date(2024, 3, 1))
        pins = {m.name: m.pin for m in view.markers}

        assert pins == {
            "대치자이": PinColor.YELLOW,
            "역삼푸르지오": PinColor.GREEN,
            "테헤란한신": PinColor.GREEN,
            "선릉삼성": PinColor.GREEN,
        }

    def test_coverage_map_geofenced(self, app: DanjiCareApp) -> None:
        assert app.dashboard.coverage_map(BUSAN, today=date(2024, 3, 1)).markers == []

    def test_coverage_map_follows_pipeline(self, app: DanjiCareApp) -> None:
        """Test moving a customer out of active removes its pin."""
        app.customers.move_customer("2", CustomerStatus.PROSPECT)

        names = [m.name for m in app.dashboard.coverage_map(GeolocationState(), today=date(2024, 3, 1)).markers]
        assert "대치자이" not in names

    def test_prospecting_map(self, app: DanjiCareApp) -> None:
        view = app.dashboard.prospecting_map(EUNMA)
        pins = {m.name: m.pin for m in view.markers}

        assert pins["대치자이"] == PinColor.GREEN
        assert pins["은마아파트"] == PinColor.RED
        assert view.zoom == 5


class TestWeather:
    """Tests for weather-based encouragement."""

    def test_message_per_condition(self, fixed_weather: type) -> None:
        assert set(WEATHER_MESSAGES) == set(Weather)
        for weather in Weather:
            assert encouragement_message(fixed_weather(weather)) == WEATHER_MESSAGES[weather]

    def test_random_provider_seeded(self) -> None:
        first = RandomWeatherProvider(seed=7)
        second = RandomWeatherProvider(seed=7)

        draws = [first.current() for _ in range(20)]
        assert draws == [second.current() for _ in range(20)]
        assert set(draws) <= set(Weather)

    def test_split_bold(self) -> None:
        assert split_bold("오늘은 **방문하기 좋은** 날") == [
            ("오늘은 ", False),
            ("방문하기 좋은", True),
            (" 날", False),
        ]

    def test_split_bold_edges(self) -> None:
        assert split_bold("**전부 굵게**") == [("전부 굵게", True)]
        assert split_bold("plain") == [("plain", False)]

    def test_location_label(self) -> None:
        assert location_label(None, None) == LOCATION_LOADING
        assert location_label(37.5, None) == LOCATION_LOADING
        assert location_label(37.5, 127.0) == LOCATION_NEARBY


class TestAppWiring:
    """Tests for DanjiCareApp.create."""

    def test_shared_storage(self, app: DanjiCareApp) -> None:
        """Test intake writes are visible to the claims desk."""
        request = app.intake.request_contact()

        assert app.claims.get(request.accident_id) == request

    def test_page_size_from_config(self, storage, fixed_weather: type) -> None:
        config = DanjiCareConfig()
        config.intake.request_page_size = 2
        app = DanjiCareApp.create(config=config, storage=storage, weather=fixed_weather())

        assert app.claims.page_size == 2

    def test_json_storage_from_config(self, tmp_path, fixed_weather: type) -> None:
        config = DanjiCareConfig(storage=StorageConfig(backend="json", data_dir=tmp_path))
        app = DanjiCareApp.create(config=config, weather=fixed_weather())
        app.intake.request_contact()

        assert (tmp_path / "woori-accidents.json").exists()

    def test_default_weather_is_random(self, storage) -> None:
        app = DanjiCareApp.create(config=DanjiCareConfig(seed=1), storage=storage)

        assert isinstance(app.dashboard.weather, RandomWeatherProvider)
        assert app.dashboard.summary(GeolocationState()).encouragement in WEATHER_MESSAGES.values()


@pytest.mark.parametrize("status", list(AccidentStatus))
def test_status_labels_defined(status: AccidentStatus) -> None:
    assert status.label
