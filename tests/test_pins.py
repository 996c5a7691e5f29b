"""Tests for coverage and prospecting map pins."""

from dataclasses import replace
from datetime import date

import pytest

from danji_care.geo.directory import HUNTER_MAP_CENTER, GeoDirectory
from danji_care.models import ApartmentGeoRecord, Customer, CustomerStatus, GeoPoint, PinColor
from danji_care.pins import (
    LABEL_ACTIVE,
    LABEL_ACTIVE_DUE,
    PIN_STYLES,
    annotate_coverage,
    annotate_prospect,
    build_map_view,
    coverage_pins,
    prospecting_pins,
    renewals_within_horizon,
    to_markers,
)
from danji_care.store.demo import demo_customers

BUSAN = GeoPoint(35.1796, 129.0756)


class TestCoveragePins:
    """Tests for the contracted-complex map."""

    def test_active_customer_due_soon_is_yellow(
        self, sample_tower: ApartmentGeoRecord, sample_customer: Customer, today: date
    ) -> None:
        """Test a contract lapsing within 60 days is highlighted."""
        pins = coverage_pins(GeoDirectory([sample_tower]), [sample_customer], today=today)

        assert len(pins) == 1
        assert pins[0].pin == PinColor.YELLOW
        assert pins[0].label == LABEL_ACTIVE_DUE
        assert pins[0].renewal_date == "02-10"

    def test_prospect_is_absent(
        self, sample_tower: ApartmentGeoRecord, sample_customer: Customer, today: date
    ) -> None:
        """Test only contracted complexes appear."""
        prospect = replace(sample_customer, status=CustomerStatus.PROSPECT)

        assert coverage_pins(GeoDirectory([sample_tower]), [prospect], today=today) == []

    def test_unmatched_record_is_absent(self, sample_tower: ApartmentGeoRecord, today: date) -> None:
        assert coverage_pins(GeoDirectory([sample_tower]), [], today=today) == []

    def test_duplicate_name_prospect_listed_first(
        self, sample_tower: ApartmentGeoRecord, sample_customer: Customer, today: date
    ) -> None:
        prospect = replace(sample_customer, customer_id="cust-dup", status=CustomerStatus.PROSPECT)

        pins = coverage_pins(GeoDirectory([sample_tower]), [prospect, sample_customer], today=today)

        assert [p.name for p in pins] == ["Sample Tower"]

    def test_active_customer_far_from_renewal_is_green(
        self, sample_tower: ApartmentGeoRecord, sample_customer: Customer, today: date
    ) -> None:
        """Test a relaxed contract."""
        relaxed = replace(sample_customer, expiry_date="07-01")
        pins = coverage_pins(GeoDirectory([sample_tower]), [relaxed], today=today)

        assert pins[0].pin == PinColor.GREEN
        assert pins[0].label == LABEL_ACTIVE

    def test_record_date_used_without_customer_expiry(
        self, sample_tower: ApartmentGeoRecord, sample_customer: Customer
    ) -> None:
        """Test the directory date applies when the customer has none."""
        no_expiry = replace(sample_customer, expiry_date="")
        pins = coverage_pins(GeoDirectory([sample_tower]), [no_expiry], today=date(2024, 4, 1))

        assert pins[0].renewal_date == "05-01"
        assert pins[0].pin == PinColor.YELLOW

    def test_invalid_expiry_is_skipped(
        self, sample_tower: ApartmentGeoRecord, sample_customer: Customer, today: date
    ) -> None:
        """Test an unparsable date drops the pin instead of failing the map."""
        broken = replace(sample_customer, expiry_date="xx-yy")

        assert coverage_pins(GeoDirectory([sample_tower]), [broken], today=today) == []

    def test_directory_not_mutated(
        self, sample_tower: ApartmentGeoRecord, sample_customer: Customer, today: date
    ) -> None:
        """Test annotation produces copies."""
        directory = GeoDirectory([sample_tower])
        coverage_pins(directory, [sample_customer], today=today)

        assert directory.get("apt-sample").pin == PinColor.GRAY
        assert directory.get("apt-sample").renewal_date == "05-01"

    def test_geofenced(
        self, sample_tower: ApartmentGeoRecord, sample_customer: Customer, today: date
    ) -> None:
        """Test pins outside the radius are dropped."""
        directory = GeoDirectory([sample_tower])

        assert coverage_pins(directory, [sample_customer], today=today, center=BUSAN) == []
        assert len(coverage_pins(directory, [sample_customer], today=today, center=sample_tower.point)) == 1

    def test_demo_data(self, directory: GeoDirectory) -> None:
        """Test the demo customers on the demo directory."""
        pins = coverage_pins(directory, demo_customers(), today=date(2024, 3, 1))

        assert [p.name for p in pins] == ["대치자이", "역삼푸르지오", "테헤란한신", "선릉삼성"]
        assert [p.pin for p in pins] == [PinColor.YELLOW, PinColor.GREEN, PinColor.GREEN, PinColor.GREEN]


class TestAnnotate:
    """Tests for single-record annotation."""

    def test_annotate_coverage_raises_on_invalid(self, sample_tower: ApartmentGeoRecord, today: date) -> None:
        from danji_care.exceptions import InvalidMonthDayError

        with pytest.raises(InvalidMonthDayError):
            annotate_coverage(replace(sample_tower, renewal_date="13-40"), None, today)

    def test_annotate_prospect_keeps_static_tier(self, sample_tower: ApartmentGeoRecord) -> None:
        assert annotate_prospect(sample_tower, None) is sample_tower

    def test_annotate_prospect_forces_active_green(
        self, sample_tower: ApartmentGeoRecord, sample_customer: Customer
    ) -> None:
        pin = annotate_prospect(sample_tower, sample_customer)

        assert pin.pin == PinColor.GREEN
        assert pin.label == LABEL_ACTIVE


class TestProspectingPins:
    """Tests for the full-directory map."""

    def test_every_complex_shown(self, directory: GeoDirectory) -> None:
        pins = prospecting_pins(directory, demo_customers())

        assert len(pins) == len(directory)

    def test_active_forced_green_others_static(self, directory: GeoDirectory) -> None:
        """Test contracted complexes are green regardless of their static tier."""
        customers = demo_customers()
        active_names = {c.name for c in customers if c.status == CustomerStatus.ACTIVE}
        pins = {p.name: p for p in prospecting_pins(directory, customers)}

        for record in directory:
            pin = pins[record.name]
            if record.name in active_names:
                assert pin.pin == PinColor.GREEN
            else:
                assert pin.pin == record.pin
                assert pin.label == record.label

    def test_geofenced(self, directory: GeoDirectory) -> None:
        assert prospecting_pins(directory, demo_customers(), center=BUSAN) == []


class TestRenewalsWithinHorizon:
    """Tests for the dashboard's renewal list."""

    def test_demo_data(self, directory: GeoDirectory) -> None:
        due = renewals_within_horizon(directory, demo_customers(), today=date(2024, 3, 1))

        assert [d.name for d in due] == ["대치자이"]
        assert due[0].renewal_date == "04-28"
        assert due[0].next_date == date(2024, 4, 28)
        assert due[0].days_left == 58

    def test_matches_coverage_rule(
        self, sample_tower: ApartmentGeoRecord, sample_customer: Customer, today: date
    ) -> None:
        """Test the list agrees with the coverage map's yellow pins."""
        directory = GeoDirectory([sample_tower])
        due = renewals_within_horizon(directory, [sample_customer], today=today)
        yellow = [p for p in coverage_pins(directory, [sample_customer], today=today) if p.pin == PinColor.YELLOW]

        assert [d.name for d in due] == [p.name for p in yellow] == ["Sample Tower"]


class TestMapView:
    """Tests for markers and map views."""

    def test_markers_carry_style(self, sample_tower: ApartmentGeoRecord) -> None:
        markers = to_markers([sample_tower])

        assert markers[0].name == "Sample Tower"
        assert markers[0].fill == PIN_STYLES[PinColor.GRAY].fill
        assert markers[0].stroke == PIN_STYLES[PinColor.GRAY].stroke

    def test_default_center(self) -> None:
        """Test the territory center is used without a position."""
        view = build_map_view([])

        assert view.center == HUNTER_MAP_CENTER
        assert view.markers == []
        assert view.zoom == 5

    def test_planner_center(self, sample_tower: ApartmentGeoRecord) -> None:
        view = build_map_view([sample_tower], center=sample_tower.point, zoom=7)

        assert view.center == sample_tower.point
        assert view.zoom == 7
        assert len(view.markers) == 1
