"""Map pin classification for the planner's two maps.

The coverage map shows contracted complexes only, amber when the contract
lapses within the horizon. The prospecting map shows every complex in the
directory, contracted ones forced green, the rest with their static
urgency tier. Both are geofenced around the planner's position when known.
"""

import logging
from dataclasses import dataclass, field, replace
from datetime import date, datetime
from typing import Sequence

from danji_care.exceptions import InvalidMonthDayError
from danji_care.geo.directory import HUNTER_MAP_CENTER, GeoDirectory, match_customer
from danji_care.geo.distance import RADIUS_KM, filter_within_radius
from danji_care.models import ApartmentGeoRecord, Customer, CustomerStatus, GeoPoint, PinColor
from danji_care.renewal import DEFAULT_HORIZON_DAYS, classify_renewal

logger = logging.getLogger(__name__)

LABEL_ACTIVE = "계약 중"
LABEL_ACTIVE_DUE = "계약 중 (D-60 이내)"

DEFAULT_ZOOM = 5


@dataclass(frozen=True)
class PinStyle:
    fill: str
    stroke: str


PIN_STYLES: dict[PinColor, PinStyle] = {
    PinColor.RED: PinStyle("#EF4444", "#DC2626"),
    PinColor.YELLOW: PinStyle("#FACC15", "#EAB308"),
    PinColor.GRAY: PinStyle("#9CA3AF", "#6B7280"),
    PinColor.GREEN: PinStyle("#22C55E", "#16A34A"),
}


@dataclass(frozen=True)
class MapMarker:
    """What the map widget needs to place one marker and its info window."""

    name: str
    lat: float
    lng: float
    pin: PinColor
    label: str
    renewal_date: str
    fill: str
    stroke: str


@dataclass(frozen=True)
class MapView:
    center: GeoPoint
    markers: list[MapMarker] = field(default_factory=list)
    zoom: int = DEFAULT_ZOOM


@dataclass(frozen=True)
class RenewalDue:
    """A contracted complex whose renewal falls inside the horizon."""

    name: str
    renewal_date: str  # MM-DD
    next_date: date
    days_left: int


def _is_active(customer: Customer | None) -> bool:
    return customer is not None and customer.status == CustomerStatus.ACTIVE


def annotate_coverage(
    record: ApartmentGeoRecord,
    customer: Customer | None,
    today: date | datetime | None = None,
    horizon_days: int = DEFAULT_HORIZON_DAYS,
) -> ApartmentGeoRecord:
    """Color a contracted complex by renewal proximity.

    The customer's own expiry date overrides the directory's.

    Raises
    ------
    InvalidMonthDayError
        If the effective renewal date cannot be parsed.
    """
    renewal = customer.expiry_date if customer and customer.expiry_date else record.renewal_date
    window = classify_renewal(renewal, today, horizon_days)
    if window.within_horizon:
        return replace(record, renewal_date=renewal, pin=PinColor.YELLOW, label=LABEL_ACTIVE_DUE)
    return replace(record, renewal_date=renewal, pin=PinColor.GREEN, label=LABEL_ACTIVE)


def annotate_prospect(
    record: ApartmentGeoRecord,
    customer: Customer | None,
) -> ApartmentGeoRecord:
    """Force contracted complexes green, keep the static tier otherwise."""
    if _is_active(customer):
        return replace(record, pin=PinColor.GREEN, label=LABEL_ACTIVE)
    return record


def coverage_pins(
    directory: GeoDirectory,
    customers: Sequence[Customer],
    today: date | datetime | None = None,
    center: GeoPoint | None = None,
    horizon_days: int = DEFAULT_HORIZON_DAYS,
    radius_m: float = RADIUS_KM * 1000,
) -> list[ApartmentGeoRecord]:
    """Pins for the coverage map: active customers only."""
    pins = []
    for record in directory:
        customer = match_customer(record, customers)
        if not _is_active(customer):
            continue
        try:
            pins.append(annotate_coverage(record, customer, today, horizon_days))
        except InvalidMonthDayError as exc:
            logger.warning("Skipping %s on coverage map: %s", record.name, exc)
    return filter_within_radius(pins, center, radius_m)


def prospecting_pins(
    directory: GeoDirectory,
    customers: Sequence[Customer],
    center: GeoPoint | None = None,
    radius_m: float = RADIUS_KM * 1000,
) -> list[ApartmentGeoRecord]:
    """Pins for the prospecting map: every complex in the directory."""
    pins = [annotate_prospect(r, match_customer(r, customers)) for r in directory]
    return filter_within_radius(pins, center, radius_m)


def renewals_within_horizon(
    directory: GeoDirectory,
    customers: Sequence[Customer],
    today: date | datetime | None = None,
    horizon_days: int = DEFAULT_HORIZON_DAYS,
) -> list[RenewalDue]:
    """Contracted complexes due for renewal, by the coverage-map rule."""
    due = []
    for record in directory:
        customer = match_customer(record, customers)
        if not _is_active(customer):
            continue
        renewal = customer.expiry_date or record.renewal_date
        try:
            window = classify_renewal(renewal, today, horizon_days)
        except InvalidMonthDayError as exc:
            logger.warning("Skipping %s in renewal list: %s", record.name, exc)
            continue
        if window.within_horizon:
            due.append(RenewalDue(record.name, renewal, window.renewal_date, window.days_left))
    return due


def to_markers(pins: Sequence[ApartmentGeoRecord]) -> list[MapMarker]:
    """Flatten annotated records into widget markers."""
    markers = []
    for pin in pins:
        style = PIN_STYLES[pin.pin]
        markers.append(
            MapMarker(
                name=pin.name,
                lat=pin.lat,
                lng=pin.lng,
                pin=pin.pin,
                label=pin.label,
                renewal_date=pin.renewal_date,
                fill=style.fill,
                stroke=style.stroke,
            )
        )
    return markers


def build_map_view(
    pins: Sequence[ApartmentGeoRecord],
    center: GeoPoint | None = None,
    zoom: int = DEFAULT_ZOOM,
) -> MapView:
    """Map centered on the planner, or on the default territory."""
    return MapView(center=center or HUNTER_MAP_CENTER, markers=to_markers(pins), zoom=zoom)
