"""Great-circle distance and radius filtering."""

import math
from typing import Protocol, Sequence, TypeVar

from danji_care.models import GeoPoint

EARTH_RADIUS_M = 6_371_000
RADIUS_KM = 3


class Located(Protocol):
    lat: float
    lng: float


L = TypeVar("L", bound=Located)


def distance_meters(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Haversine distance between two coordinates, in meters."""
    d_lat = math.radians(lat2 - lat1)
    d_lng = math.radians(lng2 - lng1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lng / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_M * c


def filter_within_radius(
    records: Sequence[L],
    center: GeoPoint | None,
    radius_m: float = RADIUS_KM * 1000,
) -> list[L]:
    """Keep records within ``radius_m`` of ``center``, preserving order.

    Without a center (position unknown, denied or still loading) every
    record is kept.
    """
    if center is None:
        return list(records)
    return [
        r for r in records
        if distance_meters(center.lat, center.lng, r.lat, r.lng) <= radius_m
    ]
