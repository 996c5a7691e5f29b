"""Geographic helpers: distances, apartment directory, position."""

from danji_care.geo.directory import DEMO_APARTMENTS, HUNTER_MAP_CENTER, GeoDirectory, match_customer
from danji_care.geo.distance import RADIUS_KM, distance_meters, filter_within_radius
from danji_care.geo.location import GeolocationService, GeolocationState, Position, fixed_position

__all__ = [
    "DEMO_APARTMENTS",
    "HUNTER_MAP_CENTER",
    "RADIUS_KM",
    "GeoDirectory",
    "GeolocationService",
    "GeolocationState",
    "Position",
    "distance_meters",
    "filter_within_radius",
    "fixed_position",
    "match_customer",
]
