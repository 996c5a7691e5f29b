"""Static apartment reference data with coordinates."""

from dataclasses import dataclass

from danji_care.models.enums import PinColor


@dataclass(frozen=True)
class GeoPoint:
    """Latitude/longitude pair in degrees."""

    lat: float
    lng: float


@dataclass(frozen=True)
class ApartmentGeoRecord:
    """Map-plottable apartment complex.

    ``pin`` and ``label`` hold the static defaults of the demo dataset.
    Views produce annotated copies; the directory entries never change.
    """

    apartment_id: str
    name: str
    lat: float
    lng: float
    renewal_date: str  # MM-DD
    business_id: str
    pin: PinColor
    label: str

    @property
    def point(self) -> GeoPoint:
        return GeoPoint(self.lat, self.lng)
