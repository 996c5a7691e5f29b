"""Static directory of map-plottable apartment complexes."""

import logging
from typing import Iterator, Sequence

from danji_care.models import ApartmentGeoRecord, Customer, CustomerStatus, GeoPoint, PinColor

logger = logging.getLogger(__name__)

HUNTER_MAP_CENTER = GeoPoint(lat=37.4945, lng=127.0540)

LABEL_D60 = "만기 D-60 이내"
LABEL_D90 = "만기 D-90 이내"
LABEL_RELAXED = "만기 여유"

DEMO_APARTMENTS: tuple[ApartmentGeoRecord, ...] = (
    ApartmentGeoRecord("apt-001", "은마아파트", 37.4993, 127.0626, "03-15", "120-82-10001", PinColor.RED, LABEL_D60),
    ApartmentGeoRecord("apt-002", "대치자이", 37.4960, 127.0590, "04-28", "120-82-10002", PinColor.YELLOW, LABEL_D90),
    ApartmentGeoRecord("apt-003", "래미안대치팰리스", 37.4953, 127.0569, "03-30", "120-82-10003", PinColor.RED, LABEL_D60),
    ApartmentGeoRecord("apt-004", "도곡렉슬", 37.4886, 127.0505, "04-05", "120-82-10004", PinColor.YELLOW, LABEL_D90),
    ApartmentGeoRecord("apt-005", "도곡삼성래미안", 37.4870, 127.0480, "05-10", "120-82-10005", PinColor.GRAY, LABEL_RELAXED),
    ApartmentGeoRecord("apt-006", "개포우성", 37.4928, 127.0636, "06-01", "120-82-10006", PinColor.GRAY, LABEL_RELAXED),
    ApartmentGeoRecord("apt-007", "역삼래미안", 37.4957, 127.0412, "05-20", "120-82-10007", PinColor.GRAY, LABEL_RELAXED),
    ApartmentGeoRecord("apt-008", "역삼푸르지오", 37.4975, 127.0440, "07-15", "120-82-10008", PinColor.GRAY, LABEL_RELAXED),
    ApartmentGeoRecord("apt-009", "테헤란한신", 37.5030, 127.0470, "08-01", "120-82-10009", PinColor.GRAY, LABEL_RELAXED),
    ApartmentGeoRecord("apt-010", "선릉삼성", 37.5040, 127.0490, "08-20", "120-82-10010", PinColor.GRAY, LABEL_RELAXED),
    ApartmentGeoRecord("apt-011", "대치아이파크", 37.4994, 127.0558, "03-20", "120-82-10011", PinColor.RED, LABEL_D60),
    ApartmentGeoRecord("apt-012", "타워팰리스", 37.4881, 127.0536, "04-18", "120-82-10012", PinColor.YELLOW, LABEL_D90),
    ApartmentGeoRecord("apt-013", "래미안블레스티지", 37.4842, 127.0605, "09-10", "120-82-10013", PinColor.GRAY, LABEL_RELAXED),
    ApartmentGeoRecord("apt-014", "대치미도", 37.5003, 127.0657, "10-02", "120-82-10014", PinColor.GRAY, LABEL_RELAXED),
)


class GeoDirectory:
    """Lookup over a fixed apartment dataset.

    Swap in another record sequence to back the maps with real data.
    """

    def __init__(self, records: Sequence[ApartmentGeoRecord] = DEMO_APARTMENTS) -> None:
        self._records = tuple(records)
        self._by_id = {r.apartment_id: r for r in self._records}
        self._by_name = {r.name: r for r in self._records}

    def __iter__(self) -> Iterator[ApartmentGeoRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    @property
    def records(self) -> tuple[ApartmentGeoRecord, ...]:
        return self._records

    def get(self, apartment_id: str) -> ApartmentGeoRecord | None:
        return self._by_id.get(apartment_id)

    def find_by_name(self, name: str) -> ApartmentGeoRecord | None:
        return self._by_name.get(name)


def match_customer(
    record: ApartmentGeoRecord,
    customers: Sequence[Customer],
) -> Customer | None:
    """Find the customer row for ``record``.

    Customers carrying an ``apartment_id`` are joined by id. Name equality
    is the best-effort fallback for rows without one; an active row wins
    when several share the name.
    """
    for customer in customers:
        if customer.apartment_id and customer.apartment_id == record.apartment_id:
            return customer
    named = [c for c in customers if not c.apartment_id and c.name == record.name]
    if not named:
        return None
    customer = next((c for c in named if c.status == CustomerStatus.ACTIVE), named[0])
    logger.debug("Joined %s to customer %s by name", record.apartment_id, customer.customer_id)
    return customer
