"""Client intake: accident reports, estimate requests, contact requests."""

import logging
from datetime import datetime
from typing import Any, Callable, Sequence

from danji_care.exceptions import ValidationError
from danji_care.models import Accident, AccidentStatus, RequestKind
from danji_care.models.enums import CONTACT_PREFIX, ESTIMATE_PREFIX
from danji_care.photos import read_photos
from danji_care.store.repositories import AccidentRepository, new_id

logger = logging.getLogger(__name__)

EMPTY_CONTENT = "(내용 없음)"

INSURANCE_PRODUCTS: dict[str, str] = {
    "apartment-fire": "아파트화재보험",
    "playground-liability": "어린이놀이시설배상책임보험",
    "elevator-liability": "승강기사고배상책임보험",
    "other": "기타보험",
}


def _local_now() -> datetime:
    return datetime.now().astimezone()


class IntakeService:
    """Requests submitted by an apartment management office."""

    def __init__(
        self,
        accidents: AccidentRepository,
        apartment_name: str = "우리 단지",
        clock: Callable[[], datetime] = _local_now,
        photo_workers: int = 4,
    ) -> None:
        self.accidents = accidents
        self.apartment_name = apartment_name
        self._clock = clock
        self.photo_workers = photo_workers

    def _create(self, content: str, kind: RequestKind, when: datetime, photos: list[str]) -> Accident:
        accident = Accident(
            accident_id=new_id("acc"),
            apartment_name=self.apartment_name,
            date=when.isoformat(timespec="seconds"),
            content=content,
            status=AccidentStatus.PENDING,
            photos=photos,
            kind=kind,
        )
        self.accidents.add(accident)
        logger.info("Received %s request %s from %s", kind.value, accident.accident_id, self.apartment_name)
        return accident

    def submit_accident_report(
        self,
        year: int,
        month: int,
        day: int,
        hour: int,
        minute: int,
        content: str = "",
        photos: Sequence[Any] = (),
    ) -> Accident:
        """File an accident report once every photo has been read.

        Raises
        ------
        ValidationError
            If the accident date/time does not exist.
        PhotoReadError
            If any photo cannot be read; nothing is stored.
        """
        try:
            when = datetime(year, month, day, hour, minute).astimezone()
        except ValueError as exc:
            raise ValidationError(f"Invalid accident date/time: {exc}") from exc
        photo_urls = read_photos(list(photos), max_workers=self.photo_workers)
        return self._create(content.strip() or EMPTY_CONTENT, RequestKind.ACCIDENT, when, photo_urls)

    def submit_estimate_request(self, product: str, expiry_month: str, expiry_day: str) -> Accident:
        """Ask for an insurance estimate ahead of the contract's expiry."""
        product_label = INSURANCE_PRODUCTS.get(product) or product or "보험"
        content = f"{ESTIMATE_PREFIX} - {product_label} (만기 {expiry_month}/{expiry_day})"
        return self._create(content, RequestKind.ESTIMATE, self._clock(), [])

    def request_contact(self) -> Accident:
        return self._create(CONTACT_PREFIX, RequestKind.CONTACT, self._clock(), [])

    def my_requests(self) -> list[Accident]:
        """This office's requests, newest first."""
        return [a for a in self.accidents.load() if a.apartment_name == self.apartment_name]
